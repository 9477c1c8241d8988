"""Append-only CSV writer with heading validation and size-based rotation."""
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from datetime import datetime
from pathlib import Path
from typing import Callable, List, Optional, Union

from ..data.file_size import FileSize
from ..errors import ArgumentInvalidError, LogWriteError

LOGGER = logging.getLogger(__name__)

DEFAULT_DELIMITER = ";"
DEFAULT_MAX_FILE_SIZE = FileSize.from_gb(10)
LOG_FILE_SUFFIX = ".csv"
LOG_FILE_PREFIX = "log_"

Clock = Callable[[], datetime]


class RotatingCsvWriter(ABC):
    """Shared engine behind the static and dynamic CSV loggers.

    The writer owns an output directory and always points at one *active*
    file whose heading line matches :meth:`headings`. On construction the
    most recently modified ``.csv`` file in the directory is reused when its
    heading matches; otherwise a fresh file is started and the old one is left
    untouched. Before every append the active file is re-stat'ed and a new file
    is started once its size exceeds ``max_file_size``.

    Subclasses must be able to answer :meth:`headings` before calling
    ``super().__init__``. The writer holds no locks; callers that share a
    logger between threads must serialise :meth:`write_record` themselves.
    """

    def __init__(
        self,
        output_dir: Path,
        *,
        delimiter: str = DEFAULT_DELIMITER,
        max_file_size: Union[FileSize, int] = DEFAULT_MAX_FILE_SIZE,
        clock: Optional[Clock] = None,
    ) -> None:
        if output_dir is None:
            raise ArgumentInvalidError("An output directory is required")
        if not isinstance(delimiter, str) or len(delimiter) != 1 or delimiter in "\r\n":
            raise ArgumentInvalidError(f"Delimiter must be a single non-newline character, got {delimiter!r}")
        if not isinstance(max_file_size, FileSize):
            max_file_size = FileSize(max_file_size)

        self._output_dir = Path(output_dir)
        self._delimiter = delimiter
        self._max_file_size = max_file_size
        self._clock: Clock = clock or datetime.now

        self._validate_headings(self.headings())
        self._ensure_directory()
        self._active_file = self._latest_valid_file()
        self.started_at = self._clock()

    # ------------------------------------------------------------------
    # Schema projections supplied by subclasses
    # ------------------------------------------------------------------
    @abstractmethod
    def headings(self) -> List[str]:
        """Return the column names in file order."""

    @abstractmethod
    def values(self) -> List[str]:
        """Return the rendered current values in the same order as the headings."""

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    @property
    def output_dir(self) -> Path:
        return self._output_dir

    @property
    def delimiter(self) -> str:
        return self._delimiter

    @property
    def max_file_size(self) -> FileSize:
        return self._max_file_size

    @property
    def active_file(self) -> Path:
        return self._active_file

    def log_files(self) -> List[Path]:
        """Return every candidate log file in the directory, oldest first."""

        candidates = [path for path in self._output_dir.glob(f"*{LOG_FILE_SUFFIX}") if path.is_file()]
        return sorted(candidates, key=_recency_key)

    def write_record(self) -> None:
        """Append the current values as one row, rotating first if needed."""

        row = self.values()
        expected = len(self.headings())
        if len(row) != expected:
            raise ArgumentInvalidError(f"Row has {len(row)} values but the heading has {expected} columns")
        for heading, value in zip(self.headings(), row):
            if "\r" in value or "\n" in value:
                raise ArgumentInvalidError(f"Value for column '{heading}' contains a line break")

        if self._current_size() > self._max_file_size:
            previous = self._active_file
            self._active_file = self._create_log_file()
            LOGGER.info("Rotated %s into %s", previous.name, self._active_file.name)

        self._append(row, self._active_file)
        LOGGER.debug("Appended row to %s", self._active_file)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _validate_headings(self, headings: List[str]) -> None:
        for heading in headings:
            if not heading or not heading.strip():
                raise ArgumentInvalidError("Column headings cannot be blank")
            if "\r" in heading or "\n" in heading:
                raise ArgumentInvalidError(f"Column heading {heading!r} contains a line break")
            if self._delimiter in heading:
                raise ArgumentInvalidError(
                    f"Column heading '{heading}' contains the delimiter {self._delimiter!r}"
                )

    def _ensure_directory(self) -> None:
        try:
            self._output_dir.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise LogWriteError(f"Unable to create log directory {self._output_dir}: {exc}") from exc

    def _current_size(self) -> FileSize:
        try:
            return FileSize(self._active_file.stat().st_size)
        except OSError as exc:
            raise LogWriteError(f"Unable to stat log file {self._active_file}: {exc}") from exc

    def _latest_valid_file(self) -> Path:
        candidates = self.log_files()
        if not candidates:
            return self._create_log_file()

        latest = candidates[-1]
        first_line = self._first_non_blank_line(latest)
        if first_line is None:
            LOGGER.warning("Removing empty log file %s", latest)
            try:
                latest.unlink()
            except OSError as exc:
                raise LogWriteError(f"Unable to remove empty log file {latest}: {exc}") from exc
            return self._create_log_file()

        if first_line.split(self._delimiter) != self.headings():
            LOGGER.warning("Headings in %s do not match the schema; starting a new file", latest)
            return self._create_log_file()

        LOGGER.debug("Reusing log file %s", latest)
        return latest

    @staticmethod
    def _first_non_blank_line(path: Path) -> Optional[str]:
        try:
            with path.open("r", encoding="utf-8", errors="replace", newline="") as handle:
                for line in handle:
                    stripped = line.rstrip("\r\n")
                    if stripped.strip():
                        return stripped
        except OSError as exc:
            raise LogWriteError(f"Unable to read log file {path}: {exc}") from exc
        return None

    def _create_log_file(self) -> Path:
        stamp = self._clock().strftime("%Y%m%d_%H%M%S_%f")
        counter = 0
        while True:
            suffix = f"_{counter:04d}" if counter else ""
            path = self._output_dir / f"{LOG_FILE_PREFIX}{stamp}{suffix}{LOG_FILE_SUFFIX}"
            try:
                with path.open("x", encoding="utf-8", newline=""):
                    pass
            except FileExistsError:
                counter += 1
                continue
            except OSError as exc:
                raise LogWriteError(f"Unable to create log file {path}: {exc}") from exc
            break

        self._append(self.headings(), path)
        LOGGER.info("Started new log file %s", path)
        return path

    def _append(self, items: List[str], path: Path) -> None:
        line = self._delimiter.join(items) + "\n"
        try:
            with path.open("a", encoding="utf-8", newline="") as handle:
                handle.write(line)
        except OSError as exc:
            raise LogWriteError(f"Unable to append to log file {path}: {exc}") from exc


def _recency_key(path: Path):
    return (path.stat().st_mtime_ns, path.name)


__all__ = [
    "DEFAULT_DELIMITER",
    "DEFAULT_MAX_FILE_SIZE",
    "LOG_FILE_PREFIX",
    "LOG_FILE_SUFFIX",
    "RotatingCsvWriter",
]
