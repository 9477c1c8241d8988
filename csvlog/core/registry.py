"""Process-scoped bookkeeping of the loggers an application has created."""
from __future__ import annotations

import logging
from pathlib import Path
from threading import Lock
from typing import Dict, FrozenSet, Optional, Set, Type, Union

from ..data.file_size import FileSize
from ..errors import (
    ArgumentInvalidError,
    DirectoryInUseError,
    IdentifierNotUniqueError,
    LoggerNotFoundError,
    SchemaAlreadyRegisteredError,
)
from ..schema.loaders import SchemaLoader
from ..schema.record import CsvSchema
from .loggers import CsvLogger, DynamicCsvLogger
from .rotating_writer import DEFAULT_DELIMITER, DEFAULT_MAX_FILE_SIZE, Clock

LOGGER = logging.getLogger(__name__)


class LoggerRegistry:
    """Creates loggers and keeps them unique.

    An output directory may only be used by one logger, static or dynamic. A
    schema type may only back one static logger and an identifier (compared
    without regard to case) only one dynamic logger. Registrations are
    permanent for the lifetime of the registry.

    Create one registry at startup and pass it to the code that needs it.
    """

    def __init__(self) -> None:
        self._lock = Lock()
        self._directories: Set[Path] = set()
        self._loggers: Dict[type, CsvLogger] = {}
        self._dynamic_loggers: Dict[str, DynamicCsvLogger] = {}

    @property
    def claimed_directories(self) -> FrozenSet[Path]:
        with self._lock:
            return frozenset(self._directories)

    # ------------------------------------------------------------------
    def register(
        self,
        schema_type: Type[CsvSchema],
        output_dir: Path,
        *,
        delimiter: str = DEFAULT_DELIMITER,
        max_file_size: Union[FileSize, int] = DEFAULT_MAX_FILE_SIZE,
        clock: Optional[Clock] = None,
    ) -> CsvLogger:
        """Create and store the static logger for ``schema_type``."""

        directory = self._canonical_directory(output_dir)
        with self._lock:
            self._check_directory(directory)
            if schema_type in self._loggers:
                raise SchemaAlreadyRegisteredError(
                    f"A logger for schema ({_qualified_name(schema_type)}) has already been registered."
                )

            logger = CsvLogger(
                schema_type,
                directory,
                delimiter=delimiter,
                max_file_size=max_file_size,
                clock=clock,
            )
            self._loggers[schema_type] = logger
            self._directories.add(directory)

        LOGGER.info("Registered logger for %s in %s", _qualified_name(schema_type), directory)
        return logger

    def register_dynamic(
        self,
        identifier: str,
        output_dir: Path,
        schema_source: Path,
        *,
        loader: Optional[SchemaLoader] = None,
        delimiter: str = DEFAULT_DELIMITER,
        max_file_size: Union[FileSize, int] = DEFAULT_MAX_FILE_SIZE,
        clock: Optional[Clock] = None,
    ) -> DynamicCsvLogger:
        """Create and store a dynamic logger under ``identifier``."""

        key = _identifier_key(identifier)
        if schema_source is None:
            raise ArgumentInvalidError("A schema source is required")
        directory = self._canonical_directory(output_dir)

        with self._lock:
            self._check_directory(directory)
            if key in self._dynamic_loggers:
                raise IdentifierNotUniqueError(
                    f"A logger with identifier ({identifier}) has already been registered."
                )

            logger = DynamicCsvLogger(
                directory,
                schema_source,
                loader=loader,
                delimiter=delimiter,
                max_file_size=max_file_size,
                clock=clock,
            )
            self._dynamic_loggers[key] = logger
            self._directories.add(directory)

        LOGGER.info("Registered dynamic logger '%s' in %s", identifier, directory)
        return logger

    # ------------------------------------------------------------------
    def get_logger(self, schema_type: Type[CsvSchema]) -> CsvLogger:
        with self._lock:
            try:
                return self._loggers[schema_type]
            except KeyError as exc:
                raise LoggerNotFoundError(
                    f"No logger was found that uses {_qualified_name(schema_type)} as schema."
                ) from exc

    def get_dynamic_logger(self, identifier: str) -> DynamicCsvLogger:
        key = _identifier_key(identifier)
        with self._lock:
            try:
                return self._dynamic_loggers[key]
            except KeyError as exc:
                raise LoggerNotFoundError(
                    f"No logger was found that uses ({identifier}) as identifier."
                ) from exc

    # ------------------------------------------------------------------
    @staticmethod
    def _canonical_directory(output_dir: Optional[Path]) -> Path:
        if output_dir is None or str(output_dir) == "":
            raise ArgumentInvalidError("An output directory is required")
        return Path(output_dir).resolve()

    def _check_directory(self, directory: Path) -> None:
        if directory in self._directories:
            raise DirectoryInUseError(
                f"The directory with path ({directory}) is already being used by a different logger."
            )


def _identifier_key(identifier: str) -> str:
    if not isinstance(identifier, str) or not identifier:
        raise ArgumentInvalidError("Argument (identifier) is null or empty.")
    return identifier.casefold()


def _qualified_name(schema_type: object) -> str:
    module = getattr(schema_type, "__module__", "")
    name = getattr(schema_type, "__qualname__", repr(schema_type))
    return f"{module}.{name}" if module else name


__all__ = ["LoggerRegistry"]
