"""Concrete CSV loggers for static (dataclass) and dynamic (loaded) schemas."""
from __future__ import annotations

from pathlib import Path
from types import MappingProxyType
from typing import Generic, List, Mapping, Optional, Type, TypeVar, Union

from ..data.field_store import END_TIME_KEY, START_TIME_KEY, FieldStore
from ..data.file_size import FileSize
from ..errors import ArgumentInvalidError
from ..schema.loaders import SchemaLoader
from ..schema.record import CsvSchema, is_schema_type, schema_columns
from .rotating_writer import DEFAULT_DELIMITER, DEFAULT_MAX_FILE_SIZE, Clock, RotatingCsvWriter

SchemaT = TypeVar("SchemaT", bound=CsvSchema)


def _render(value: object) -> str:
    return "" if value is None else str(value)


class CsvLogger(RotatingCsvWriter, Generic[SchemaT]):
    """Logs instances of a dataclass schema.

    ``data`` holds the record for the next row; mutate its attributes and call
    :meth:`write_record`.
    """

    def __init__(
        self,
        schema_type: Type[SchemaT],
        output_dir: Path,
        *,
        delimiter: str = DEFAULT_DELIMITER,
        max_file_size: Union[FileSize, int] = DEFAULT_MAX_FILE_SIZE,
        clock: Optional[Clock] = None,
    ) -> None:
        if not is_schema_type(schema_type):
            raise ArgumentInvalidError(f"{schema_type!r} must be a dataclass deriving from CsvSchema")
        try:
            data = schema_type()
        except TypeError as exc:
            raise ArgumentInvalidError(
                f"Schema {schema_type.__name__} must be constructible without arguments: {exc}"
            ) from exc

        self.schema_type = schema_type
        self.data: SchemaT = data
        self._columns = schema_columns(schema_type)
        super().__init__(output_dir, delimiter=delimiter, max_file_size=max_file_size, clock=clock)
        self.data.start_date_time = self.started_at

    def headings(self) -> List[str]:
        return [heading for heading, _ in self._columns]

    def values(self) -> List[str]:
        return [_render(getattr(self.data, attribute)) for _, attribute in self._columns]

    def schema_as_dict(self) -> Mapping[str, str]:
        """Return a read-only view of heading to rendered value."""

        return MappingProxyType(dict(zip(self.headings(), self.values())))

    def write_record(self) -> None:
        self.data.end_date_time = self._clock()
        super().write_record()


class DynamicCsvLogger(RotatingCsvWriter):
    """Logs rows whose columns come from a schema description file.

    Values are set through ``data``, a :class:`FieldStore`, with type checks::

        logger.data.set_value("Temperature", 21.5)
        logger.write_record()
    """

    def __init__(
        self,
        output_dir: Path,
        schema_source: Path,
        *,
        loader: Optional[SchemaLoader] = None,
        delimiter: str = DEFAULT_DELIMITER,
        max_file_size: Union[FileSize, int] = DEFAULT_MAX_FILE_SIZE,
        clock: Optional[Clock] = None,
    ) -> None:
        if schema_source is None:
            raise ArgumentInvalidError("A schema source is required")
        self.schema_source = Path(schema_source)
        self.data = FieldStore.load(self.schema_source, loader)
        super().__init__(output_dir, delimiter=delimiter, max_file_size=max_file_size, clock=clock)
        self.data.set_value(START_TIME_KEY, self.started_at)

    def headings(self) -> List[str]:
        return self.data.headings()

    def values(self) -> List[str]:
        return self.data.values()

    def write_record(self) -> None:
        self.data.set_value(END_TIME_KEY, self._clock())
        super().write_record()


__all__ = ["CsvLogger", "DynamicCsvLogger"]
