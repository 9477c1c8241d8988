"""Schema-checked CSV logging with size-based file rotation."""

from .core.loggers import CsvLogger, DynamicCsvLogger
from .core.registry import LoggerRegistry
from .core.rotating_writer import DEFAULT_DELIMITER, DEFAULT_MAX_FILE_SIZE, RotatingCsvWriter
from .data.field_store import END_TIME_KEY, START_TIME_KEY, FieldStore
from .data.file_size import FileSize
from .data.typed_cell import FieldType, TypedCell
from .errors import (
    ArgumentInvalidError,
    CsvLogError,
    DirectoryInUseError,
    DuplicateFieldError,
    FieldNotFoundError,
    IdentifierNotUniqueError,
    LoggerNotFoundError,
    LogWriteError,
    SchemaAlreadyRegisteredError,
    SchemaError,
    SchemaFormatError,
    SchemaLockedError,
    SchemaValidationError,
    TypeMismatchError,
    UnsupportedTypeError,
)
from .schema.loaders import load_json_schema, load_xml_schema, loader_for
from .schema.record import CsvSchema

__all__ = [
    "ArgumentInvalidError",
    "CsvLogError",
    "CsvLogger",
    "CsvSchema",
    "DEFAULT_DELIMITER",
    "DEFAULT_MAX_FILE_SIZE",
    "DirectoryInUseError",
    "DuplicateFieldError",
    "DynamicCsvLogger",
    "END_TIME_KEY",
    "FieldNotFoundError",
    "FieldStore",
    "FieldType",
    "FileSize",
    "IdentifierNotUniqueError",
    "LogWriteError",
    "LoggerNotFoundError",
    "LoggerRegistry",
    "RotatingCsvWriter",
    "START_TIME_KEY",
    "SchemaAlreadyRegisteredError",
    "SchemaError",
    "SchemaFormatError",
    "SchemaLockedError",
    "SchemaValidationError",
    "TypeMismatchError",
    "TypedCell",
    "UnsupportedTypeError",
    "load_json_schema",
    "load_xml_schema",
    "loader_for",
]
