"""Value types backing the CSV loggers."""

from .field_store import END_TIME_KEY, START_TIME_KEY, FieldStore
from .file_size import FileSize
from .typed_cell import FieldType, TypedCell

__all__ = [
    "END_TIME_KEY",
    "FieldStore",
    "FieldType",
    "FileSize",
    "START_TIME_KEY",
    "TypedCell",
]
