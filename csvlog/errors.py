"""Exception hierarchy shared across the CSV logging package."""
from __future__ import annotations


class CsvLogError(Exception):
    """Base class for every error raised by :mod:`csvlog`."""


class ArgumentInvalidError(CsvLogError, ValueError):
    """Raised when a required argument is missing, empty or malformed."""


class DirectoryInUseError(CsvLogError):
    """Raised when an output directory is already claimed by another logger."""


class SchemaAlreadyRegisteredError(CsvLogError):
    """Raised when a static logger already exists for a schema type."""


class IdentifierNotUniqueError(CsvLogError):
    """Raised when a dynamic logger identifier is already taken."""


class LoggerNotFoundError(CsvLogError, LookupError):
    """Raised when looking up a logger that was never registered."""


class SchemaError(CsvLogError):
    """Base class for schema description problems."""


class SchemaFormatError(SchemaError):
    """Raised when a schema source is not a readable description document."""


class SchemaValidationError(SchemaError):
    """Raised when a schema description fails structural validation."""


class DuplicateFieldError(SchemaValidationError):
    """Raised when a schema declares the same field name twice."""


class UnsupportedTypeError(SchemaError):
    """Raised when a schema declares a type tag that has no field type."""


class SchemaLockedError(CsvLogError):
    """Raised on attempts to add or remove fields after a schema is loaded."""


class FieldNotFoundError(CsvLogError, LookupError):
    """Raised when a field name is not part of the loaded schema."""


class TypeMismatchError(CsvLogError, TypeError):
    """Raised when a field is accessed with a type other than its declared one."""


class LogWriteError(CsvLogError, OSError):
    """Raised when the log directory or a log file cannot be created or appended."""


__all__ = [
    "ArgumentInvalidError",
    "CsvLogError",
    "DirectoryInUseError",
    "DuplicateFieldError",
    "FieldNotFoundError",
    "IdentifierNotUniqueError",
    "LogWriteError",
    "LoggerNotFoundError",
    "SchemaAlreadyRegisteredError",
    "SchemaError",
    "SchemaFormatError",
    "SchemaLockedError",
    "SchemaValidationError",
    "TypeMismatchError",
    "UnsupportedTypeError",
]
