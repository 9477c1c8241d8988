"""Type-preserving value holders for dynamically loaded schemas."""
from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Any, Optional, Union
from uuid import UUID

from ..errors import TypeMismatchError, UnsupportedTypeError

_INT32_RANGE = (-(2**31), 2**31 - 1)
_INT64_RANGE = (-(2**63), 2**63 - 1)


class FieldType(Enum):
    """Primitive field types a schema description may declare."""

    TEXT = "text"
    INT = "int"
    BOOL = "bool"
    FLOAT = "float"
    TIMESTAMP = "timestamp"
    DECIMAL = "decimal"
    GUID = "guid"
    SINGLE = "single"
    CHAR = "char"
    INT64 = "int64"

    @classmethod
    def parse(cls, tag: str) -> "FieldType":
        """Resolve a type tag or one of its short aliases.

        Raises :class:`UnsupportedTypeError` for anything unrecognised; there is
        no fallback to text.
        """

        if isinstance(tag, cls):
            return tag
        if not isinstance(tag, str):
            raise UnsupportedTypeError(f"Type tag must be a string, got {tag!r}")
        key = tag.strip().lower()
        try:
            return cls(key)
        except ValueError:
            pass
        try:
            return _ALIASES[key]
        except KeyError as exc:
            raise UnsupportedTypeError(f"Unsupported field type: {tag!r}") from exc

    @property
    def python_type(self) -> type:
        return _PYTHON_TYPES[self]

    def zero_value(self) -> Any:
        return _ZERO_VALUES[self]

    def accepts(self, value: Any) -> bool:
        """Return ``True`` when ``value`` can be stored without conversion."""

        if value is None:
            return False
        if self is FieldType.BOOL:
            return isinstance(value, bool)
        if self in (FieldType.INT, FieldType.INT64):
            if isinstance(value, bool) or not isinstance(value, int):
                return False
            low, high = _INT32_RANGE if self is FieldType.INT else _INT64_RANGE
            return low <= value <= high
        if self is FieldType.CHAR:
            return isinstance(value, str) and len(value) == 1
        return isinstance(value, self.python_type)


_ALIASES = {
    "s": FieldType.TEXT,
    "string": FieldType.TEXT,
    "str": FieldType.TEXT,
    "i": FieldType.INT,
    "integer": FieldType.INT,
    "b": FieldType.BOOL,
    "boolean": FieldType.BOOL,
    "d": FieldType.FLOAT,
    "double": FieldType.FLOAT,
    "dt": FieldType.TIMESTAMP,
    "datetime": FieldType.TIMESTAMP,
    "dec": FieldType.DECIMAL,
    "g": FieldType.GUID,
    "uuid": FieldType.GUID,
    "f": FieldType.SINGLE,
    "c": FieldType.CHAR,
    "l": FieldType.INT64,
    "long": FieldType.INT64,
}

_PYTHON_TYPES = {
    FieldType.TEXT: str,
    FieldType.INT: int,
    FieldType.BOOL: bool,
    FieldType.FLOAT: float,
    FieldType.TIMESTAMP: datetime,
    FieldType.DECIMAL: Decimal,
    FieldType.GUID: UUID,
    FieldType.SINGLE: float,
    FieldType.CHAR: str,
    FieldType.INT64: int,
}

_ZERO_VALUES = {
    FieldType.TEXT: "",
    FieldType.INT: 0,
    FieldType.BOOL: False,
    FieldType.FLOAT: 0.0,
    FieldType.TIMESTAMP: datetime.min,
    FieldType.DECIMAL: Decimal("0"),
    FieldType.GUID: UUID(int=0),
    FieldType.SINGLE: 0.0,
    FieldType.CHAR: "\0",
    FieldType.INT64: 0,
}

TypeToken = Union[FieldType, type]


class TypedCell:
    """Holds one field's value and enforces the type declared at creation."""

    __slots__ = ("_field_type", "_value")

    def __init__(self, field_type: Union[FieldType, str]) -> None:
        self._field_type = FieldType.parse(field_type)
        self._value = self._field_type.zero_value()

    @property
    def field_type(self) -> FieldType:
        return self._field_type

    @property
    def value(self) -> Any:
        return self._value

    def matches(self, expected: TypeToken) -> bool:
        """Return ``True`` when ``expected`` names this cell's declared type.

        ``expected`` may be a :class:`FieldType` or a plain Python type; the
        latter matches every field type backed by exactly that class.
        """

        if isinstance(expected, FieldType):
            return expected is self._field_type
        return expected is self._field_type.python_type

    def get(self, expected: Optional[TypeToken] = None) -> Any:
        if expected is not None and not self.matches(expected):
            raise TypeMismatchError(
                f"Field holds {self._field_type.value} values, requested {_token_name(expected)}"
            )
        return self._value

    def set(self, value: Any, expected: Optional[TypeToken] = None) -> None:
        if expected is not None and not self.matches(expected):
            raise TypeMismatchError(
                f"Field holds {self._field_type.value} values, cannot assign as {_token_name(expected)}"
            )
        if not self._field_type.accepts(value):
            raise TypeMismatchError(
                f"Value {value!r} of type {type(value).__name__} is not a valid "
                f"{self._field_type.value} value"
            )
        self._value = value

    def __str__(self) -> str:
        return str(self._value)

    def __repr__(self) -> str:
        return f"TypedCell({self._field_type.value}, {self._value!r})"


def _token_name(token: TypeToken) -> str:
    if isinstance(token, FieldType):
        return token.value
    return getattr(token, "__name__", repr(token))


__all__ = ["FieldType", "TypedCell", "TypeToken"]
