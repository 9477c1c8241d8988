"""Ordered, case-insensitive field container for runtime-defined schemas."""
from __future__ import annotations

from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional, Tuple, Union

from ..errors import (
    DuplicateFieldError,
    FieldNotFoundError,
    SchemaLockedError,
    SchemaValidationError,
)
from ..schema.loaders import SchemaLoader, loader_for
from .typed_cell import FieldType, TypedCell, TypeToken

START_TIME_KEY = "StartDateTime"
END_TIME_KEY = "EndDateTime"


class FieldStore:
    """Maps field names to :class:`TypedCell` instances in declaration order.

    Lookups ignore case, but headings keep the casing used by the schema
    description. The set of fields is fixed once the store is built; values
    may change, fields may not be added or removed. The reserved
    ``StartDateTime`` and ``EndDateTime`` timestamp fields are always present
    and are appended at the end when the schema does not declare them.
    """

    def __init__(self, fields: Iterable[Tuple[str, Union[FieldType, str]]] = ()) -> None:
        self._names: Dict[str, str] = {}
        self._cells: Dict[str, TypedCell] = {}

        for name, tag in fields:
            self._add(name, tag)
        self._ensure_reserved_fields()

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------
    @classmethod
    def from_fields(cls, fields: Iterable[Tuple[str, Union[FieldType, str]]]) -> "FieldStore":
        return cls(fields)

    @classmethod
    def load(cls, source: Path, loader: Optional[SchemaLoader] = None) -> "FieldStore":
        """Build a store from a schema description file.

        When ``loader`` is omitted it is chosen from the file extension.
        """

        source = Path(source)
        if loader is None:
            loader = loader_for(source)
        return cls(loader(source))

    def _add(self, name: str, tag: Union[FieldType, str]) -> None:
        if not isinstance(name, str) or not name.strip():
            raise SchemaValidationError(f"Field names must be non-empty strings, got {name!r}")
        key = name.casefold()
        if key in self._cells:
            raise DuplicateFieldError(f"Field '{name}' is declared more than once")
        self._names[key] = name
        self._cells[key] = TypedCell(tag)

    def _ensure_reserved_fields(self) -> None:
        for name in (START_TIME_KEY, END_TIME_KEY):
            key = name.casefold()
            if key not in self._cells:
                self._names[key] = name
                self._cells[key] = TypedCell(FieldType.TIMESTAMP)
            elif self._cells[key].field_type is not FieldType.TIMESTAMP:
                raise SchemaValidationError(f"Reserved field '{name}' must be a timestamp")

    # ------------------------------------------------------------------
    # Typed access
    # ------------------------------------------------------------------
    def cell(self, key: str) -> TypedCell:
        if not isinstance(key, str):
            raise FieldNotFoundError(f"Field names must be strings, got {key!r}")
        try:
            return self._cells[key.casefold()]
        except KeyError as exc:
            raise FieldNotFoundError(f"Schema does not contain a field named '{key}'") from exc

    def get_value(self, key: str, expected: Optional[TypeToken] = None) -> Any:
        return self.cell(key).get(expected)

    def set_value(self, key: str, value: Any, expected: Optional[TypeToken] = None) -> None:
        self.cell(key).set(value, expected)

    def field_type(self, key: str) -> FieldType:
        return self.cell(key).field_type

    # ------------------------------------------------------------------
    # Projections
    # ------------------------------------------------------------------
    def headings(self) -> List[str]:
        return list(self._names.values())

    def values(self) -> List[str]:
        return [str(cell) for cell in self._cells.values()]

    def types(self) -> List[FieldType]:
        return [cell.field_type for cell in self._cells.values()]

    def as_dict(self) -> Mapping[str, str]:
        return MappingProxyType(dict(zip(self.headings(), self.values())))

    # ------------------------------------------------------------------
    # Mapping protocol
    # ------------------------------------------------------------------
    def __getitem__(self, key: str) -> Any:
        return self.get_value(key)

    def __setitem__(self, key: str, value: Any) -> None:
        self.set_value(key, value)

    def __delitem__(self, key: str) -> None:
        raise SchemaLockedError(f"Cannot remove field '{key}' from a loaded schema")

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and key.casefold() in self._cells

    def __iter__(self) -> Iterator[str]:
        return iter(self.headings())

    def __len__(self) -> int:
        return len(self._cells)

    def __repr__(self) -> str:
        fields = ", ".join(
            f"{name}:{cell.field_type.value}" for name, cell in zip(self._names.values(), self._cells.values())
        )
        return f"FieldStore({fields})"


__all__ = ["END_TIME_KEY", "FieldStore", "START_TIME_KEY"]
