"""Base record type for loggers whose columns are known up front."""
from __future__ import annotations

from dataclasses import dataclass, field, fields, is_dataclass
from datetime import datetime
from typing import List, Tuple

from ..errors import DuplicateFieldError


@dataclass
class CsvSchema:
    """Every static schema derives from this dataclass.

    Subclasses add their own fields, each with a default so the logger can
    build an empty record. A column heading is the field name unless the
    field carries ``metadata={"heading": ...}``.
    """

    start_date_time: datetime = field(default=datetime.min, metadata={"heading": "StartDateTime"})
    end_date_time: datetime = field(default=datetime.min, metadata={"heading": "EndDateTime"})


def is_schema_type(candidate: object) -> bool:
    return isinstance(candidate, type) and is_dataclass(candidate) and issubclass(candidate, CsvSchema)


def schema_columns(schema_type: type) -> List[Tuple[str, str]]:
    """Return ``(heading, attribute)`` pairs in field declaration order.

    Headings must be unique ignoring case, as in :class:`~csvlog.data.field_store.FieldStore`.
    """

    columns = [(f.metadata.get("heading", f.name), f.name) for f in fields(schema_type)]
    seen = set()
    for heading, attribute in columns:
        key = heading.casefold() if isinstance(heading, str) else heading
        if key in seen:
            raise DuplicateFieldError(
                f"Heading '{heading}' of field '{attribute}' is used more than once in {schema_type.__name__}"
            )
        seen.add(key)
    return columns


__all__ = ["CsvSchema", "is_schema_type", "schema_columns"]
