"""Readers for schema description documents.

A loader takes the path of a description file and returns the declared
columns as an ordered list of ``(name, type_tag)`` pairs. Type tags are not
interpreted here; :class:`csvlog.data.typed_cell.FieldType` resolves them.

Two formats are understood::

    <schema>
      <column name="Field1" type="s"/>
      <column name="Field2" type="i"/>
    </schema>

    {"columns": [{"name": "Field1", "type": "text"}, {"name": "Field2", "type": "int"}]}
"""
from __future__ import annotations

import json
import logging
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Any, Callable, Dict, List, Tuple

from ..errors import SchemaFormatError, SchemaValidationError

LOGGER = logging.getLogger(__name__)

SchemaColumns = List[Tuple[str, str]]
SchemaLoader = Callable[[Path], SchemaColumns]


def _read_bytes(source: Path) -> bytes:
    try:
        return source.read_bytes()
    except OSError as exc:
        raise SchemaFormatError(f"Unable to read schema file {source}: {exc}") from exc


def _validated_column(name: Any, tag: Any, position: int, source: Path) -> Tuple[str, str]:
    if not isinstance(name, str) or not name.strip():
        raise SchemaValidationError(f"Column {position} in {source} is missing a 'name'")
    if not isinstance(tag, str) or not tag.strip():
        raise SchemaValidationError(f"Column '{name}' in {source} is missing a 'type'")
    return name.strip(), tag.strip()


def load_xml_schema(source: Path) -> SchemaColumns:
    """Read ``<column name=... type=...>`` elements from an XML description."""

    source = Path(source)
    try:
        root = ET.fromstring(_read_bytes(source))
    except ET.ParseError as exc:
        raise SchemaFormatError(f"Schema file {source} is not well-formed XML: {exc}") from exc

    if root.tag != "schema":
        raise SchemaValidationError(f"Schema file {source} must have a <schema> root, found <{root.tag}>")

    columns: SchemaColumns = []
    for position, element in enumerate(root.iter("column")):
        unexpected = set(element.attrib) - {"name", "type"}
        if unexpected:
            raise SchemaValidationError(
                f"Column {position} in {source} has unexpected attributes: {sorted(unexpected)}"
            )
        columns.append(_validated_column(element.get("name"), element.get("type"), position, source))

    LOGGER.debug("Loaded %d columns from %s", len(columns), source)
    return columns


def load_json_schema(source: Path) -> SchemaColumns:
    """Read the ``columns`` array from a JSON description."""

    source = Path(source)
    try:
        raw = json.loads(_read_bytes(source))
    except ValueError as exc:
        raise SchemaFormatError(f"Schema file {source} is not valid JSON: {exc}") from exc

    if not isinstance(raw, dict):
        raise SchemaValidationError(f"Schema file {source} must contain a JSON object")
    entries = raw.get("columns")
    if not isinstance(entries, list):
        raise SchemaValidationError(f"Schema file {source} must define a 'columns' list")

    columns: SchemaColumns = []
    for position, entry in enumerate(entries):
        if not isinstance(entry, dict):
            raise SchemaValidationError(f"Column {position} in {source} must be an object")
        columns.append(_validated_column(entry.get("name"), entry.get("type"), position, source))

    LOGGER.debug("Loaded %d columns from %s", len(columns), source)
    return columns


LOADERS: Dict[str, SchemaLoader] = {
    ".xml": load_xml_schema,
    ".json": load_json_schema,
}


def loader_for(source: Path) -> SchemaLoader:
    """Return the loader registered for the extension of ``source``."""

    suffix = Path(source).suffix.lower()
    try:
        return LOADERS[suffix]
    except KeyError as exc:
        expected = ", ".join(sorted(LOADERS))
        raise SchemaFormatError(
            f"Schema file {source} has unsupported extension '{suffix}' (expected one of {expected})"
        ) from exc


__all__ = [
    "LOADERS",
    "SchemaColumns",
    "SchemaLoader",
    "load_json_schema",
    "load_xml_schema",
    "loader_for",
]
