"""Unit tests for schema description loaders."""

from __future__ import annotations

from pathlib import Path

import pytest

from csvlog import SchemaFormatError, SchemaValidationError, load_json_schema, load_xml_schema, loader_for

from .sample_schemas import SCHEMA_DIR


def test_xml_loader_preserves_declaration_order() -> None:
    columns = load_xml_schema(SCHEMA_DIR / "sensor_schema.xml")
    assert columns[:3] == [("Field1", "s"), ("Field2", "i"), ("Ready", "b")]
    assert len(columns) == 10


def test_json_loader_reads_columns() -> None:
    columns = load_json_schema(SCHEMA_DIR / "ordered_schema.json")
    assert [name for name, _ in columns] == ["StartDateTime", "Station", "EndDateTime", "Reading"]


def test_loader_is_chosen_by_extension(tmp_path: Path) -> None:
    assert loader_for(tmp_path / "schema.XML") is load_xml_schema
    assert loader_for(tmp_path / "schema.json") is load_json_schema
    with pytest.raises(SchemaFormatError):
        loader_for(tmp_path / "schema.txt")


def test_malformed_documents_are_format_errors(tmp_path: Path) -> None:
    broken_xml = tmp_path / "broken.xml"
    broken_xml.write_text("<schema><column name='a'", encoding="utf-8")
    broken_json = tmp_path / "broken.json"
    broken_json.write_text("{not json", encoding="utf-8")

    with pytest.raises(SchemaFormatError):
        load_xml_schema(broken_xml)
    with pytest.raises(SchemaFormatError):
        load_json_schema(broken_json)
    with pytest.raises(SchemaFormatError):
        load_xml_schema(tmp_path / "missing.xml")


@pytest.mark.parametrize(
    "content",
    [
        "<columns><column name='a' type='s'/></columns>",
        "<schema><column type='s'/></schema>",
        "<schema><column name='a'/></schema>",
        "<schema><column name='a' type='s' width='3'/></schema>",
    ],
)
def test_structurally_invalid_xml_is_a_validation_error(tmp_path: Path, content: str) -> None:
    source = tmp_path / "schema.xml"
    source.write_text(content, encoding="utf-8")
    with pytest.raises(SchemaValidationError):
        load_xml_schema(source)


@pytest.mark.parametrize(
    "content",
    [
        "[]",
        '{"fields": []}',
        '{"columns": ["a"]}',
        '{"columns": [{"name": "", "type": "text"}]}',
        '{"columns": [{"name": "a", "type": 3}]}',
    ],
)
def test_structurally_invalid_json_is_a_validation_error(tmp_path: Path, content: str) -> None:
    source = tmp_path / "schema.json"
    source.write_text(content, encoding="utf-8")
    with pytest.raises(SchemaValidationError):
        load_json_schema(source)
