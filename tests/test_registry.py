"""Tests for logger registration and lookup."""

from __future__ import annotations

from pathlib import Path
from threading import Thread

import pytest

from csvlog import (
    ArgumentInvalidError,
    CsvLogger,
    DirectoryInUseError,
    DynamicCsvLogger,
    FileSize,
    IdentifierNotUniqueError,
    LoggerNotFoundError,
    LoggerRegistry,
    SchemaAlreadyRegisteredError,
    SchemaFormatError,
)

from .sample_schemas import SCHEMA_DIR, ExtendedResultSchema, RenamedSchema, ResultSchema


@pytest.fixture
def registry() -> LoggerRegistry:
    return LoggerRegistry()


def test_registered_logger_is_returned_on_lookup(registry: LoggerRegistry, tmp_path: Path) -> None:
    logger = registry.register(ResultSchema, tmp_path / "results", delimiter=",", max_file_size=FileSize.from_kb(1))

    assert isinstance(logger, CsvLogger)
    assert registry.get_logger(ResultSchema) is logger
    assert logger.delimiter == ","
    assert logger.max_file_size == FileSize(1024)
    assert (tmp_path / "results").resolve() in registry.claimed_directories


def test_directory_can_only_be_claimed_once(registry: LoggerRegistry, tmp_path: Path) -> None:
    registry.register(ResultSchema, tmp_path / "shared")

    with pytest.raises(DirectoryInUseError):
        registry.register(ExtendedResultSchema, tmp_path / "shared")
    with pytest.raises(DirectoryInUseError):
        registry.register_dynamic("sensor", tmp_path / "shared", SCHEMA_DIR / "sensor_schema.xml")


def test_directory_claims_compare_canonical_paths(
    registry: LoggerRegistry, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    registry.register(ResultSchema, tmp_path / "logs")
    monkeypatch.chdir(tmp_path)

    with pytest.raises(DirectoryInUseError):
        registry.register(RenamedSchema, Path("other") / ".." / "logs")


def test_schema_type_can_only_be_registered_once(registry: LoggerRegistry, tmp_path: Path) -> None:
    registry.register(ResultSchema, tmp_path / "first")

    with pytest.raises(SchemaAlreadyRegisteredError):
        registry.register(ResultSchema, tmp_path / "second")
    assert (tmp_path / "second").resolve() not in registry.claimed_directories


def test_dynamic_identifiers_are_unique_ignoring_case(registry: LoggerRegistry, tmp_path: Path) -> None:
    logger = registry.register_dynamic("Sensor", tmp_path / "a", SCHEMA_DIR / "sensor_schema.xml")

    assert isinstance(logger, DynamicCsvLogger)
    assert registry.get_dynamic_logger("SENSOR") is logger
    with pytest.raises(IdentifierNotUniqueError):
        registry.register_dynamic("sensor", tmp_path / "b", SCHEMA_DIR / "ordered_schema.json")


def test_empty_identifier_is_rejected(registry: LoggerRegistry, tmp_path: Path) -> None:
    with pytest.raises(ArgumentInvalidError):
        registry.register_dynamic("", tmp_path, SCHEMA_DIR / "sensor_schema.xml")
    with pytest.raises(ArgumentInvalidError):
        registry.get_dynamic_logger("")
    assert not registry.claimed_directories


def test_missing_directory_is_rejected(registry: LoggerRegistry) -> None:
    with pytest.raises(ArgumentInvalidError):
        registry.register(ResultSchema, None)


def test_unregistered_lookups_fail(registry: LoggerRegistry) -> None:
    with pytest.raises(LoggerNotFoundError):
        registry.get_logger(ResultSchema)
    with pytest.raises(LoggerNotFoundError):
        registry.get_dynamic_logger("missing")


def test_failed_schema_load_claims_nothing(registry: LoggerRegistry, tmp_path: Path) -> None:
    bad_source = tmp_path / "schema.txt"
    bad_source.write_text("", encoding="utf-8")

    with pytest.raises(SchemaFormatError):
        registry.register_dynamic("sensor", tmp_path / "out", bad_source)

    logger = registry.register_dynamic("sensor", tmp_path / "out", SCHEMA_DIR / "sensor_schema.xml")
    assert registry.get_dynamic_logger("sensor") is logger


def test_registries_are_independent(tmp_path: Path) -> None:
    first = LoggerRegistry()
    second = LoggerRegistry()
    first.register(ResultSchema, tmp_path / "one")
    second.register(ResultSchema, tmp_path / "two")

    with pytest.raises(LoggerNotFoundError):
        first.get_dynamic_logger("anything")
    assert first.get_logger(ResultSchema) is not second.get_logger(ResultSchema)


def test_concurrent_registration_admits_a_single_winner(registry: LoggerRegistry, tmp_path: Path) -> None:
    outcomes = []

    def _register(index: int) -> None:
        try:
            registry.register_dynamic(f"logger-{index}", tmp_path / "contested", SCHEMA_DIR / "sensor_schema.xml")
        except DirectoryInUseError:
            outcomes.append("rejected")
        else:
            outcomes.append("registered")

    threads = [Thread(target=_register, args=(index,)) for index in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert outcomes.count("registered") == 1
    assert outcomes.count("rejected") == 7
