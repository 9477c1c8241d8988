"""Record types shared by the logger tests."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from csvlog import CsvSchema

SCHEMA_DIR = Path(__file__).parent / "schemas"


@dataclass
class ResultSchema(CsvSchema):
    result_1: str = ""
    result_2: str = ""
    result_3: str = ""
    attempts: int = 0
    note: Optional[str] = None


@dataclass
class ExtendedResultSchema(ResultSchema):
    new_heading: str = ""


@dataclass
class RenamedSchema(CsvSchema):
    station: str = field(default="", metadata={"heading": "Station"})
    reading: float = field(default=0.0, metadata={"heading": "Reading"})


@dataclass
class PaddedSchema(CsvSchema):
    payload: str = "x" * 30


__all__ = [
    "ExtendedResultSchema",
    "PaddedSchema",
    "RenamedSchema",
    "ResultSchema",
    "SCHEMA_DIR",
]
