"""Byte counts used to express the maximum size of a log file."""
from __future__ import annotations

from dataclasses import dataclass

from ..errors import ArgumentInvalidError

_KB = 1024
_MB = _KB * 1024
_GB = _MB * 1024


@dataclass(frozen=True, order=True)
class FileSize:
    """Immutable, totally ordered, non-negative number of bytes."""

    bytes: int

    def __post_init__(self) -> None:
        if isinstance(self.bytes, bool) or not isinstance(self.bytes, int):
            raise ArgumentInvalidError(f"File size must be an integer byte count, got {self.bytes!r}")
        if self.bytes < 0:
            raise ArgumentInvalidError(f"File size cannot be negative: {self.bytes}")

    @classmethod
    def from_bytes(cls, count: int) -> "FileSize":
        return cls(count)

    @classmethod
    def from_kb(cls, kilobytes: float) -> "FileSize":
        return cls(int(kilobytes * _KB))

    @classmethod
    def from_mb(cls, megabytes: float) -> "FileSize":
        return cls(int(megabytes * _MB))

    @classmethod
    def from_gb(cls, gigabytes: float) -> "FileSize":
        return cls(int(gigabytes * _GB))

    @property
    def kilobytes(self) -> int:
        return self.bytes // _KB

    @property
    def megabytes(self) -> float:
        return self.bytes / _MB

    @property
    def gigabytes(self) -> float:
        return self.bytes / _GB

    def __str__(self) -> str:
        return f"{self.bytes} bytes ({self.megabytes:.2f} MB, {self.gigabytes:.2f} GB)"


__all__ = ["FileSize"]
