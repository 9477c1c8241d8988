"""Log writing engine, schema bindings and the logger registry."""

from .loggers import CsvLogger, DynamicCsvLogger
from .registry import LoggerRegistry
from .rotating_writer import RotatingCsvWriter

__all__ = ["CsvLogger", "DynamicCsvLogger", "LoggerRegistry", "RotatingCsvWriter"]
