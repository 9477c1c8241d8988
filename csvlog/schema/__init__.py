"""Schema definitions: the static record base and description loaders."""

from .loaders import LOADERS, load_json_schema, load_xml_schema, loader_for
from .record import CsvSchema

__all__ = ["CsvSchema", "LOADERS", "load_json_schema", "load_xml_schema", "loader_for"]
