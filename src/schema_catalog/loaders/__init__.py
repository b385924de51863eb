"""Schema loaders - static DDL and live INFORMATION_SCHEMA."""

from __future__ import annotations

from ..config import SourceConfig
from .base import PRIMARY_KEY, SchemaLoader
from .ddl import DdlLoader
from .information_schema import InformationSchemaLoader, connect
from .views import base_tables_for_view, resolve_view_base


def open_loader(source: SourceConfig) -> SchemaLoader:
    """Create the loader a source configuration describes."""
    source.validate()
    if source.kind == "ddl":
        return DdlLoader.from_file(source.ddl_file, source.dialect)
    return InformationSchemaLoader.from_config(source)


__all__ = [
    "PRIMARY_KEY",
    "SchemaLoader",
    "DdlLoader",
    "InformationSchemaLoader",
    "base_tables_for_view",
    "connect",
    "open_loader",
    "resolve_view_base",
]
