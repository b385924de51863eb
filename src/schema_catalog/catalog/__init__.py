"""Schema catalog - tables, indexes and views built from DDL."""

from .types import TableEntry, TableOrView, ViewEntry
from .registry import SchemaCatalog
from .builder import CatalogBuilder, build_catalog

__all__ = [
    "TableEntry",
    "TableOrView",
    "ViewEntry",
    "SchemaCatalog",
    "CatalogBuilder",
    "build_catalog",
]
