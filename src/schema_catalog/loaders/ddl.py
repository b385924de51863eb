"""Schema loader over a catalog built from DDL text."""

from __future__ import annotations

import logging
from pathlib import Path

from ..catalog import SchemaCatalog, TableEntry, ViewEntry, build_catalog
from ..ddl import parse_ddl_file, parse_ddls
from ..dialect import Dialect
from ..models import Column, Index, IndexColumn, Table
from .base import PRIMARY_KEY, SchemaLoader
from .views import resolve_view_base


logger = logging.getLogger(__name__)


class DdlLoader(SchemaLoader):
    """
    Answers schema questions from a SchemaCatalog.

    Usage:
        loader = DdlLoader.from_file("schema.sql")
        for table in loader.table_list():
            print(table.table_name, loader.column_list(table.table_name))
    """

    def __init__(self, catalog: SchemaCatalog, dialect: Dialect | str | None = None):
        super().__init__(dialect)
        self._catalog = catalog

    @classmethod
    def from_string(cls, text: str, dialect: Dialect | str | None = None) -> DdlLoader:
        """Parse DDL text and build a loader over it."""
        return cls(build_catalog(parse_ddls(text)), dialect)

    @classmethod
    def from_file(cls, path: str | Path, dialect: Dialect | str | None = None) -> DdlLoader:
        """Parse a DDL file and build a loader over it."""
        logger.info(f"Loading DDL file: {path}")
        return cls(build_catalog(parse_ddl_file(path)), dialect)

    @property
    def catalog(self) -> SchemaCatalog:
        return self._catalog

    def table_list(self) -> list[Table]:
        return [Table(table_name=t.name, manual_pk=True) for t in self._catalog.tables()]

    def column_list(self, table: str) -> list[Column]:
        entry = self._catalog.get_table(table)
        if entry is None:
            return []

        pk_names = set(entry.primary_key_names)
        return [
            Column(
                field_ordinal=i,
                column_name=c.name,
                data_type=c.type,
                not_null=c.not_null,
                is_primary_key=c.name in pk_names,
                is_generated=c.generated_expr is not None,
            )
            for i, c in enumerate(entry.create_table.columns, start=1)
        ]

    def index_list(self, table: str) -> list[Index]:
        entry = self._catalog.get_table(table)
        if entry is None:
            return []
        return [Index(index_name=ix.name, is_unique=ix.unique) for ix in entry.indexes]

    def index_column_list(self, table: str, index: str) -> list[IndexColumn]:
        if index == PRIMARY_KEY:
            return self._primary_key_columns(table)

        entry = self._catalog.get_table(table)
        if entry is None:
            return []

        for ix in entry.indexes:
            if ix.name != index:
                continue
            columns = [IndexColumn(seq_no=0, column_name=name, storing=True) for name in ix.storing]
            columns.extend(
                IndexColumn(seq_no=i, column_name=key.name)
                for i, key in enumerate(ix.keys, start=1)
            )
            return columns
        return []

    def _primary_key_columns(self, table: str) -> list[IndexColumn]:
        entry = self._catalog.get(table)
        if entry is None:
            return []
        if isinstance(entry, ViewEntry):
            entry = resolve_view_base(self._catalog, entry)
        return _numbered_keys(entry)


def _numbered_keys(entry: TableEntry) -> list[IndexColumn]:
    return [
        IndexColumn(seq_no=i, column_name=name)
        for i, name in enumerate(entry.primary_key_names, start=1)
    ]
