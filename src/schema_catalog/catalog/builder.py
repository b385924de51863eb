"""Catalog builder - integrates parsed DDL statements into a SchemaCatalog."""

from __future__ import annotations

import logging
from typing import Iterable

from ..ddl.ast import AddTableConstraint, AlterTable, CreateIndex, CreateTable, CreateView
from ..errors import DuplicateDefinitionError, UndefinedTableError, UnsupportedStatementError
from .registry import SchemaCatalog
from .types import TableEntry, TableOrView, ViewEntry


logger = logging.getLogger(__name__)


def _render(statement: object) -> str:
    sql = getattr(statement, "sql", None)
    return sql() if callable(sql) else repr(statement)


class CatalogBuilder:
    """
    Single-pass builder over an ordered statement sequence.

    Statements are integrated as they arrive; there is no fix-up pass, so a
    table must be declared before any index on it. Accepted statements:

    - CREATE TABLE: registers (or redefines) the table, keeping its indexes
    - CREATE INDEX: appended to an already registered table
    - CREATE VIEW: registers (or redefines) the view
    - ALTER TABLE ... ADD CONSTRAINT / FOREIGN KEY / CHECK: ignored

    Anything else raises UnsupportedStatementError.
    """

    def __init__(self):
        self._entries: dict[str, TableOrView] = {}

    def add(self, statement: object) -> None:
        """Integrate one statement."""
        if isinstance(statement, CreateTable):
            self._add_table(statement)
        elif isinstance(statement, CreateIndex):
            self._add_index(statement)
        elif isinstance(statement, CreateView):
            self._add_view(statement)
        elif isinstance(statement, AlterTable):
            if not isinstance(statement.alteration, AddTableConstraint):
                raise UnsupportedStatementError(statement.sql())
            logger.debug(f"Skipped constraint on {statement.table_name}")
        else:
            raise UnsupportedStatementError(_render(statement))

    def add_all(self, statements: Iterable[object]) -> None:
        for statement in statements:
            self.add(statement)

    def build(self) -> SchemaCatalog:
        """Freeze the integrated statements into a catalog."""
        catalog = SchemaCatalog(self._entries)
        stats = catalog.stats()
        logger.info(
            f"Built schema catalog: {stats['tables']} tables, "
            f"{stats['views']} views, {stats['indexes']} indexes"
        )
        return catalog

    def _add_table(self, statement: CreateTable) -> None:
        entry = self._entries.get(statement.name)
        if isinstance(entry, ViewEntry):
            raise DuplicateDefinitionError(statement.name, "view", statement.sql())
        if isinstance(entry, TableEntry):
            self._entries[statement.name] = entry.with_table(statement)
        else:
            self._entries[statement.name] = TableEntry(statement.name, statement)
        logger.debug(f"Registered table: {statement.name}")

    def _add_index(self, statement: CreateIndex) -> None:
        entry = self._entries.get(statement.table_name)
        if not isinstance(entry, TableEntry):
            raise UndefinedTableError(statement.table_name, statement.sql())
        self._entries[statement.table_name] = entry.with_index(statement)
        logger.debug(f"Registered index: {statement.name} on {statement.table_name}")

    def _add_view(self, statement: CreateView) -> None:
        entry = self._entries.get(statement.name)
        if isinstance(entry, TableEntry):
            raise DuplicateDefinitionError(statement.name, "table", statement.sql())
        if isinstance(entry, ViewEntry):
            self._entries[statement.name] = entry.with_view(statement)
        else:
            self._entries[statement.name] = ViewEntry(statement.name, statement)
        logger.debug(f"Registered view: {statement.name}")


def build_catalog(statements: Iterable[object]) -> SchemaCatalog:
    """
    Build a catalog from an ordered statement sequence.

    Either every statement is integrated or an error is raised and nothing
    is returned.
    """
    builder = CatalogBuilder()
    builder.add_all(statements)
    return builder.build()
