"""Schema catalog errors.

Every error here is fatal to the operation that raised it. Lookups of names
that simply are not there (an unknown table, an index with no match) are not
errors and return empty results instead.
"""

from __future__ import annotations


class CatalogError(Exception):
    """Base exception for schema catalog errors."""
    pass


class UndefinedTableError(CatalogError):
    """Raised when a statement references a table that is not registered yet."""

    def __init__(self, table_name: str, statement: str | None = None):
        if statement is None:
            message = f"table '{table_name}' is undefined"
        else:
            message = f"table '{table_name}' is undefined, but got '{statement}'"
        super().__init__(message)
        self.table_name = table_name
        self.statement = statement


class UnsupportedStatementError(CatalogError):
    """Raised for DDL the catalog cannot integrate (e.g. ALTER TABLE ... DROP COLUMN)."""

    def __init__(self, statement: str):
        super().__init__(
            "stmt should be CreateTable, CreateIndex, CreateView or "
            f"AlterTableAddConstraint, but got '{statement}'"
        )
        self.statement = statement


class UnsupportedViewSourceError(CatalogError):
    """Raised when a view's FROM clause cannot be traced to a single base table."""
    pass


class DuplicateDefinitionError(CatalogError):
    """Raised when one name is declared both as a table and as a view."""

    def __init__(self, name: str, existing: str, statement: str):
        super().__init__(
            f"'{name}' is already defined as a {existing}, but got '{statement}'"
        )
        self.name = name
        self.existing = existing
        self.statement = statement


class IntrospectionError(CatalogError):
    """Raised when an INFORMATION_SCHEMA query fails."""
    pass


class ConfigError(CatalogError):
    """Raised when the configuration does not describe a usable schema source."""
    pass
