"""View base-table resolution.

A view's primary key is the primary key of the single table it selects
from. Only `SELECT ... FROM <table>` views are supported; joins and every
other source shape are rejected.
"""

from __future__ import annotations

from ..catalog import SchemaCatalog, TableEntry, ViewEntry
from ..ddl import CreateView, Join, Select, TableName, parse_ddl
from ..errors import UndefinedTableError, UnsupportedViewSourceError


def base_tables_for_view(sql: str) -> list[str]:
    """
    Re-parse a CREATE VIEW statement and return its source table names.

    Raises:
        DdlParseError: If the text does not parse
        UnsupportedViewSourceError: If the view does not select from a single table
    """
    statement = parse_ddl(sql)
    if not isinstance(statement, CreateView):
        raise UnsupportedViewSourceError(
            f"unknown source type: {type(statement).__name__}"
        )

    query = statement.query
    if not isinstance(query, Select):
        raise UnsupportedViewSourceError(f"unknown source type: {type(query).__name__}")

    source = query.from_
    if isinstance(source, TableName):
        return [source.table]
    if isinstance(source, Join):
        raise UnsupportedViewSourceError("view with join is not supported")
    if source is None:
        raise UnsupportedViewSourceError("unknown source type: None")
    raise UnsupportedViewSourceError(f"unknown source type: {type(source).__name__}")


def resolve_view_base(catalog: SchemaCatalog, view: ViewEntry) -> TableEntry:
    """
    Find the table a view reads from.

    Only one level of indirection is followed: a view over another view is
    rejected.
    """
    table_name = base_tables_for_view(view.create_view.sql())[0]
    entry = catalog.get(table_name)
    if entry is None:
        raise UndefinedTableError(table_name, view.create_view.sql())
    if isinstance(entry, ViewEntry):
        raise UnsupportedViewSourceError(
            f"view '{view.name}' selects from view '{table_name}', "
            "only views over tables are supported"
        )
    return entry
