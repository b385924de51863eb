"""Schema loader over a live database's INFORMATION_SCHEMA."""

from __future__ import annotations

import importlib
import logging
from typing import Any

from ..config import SourceConfig
from ..dialect import Dialect
from ..errors import ConfigError, IntrospectionError
from ..models import Column, Index, IndexColumn, Table
from .base import PRIMARY_KEY, SchemaLoader


logger = logging.getLogger(__name__)

PARAMSTYLES = ("qmark", "format", "pyformat", "numeric", "named")

TABLES_QUERY = (
    "SELECT TABLE_NAME "
    "FROM INFORMATION_SCHEMA.TABLES "
    "WHERE TABLE_SCHEMA = {schema} AND TABLE_TYPE = 'BASE TABLE' "
    "ORDER BY TABLE_NAME"
)

COLUMNS_QUERY = (
    "SELECT c.ORDINAL_POSITION, c.COLUMN_NAME, c.SPANNER_TYPE, c.IS_NULLABLE, c.IS_GENERATED, "
    "EXISTS ("
    "SELECT 1 FROM INFORMATION_SCHEMA.INDEX_COLUMNS ic "
    "WHERE ic.TABLE_SCHEMA = c.TABLE_SCHEMA AND ic.TABLE_NAME = c.TABLE_NAME "
    f"AND ic.COLUMN_NAME = c.COLUMN_NAME AND ic.INDEX_NAME = '{PRIMARY_KEY}'"
    ") AS IS_PRIMARY_KEY "
    "FROM INFORMATION_SCHEMA.COLUMNS c "
    "WHERE c.TABLE_SCHEMA = {schema} AND c.TABLE_NAME = {table} "
    "ORDER BY c.ORDINAL_POSITION"
)

INDEXES_QUERY = (
    "SELECT INDEX_NAME, IS_UNIQUE "
    "FROM INFORMATION_SCHEMA.INDEXES "
    "WHERE TABLE_SCHEMA = {schema} AND TABLE_NAME = {table} "
    f"AND INDEX_NAME <> '{PRIMARY_KEY}' AND SPANNER_IS_MANAGED = FALSE "
    "ORDER BY INDEX_NAME"
)

# Storing columns have a NULL ordinal position and sort first
INDEX_COLUMNS_QUERY = (
    "SELECT ORDINAL_POSITION, COLUMN_NAME "
    "FROM INFORMATION_SCHEMA.INDEX_COLUMNS "
    "WHERE TABLE_SCHEMA = {schema} AND TABLE_NAME = {table} AND INDEX_NAME = {index} "
    "ORDER BY ORDINAL_POSITION, COLUMN_NAME"
)


def _placeholder(paramstyle: str, position: int, name: str) -> str:
    if paramstyle == "qmark":
        return "?"
    if paramstyle == "format":
        return "%s"
    if paramstyle == "pyformat":
        return f"%({name})s"
    if paramstyle == "numeric":
        return f":{position}"
    return f":{name}"


class InformationSchemaLoader(SchemaLoader):
    """
    Reads the schema of a running database through INFORMATION_SCHEMA.

    Works with any DB-API 2.0 connection whose INFORMATION_SCHEMA has the
    Cloud Spanner layout (TABLES, COLUMNS, INDEXES, INDEX_COLUMNS).

    Usage:
        loader = InformationSchemaLoader(connection, paramstyle="format")
        tables = loader.table_list()
    """

    def __init__(
        self,
        connection: Any,
        paramstyle: str = "qmark",
        table_schema: str = "",
        dialect: Dialect | str | None = None,
    ):
        super().__init__(dialect)
        if paramstyle not in PARAMSTYLES:
            raise ConfigError(
                f"Unsupported paramstyle '{paramstyle}', expected one of: {', '.join(PARAMSTYLES)}"
            )
        self._connection = connection
        self._paramstyle = paramstyle
        self._table_schema = table_schema

    @classmethod
    def from_config(cls, source: SourceConfig) -> InformationSchemaLoader:
        """Open a connection with the configured driver and wrap it."""
        connection, paramstyle = connect(source)
        return cls(connection, paramstyle, source.table_schema, source.dialect)

    def close(self) -> None:
        self._connection.close()

    def table_list(self) -> list[Table]:
        rows = self._query(TABLES_QUERY, {})
        return [Table(table_name=row[0], manual_pk=True) for row in rows]

    def column_list(self, table: str) -> list[Column]:
        rows = self._query(COLUMNS_QUERY, {"table": table})
        return [
            Column(
                field_ordinal=int(ordinal),
                column_name=name,
                data_type=data_type,
                not_null=is_nullable == "NO",
                is_primary_key=bool(is_pk),
                is_generated=is_generated == "ALWAYS",
            )
            for ordinal, name, data_type, is_nullable, is_generated, is_pk in rows
        ]

    def index_list(self, table: str) -> list[Index]:
        rows = self._query(INDEXES_QUERY, {"table": table})
        return [Index(index_name=name, is_unique=bool(unique)) for name, unique in rows]

    def index_column_list(self, table: str, index: str) -> list[IndexColumn]:
        rows = self._query(INDEX_COLUMNS_QUERY, {"table": table, "index": index})
        columns = []
        for ordinal, name in rows:
            if ordinal is None:
                columns.append(IndexColumn(seq_no=0, column_name=name, storing=True))
            else:
                columns.append(IndexColumn(seq_no=int(ordinal), column_name=name))
        return columns

    def _query(self, template: str, params: dict[str, str]) -> list[tuple]:
        """Render `template` for the connection's paramstyle and run it."""
        params = {"schema": self._table_schema, **params}

        # Placeholders are numbered in order of appearance in the template
        order = sorted(params, key=lambda name: template.index("{" + name + "}"))
        sql = template.format(**{
            name: _placeholder(self._paramstyle, i, name)
            for i, name in enumerate(order, start=1)
        })
        if self._paramstyle in ("named", "pyformat"):
            args: Any = params
        else:
            args = [params[name] for name in order]

        logger.debug(f"INFORMATION_SCHEMA query: {sql} {args}")
        try:
            cursor = self._connection.cursor()
            try:
                cursor.execute(sql, args)
                return [tuple(row) for row in cursor.fetchall()]
            finally:
                cursor.close()
        except Exception as e:
            raise IntrospectionError(f"INFORMATION_SCHEMA query failed: {e}") from e


def connect(source: SourceConfig) -> tuple[Any, str]:
    """
    Open a DB-API connection from a source configuration.

    Returns:
        (connection, paramstyle) where paramstyle is the driver module's own
    """
    if not source.driver:
        raise ConfigError("source.driver is required for live introspection")

    try:
        module = importlib.import_module(source.driver)
    except ImportError as e:
        raise ConfigError(f"Cannot import database driver '{source.driver}': {e}") from e

    paramstyle = getattr(module, "paramstyle", "qmark")
    logger.info(f"Connecting with {source.driver} (paramstyle={paramstyle})")
    try:
        connection = module.connect(**source.connect_args)
    except Exception as e:
        raise IntrospectionError(f"Connection with {source.driver} failed: {e}") from e
    return connection, paramstyle
