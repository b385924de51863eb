"""Base schema loader interface."""

from __future__ import annotations

from abc import ABC, abstractmethod

from ..dialect import Dialect, TypeInfo, get_dialect
from ..models import Column, Index, IndexColumn, Table


# Pseudo index name that selects a table's primary key columns
PRIMARY_KEY = "PRIMARY_KEY"


class SchemaLoader(ABC):
    """
    Abstract base class for schema loaders.

    Every loader (static DDL, live INFORMATION_SCHEMA) answers the same four
    questions in the same shapes, so a code generator can use either one.
    Names that are not found yield empty lists, never errors.
    """

    def __init__(self, dialect: Dialect | str | None = None):
        if dialect is None:
            dialect = "spanner"
        self.dialect = get_dialect(dialect) if isinstance(dialect, str) else dialect

    @abstractmethod
    def table_list(self) -> list[Table]:
        """List base tables (views excluded) in a stable order."""
        ...

    @abstractmethod
    def column_list(self, table: str) -> list[Column]:
        """List a table's columns in declaration order."""
        ...

    @abstractmethod
    def index_list(self, table: str) -> list[Index]:
        """List a table's secondary indexes."""
        ...

    @abstractmethod
    def index_column_list(self, table: str, index: str) -> list[IndexColumn]:
        """
        List the columns of an index.

        Storing columns come first with seq_no 0, then key columns numbered
        from 1. Passing PRIMARY_KEY as `index` lists the primary key columns.
        """
        ...

    # Dialect helpers

    def param_n(self, n: int) -> str:
        return self.dialect.param_n(n)

    def mask_func(self) -> str:
        return self.dialect.mask_func()

    def parse_type(self, data_type: str, nullable: bool) -> TypeInfo:
        return self.dialect.parse_type(data_type, nullable)

    def valid_custom_type(self, data_type: str, custom_type: str) -> bool:
        return self.dialect.valid_custom_type(data_type, custom_type)
