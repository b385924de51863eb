"""Accessor output models - the shape every schema loader returns."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Table:
    """A table as seen by the code generator."""
    table_name: str
    # Primary key values are assigned by the application, never by the store
    manual_pk: bool = True


@dataclass(frozen=True, slots=True)
class Column:
    """A table column in declaration order."""
    field_ordinal: int   # 1-based
    column_name: str
    data_type: str       # declared type text, e.g. STRING(MAX), ARRAY<INT64>
    not_null: bool = False
    is_primary_key: bool = False
    is_generated: bool = False


@dataclass(frozen=True, slots=True)
class Index:
    """A secondary index. Columns are fetched separately."""
    index_name: str
    is_unique: bool = False


@dataclass(frozen=True, slots=True)
class IndexColumn:
    """
    A column of an index.

    Key columns are numbered from 1 in key order. Storing (covering)
    columns carry seq_no 0 and storing=True.
    """
    seq_no: int
    column_name: str
    storing: bool = False
