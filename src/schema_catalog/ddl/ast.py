"""DDL syntax tree.

Statement nodes form a closed set; consumers dispatch on the concrete type
and must reject anything they do not recognize. Every statement keeps the
exact source text it was parsed from, which `sql()` returns.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union


# =============================================================================
# Table elements
# =============================================================================

@dataclass(frozen=True, slots=True)
class KeyPart:
    """A column reference in a primary key or index key."""
    name: str
    desc: bool = False


@dataclass(frozen=True, slots=True)
class ColumnDef:
    """A column definition inside CREATE TABLE or ALTER TABLE ADD COLUMN."""
    name: str
    type: str                           # normalized type text, e.g. STRING(MAX)
    not_null: bool = False
    generated_expr: str | None = None   # AS (expr) [STORED]
    stored: bool = False
    default_expr: str | None = None
    hidden: bool = False


@dataclass(frozen=True, slots=True)
class TableConstraint:
    """FOREIGN KEY / CHECK constraint, kept as source text."""
    name: str | None
    kind: str       # FOREIGN KEY | CHECK
    text: str


@dataclass(frozen=True, slots=True)
class Interleave:
    """INTERLEAVE IN PARENT clause."""
    parent: str
    on_delete: str | None = None    # CASCADE | NO ACTION


# =============================================================================
# Query nodes (view bodies)
# =============================================================================

@dataclass(frozen=True, slots=True)
class TableName:
    """A plain table reference in FROM."""
    table: str
    alias: str | None = None


@dataclass(frozen=True, slots=True)
class Join:
    """Two sources combined with JOIN or a comma."""
    op: str     # INNER JOIN, LEFT OUTER JOIN, CROSS JOIN, ",", ...
    left: "FromSource"
    right: "FromSource"


@dataclass(frozen=True, slots=True)
class SubQuerySource:
    """A parenthesized query used as a FROM source."""
    query: "Query"
    alias: str | None = None


@dataclass(frozen=True, slots=True)
class Unnest:
    """UNNEST(array_expr) used as a FROM source."""
    expr: str
    alias: str | None = None


FromSource = Union[TableName, Join, SubQuerySource, Unnest]


@dataclass(frozen=True, slots=True)
class Select:
    """A SELECT query. `from_` is None for SELECT without FROM."""
    from_: FromSource | None = None


@dataclass(frozen=True, slots=True)
class CompoundQuery:
    """UNION / INTERSECT / EXCEPT of two or more queries."""
    op: str
    queries: tuple["Query", ...] = ()


@dataclass(frozen=True, slots=True)
class ParenQuery:
    """A query wrapped in parentheses at the top level."""
    query: "Query"


@dataclass(frozen=True, slots=True)
class WithQuery:
    """A query preceded by WITH common table expressions."""
    query: "Query"
    cte_names: tuple[str, ...] = ()


Query = Union[Select, CompoundQuery, ParenQuery, WithQuery]


# =============================================================================
# ALTER TABLE alterations
# =============================================================================

@dataclass(frozen=True, slots=True)
class AddTableConstraint:
    constraint: TableConstraint


@dataclass(frozen=True, slots=True)
class AddColumn:
    column: ColumnDef
    if_not_exists: bool = False


@dataclass(frozen=True, slots=True)
class DropColumn:
    name: str


@dataclass(frozen=True, slots=True)
class DropConstraint:
    name: str


@dataclass(frozen=True, slots=True)
class AlterColumn:
    name: str
    text: str


@dataclass(frozen=True, slots=True)
class SetOnDelete:
    action: str


@dataclass(frozen=True, slots=True)
class OtherAlteration:
    """Any alteration not modelled above (row deletion policy, ...)."""
    text: str


TableAlteration = Union[
    AddTableConstraint, AddColumn, DropColumn, DropConstraint,
    AlterColumn, SetOnDelete, OtherAlteration,
]


# =============================================================================
# Statements
# =============================================================================

@dataclass(frozen=True, slots=True)
class CreateTable:
    name: str
    columns: tuple[ColumnDef, ...] = ()
    primary_keys: tuple[KeyPart, ...] = ()
    constraints: tuple[TableConstraint, ...] = ()
    interleave: Interleave | None = None
    if_not_exists: bool = False
    text: str = field(default="", compare=False)

    def sql(self) -> str:
        return self.text


@dataclass(frozen=True, slots=True)
class CreateIndex:
    name: str
    table_name: str
    keys: tuple[KeyPart, ...] = ()
    storing: tuple[str, ...] = ()
    unique: bool = False
    null_filtered: bool = False
    interleave_in: str | None = None
    if_not_exists: bool = False
    text: str = field(default="", compare=False)

    def sql(self) -> str:
        return self.text


@dataclass(frozen=True, slots=True)
class CreateView:
    name: str
    query: Query
    or_replace: bool = False
    sql_security: str | None = None     # INVOKER | DEFINER
    text: str = field(default="", compare=False)

    def sql(self) -> str:
        return self.text


@dataclass(frozen=True, slots=True)
class AlterTable:
    table_name: str
    alteration: TableAlteration
    text: str = field(default="", compare=False)

    def sql(self) -> str:
        return self.text


@dataclass(frozen=True, slots=True)
class DropStatement:
    """DROP TABLE / DROP INDEX / DROP VIEW."""
    kind: str
    name: str
    text: str = field(default="", compare=False)

    def sql(self) -> str:
        return self.text


@dataclass(frozen=True, slots=True)
class OtherStatement:
    """A DDL statement of a kind the parser recognizes but does not model."""
    keyword: str
    text: str = field(default="", compare=False)

    def sql(self) -> str:
        return self.text


Statement = Union[
    CreateTable, CreateIndex, CreateView, AlterTable, DropStatement, OtherStatement,
]
