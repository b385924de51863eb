"""GoogleSQL DDL lexer, syntax tree and parser."""

from .ast import (
    AddColumn,
    AddTableConstraint,
    AlterColumn,
    AlterTable,
    ColumnDef,
    CompoundQuery,
    CreateIndex,
    CreateTable,
    CreateView,
    DropColumn,
    DropConstraint,
    DropStatement,
    Interleave,
    Join,
    KeyPart,
    OtherAlteration,
    OtherStatement,
    ParenQuery,
    Select,
    SetOnDelete,
    Statement,
    SubQuerySource,
    TableConstraint,
    TableName,
    Unnest,
    WithQuery,
)
from .parser import DdlParseError, DdlParser, parse_ddl, parse_ddl_file, parse_ddls

__all__ = [
    "AddColumn",
    "AddTableConstraint",
    "AlterColumn",
    "AlterTable",
    "ColumnDef",
    "CompoundQuery",
    "CreateIndex",
    "CreateTable",
    "CreateView",
    "DdlParseError",
    "DdlParser",
    "DropColumn",
    "DropConstraint",
    "DropStatement",
    "Interleave",
    "Join",
    "KeyPart",
    "OtherAlteration",
    "OtherStatement",
    "ParenQuery",
    "Select",
    "SetOnDelete",
    "Statement",
    "SubQuerySource",
    "TableConstraint",
    "TableName",
    "Unnest",
    "WithQuery",
    "parse_ddl",
    "parse_ddl_file",
    "parse_ddls",
]
