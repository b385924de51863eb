"""Catalog entry types.

Each name in a catalog maps to exactly one entry, either a table (with its
indexes) or a view. There is no entry shape without a definition.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Union

from ..ddl.ast import CreateIndex, CreateTable, CreateView


@dataclass(frozen=True, slots=True)
class TableEntry:
    """A table definition plus the indexes declared on it, in declaration order."""
    name: str
    create_table: CreateTable
    indexes: tuple[CreateIndex, ...] = ()

    def with_table(self, create_table: CreateTable) -> TableEntry:
        return replace(self, create_table=create_table)

    def with_index(self, create_index: CreateIndex) -> TableEntry:
        return replace(self, indexes=self.indexes + (create_index,))

    @property
    def primary_key_names(self) -> list[str]:
        return [key.name for key in self.create_table.primary_keys]


@dataclass(frozen=True, slots=True)
class ViewEntry:
    """A view definition. Its primary key is resolved on demand."""
    name: str
    create_view: CreateView

    def with_view(self, create_view: CreateView) -> ViewEntry:
        return replace(self, create_view=create_view)


TableOrView = Union[TableEntry, ViewEntry]
