"""Schema catalog - immutable, ordered mapping of names to catalog entries."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Iterator

from .types import TableEntry, TableOrView, ViewEntry


class SchemaCatalog(Mapping):
    """
    Read-only mapping of table/view name to its catalog entry.

    Enumeration follows first declaration order, so anything generated from
    the catalog is diff-stable across runs. Instances are never mutated after
    construction and can be shared between threads without locking.
    """

    __slots__ = ("_entries",)

    def __init__(self, entries: Mapping[str, TableOrView] | None = None):
        self._entries = MappingProxyType(dict(entries or {}))

    def __getitem__(self, name: str) -> TableOrView:
        return self._entries[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"SchemaCatalog({list(self._entries)!r})"

    def tables(self) -> list[TableEntry]:
        """Table entries in declaration order."""
        return [e for e in self._entries.values() if isinstance(e, TableEntry)]

    def views(self) -> list[ViewEntry]:
        """View entries in declaration order."""
        return [e for e in self._entries.values() if isinstance(e, ViewEntry)]

    def get_table(self, name: str) -> TableEntry | None:
        entry = self._entries.get(name)
        return entry if isinstance(entry, TableEntry) else None

    def stats(self) -> dict[str, int]:
        """Counts of tables, views and indexes."""
        tables = self.tables()
        return {
            "tables": len(tables),
            "views": len(self._entries) - len(tables),
            "indexes": sum(len(t.indexes) for t in tables),
        }
