"""Dialect registry for looking up dialects by name."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .base import Dialect


class DialectRegistry:
    """Registry for dialect implementations.

    Provides a singleton-like access pattern for dialect lookup by name.
    """

    _instance: "DialectRegistry | None" = None
    _dialects: dict[str, "Dialect"]

    def __init__(self) -> None:
        self._dialects = {}
        self._register_defaults()

    def _register_defaults(self) -> None:
        """Register built-in dialects."""
        from .spanner import SpannerDialect

        self.register(SpannerDialect())

    def register(self, dialect: "Dialect") -> None:
        """Register a dialect by its name."""
        self._dialects[dialect.name.lower()] = dialect

    def get(self, name: str) -> "Dialect":
        """Get dialect by name.

        Names are case-insensitive.

        Raises:
            ValueError: If no dialect is registered under the name
        """
        dialect = self._dialects.get(name.lower())
        if dialect is None:
            raise ValueError(
                f"Unknown dialect '{name}', expected one of: {', '.join(self.list_dialects())}"
            )
        return dialect

    def list_dialects(self) -> list[str]:
        """Return list of registered dialect names."""
        return list(self._dialects.keys())

    @classmethod
    def instance(cls) -> "DialectRegistry":
        """Get the singleton registry instance."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance


def get_dialect(name: str) -> "Dialect":
    """Convenience function to get a dialect by name."""
    return DialectRegistry.instance().get(name)
