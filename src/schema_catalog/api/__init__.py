"""Read-only HTTP API over a schema loader."""

from .routes import configure, router

__all__ = ["configure", "router"]
