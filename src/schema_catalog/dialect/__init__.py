"""Dialect module for parameter placeholders and type mapping."""

from .base import Dialect, TypeInfo
from .registry import DialectRegistry, get_dialect
from .spanner import SpannerDialect

__all__ = [
    "Dialect",
    "TypeInfo",
    "DialectRegistry",
    "get_dialect",
    "SpannerDialect",
]
