"""Base class for database dialects."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class TypeInfo:
    """
    Python-side view of a declared column type.

    Attributes:
        precision: Declared length, -1 for MAX, 0 when none is declared
        nil_value: Source text of the zero value for the type
        py_type: Source text of the Python type annotation
    """
    precision: int
    nil_value: str
    py_type: str


class Dialect(ABC):
    """Abstract base for database dialects.

    A dialect answers the questions a code generator asks about a schema
    that are not part of the schema itself: how query parameters are
    written and how declared column types map to Python types.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Dialect identifier (e.g., 'spanner')."""
        ...

    @abstractmethod
    def param_n(self, n: int) -> str:
        """Placeholder for the n-th query parameter (0-based)."""
        ...

    @abstractmethod
    def mask_func(self) -> str:
        """Mask used when rendering parameter values in generated logging."""
        ...

    @abstractmethod
    def parse_type(self, data_type: str, nullable: bool) -> TypeInfo:
        """Map a declared column type to its Python type."""
        ...

    @abstractmethod
    def valid_custom_type(self, data_type: str, custom_type: str) -> bool:
        """Check whether `custom_type` may stand in for the column's mapped type."""
        ...
