"""Cloud Spanner (GoogleSQL) dialect implementation."""

from __future__ import annotations

import logging
import re

from .base import Dialect, TypeInfo


logger = logging.getLogger(__name__)

# Matches e.g. STRING(MAX), BYTES(1024), INT64
_TYPE_PATTERN = re.compile(r"^([A-Z][A-Z0-9_]*)(?:\((\d+|MAX)\))?$")
_ARRAY_PATTERN = re.compile(r"^ARRAY<(.+)>$", re.DOTALL)

# declared type -> (python type, zero value)
_TYPE_MAP: dict[str, tuple[str, str]] = {
    "BOOL": ("bool", "False"),
    "STRING": ("str", "''"),
    "INT64": ("int", "0"),
    "FLOAT64": ("float", "0.0"),
    "FLOAT32": ("float", "0.0"),
    "BYTES": ("bytes", "b''"),
    "TIMESTAMP": ("datetime.datetime", "datetime.datetime.min"),
    "DATE": ("datetime.date", "datetime.date.min"),
    "NUMERIC": ("decimal.Decimal", "decimal.Decimal(0)"),
    "JSON": ("typing.Any", "None"),
}

# Types a column of the given declared type may be generated as instead
_CUSTOM_TYPES: dict[str, frozenset[str]] = {
    "INT64": frozenset(["int", "IntEnum", "IntFlag", "enum.IntEnum", "enum.IntFlag"]),
    "STRING": frozenset(["str", "StrEnum", "enum.StrEnum"]),
}


class SpannerDialect(Dialect):
    """Cloud Spanner dialect.

    Parameters are named (@param0, @param1, ...) and values are masked
    with '?'. Declared types map as follows:

    - BOOL -> bool, STRING -> str, INT64 -> int, FLOAT64/FLOAT32 -> float
    - BYTES -> bytes, TIMESTAMP -> datetime.datetime, DATE -> datetime.date
    - NUMERIC -> decimal.Decimal, JSON -> typing.Any
    - ARRAY<T> -> list[T]

    Nullable columns become `T | None` with `None` as zero value.
    """

    @property
    def name(self) -> str:
        return "spanner"

    def param_n(self, n: int) -> str:
        return f"@param{n}"

    def mask_func(self) -> str:
        return "?"

    def parse_type(self, data_type: str, nullable: bool) -> TypeInfo:
        normalized = " ".join(data_type.split()).upper()

        array = _ARRAY_PATTERN.match(normalized)
        if array:
            element = self.parse_type(array.group(1), nullable=False)
            py_type = f"list[{element.py_type}]"
            return self._finish(element.precision, "[]", py_type, nullable)

        match = _TYPE_PATTERN.match(normalized)
        if match is None or match.group(1) not in _TYPE_MAP:
            logger.warning(f"Unknown Spanner type '{data_type}', mapping to typing.Any")
            return TypeInfo(precision=0, nil_value="None", py_type="typing.Any")

        base, length = match.groups()
        precision = 0
        if length == "MAX":
            precision = -1
        elif length:
            precision = int(length)

        py_type, nil_value = _TYPE_MAP[base]
        return self._finish(precision, nil_value, py_type, nullable)

    def valid_custom_type(self, data_type: str, custom_type: str) -> bool:
        normalized = " ".join(data_type.split()).upper()
        match = _TYPE_PATTERN.match(normalized)
        base = match.group(1) if match else normalized

        if base in _CUSTOM_TYPES:
            return custom_type in _CUSTOM_TYPES[base]
        return custom_type == self.parse_type(data_type, nullable=False).py_type

    @staticmethod
    def _finish(precision: int, nil_value: str, py_type: str, nullable: bool) -> TypeInfo:
        # typing.Any already admits None
        if nullable and py_type != "typing.Any":
            return TypeInfo(precision=precision, nil_value="None", py_type=f"{py_type} | None")
        return TypeInfo(precision=precision, nil_value=nil_value, py_type=py_type)
