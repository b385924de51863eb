"""Schema serializer - converts a loader's view of the schema to a YAML-ready dict."""

from __future__ import annotations

import json
from typing import Any

import yaml

from .loaders import PRIMARY_KEY, SchemaLoader
from .models import Column, IndexColumn


class SchemaSerializer:
    """
    Serializes everything a loader knows into plain dictionaries.

    Omits empty/default values to keep YAML clean. Ordering follows the
    loader, so identical DDL always produces identical output.
    """

    def serialize(self, loader: SchemaLoader) -> dict[str, Any]:
        tables: dict[str, Any] = {}
        for table in loader.table_list():
            tables[table.table_name] = self.serialize_table(loader, table.table_name)
        return {"tables": tables}

    def serialize_table(self, loader: SchemaLoader, name: str) -> dict[str, Any]:
        result: dict[str, Any] = {}

        columns = [self.serialize_column(c) for c in loader.column_list(name)]
        if columns:
            result["columns"] = columns

        primary_key = [c.column_name for c in loader.index_column_list(name, PRIMARY_KEY)]
        if primary_key:
            result["primary_key"] = primary_key

        indexes: dict[str, Any] = {}
        for index in loader.index_list(name):
            entry: dict[str, Any] = {}
            if index.is_unique:
                entry["unique"] = True
            entry["columns"] = [
                self.serialize_index_column(c)
                for c in loader.index_column_list(name, index.index_name)
            ]
            indexes[index.index_name] = entry
        if indexes:
            result["indexes"] = indexes

        return result

    def serialize_column(self, column: Column) -> dict[str, Any]:
        result: dict[str, Any] = {"name": column.column_name, "type": column.data_type}
        if column.not_null:
            result["not_null"] = True
        if column.is_primary_key:
            result["primary_key"] = True
        if column.is_generated:
            result["generated"] = True
        return result

    def serialize_index_column(self, column: IndexColumn) -> dict[str, Any] | str:
        if column.storing:
            return {"name": column.column_name, "storing": True}
        return column.column_name


def dump_yaml(loader: SchemaLoader) -> str:
    """Render the schema as YAML."""
    data = SchemaSerializer().serialize(loader)
    return yaml.safe_dump(data, sort_keys=False, default_flow_style=False)


def dump_json(loader: SchemaLoader) -> str:
    """Render the schema as JSON."""
    return json.dumps(SchemaSerializer().serialize(loader), indent=2)
