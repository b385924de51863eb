"""Tests for the DDL-backed schema loader."""

import pytest

from schema_catalog.ddl import DdlParseError
from schema_catalog.loaders import PRIMARY_KEY, DdlLoader
from schema_catalog.models import Column, Index, IndexColumn, Table


class TestTableList:
    def test_tables_in_declaration_order(self, ddl_loader):
        assert ddl_loader.table_list() == [
            Table("Singers", manual_pk=True),
            Table("Albums", manual_pk=True),
        ]

    def test_views_excluded(self, ddl_loader):
        names = [t.table_name for t in ddl_loader.table_list()]
        assert "SingerNames" not in names


class TestColumnList:
    def test_ordinals_and_primary_key(self):
        loader = DdlLoader.from_string(
            "CREATE TABLE Users (id INT64 NOT NULL, name STRING(MAX), created_at TIMESTAMP) "
            "PRIMARY KEY (id)"
        )
        assert loader.column_list("Users") == [
            Column(1, "id", "INT64", not_null=True, is_primary_key=True),
            Column(2, "name", "STRING(MAX)"),
            Column(3, "created_at", "TIMESTAMP"),
        ]

    def test_primary_key_membership_ignores_key_order(self, ddl_loader):
        columns = ddl_loader.column_list("Albums")
        assert [c.column_name for c in columns if c.is_primary_key] == ["SingerId", "AlbumId"]

    def test_primary_key_declared_out_of_column_order(self):
        loader = DdlLoader.from_string("CREATE TABLE T (a INT64, b INT64, c INT64) PRIMARY KEY (c, a)")
        assert [c.is_primary_key for c in loader.column_list("T")] == [True, False, True]

    def test_generated_column(self, ddl_loader):
        columns = {c.column_name: c for c in ddl_loader.column_list("Singers")}
        assert columns["FullName"].is_generated
        assert columns["FullName"].data_type == "STRING(2048)"
        assert not columns["FirstName"].is_generated

    def test_array_type_text(self, ddl_loader):
        assert ddl_loader.column_list("Albums")[-1].data_type == "ARRAY<STRING(64)>"

    def test_keyword_named_columns_kept(self):
        loader = DdlLoader.from_string(
            "CREATE TABLE T (Id INT64 NOT NULL, Check STRING(MAX), Foreign BOOL) PRIMARY KEY (Id)"
        )
        assert [c.column_name for c in loader.column_list("T")] == ["Id", "Check", "Foreign"]

    def test_unknown_table(self, ddl_loader):
        assert ddl_loader.column_list("Nope") == []

    def test_view_has_no_columns(self, ddl_loader):
        assert ddl_loader.column_list("SingerNames") == []


class TestIndexList:
    def test_indexes_in_declaration_order(self, ddl_loader):
        assert ddl_loader.index_list("Albums") == [
            Index("AlbumsByAlbumTitle", is_unique=True),
            Index("AlbumsBySingerTitle", is_unique=False),
        ]

    def test_table_without_indexes(self, ddl_loader):
        assert ddl_loader.index_list("Singers") == []

    def test_unknown_table(self, ddl_loader):
        assert ddl_loader.index_list("Nope") == []


class TestIndexColumnList:
    def test_storing_columns_first(self):
        loader = DdlLoader.from_string(
            "CREATE TABLE T (k1 INT64, k2 INT64, s1 STRING(MAX), s2 STRING(MAX)) PRIMARY KEY (k1);"
            "CREATE INDEX ix ON T (k1, k2) STORING (s1, s2)"
        )
        assert loader.index_column_list("T", "ix") == [
            IndexColumn(0, "s1", storing=True),
            IndexColumn(0, "s2", storing=True),
            IndexColumn(1, "k1", storing=False),
            IndexColumn(2, "k2", storing=False),
        ]

    def test_index_without_storing(self):
        loader = DdlLoader.from_string(
            "CREATE TABLE T (a INT64, b INT64) PRIMARY KEY (a); CREATE INDEX ix ON T (b DESC, a)"
        )
        assert loader.index_column_list("T", "ix") == [IndexColumn(1, "b"), IndexColumn(2, "a")]

    def test_first_matching_index_wins(self):
        loader = DdlLoader.from_string(
            "CREATE TABLE T (a INT64, b INT64) PRIMARY KEY (a);"
            "CREATE INDEX ix ON T (a);"
            "CREATE INDEX ix ON T (b)"
        )
        assert loader.index_column_list("T", "ix") == [IndexColumn(1, "a")]

    def test_unknown_index(self, ddl_loader):
        assert ddl_loader.index_column_list("Albums", "Nope") == []

    def test_unknown_table(self, ddl_loader):
        assert ddl_loader.index_column_list("Nope", "AlbumsByAlbumTitle") == []

    def test_primary_key(self, ddl_loader):
        assert ddl_loader.index_column_list("Albums", PRIMARY_KEY) == [
            IndexColumn(1, "SingerId"),
            IndexColumn(2, "AlbumId"),
        ]

    def test_primary_key_in_declared_key_order(self):
        loader = DdlLoader.from_string("CREATE TABLE T (a INT64, b INT64, c INT64) PRIMARY KEY (c, a)")
        assert loader.index_column_list("T", PRIMARY_KEY) == [IndexColumn(1, "c"), IndexColumn(2, "a")]

    def test_primary_key_of_view(self, ddl_loader):
        assert ddl_loader.index_column_list("SingerNames", PRIMARY_KEY) == [IndexColumn(1, "SingerId")]

    def test_primary_key_of_unknown_table(self, ddl_loader):
        assert ddl_loader.index_column_list("Nope", PRIMARY_KEY) == []


class TestConstruction:
    def test_from_file(self, schema_path):
        loader = DdlLoader.from_file(schema_path)
        assert len(loader.catalog) == 3

    def test_from_string_matches_from_file(self, schema_path, schema_ddl):
        assert DdlLoader.from_string(schema_ddl).catalog == DdlLoader.from_file(schema_path).catalog

    def test_parse_error_propagates(self):
        with pytest.raises(DdlParseError):
            DdlLoader.from_string("CREATE TABLE (")

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            DdlLoader.from_file(tmp_path / "missing.sql")

    def test_identical_results_across_builds(self, schema_ddl):
        first = DdlLoader.from_string(schema_ddl)
        second = DdlLoader.from_string(schema_ddl)
        for table in first.table_list():
            name = table.table_name
            assert first.column_list(name) == second.column_list(name)
            assert first.index_list(name) == second.index_list(name)
        assert first.table_list() == second.table_list()


class TestDialectHelpers:
    def test_placeholders(self, ddl_loader):
        assert ddl_loader.param_n(0) == "@param0"
        assert ddl_loader.param_n(3) == "@param3"
        assert ddl_loader.mask_func() == "?"

    def test_parse_type(self, ddl_loader):
        info = ddl_loader.parse_type("STRING(MAX)", nullable=True)
        assert info.py_type == "str | None"
        assert info.precision == -1

    def test_valid_custom_type(self, ddl_loader):
        assert ddl_loader.valid_custom_type("INT64", "IntEnum")
        assert not ddl_loader.valid_custom_type("INT64", "str")
