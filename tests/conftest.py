"""Shared test fixtures for schema catalog tests."""

import sqlite3
from pathlib import Path

import pytest

from schema_catalog.loaders import DdlLoader, InformationSchemaLoader


FIXTURES_DIR = Path(__file__).parent / "fixtures"


# =============================================================================
# DDL Fixtures
# =============================================================================

@pytest.fixture
def schema_path() -> Path:
    """Path to the music catalog DDL."""
    return FIXTURES_DIR / "schema.sql"


@pytest.fixture
def schema_ddl(schema_path) -> str:
    return schema_path.read_text(encoding="utf-8")


@pytest.fixture
def ddl_loader(schema_path) -> DdlLoader:
    return DdlLoader.from_file(schema_path)


# =============================================================================
# INFORMATION_SCHEMA Fixtures
# =============================================================================

# Same schema as fixtures/schema.sql, as Cloud Spanner reports it
TABLES = [
    ("Singers", "BASE TABLE"),
    ("Albums", "BASE TABLE"),
    ("SingerNames", "VIEW"),
]

COLUMNS = [
    ("Singers", "SingerId", 1, "NO", "INT64", "NEVER"),
    ("Singers", "FirstName", 2, "YES", "STRING(1024)", "NEVER"),
    ("Singers", "LastName", 3, "YES", "STRING(1024)", "NEVER"),
    ("Singers", "FullName", 4, "YES", "STRING(2048)", "ALWAYS"),
    ("Singers", "SingerInfo", 5, "YES", "BYTES(MAX)", "NEVER"),
    ("Albums", "SingerId", 1, "NO", "INT64", "NEVER"),
    ("Albums", "AlbumId", 2, "NO", "INT64", "NEVER"),
    ("Albums", "AlbumTitle", 3, "YES", "STRING(MAX)", "NEVER"),
    ("Albums", "MarketingBudget", 4, "YES", "NUMERIC", "NEVER"),
    ("Albums", "Tags", 5, "YES", "ARRAY<STRING(64)>", "NEVER"),
    ("SingerNames", "SingerId", 1, "YES", "INT64", "NEVER"),
    ("SingerNames", "FirstName", 2, "YES", "STRING(1024)", "NEVER"),
]

INDEXES = [
    ("Singers", "PRIMARY_KEY", True, False),
    ("Albums", "PRIMARY_KEY", True, False),
    ("Albums", "AlbumsByAlbumTitle", True, False),
    ("Albums", "AlbumsBySingerTitle", False, False),
    # backing index Spanner creates for the foreign key
    ("Albums", "IDX_Albums_SingerId_5A1B2C", False, True),
]

INDEX_COLUMNS = [
    ("Singers", "PRIMARY_KEY", "SingerId", 1),
    ("Albums", "PRIMARY_KEY", "SingerId", 1),
    ("Albums", "PRIMARY_KEY", "AlbumId", 2),
    ("Albums", "AlbumsByAlbumTitle", "AlbumTitle", 1),
    ("Albums", "AlbumsByAlbumTitle", "MarketingBudget", None),
    ("Albums", "AlbumsBySingerTitle", "SingerId", 1),
    ("Albums", "AlbumsBySingerTitle", "AlbumTitle", 2),
    ("Albums", "AlbumsBySingerTitle", "MarketingBudget", None),
    ("Albums", "AlbumsBySingerTitle", "Tags", None),
    ("Albums", "IDX_Albums_SingerId_5A1B2C", "SingerId", 1),
]


@pytest.fixture
def information_schema_db():
    """In-memory sqlite database with a Spanner-shaped INFORMATION_SCHEMA."""
    conn = sqlite3.connect(":memory:")
    conn.execute("ATTACH DATABASE ':memory:' AS INFORMATION_SCHEMA")
    conn.executescript(
        """
        CREATE TABLE INFORMATION_SCHEMA.TABLES (
            TABLE_SCHEMA TEXT, TABLE_NAME TEXT, TABLE_TYPE TEXT
        );
        CREATE TABLE INFORMATION_SCHEMA.COLUMNS (
            TABLE_SCHEMA TEXT, TABLE_NAME TEXT, COLUMN_NAME TEXT,
            ORDINAL_POSITION INTEGER, IS_NULLABLE TEXT, SPANNER_TYPE TEXT,
            IS_GENERATED TEXT
        );
        CREATE TABLE INFORMATION_SCHEMA.INDEXES (
            TABLE_SCHEMA TEXT, TABLE_NAME TEXT, INDEX_NAME TEXT,
            IS_UNIQUE BOOLEAN, SPANNER_IS_MANAGED BOOLEAN
        );
        CREATE TABLE INFORMATION_SCHEMA.INDEX_COLUMNS (
            TABLE_SCHEMA TEXT, TABLE_NAME TEXT, INDEX_NAME TEXT,
            COLUMN_NAME TEXT, ORDINAL_POSITION INTEGER
        );
        """
    )
    conn.executemany(
        "INSERT INTO INFORMATION_SCHEMA.TABLES VALUES ('', ?, ?)", TABLES
    )
    conn.executemany(
        "INSERT INTO INFORMATION_SCHEMA.COLUMNS VALUES ('', ?, ?, ?, ?, ?, ?)", COLUMNS
    )
    conn.executemany(
        "INSERT INTO INFORMATION_SCHEMA.INDEXES VALUES ('', ?, ?, ?, ?)", INDEXES
    )
    conn.executemany(
        "INSERT INTO INFORMATION_SCHEMA.INDEX_COLUMNS VALUES ('', ?, ?, ?, ?)", INDEX_COLUMNS
    )
    conn.commit()
    yield conn
    conn.close()


@pytest.fixture
def live_loader(information_schema_db) -> InformationSchemaLoader:
    return InformationSchemaLoader(information_schema_db, paramstyle="qmark")
