"""
Pydantic models for the Schema API.

Provides response models for the read-only schema browsing endpoints.
"""

from typing import List

from pydantic import BaseModel, ConfigDict, Field


class TableModel(BaseModel):
    """Table representation for API responses."""

    table_name: str = Field(..., description="Table name")
    manual_pk: bool = Field(True, description="Primary key values are assigned by the application")


class ColumnModel(BaseModel):
    """Column representation for API responses."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "field_ordinal": 1,
                "column_name": "SingerId",
                "data_type": "INT64",
                "not_null": True,
                "is_primary_key": True,
                "is_generated": False,
            }
        }
    )

    field_ordinal: int = Field(..., description="1-based position in declaration order")
    column_name: str = Field(..., description="Column name")
    data_type: str = Field(..., description="Declared type, e.g. STRING(MAX)")
    not_null: bool = Field(False, description="Column is NOT NULL")
    is_primary_key: bool = Field(False, description="Column is part of the primary key")
    is_generated: bool = Field(False, description="Column is computed from an expression")


class IndexModel(BaseModel):
    """Index representation for API responses."""

    index_name: str = Field(..., description="Index name")
    is_unique: bool = Field(False, description="Index is UNIQUE")


class IndexColumnModel(BaseModel):
    """Index column representation for API responses."""

    seq_no: int = Field(..., description="1-based key position, 0 for storing columns")
    column_name: str = Field(..., description="Column name")
    storing: bool = Field(False, description="Column is stored, not part of the key")


class TableListResponse(BaseModel):
    """Response for listing tables."""

    tables: List[TableModel]
    count: int


class ColumnListResponse(BaseModel):
    """Response for listing a table's columns."""

    table: str
    columns: List[ColumnModel]


class IndexListResponse(BaseModel):
    """Response for listing a table's indexes."""

    table: str
    indexes: List[IndexModel]


class IndexColumnListResponse(BaseModel):
    """Response for listing an index's columns."""

    table: str
    index: str
    columns: List[IndexColumnModel]


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    loader: str
