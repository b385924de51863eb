"""FastAPI routes for the Schema API."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException

from ..loaders import SchemaLoader
from .models import (
    ColumnListResponse,
    ColumnModel,
    IndexColumnListResponse,
    IndexColumnModel,
    IndexListResponse,
    IndexModel,
    TableListResponse,
    TableModel,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/schema", tags=["Schema"])

# Configuration - will be set during app startup
_loader: SchemaLoader | None = None


def configure(loader: SchemaLoader) -> None:
    """Configure the Schema routes.

    Args:
        loader: The schema loader to serve
    """
    global _loader
    _loader = loader


def _get_loader() -> SchemaLoader:
    """Get the loader, raising if not configured."""
    if _loader is None:
        raise HTTPException(status_code=503, detail="Schema loader not initialized")
    return _loader


@router.get("/tables", response_model=TableListResponse)
async def list_tables():
    """List base tables. Views are not included."""
    tables = _get_loader().table_list()
    return TableListResponse(
        tables=[TableModel(table_name=t.table_name, manual_pk=t.manual_pk) for t in tables],
        count=len(tables),
    )


@router.get("/tables/{table}/columns", response_model=ColumnListResponse)
async def list_columns(table: str):
    """
    List a table's columns in declaration order.

    An unknown table yields an empty list.
    """
    columns = _get_loader().column_list(table)
    return ColumnListResponse(
        table=table,
        columns=[
            ColumnModel(
                field_ordinal=c.field_ordinal,
                column_name=c.column_name,
                data_type=c.data_type,
                not_null=c.not_null,
                is_primary_key=c.is_primary_key,
                is_generated=c.is_generated,
            )
            for c in columns
        ],
    )


@router.get("/tables/{table}/indexes", response_model=IndexListResponse)
async def list_indexes(table: str):
    """List a table's secondary indexes."""
    indexes = _get_loader().index_list(table)
    return IndexListResponse(
        table=table,
        indexes=[IndexModel(index_name=i.index_name, is_unique=i.is_unique) for i in indexes],
    )


@router.get("/tables/{table}/indexes/{index}/columns", response_model=IndexColumnListResponse)
async def list_index_columns(table: str, index: str):
    """
    List an index's columns: storing columns first, then key columns.

    Use PRIMARY_KEY as the index name for the primary key, which for a view
    is the primary key of the table it selects from.
    """
    columns = _get_loader().index_column_list(table, index)
    return IndexColumnListResponse(
        table=table,
        index=index,
        columns=[
            IndexColumnModel(seq_no=c.seq_no, column_name=c.column_name, storing=c.storing)
            for c in columns
        ],
    )
