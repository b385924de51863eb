"""
Schema catalog HTTP service.

Serves the four schema questions (tables, columns, indexes, index columns)
for whichever loader the configuration describes.

Run with:
    schema-catalog --config config.yaml serve
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from . import __version__
from .api import routes as schema_routes
from .api.models import HealthResponse
from .config import Config
from .ddl import DdlParseError
from .errors import CatalogError
from .loaders import SchemaLoader, open_loader

logger = logging.getLogger(__name__)


def create_app(loader: SchemaLoader) -> FastAPI:
    """Build the FastAPI app around a ready loader."""
    app = FastAPI(
        title="Schema Catalog",
        description="Read-only view of a database schema built from DDL or INFORMATION_SCHEMA.",
        version=__version__,
    )

    @app.exception_handler(CatalogError)
    async def catalog_error_handler(request: Request, exc: CatalogError):
        return JSONResponse(
            status_code=422,
            content={"error": "Schema error", "detail": str(exc)},
        )

    @app.exception_handler(DdlParseError)
    async def ddl_parse_error_handler(request: Request, exc: DdlParseError):
        return JSONResponse(
            status_code=422,
            content={"error": "Invalid DDL", "detail": str(exc)},
        )

    @app.get("/health", response_model=HealthResponse)
    async def health():
        """Health check endpoint."""
        return HealthResponse(status="healthy", loader=type(loader).__name__)

    schema_routes.configure(loader)
    app.include_router(schema_routes.router)
    return app


def run(config: Config) -> None:
    """Load the schema and serve it with uvicorn."""
    import uvicorn

    logging.basicConfig(
        level=config.logging.level.upper(),
        format=config.logging.format,
    )

    loader = open_loader(config.source)
    app = create_app(loader)

    logger.info(f"Serving schema on {config.server.host}:{config.server.port}")
    uvicorn.run(app, host=config.server.host, port=config.server.port)
