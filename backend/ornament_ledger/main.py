"""
Ornament Ledger Backend - FastAPI Application

Tracks precious-metal ornament stock issued to recipients and the gold/silver
prices used to value it.
"""
import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from ornament_ledger import __version__
from ornament_ledger.config import get_settings
from ornament_ledger.core.exceptions import LedgerError, StoreError
from ornament_ledger.core.logging import setup_logging
from ornament_ledger.database.connections import get_mongo_client, close_connections
from ornament_ledger.database.registry import sync_registry, create_indexes
from ornament_ledger.routers import active_stock, archive, catalog, credentials, health, prices

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    Startup:
    - Configure logging
    - Sync database registry
    - Create indexes

    Shutdown:
    - Close the database connection
    """
    setup_logging()
    logger.info("Starting up Ornament Ledger Backend...")

    try:
        client = await get_mongo_client()
        await sync_registry(client)
        await create_indexes(client)
        logger.info("Database registry synced and indexes created")
    except Exception as e:
        logger.warning("Database initialization warning: %s", e)

    yield

    logger.info("Shutting down Ornament Ledger Backend...")
    await close_connections()
    logger.info("Database connections closed")


# Create FastAPI application
app = FastAPI(
    title="Ornament Ledger API",
    description="""
## Ornament stock and price ledger

### Features
- **Active stock**: Ornaments currently given out, by recipient
- **Archive**: Append-only record of stock taken out of circulation
- **Prices**: Current gold/silver prices with a full change history
- **Stock catalog**: Flat list of catalog items
- **Credentials**: Username/password lookup for the shop staff

### Retiring stock
`DELETE /active-stock/{id}` only removes the entry. To keep an audit record,
post a copy to `/archive`, or call `POST /active-stock/{id}/retire` to do both.
    """,
    version=__version__,
    lifespan=lifespan,
)

# Configure CORS
settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Report malformed or incomplete request bodies as 400."""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "detail": "Required fields are missing or invalid",
            "errors": jsonable_encoder(exc.errors()),
        },
    )


@app.exception_handler(LedgerError)
async def ledger_error_handler(request: Request, exc: LedgerError):
    """Map ledger errors not handled by a router to their status code."""
    if isinstance(exc, StoreError):
        logger.error(
            "%s %s failed: %s", request.method, request.url.path, exc.message,
            exc_info=exc.cause,
        )
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.message},
    )


# Include routers
app.include_router(health.router)
app.include_router(active_stock.router)
app.include_router(archive.router)
app.include_router(prices.router)
app.include_router(catalog.router)
app.include_router(credentials.router)


@app.get("/", tags=["Root"])
async def root():
    """Root endpoint with API information."""
    return {
        "name": "Ornament Ledger API",
        "version": __version__,
        "docs": "/docs",
        "health": "/health",
    }


def run() -> None:
    """Serve the API with uvicorn on API_HOST:API_PORT."""
    settings = get_settings()
    uvicorn.run(
        app,
        host=settings.api_host,
        port=settings.api_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
