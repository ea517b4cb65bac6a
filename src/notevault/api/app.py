"""FastAPI application bridging the note editor to the vault."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from notevault.api.routes import assets, files, health, notes
from notevault.core.config import (
    NOTEVAULT_CORS_ORIGINS,
    NOTEVAULT_HOST,
    NOTEVAULT_PORT,
)
from notevault.core.errors import (
    DecodeError,
    InvalidNotePathError,
    NotFoundError,
    StorageError,
)

logger = logging.getLogger(__name__)


def _status_for(error: StorageError) -> int:
    if isinstance(error, (InvalidNotePathError, DecodeError)):
        return status.HTTP_400_BAD_REQUEST
    if isinstance(error, NotFoundError):
        return status.HTTP_404_NOT_FOUND
    return status.HTTP_500_INTERNAL_SERVER_ERROR


async def storage_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Render storage failures as a human-readable detail message."""
    logger.error(f"{request.method} {request.url.path} failed: {exc}")
    code = _status_for(exc) if isinstance(exc, StorageError) else 500
    return JSONResponse(status_code=code, content={"detail": str(exc)})


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    logger.info("notevault API starting up...")
    yield
    logger.info("notevault API shutting down...")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="notevault API",
        description="Storage bridge for filesystem-first markdown notes",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=NOTEVAULT_CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(StorageError, storage_error_handler)

    # Include routers
    app.include_router(health.router, prefix="/api/v1", tags=["Health"])
    app.include_router(notes.router, prefix="/api/v1", tags=["Notes"])
    app.include_router(assets.router, prefix="/api/v1", tags=["Assets"])
    app.include_router(files.router, prefix="/api/v1", tags=["Files"])

    return app


# Create the default app instance
app = create_app()


def run_server():
    """Run the API server."""
    import uvicorn

    uvicorn.run(
        "notevault.api.app:app",
        host=NOTEVAULT_HOST,
        port=NOTEVAULT_PORT,
        reload=False,
    )


if __name__ == "__main__":
    run_server()
