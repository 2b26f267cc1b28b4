"""FastAPI app entry: config, logging, health, and error handling."""

from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from docembed.config.logging import configure_logging, get_logger
from docembed.config.settings import get_settings
from docembed.controllers.routes.embed import router as embed_router

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup: config and logging."""
    settings = get_settings()
    configure_logging()
    logger.info(
        "Application starting",
        extra={"app_name": settings.app_name, "environment": settings.environment},
    )
    yield
    logger.info("Application shutting down")


app = FastAPI(
    title="docembed",
    description="Embed documents' text fragments in provider-sized batches",
    version="0.1.0",
    lifespan=lifespan,
)
app.include_router(embed_router)


@app.get("/health")
async def health() -> dict[str, Any]:
    """Liveness: service is up. Does not call any embedding provider."""
    return {"status": "ok"}


@app.exception_handler(Exception)
async def global_exception_handler(_request: Request, exc: Exception):
    """Unhandled errors: log with traceback, return a message without internals."""
    logger.exception("Unhandled error", extra={"error_type": type(exc).__name__})
    return JSONResponse(
        content={"detail": "An internal error occurred."},
        status_code=500,
    )
