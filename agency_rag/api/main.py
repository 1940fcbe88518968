"""
FastAPI application with assembled routers.

Dependencies: fastapi, uvicorn, agency_rag.api.routers, agency_rag.observability
System role: API entry point with router assembly and server launch
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from agency_rag import __version__
from agency_rag.api.deps.dependencies import get_service_cache
from agency_rag.configs import get_settings
from agency_rag.observability.logger import configure_logging
from agency_rag.observability.middleware import RequestContextMiddleware

from .routers import documents_router, health_router, query_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Builds cached services on startup and disposes them on shutdown.
    """
    cache = get_service_cache()
    logger.info("Pre-warming service cache...")
    _ = cache.vector_index
    _ = cache.document_pipeline
    _ = cache.retriever
    logger.info("Service cache pre-warmed")

    yield

    await cache.aclose()
    logger.info("Service cache cleared")


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application with routers.

    Returns:
        FastAPI: Configured application instance with all routers registered
    """
    settings = get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title="Agency Strategy RAG API",
        description="Document ingestion and project-scoped question answering",
        version=__version__,
        debug=settings.debug,
        docs_url=None if settings.is_production else "/docs",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestContextMiddleware)

    # All routers are versioned under /api/v1
    app.include_router(health_router, prefix="/api/v1")
    app.include_router(documents_router, prefix="/api/v1")
    app.include_router(query_router, prefix="/api/v1")

    return app


if __name__ == "__main__":
    uvicorn.run(
        "agency_rag.api.main:create_app",
        factory=True,
        host="0.0.0.0",
        port=8000,
    )
