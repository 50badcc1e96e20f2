#!/usr/bin/env python3
"""
Main FastAPI Application - Routes-Controller-Service Architecture
File URL Service: stream wrapper URIs to web-accessible URLs
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging

from fileurl.core.config import Settings, settings
from fileurl.routes import files_rcs
from fileurl.routes import health_rcs
from fileurl.schemas.url import BaseUrlContext
from fileurl.stream_wrappers import StreamWrapperRegistry, build_registry

# Configure logging
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def create_app(
    app_settings: Optional[Settings] = None,
    registry: Optional[StreamWrapperRegistry] = None,
) -> FastAPI:
    """
    Create the FastAPI application.
    The stream wrapper registry is built here, before the first request.
    """
    if app_settings is None:
        app_settings = settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Log the active configuration on startup"""
        logger.info(
            "File URL Service started",
            extra={
                "schemes": app.state.registry.schemes,
                "base_url": app_settings.BASE_URL or "per-request",
            },
        )
        yield
        logger.info("Shutting down File URL Service...")

    app = FastAPI(
        title=app_settings.APP_TITLE,
        description=app_settings.APP_DESCRIPTION,
        version=app_settings.APP_VERSION,
        debug=app_settings.DEBUG,
        lifespan=lifespan
    )

    app.state.settings = app_settings
    # Parsed once so a malformed BASE_URL fails at startup
    app.state.base_url_context = (
        BaseUrlContext.from_url(app_settings.BASE_URL) if app_settings.BASE_URL else None
    )
    app.state.registry = registry if registry is not None else build_registry(app_settings)

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    app.include_router(files_rcs.router)
    app.include_router(health_rcs.router)

    @app.get("/", tags=["root"])
    def root():
        """
        Root endpoint with service information
        """
        return {
            "message": app_settings.APP_TITLE,
            "version": app_settings.APP_VERSION,
            "docs": "/docs",
            "health": "/health/",
            "schemes": app.state.registry.schemes,
            "endpoints": {
                "GET /files/url?uri=<uri>&absolute=<bool>": "Generate a file URL",
                "GET /files/descriptor?uri=<uri>": "Relative and absolute renderings",
                "GET /files/relative?url=<url>&root_relative=<bool>": "Relativize a local file URL",
                "GET /files/schemes": "Registered stream wrapper schemes",
                "GET /health/": "System health check"
            }
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "fileurl.main_rcs:app",
        host=settings.SERVER_HOST,
        port=settings.SERVER_PORT,
        reload=settings.DEBUG
    )
