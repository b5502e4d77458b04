"""
Main FastAPI Application
Entry point for the Podcasts API.

This module creates and configures the FastAPI application instance,
sets up middleware, and defines the health check endpoint.

Run with:
    uvicorn podcast_api.main:app --reload
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import JSONResponse

from podcast_api.api.v1.router import api_router
from podcast_api.core.config import settings
from podcast_api.db.session import engine
from podcast_api.middleware.cors import setup_cors
from podcast_api.middleware.error_handler import ErrorHandlerMiddleware
from podcast_api.models import Base
from podcast_api.services.error_logging import configure_error_logging


logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_: FastAPI):
    """
    Application startup and shutdown.

    Startup configures logging and creates missing tables.
    In production, manage the schema with migrations instead of create_all().
    """
    configure_error_logging(settings.LOG_DIR, settings.LOG_LEVEL)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database tables created/verified")

    try:
        yield
    finally:
        await engine.dispose()
        logger.info("Application shutdown complete")


app = FastAPI(
    title=settings.PROJECT_NAME,
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    description="""
    Podcasts API - podcasts, episodes and user accounts.

    Features:
    - Account registration and JWT login
    - Profile edits (email re-verification, password rehash)
    - Podcast CRUD with ratings from 1 to 5
    - Episodes nested under their podcast
    """,
    lifespan=lifespan,
)

setup_cors(app)

# Catches all unhandled exceptions and logs them
app.add_middleware(ErrorHandlerMiddleware)


@app.get(
    "/health",
    tags=["Health"],
    summary="Health Check",
    description="Simple endpoint to verify API is running"
)
async def health_check():
    return JSONResponse(
        status_code=200,
        content={
            "status": "ok",
            "version": "1.0.0",
            "api": settings.PROJECT_NAME
        }
    )


@app.get(
    "/",
    tags=["Root"],
    summary="API Root",
)
async def root():
    return {
        "message": "Welcome to Podcasts API",
        "version": "1.0.0",
        "docs": "/docs",
        "health": "/health"
    }


# All v1 endpoints are prefixed with /api/v1
app.include_router(
    api_router,
    prefix=f"/api/{settings.API_VERSION}",
)
