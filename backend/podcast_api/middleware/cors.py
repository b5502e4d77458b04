"""
CORS Middleware Configuration
Enables Cross-Origin Resource Sharing for frontend-backend communication.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from podcast_api.core.config import settings


def setup_cors(app: FastAPI) -> None:
    """
    Configure CORS middleware for the FastAPI application.

    Allowed origins come from settings.CORS_ORIGINS; restrict them to the
    production frontend domain when deploying.
    """
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,  # Allow cookies and auth headers
        allow_methods=["*"],
        allow_headers=["*"],  # Content-Type, Authorization, etc.
    )
