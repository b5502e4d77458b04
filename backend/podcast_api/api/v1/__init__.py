"""
API v1 Module
Contains all version 1 API endpoints.
"""

# Expose routers for easy import
from podcast_api.api.v1 import auth, users, podcasts

__all__ = ["auth", "users", "podcasts"]
