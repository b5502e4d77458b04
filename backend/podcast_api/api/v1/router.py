"""
API v1 Main Router
Aggregates all v1 API endpoints into a single router.

Structure:
- /auth/* - Authentication endpoints (register, login)
- /users/* - User profile endpoints
- /podcasts/* - Podcast and episode endpoints
"""

from fastapi import APIRouter

from podcast_api.api.v1 import auth, users, podcasts


# Create main v1 router
# This router will be included in main.py with prefix /api/v1
api_router = APIRouter()


# No authentication required for these endpoints
api_router.include_router(
    auth.router,
    prefix="/auth",
    tags=["Authentication"],
)

# All endpoints require authentication
api_router.include_router(
    users.router,
    prefix="/users",
    tags=["Users"],
)

# Reads are public, writes require a host account
api_router.include_router(
    podcasts.router,
    prefix="/podcasts",
    tags=["Podcasts"],
)
