"""
API Dependencies
Common dependencies used across API endpoints.

This module provides:
- Service construction from a request-scoped database session
- User authentication (JWT validation)
- Role checks
- Translation of failed service results into HTTP errors

Dependencies are injected into FastAPI endpoints using Depends().
"""

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.ext.asyncio import AsyncSession

from podcast_api.db.repository import Repository
from podcast_api.db.session import get_db
from podcast_api.models.podcast import Episode, Podcast
from podcast_api.models.user import User
from podcast_api.schemas.common import CoreOutput, ErrorCode
from podcast_api.services.jwt_service import JwtService
from podcast_api.services.podcasts_service import PodcastsService
from podcast_api.services.users_service import UsersService


# HTTP Bearer token scheme for JWT authentication
# Used to extract "Authorization: Bearer <token>" from request headers
security = HTTPBearer()


ERROR_STATUS = {
    ErrorCode.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.CONFLICT: status.HTTP_409_CONFLICT,
    ErrorCode.INVALID_CREDENTIALS: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.INVALID_RATING: status.HTTP_400_BAD_REQUEST,
}


def raise_for_output(result: CoreOutput) -> None:
    """
    Raise an HTTPException for a failed service result.

    Failure kinds without a dedicated status map to 500. The detail is the
    service message, unchanged.
    """
    if result.ok:
        return None
    raise HTTPException(
        status_code=ERROR_STATUS.get(result.code, status.HTTP_500_INTERNAL_SERVER_ERROR),
        detail=result.error,
    )


def get_jwt_service() -> JwtService:
    return JwtService()


def get_users_service(
    db: AsyncSession = Depends(get_db),
    jwt_service: JwtService = Depends(get_jwt_service),
) -> UsersService:
    return UsersService(Repository(db, User), jwt_service)


def get_podcasts_service(db: AsyncSession = Depends(get_db)) -> PodcastsService:
    return PodcastsService(Repository(db, Podcast), Repository(db, Episode))


async def get_current_user(
    credentials: HTTPAuthorizationCredentials = Depends(security),
    jwt_service: JwtService = Depends(get_jwt_service),
    users_service: UsersService = Depends(get_users_service),
) -> User:
    """
    Extract and validate current user from JWT token.

    Raises:
        HTTPException 401: If token is invalid, expired, or its user is gone
    """
    payload = jwt_service.verify(credentials.credentials)
    if payload is None or not payload.sub.isdigit():
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
            headers={"WWW-Authenticate": "Bearer"}
        )

    result = await users_service.find_by_id(int(payload.sub))
    if not result.ok:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=result.error,
            headers={"WWW-Authenticate": "Bearer"}
        )

    return result.user


async def get_current_host(current_user: User = Depends(get_current_user)) -> User:
    """Require an authenticated user with the host role."""
    if not current_user.is_host:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Only hosts can manage podcasts"
        )
    return current_user
