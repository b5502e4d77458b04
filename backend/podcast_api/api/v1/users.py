"""
User Profile Endpoints
Handles user profile retrieval and updates.

Endpoints:
- GET /users/me - Get current user profile
- PUT /users/me - Update email and/or password
- GET /users/{user_id} - Get another user's profile

All endpoints require authentication via JWT token.
"""

from fastapi import APIRouter, Depends

from podcast_api.api.v1.deps import get_current_user, get_users_service, raise_for_output
from podcast_api.models.user import User
from podcast_api.schemas.common import CoreOutput
from podcast_api.schemas.user import EditProfileInput, UserResponse
from podcast_api.services.users_service import UsersService


router = APIRouter()


@router.get(
    "/me",
    response_model=UserResponse,
    summary="Get current user profile",
)
async def get_current_user_profile(
    current_user: User = Depends(get_current_user)
) -> UserResponse:
    return UserResponse.model_validate(current_user)


@router.put(
    "/me",
    response_model=CoreOutput,
    response_model_exclude_none=True,
    summary="Update current user profile",
    description="Change email (resets verification) and/or password",
)
async def update_current_user_profile(
    data: EditProfileInput,
    current_user: User = Depends(get_current_user),
    users_service: UsersService = Depends(get_users_service)
) -> CoreOutput:
    result = await users_service.edit_profile(current_user.id, data)
    raise_for_output(result)
    return result


@router.get(
    "/{user_id}",
    response_model=UserResponse,
    summary="Get user profile",
    responses={404: {"description": "User not found"}}
)
async def get_user_profile(
    user_id: int,
    current_user: User = Depends(get_current_user),
    users_service: UsersService = Depends(get_users_service)
) -> UserResponse:
    result = await users_service.find_by_id(user_id)
    raise_for_output(result)
    return UserResponse.model_validate(result.user)
