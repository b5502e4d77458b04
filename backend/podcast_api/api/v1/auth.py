"""
Authentication Endpoints
Handles account registration and login.

Endpoints:
- POST /auth/register - Create new user account
- POST /auth/login - Authenticate and get an access token
"""

import logging

from fastapi import APIRouter, Depends, status

from podcast_api.api.v1.deps import get_users_service, raise_for_output
from podcast_api.schemas.common import CoreOutput
from podcast_api.schemas.user import CreateAccountInput, LoginInput, TokenResponse
from podcast_api.services.users_service import UsersService

# Logger for auth events
auth_logger = logging.getLogger("auth")


router = APIRouter()


@router.post(
    "/register",
    response_model=CoreOutput,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
    summary="Register new user",
    responses={
        409: {"description": "Email already registered"},
        422: {"description": "Validation error (invalid email, short password, etc.)"},
    }
)
async def register(
    data: CreateAccountInput,
    users_service: UsersService = Depends(get_users_service)
) -> CoreOutput:
    """
    Register a new user account.

    Example:
        POST /api/v1/auth/register
        {
            "email": "host@example.com",
            "password": "SecurePass123!",
            "role": "host"
        }

        Response 201:
        {"ok": true}
    """
    result = await users_service.create_account(data)
    raise_for_output(result)
    return result


@router.post(
    "/login",
    response_model=TokenResponse,
    summary="Login",
    responses={
        401: {"description": "Wrong password"},
        404: {"description": "User not found"},
    }
)
async def login(
    data: LoginInput,
    users_service: UsersService = Depends(get_users_service)
) -> TokenResponse:
    """
    Authenticate with email and password and return a bearer token.
    """
    result = await users_service.login(data)
    if not result.ok:
        auth_logger.warning(f"Login failed for {data.email}: {result.error}")
    raise_for_output(result)
    return TokenResponse(token=result.token)
