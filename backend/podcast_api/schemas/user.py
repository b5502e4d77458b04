"""
User Pydantic Schemas
Inputs and outputs of the account service, plus the API response model.
"""

from pydantic import BaseModel, EmailStr, Field, ConfigDict
from typing import Optional
from datetime import datetime

from podcast_api.models.user import User, UserRole
from podcast_api.schemas.common import CoreOutput


# ============================================================================
# Account Inputs
# ============================================================================

class CreateAccountInput(BaseModel):
    """
    Schema for account registration.

    Example:
        {
            "email": "host@example.com",
            "password": "SecurePass123!",
            "role": "host"
        }
    """
    email: EmailStr = Field(
        ...,
        description="Valid email address for authentication",
        examples=["host@example.com"]
    )
    password: str = Field(
        ...,
        min_length=8,
        description="Password (minimum 8 characters)",
        examples=["SecurePass123!"]
    )
    role: UserRole = Field(
        ...,
        description="Account type",
        examples=[UserRole.HOST]
    )


class LoginInput(BaseModel):
    email: EmailStr = Field(..., description="User's email address")
    password: str = Field(..., description="User's password")


class EditProfileInput(BaseModel):
    """
    Schema for profile edits.

    All fields are optional - only provided fields are changed. A new email
    resets the verified flag.
    """
    email: Optional[EmailStr] = Field(None, description="New email address")
    password: Optional[str] = Field(
        None,
        min_length=8,
        description="New password (minimum 8 characters)"
    )


# ============================================================================
# Account Outputs
# ============================================================================

class LoginOutput(CoreOutput):
    token: Optional[str] = None


class UserProfileOutput(CoreOutput):
    user: Optional[User] = None


# ============================================================================
# API Responses
# ============================================================================

class UserResponse(BaseModel):
    """
    Schema for user profile response.

    Never includes the password hash.
    """
    id: int = Field(..., description="Unique user identifier")
    email: str = Field(..., description="User's email address")
    role: UserRole = Field(..., description="Account type")
    verified: bool = Field(False, description="Whether the email is verified")
    created_at: Optional[datetime] = Field(None, description="Account creation timestamp")
    updated_at: Optional[datetime] = Field(None, description="Last profile update timestamp")

    model_config = ConfigDict(from_attributes=True)


class TokenResponse(BaseModel):
    token: str = Field(..., description="JWT access token for API authentication")
    token_type: str = Field(default="bearer", description="Always 'bearer'")


class TokenPayload(BaseModel):
    """
    Schema for JWT token payload (internal use).

    Token payload contains:
    - sub: Subject (user_id)
    - exp: Expiration timestamp
    - type: Token type (always access)
    """
    sub: str
    exp: int
    type: str
