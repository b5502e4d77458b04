"""
Users Service
Account creation, login, lookup and profile edits.

Every method returns a result object (see schemas.common) instead of
raising. Unexpected exceptions are logged and mapped to a fixed failure
message for the operation.
"""

import logging

from podcast_api.core import constants
from podcast_api.db.repository import Repository
from podcast_api.models.user import User
from podcast_api.schemas.common import CoreOutput, ErrorCode
from podcast_api.schemas.user import (
    CreateAccountInput,
    EditProfileInput,
    LoginInput,
    LoginOutput,
    UserProfileOutput,
)
from podcast_api.services.error_logging import error_logger
from podcast_api.services.jwt_service import JwtService


logger = logging.getLogger(__name__)


class UsersService:

    def __init__(self, users: Repository[User], jwt_service: JwtService):
        self.users = users
        self.jwt_service = jwt_service

    async def create_account(self, data: CreateAccountInput) -> CoreOutput:
        try:
            existing = await self.users.find_one(email=data.email)
            if existing:
                return CoreOutput.fail(ErrorCode.CONFLICT, constants.MSG_USER_EXISTS)

            user = self.users.create(
                email=data.email,
                password=data.password,
                role=data.role,
            )
            await self.users.save(user)
            logger.info(f"Account created for {data.email}")
            return CoreOutput(ok=True)
        except Exception as e:
            error_logger.log_error(e, context={"operation": "create_account", "email": data.email})
            return CoreOutput.fail(ErrorCode.COULD_NOT_CREATE, constants.MSG_COULD_NOT_CREATE_ACCOUNT)

    async def login(self, data: LoginInput) -> LoginOutput:
        try:
            user = await self.users.find_one(email=data.email)
            if not user:
                return LoginOutput.fail(ErrorCode.NOT_FOUND, constants.MSG_USER_NOT_FOUND)

            if not await user.check_password(data.password):
                return LoginOutput.fail(ErrorCode.INVALID_CREDENTIALS, constants.MSG_WRONG_PASSWORD)

            token = self.jwt_service.sign(user.id)
            return LoginOutput(ok=True, token=token)
        except Exception as e:
            error_logger.log_error(e, context={"operation": "login", "email": data.email})
            # Login reports the caught message itself
            return LoginOutput.fail(ErrorCode.INTERNAL_ERROR, str(e))

    async def find_by_id(self, user_id: int) -> UserProfileOutput:
        try:
            user = await self.users.find_one_or_fail(id=user_id)
            return UserProfileOutput(ok=True, user=user)
        except Exception as e:
            logger.debug(f"User {user_id} lookup failed: {e!r}")
            return UserProfileOutput.fail(ErrorCode.NOT_FOUND, constants.MSG_USER_NOT_FOUND_BY_ID)

    async def edit_profile(self, user_id: int, data: EditProfileInput) -> CoreOutput:
        """
        Apply an email and/or password change.

        A missing user has no dedicated message: the must-exist lookup raises
        and ends up in the generic failure like any other exception.
        """
        try:
            user = await self.users.find_one_or_fail(id=user_id)

            if data.email and data.email != user.email:
                user.email = data.email
                # Re-verification of the new address is handled elsewhere
                user.verified = False

            if data.password:
                user.password = data.password

            await self.users.save(user)
            return CoreOutput(ok=True)
        except Exception as e:
            error_logger.log_error(e, context={"operation": "edit_profile", "user_id": user_id})
            return CoreOutput.fail(ErrorCode.COULD_NOT_UPDATE, constants.MSG_COULD_NOT_UPDATE_PROFILE)
