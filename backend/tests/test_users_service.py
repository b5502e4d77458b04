import unittest
from unittest.mock import AsyncMock, MagicMock

from sqlalchemy.exc import NoResultFound

from podcast_api.models.user import User, UserRole
from podcast_api.schemas.common import CoreOutput, ErrorCode
from podcast_api.schemas.user import (
    CreateAccountInput,
    EditProfileInput,
    LoginInput,
    LoginOutput,
    UserProfileOutput,
)
from podcast_api.services.users_service import UsersService

from tests.helpers import mock_repository


class UsersServiceTestCase(unittest.IsolatedAsyncioTestCase):
    def setUp(self) -> None:
        self.users = mock_repository()
        self.jwt_service = MagicMock()
        self.jwt_service.sign.return_value = "test_token"
        self.service = UsersService(self.users, self.jwt_service)


class TestCreateAccount(UsersServiceTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.data = CreateAccountInput(
            email="test@email.com",
            password="test_password",
            role=UserRole.HOST,
        )

    async def test_fails_if_user_exists(self) -> None:
        self.users.find_one.return_value = User(id=1, email="test@email.com")

        result = await self.service.create_account(self.data)

        self.assertEqual(
            result,
            CoreOutput(
                ok=False,
                error="There is a user with that email already",
                code=ErrorCode.CONFLICT,
            ),
        )
        self.users.create.assert_not_called()
        self.users.save.assert_not_called()

    async def test_creates_new_user(self) -> None:
        new_user = User(email="test@email.com", password="test_password", role=UserRole.HOST)
        self.users.find_one.return_value = None
        self.users.create.return_value = new_user
        self.users.save.return_value = new_user

        result = await self.service.create_account(self.data)

        self.users.find_one.assert_awaited_once_with(email="test@email.com")
        self.users.create.assert_called_once_with(
            email="test@email.com",
            password="test_password",
            role=UserRole.HOST,
        )
        self.users.save.assert_awaited_once_with(new_user)
        self.assertEqual(result, CoreOutput(ok=True))
        self.assertIsNone(result.error)

    async def test_fails_on_exception(self) -> None:
        self.users.find_one.side_effect = Exception("Find One Failed")

        result = await self.service.create_account(self.data)

        self.assertEqual(
            result,
            CoreOutput(ok=False, error="Could not create account", code=ErrorCode.COULD_NOT_CREATE),
        )

    async def test_fails_when_save_raises(self) -> None:
        self.users.find_one.return_value = None
        self.users.save.side_effect = Exception("unique violation")

        result = await self.service.create_account(self.data)

        self.assertFalse(result.ok)
        self.assertEqual(result.error, "Could not create account")


class TestLogin(UsersServiceTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.data = LoginInput(email="bs@email.com", password="test_password")

    async def test_fails_if_user_does_not_exist(self) -> None:
        self.users.find_one.return_value = None

        result = await self.service.login(self.data)

        self.users.find_one.assert_awaited_once_with(email="bs@email.com")
        self.assertEqual(
            result,
            LoginOutput(ok=False, error="User not found", code=ErrorCode.NOT_FOUND),
        )

    async def test_fails_if_wrong_password(self) -> None:
        user = User(id=1, email="bs@email.com")
        user.check_password = AsyncMock(return_value=False)
        self.users.find_one.return_value = user

        result = await self.service.login(self.data)

        user.check_password.assert_awaited_once_with("test_password")
        self.jwt_service.sign.assert_not_called()
        self.assertEqual(
            result,
            LoginOutput(ok=False, error="Wrong password", code=ErrorCode.INVALID_CREDENTIALS),
        )

    async def test_fails_on_exception_with_message(self) -> None:
        self.users.find_one.side_effect = Exception("connection lost")

        result = await self.service.login(self.data)

        self.assertFalse(result.ok)
        self.assertEqual(result.error, "connection lost")
        self.assertIsNone(result.token)

    async def test_succeeds_with_token(self) -> None:
        user = User(id=1, email="bs@email.com")
        user.check_password = AsyncMock(return_value=True)
        self.users.find_one.return_value = user

        result = await self.service.login(self.data)

        self.jwt_service.sign.assert_called_once_with(1)
        self.assertEqual(result, LoginOutput(ok=True, token="test_token"))


class TestFindById(UsersServiceTestCase):
    async def test_finds_user(self) -> None:
        user = User(id=1)
        self.users.find_one_or_fail.return_value = user

        result = await self.service.find_by_id(1)

        self.users.find_one_or_fail.assert_awaited_once_with(id=1)
        self.assertEqual(result, UserProfileOutput(ok=True, user=user))

    async def test_fails_when_user_does_not_exist(self) -> None:
        self.users.find_one_or_fail.side_effect = NoResultFound()

        result = await self.service.find_by_id(1)

        self.assertEqual(
            result,
            UserProfileOutput(ok=False, error="User Not Found", code=ErrorCode.NOT_FOUND),
        )


class TestEditProfile(UsersServiceTestCase):
    async def test_changes_email_and_resets_verification(self) -> None:
        user = User(id=1, email="bs@email.com", verified=True, password="oldpassword")
        self.users.find_one_or_fail.return_value = user

        result = await self.service.edit_profile(1, EditProfileInput(email="bs@new.com"))

        self.users.find_one_or_fail.assert_awaited_once_with(id=1)
        self.users.save.assert_awaited_once_with(user)
        self.assertEqual(user.email, "bs@new.com")
        self.assertFalse(user.verified)
        self.assertEqual(user.password, "oldpassword")
        self.assertEqual(result, CoreOutput(ok=True))

    async def test_same_email_keeps_verification(self) -> None:
        user = User(id=1, email="bs@email.com", verified=True)
        self.users.find_one_or_fail.return_value = user

        result = await self.service.edit_profile(1, EditProfileInput(email="bs@email.com"))

        self.assertTrue(user.verified)
        self.assertTrue(result.ok)

    async def test_changes_password(self) -> None:
        user = User(id=1, email="bs@email.com", verified=True, password="oldpassword")
        self.users.find_one_or_fail.return_value = user

        result = await self.service.edit_profile(1, EditProfileInput(password="newpassword"))

        self.users.save.assert_awaited_once_with(user)
        # Hashing happens in the model write hook, not in the service
        self.assertEqual(user.password, "newpassword")
        self.assertEqual(user.email, "bs@email.com")
        self.assertTrue(user.verified)
        self.assertEqual(result, CoreOutput(ok=True))

    async def test_fails_on_exception(self) -> None:
        self.users.find_one_or_fail.side_effect = Exception()

        result = await self.service.edit_profile(1, EditProfileInput(password="newpassword"))

        self.users.save.assert_not_called()
        self.assertEqual(
            result,
            CoreOutput(ok=False, error="Could not update profile", code=ErrorCode.COULD_NOT_UPDATE),
        )

    async def test_missing_user_has_no_dedicated_message(self) -> None:
        self.users.find_one_or_fail.side_effect = NoResultFound()

        result = await self.service.edit_profile(99, EditProfileInput(email="bs@new.com"))

        self.assertEqual(result.error, "Could not update profile")


if __name__ == "__main__":
    unittest.main()
