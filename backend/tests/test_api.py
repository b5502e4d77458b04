import unittest
from unittest.mock import AsyncMock, MagicMock

from fastapi.testclient import TestClient

from podcast_api.api.v1.deps import get_current_user, get_podcasts_service, get_users_service
from podcast_api.main import app
from podcast_api.models.podcast import Episode, Podcast
from podcast_api.models.user import User, UserRole
from podcast_api.schemas.common import CoreOutput, ErrorCode
from podcast_api.schemas.podcast import (
    CreateEpisodeOutput,
    CreatePodcastInput,
    CreatePodcastOutput,
    EpisodeOutput,
    PodcastOutput,
    PodcastsOutput,
    UpdatePodcastInput,
)
from podcast_api.schemas.user import LoginOutput, UserProfileOutput
from podcast_api.services.jwt_service import JwtService


API = "/api/v1"


def make_user(role: UserRole = UserRole.HOST) -> User:
    return User(id=1, email="host@example.com", role=role, verified=True)


class ApiTestCase(unittest.TestCase):
    def setUp(self) -> None:
        self.users_service = MagicMock()
        self.podcasts_service = MagicMock()
        self.current_user = make_user()
        app.dependency_overrides[get_users_service] = lambda: self.users_service
        app.dependency_overrides[get_podcasts_service] = lambda: self.podcasts_service
        app.dependency_overrides[get_current_user] = lambda: self.current_user
        self.addCleanup(app.dependency_overrides.clear)
        self.client = TestClient(app)


class TestHealth(ApiTestCase):
    def test_health(self) -> None:
        response = self.client.get("/health")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["status"], "ok")


class TestAuthEndpoints(ApiTestCase):
    def test_register(self) -> None:
        self.users_service.create_account = AsyncMock(return_value=CoreOutput(ok=True))

        response = self.client.post(
            f"{API}/auth/register",
            json={"email": "host@example.com", "password": "SecurePass123", "role": "host"},
        )

        self.assertEqual(response.status_code, 201)
        self.assertEqual(response.json(), {"ok": True})

    def test_register_conflict(self) -> None:
        self.users_service.create_account = AsyncMock(
            return_value=CoreOutput.fail(ErrorCode.CONFLICT, "There is a user with that email already")
        )

        response = self.client.post(
            f"{API}/auth/register",
            json={"email": "host@example.com", "password": "SecurePass123", "role": "host"},
        )

        self.assertEqual(response.status_code, 409)
        self.assertEqual(response.json()["detail"], "There is a user with that email already")

    def test_register_validates_input(self) -> None:
        self.users_service.create_account = AsyncMock()

        response = self.client.post(
            f"{API}/auth/register",
            json={"email": "not-an-email", "password": "short", "role": "admin"},
        )

        self.assertEqual(response.status_code, 422)
        self.users_service.create_account.assert_not_called()

    def test_login(self) -> None:
        self.users_service.login = AsyncMock(return_value=LoginOutput(ok=True, token="test_token"))

        response = self.client.post(
            f"{API}/auth/login", json={"email": "host@example.com", "password": "SecurePass123"}
        )

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"token": "test_token", "token_type": "bearer"})

    def test_login_wrong_password(self) -> None:
        self.users_service.login = AsyncMock(
            return_value=LoginOutput.fail(ErrorCode.INVALID_CREDENTIALS, "Wrong password")
        )

        response = self.client.post(
            f"{API}/auth/login", json={"email": "host@example.com", "password": "nope"}
        )

        self.assertEqual(response.status_code, 401)
        self.assertEqual(response.json()["detail"], "Wrong password")


class TestUserEndpoints(ApiTestCase):
    def test_me(self) -> None:
        response = self.client.get(f"{API}/users/me")

        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["id"], 1)
        self.assertEqual(body["role"], "host")
        self.assertNotIn("password", body)

    def test_edit_profile_uses_current_user(self) -> None:
        self.users_service.edit_profile = AsyncMock(return_value=CoreOutput(ok=True))

        response = self.client.put(f"{API}/users/me", json={"email": "new@example.com"})

        self.assertEqual(response.status_code, 200)
        user_id, data = self.users_service.edit_profile.await_args.args
        self.assertEqual(user_id, 1)
        self.assertEqual(data.email, "new@example.com")
        self.assertIsNone(data.password)

    def test_edit_profile_failure(self) -> None:
        self.users_service.edit_profile = AsyncMock(
            return_value=CoreOutput.fail(ErrorCode.COULD_NOT_UPDATE, "Could not update profile")
        )

        response = self.client.put(f"{API}/users/me", json={"password": "newpassword"})

        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.json()["detail"], "Could not update profile")

    def test_user_not_found(self) -> None:
        self.users_service.find_by_id = AsyncMock(
            return_value=UserProfileOutput.fail(ErrorCode.NOT_FOUND, "User Not Found")
        )

        response = self.client.get(f"{API}/users/99")

        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json()["detail"], "User Not Found")


class TestBearerAuthentication(ApiTestCase):
    def setUp(self) -> None:
        super().setUp()
        del app.dependency_overrides[get_current_user]

    def test_valid_token_resolves_user(self) -> None:
        self.users_service.find_by_id = AsyncMock(
            return_value=UserProfileOutput(ok=True, user=make_user())
        )
        token = JwtService().sign(1)

        response = self.client.get(
            f"{API}/users/me", headers={"Authorization": f"Bearer {token}"}
        )

        self.assertEqual(response.status_code, 200)
        self.users_service.find_by_id.assert_awaited_once_with(1)

    def test_invalid_token_is_rejected(self) -> None:
        response = self.client.get(
            f"{API}/users/me", headers={"Authorization": "Bearer garbage"}
        )

        self.assertEqual(response.status_code, 401)

    def test_missing_token_is_rejected(self) -> None:
        response = self.client.get(f"{API}/users/me")

        self.assertIn(response.status_code, (401, 403))


class TestPodcastEndpoints(ApiTestCase):
    def test_list_podcasts(self) -> None:
        self.podcasts_service.get_all_podcasts = AsyncMock(
            return_value=PodcastsOutput(
                ok=True, podcasts=[Podcast(id=1, title="TITLE", category="CATEGORY", rating=4)]
            )
        )

        response = self.client.get(f"{API}/podcasts")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()[0]["title"], "TITLE")
        self.assertEqual(response.json()[0]["rating"], 4)

    def test_create_podcast(self) -> None:
        self.podcasts_service.create_podcast = AsyncMock(
            return_value=CreatePodcastOutput(ok=True, id=1)
        )

        response = self.client.post(
            f"{API}/podcasts", json={"title": "TITLE", "category": "CATEGORY"}
        )

        self.assertEqual(response.status_code, 201)
        self.assertEqual(response.json(), {"id": 1})
        self.podcasts_service.create_podcast.assert_awaited_once_with(
            CreatePodcastInput(title="TITLE", category="CATEGORY")
        )

    def test_listener_cannot_create_podcast(self) -> None:
        self.current_user = make_user(UserRole.LISTENER)
        self.podcasts_service.create_podcast = AsyncMock()

        response = self.client.post(
            f"{API}/podcasts", json={"title": "TITLE", "category": "CATEGORY"}
        )

        self.assertEqual(response.status_code, 403)
        self.podcasts_service.create_podcast.assert_not_called()

    def test_get_podcast_with_episodes(self) -> None:
        podcast = Podcast(
            id=1,
            title="TITLE",
            category="CATEGORY",
            episodes=[Episode(id=2, title="EP", category="CATEGORY")],
        )
        self.podcasts_service.get_podcast = AsyncMock(
            return_value=PodcastOutput(ok=True, podcast=podcast)
        )

        response = self.client.get(f"{API}/podcasts/1")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["episodes"][0]["title"], "EP")

    def test_get_podcast_not_found(self) -> None:
        self.podcasts_service.get_podcast = AsyncMock(
            return_value=PodcastOutput.fail(ErrorCode.NOT_FOUND, "Podcast with id 1 not found")
        )

        response = self.client.get(f"{API}/podcasts/1")

        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json()["detail"], "Podcast with id 1 not found")

    def test_update_podcast_invalid_rating(self) -> None:
        self.podcasts_service.update_podcast = AsyncMock(
            return_value=CoreOutput.fail(ErrorCode.INVALID_RATING, "Rating must be between 1 and 5.")
        )

        response = self.client.patch(f"{API}/podcasts/1", json={"rating": 6})

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["detail"], "Rating must be between 1 and 5.")
        data = self.podcasts_service.update_podcast.await_args.args[0]
        self.assertIsInstance(data, UpdatePodcastInput)
        self.assertEqual(data.id, 1)
        self.assertEqual(data.payload.rating, 6)

    def test_delete_podcast(self) -> None:
        self.podcasts_service.delete_podcast = AsyncMock(return_value=CoreOutput(ok=True))

        response = self.client.delete(f"{API}/podcasts/1")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"ok": True})
        self.podcasts_service.delete_podcast.assert_awaited_once_with(1)

    def test_internal_error_maps_to_500(self) -> None:
        self.podcasts_service.get_all_podcasts = AsyncMock(
            return_value=PodcastsOutput.fail(ErrorCode.INTERNAL_ERROR, "Internal server error occurred.")
        )

        response = self.client.get(f"{API}/podcasts")

        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.json()["detail"], "Internal server error occurred.")


class TestEpisodeEndpoints(ApiTestCase):
    def test_create_episode(self) -> None:
        self.podcasts_service.create_episode = AsyncMock(
            return_value=CreateEpisodeOutput(ok=True, id=3)
        )

        response = self.client.post(
            f"{API}/podcasts/1/episodes", json={"title": "EP", "category": "CATEGORY"}
        )

        self.assertEqual(response.status_code, 201)
        self.assertEqual(response.json(), {"id": 3})
        data = self.podcasts_service.create_episode.await_args.args[0]
        self.assertEqual((data.podcast_id, data.title), (1, "EP"))

    def test_get_episode_not_found(self) -> None:
        self.podcasts_service.get_episode = AsyncMock(
            return_value=EpisodeOutput.fail(
                ErrorCode.NOT_FOUND, "Episode with id 2 not found in podcast with id 1"
            )
        )

        response = self.client.get(f"{API}/podcasts/1/episodes/2")

        self.assertEqual(response.status_code, 404)
        self.assertEqual(
            response.json()["detail"], "Episode with id 2 not found in podcast with id 1"
        )

    def test_update_episode_passes_only_given_fields(self) -> None:
        self.podcasts_service.update_episode = AsyncMock(return_value=CoreOutput(ok=True))

        response = self.client.patch(f"{API}/podcasts/1/episodes/2", json={"title": "NEW"})

        self.assertEqual(response.status_code, 200)
        data = self.podcasts_service.update_episode.await_args.args[0]
        self.assertEqual((data.podcast_id, data.episode_id), (1, 2))
        self.assertEqual(data.title, "NEW")
        self.assertIsNone(data.category)


if __name__ == "__main__":
    unittest.main()
