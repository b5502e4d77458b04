"""
Pydantic Schemas Module
Contains service inputs/outputs and API response schemas.

Pydantic schemas are used for:
- Validating incoming request data
- The discriminated result returned by every service operation
- Serializing database models to JSON responses
"""

from podcast_api.schemas.common import CoreOutput, ErrorCode
from podcast_api.schemas.user import (
    CreateAccountInput,
    LoginInput,
    EditProfileInput,
    LoginOutput,
    UserProfileOutput,
    UserResponse,
    TokenResponse,
    TokenPayload,
)
from podcast_api.schemas.podcast import (
    CreatePodcastInput,
    UpdatePodcastPayload,
    UpdatePodcastInput,
    EpisodesSearchInput,
    CreateEpisodeInput,
    UpdateEpisodeInput,
    PodcastsOutput,
    PodcastOutput,
    CreatePodcastOutput,
    EpisodesOutput,
    EpisodeOutput,
    CreateEpisodeOutput,
    EpisodeResponse,
    PodcastResponse,
    PodcastDetailResponse,
    CreatedResponse,
)

__all__ = [
    "CoreOutput",
    "ErrorCode",
    "CreateAccountInput",
    "LoginInput",
    "EditProfileInput",
    "LoginOutput",
    "UserProfileOutput",
    "UserResponse",
    "TokenResponse",
    "TokenPayload",
    "CreatePodcastInput",
    "UpdatePodcastPayload",
    "UpdatePodcastInput",
    "EpisodesSearchInput",
    "CreateEpisodeInput",
    "UpdateEpisodeInput",
    "PodcastsOutput",
    "PodcastOutput",
    "CreatePodcastOutput",
    "EpisodesOutput",
    "EpisodeOutput",
    "CreateEpisodeOutput",
    "EpisodeResponse",
    "PodcastResponse",
    "PodcastDetailResponse",
    "CreatedResponse",
]
