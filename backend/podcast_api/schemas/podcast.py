"""
Podcast Pydantic Schemas
Inputs and outputs of the podcast service, plus the API response models.
"""

from pydantic import BaseModel, Field, ConfigDict
from typing import List, Optional
from datetime import datetime

from podcast_api.models.podcast import Episode, Podcast
from podcast_api.schemas.common import CoreOutput


# ============================================================================
# Podcast Inputs
# ============================================================================

class CreatePodcastInput(BaseModel):
    title: str = Field(..., min_length=1, max_length=255, examples=["Daily Tech"])
    category: str = Field(..., min_length=1, max_length=255, examples=["Technology"])


class UpdatePodcastPayload(BaseModel):
    """
    Fields a podcast update may change.

    Omitted or null fields are left as they are. The rating range is checked
    by the service, not here, so out-of-range values reach it and produce an
    ordinary failure result.
    """
    title: Optional[str] = Field(None, min_length=1, max_length=255)
    category: Optional[str] = Field(None, min_length=1, max_length=255)
    rating: Optional[int] = Field(None, examples=[4])


class UpdatePodcastInput(BaseModel):
    id: int
    payload: UpdatePodcastPayload


# ============================================================================
# Episode Inputs
# ============================================================================

class EpisodesSearchInput(BaseModel):
    podcast_id: int
    episode_id: int


class CreateEpisodeInput(BaseModel):
    podcast_id: int
    title: str = Field(..., min_length=1, max_length=255)
    category: str = Field(..., min_length=1, max_length=255)


class UpdateEpisodeInput(EpisodesSearchInput):
    title: Optional[str] = Field(None, min_length=1, max_length=255)
    category: Optional[str] = Field(None, min_length=1, max_length=255)


# ============================================================================
# Outputs
# ============================================================================

class PodcastsOutput(CoreOutput):
    podcasts: Optional[List[Podcast]] = None


class PodcastOutput(CoreOutput):
    podcast: Optional[Podcast] = None


class CreatePodcastOutput(CoreOutput):
    id: Optional[int] = None


class EpisodesOutput(CoreOutput):
    episodes: Optional[List[Episode]] = None


class EpisodeOutput(CoreOutput):
    episode: Optional[Episode] = None


class CreateEpisodeOutput(CoreOutput):
    id: Optional[int] = None


# ============================================================================
# API Responses
# ============================================================================

class EpisodeResponse(BaseModel):
    id: int
    title: str
    category: str
    podcast_id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class PodcastResponse(BaseModel):
    id: int
    title: str
    category: str
    rating: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class PodcastDetailResponse(PodcastResponse):
    episodes: List[EpisodeResponse] = Field(default_factory=list)


class CreatedResponse(BaseModel):
    id: int
