"""
Podcast Endpoints
CRUD for podcasts and their nested episodes.

Endpoints:
- GET    /podcasts                                  - List podcasts
- POST   /podcasts                                  - Create podcast (host)
- GET    /podcasts/{podcast_id}                     - Podcast with episodes
- PATCH  /podcasts/{podcast_id}                     - Update podcast (host)
- DELETE /podcasts/{podcast_id}                     - Delete podcast (host)
- GET    /podcasts/{podcast_id}/episodes            - List episodes
- POST   /podcasts/{podcast_id}/episodes            - Create episode (host)
- GET    /podcasts/{podcast_id}/episodes/{id}       - Get episode
- PATCH  /podcasts/{podcast_id}/episodes/{id}       - Update episode (host)
- DELETE /podcasts/{podcast_id}/episodes/{id}       - Delete episode (host)

Reads are public, writes require a host account.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from podcast_api.api.v1.deps import get_current_host, get_podcasts_service, raise_for_output
from podcast_api.models.user import User
from podcast_api.schemas.common import CoreOutput
from podcast_api.schemas.podcast import (
    CreateEpisodeInput,
    CreatePodcastInput,
    CreatedResponse,
    EpisodeResponse,
    EpisodesSearchInput,
    PodcastDetailResponse,
    PodcastResponse,
    UpdateEpisodeInput,
    UpdatePodcastInput,
    UpdatePodcastPayload,
)
from podcast_api.services.podcasts_service import PodcastsService


router = APIRouter()


class EpisodeBody(BaseModel):
    title: str = Field(..., min_length=1, max_length=255)
    category: str = Field(..., min_length=1, max_length=255)


class EpisodeUpdateBody(BaseModel):
    title: Optional[str] = Field(None, min_length=1, max_length=255)
    category: Optional[str] = Field(None, min_length=1, max_length=255)


# ============================================================================
# Podcasts
# ============================================================================

@router.get("", response_model=List[PodcastResponse], summary="List podcasts")
async def list_podcasts(
    service: PodcastsService = Depends(get_podcasts_service)
):
    result = await service.get_all_podcasts()
    raise_for_output(result)
    return [PodcastResponse.model_validate(p) for p in result.podcasts]


@router.post(
    "",
    response_model=CreatedResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create podcast",
)
async def create_podcast(
    data: CreatePodcastInput,
    current_user: User = Depends(get_current_host),
    service: PodcastsService = Depends(get_podcasts_service)
):
    result = await service.create_podcast(data)
    raise_for_output(result)
    return CreatedResponse(id=result.id)


@router.get(
    "/{podcast_id}",
    response_model=PodcastDetailResponse,
    summary="Get podcast",
    responses={404: {"description": "Podcast not found"}}
)
async def get_podcast(
    podcast_id: int,
    service: PodcastsService = Depends(get_podcasts_service)
):
    result = await service.get_podcast(podcast_id)
    raise_for_output(result)
    return PodcastDetailResponse.model_validate(result.podcast)


@router.patch(
    "/{podcast_id}",
    response_model=CoreOutput,
    response_model_exclude_none=True,
    summary="Update podcast",
    responses={
        400: {"description": "Rating out of range"},
        404: {"description": "Podcast not found"},
    }
)
async def update_podcast(
    podcast_id: int,
    payload: UpdatePodcastPayload,
    current_user: User = Depends(get_current_host),
    service: PodcastsService = Depends(get_podcasts_service)
):
    result = await service.update_podcast(UpdatePodcastInput(id=podcast_id, payload=payload))
    raise_for_output(result)
    return result


@router.delete(
    "/{podcast_id}",
    response_model=CoreOutput,
    response_model_exclude_none=True,
    summary="Delete podcast and its episodes",
)
async def delete_podcast(
    podcast_id: int,
    current_user: User = Depends(get_current_host),
    service: PodcastsService = Depends(get_podcasts_service)
):
    result = await service.delete_podcast(podcast_id)
    raise_for_output(result)
    return result


# ============================================================================
# Episodes
# ============================================================================

@router.get(
    "/{podcast_id}/episodes",
    response_model=List[EpisodeResponse],
    summary="List episodes of a podcast",
)
async def list_episodes(
    podcast_id: int,
    service: PodcastsService = Depends(get_podcasts_service)
):
    result = await service.get_episodes(podcast_id)
    raise_for_output(result)
    return [EpisodeResponse.model_validate(e) for e in result.episodes]


@router.post(
    "/{podcast_id}/episodes",
    response_model=CreatedResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create episode",
)
async def create_episode(
    podcast_id: int,
    body: EpisodeBody,
    current_user: User = Depends(get_current_host),
    service: PodcastsService = Depends(get_podcasts_service)
):
    result = await service.create_episode(
        CreateEpisodeInput(podcast_id=podcast_id, title=body.title, category=body.category)
    )
    raise_for_output(result)
    return CreatedResponse(id=result.id)


@router.get(
    "/{podcast_id}/episodes/{episode_id}",
    response_model=EpisodeResponse,
    summary="Get episode",
)
async def get_episode(
    podcast_id: int,
    episode_id: int,
    service: PodcastsService = Depends(get_podcasts_service)
):
    result = await service.get_episode(
        EpisodesSearchInput(podcast_id=podcast_id, episode_id=episode_id)
    )
    raise_for_output(result)
    return EpisodeResponse.model_validate(result.episode)


@router.patch(
    "/{podcast_id}/episodes/{episode_id}",
    response_model=CoreOutput,
    response_model_exclude_none=True,
    summary="Update episode",
)
async def update_episode(
    podcast_id: int,
    episode_id: int,
    body: EpisodeUpdateBody,
    current_user: User = Depends(get_current_host),
    service: PodcastsService = Depends(get_podcasts_service)
):
    result = await service.update_episode(
        UpdateEpisodeInput(
            podcast_id=podcast_id,
            episode_id=episode_id,
            **body.model_dump(exclude_none=True),
        )
    )
    raise_for_output(result)
    return result


@router.delete(
    "/{podcast_id}/episodes/{episode_id}",
    response_model=CoreOutput,
    response_model_exclude_none=True,
    summary="Delete episode",
)
async def delete_episode(
    podcast_id: int,
    episode_id: int,
    current_user: User = Depends(get_current_host),
    service: PodcastsService = Depends(get_podcasts_service)
):
    result = await service.delete_episode(
        EpisodesSearchInput(podcast_id=podcast_id, episode_id=episode_id)
    )
    raise_for_output(result)
    return result
