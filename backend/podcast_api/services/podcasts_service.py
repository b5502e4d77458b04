"""
Podcasts Service
CRUD for podcasts and their episodes.

get_podcast() is the single existence check: every podcast- and
episode-scoped operation calls it (directly or through get_episodes /
get_episode) and forwards its failure unchanged. Any exception raised along
the way is logged and reported as the generic internal error.

The existence check and the following write are separate round trips with
no transaction around them, so a concurrent delete can slip in between.
"""

import logging

from podcast_api.core import constants
from podcast_api.db.repository import Repository
from podcast_api.models.podcast import Episode, Podcast
from podcast_api.schemas.common import CoreOutput, ErrorCode
from podcast_api.schemas.podcast import (
    CreateEpisodeInput,
    CreateEpisodeOutput,
    CreatePodcastInput,
    CreatePodcastOutput,
    EpisodeOutput,
    EpisodesOutput,
    EpisodesSearchInput,
    PodcastOutput,
    PodcastsOutput,
    UpdateEpisodeInput,
    UpdatePodcastInput,
)
from podcast_api.services.error_logging import error_logger


logger = logging.getLogger(__name__)


def _internal_error(output_cls, error: Exception, **context):
    error_logger.log_error(error, context=context)
    return output_cls.fail(ErrorCode.INTERNAL_ERROR, constants.MSG_INTERNAL_ERROR)


class PodcastsService:

    def __init__(self, podcasts: Repository[Podcast], episodes: Repository[Episode]):
        self.podcasts = podcasts
        self.episodes = episodes

    # ========================================================================
    # Podcasts
    # ========================================================================

    async def get_all_podcasts(self) -> PodcastsOutput:
        try:
            podcasts = await self.podcasts.find()
            return PodcastsOutput(ok=True, podcasts=podcasts)
        except Exception as e:
            return _internal_error(PodcastsOutput, e, operation="get_all_podcasts")

    async def create_podcast(self, data: CreatePodcastInput) -> CreatePodcastOutput:
        try:
            podcast = self.podcasts.create(title=data.title, category=data.category)
            saved = await self.podcasts.save(podcast)
            logger.info(f"Podcast {saved.id} created")
            return CreatePodcastOutput(ok=True, id=saved.id)
        except Exception as e:
            return _internal_error(CreatePodcastOutput, e, operation="create_podcast")

    async def get_podcast(self, podcast_id: int) -> PodcastOutput:
        try:
            podcast = await self.podcasts.find_one(id=podcast_id)
            if not podcast:
                return PodcastOutput.fail(
                    ErrorCode.NOT_FOUND, constants.podcast_not_found(podcast_id)
                )
            return PodcastOutput(ok=True, podcast=podcast)
        except Exception as e:
            return _internal_error(PodcastOutput, e, operation="get_podcast", podcast_id=podcast_id)

    async def delete_podcast(self, podcast_id: int) -> CoreOutput:
        try:
            result = await self.get_podcast(podcast_id)
            if not result.ok:
                return CoreOutput.from_failure(result)

            await self.podcasts.delete(podcast_id)
            logger.info(f"Podcast {podcast_id} deleted")
            return CoreOutput(ok=True)
        except Exception as e:
            return _internal_error(CoreOutput, e, operation="delete_podcast", podcast_id=podcast_id)

    async def update_podcast(self, data: UpdatePodcastInput) -> CoreOutput:
        try:
            result = await self.get_podcast(data.id)
            if not result.ok:
                return CoreOutput.from_failure(result)

            rating = data.payload.rating
            if rating is not None and not constants.RATING_MIN <= rating <= constants.RATING_MAX:
                return CoreOutput.fail(ErrorCode.INVALID_RATING, constants.MSG_INVALID_RATING)

            podcast = result.podcast
            for field, value in data.payload.model_dump(exclude_none=True).items():
                setattr(podcast, field, value)
            await self.podcasts.save(podcast)
            return CoreOutput(ok=True)
        except Exception as e:
            return _internal_error(CoreOutput, e, operation="update_podcast", podcast_id=data.id)

    # ========================================================================
    # Episodes
    # ========================================================================

    async def get_episodes(self, podcast_id: int) -> EpisodesOutput:
        try:
            result = await self.get_podcast(podcast_id)
            if not result.ok:
                return EpisodesOutput.from_failure(result)
            return EpisodesOutput(ok=True, episodes=list(result.podcast.episodes))
        except Exception as e:
            return _internal_error(EpisodesOutput, e, operation="get_episodes", podcast_id=podcast_id)

    async def get_episode(self, data: EpisodesSearchInput) -> EpisodeOutput:
        try:
            result = await self.get_episodes(data.podcast_id)
            if not result.ok:
                return EpisodeOutput.from_failure(result)

            episode = next(
                (episode for episode in result.episodes if episode.id == data.episode_id),
                None,
            )
            if episode is None:
                return EpisodeOutput.fail(
                    ErrorCode.NOT_FOUND,
                    constants.episode_not_found(data.podcast_id, data.episode_id),
                )
            return EpisodeOutput(ok=True, episode=episode)
        except Exception as e:
            return _internal_error(
                EpisodeOutput, e, operation="get_episode",
                podcast_id=data.podcast_id, episode_id=data.episode_id,
            )

    async def create_episode(self, data: CreateEpisodeInput) -> CreateEpisodeOutput:
        try:
            result = await self.get_podcast(data.podcast_id)
            if not result.ok:
                return CreateEpisodeOutput.from_failure(result)

            episode = self.episodes.create(
                title=data.title,
                category=data.category,
                podcast=result.podcast,
            )
            saved = await self.episodes.save(episode)
            return CreateEpisodeOutput(ok=True, id=saved.id)
        except Exception as e:
            return _internal_error(
                CreateEpisodeOutput, e, operation="create_episode", podcast_id=data.podcast_id
            )

    async def delete_episode(self, data: EpisodesSearchInput) -> CoreOutput:
        try:
            result = await self.get_episode(data)
            if not result.ok:
                return CoreOutput.from_failure(result)

            await self.episodes.delete(data.episode_id)
            return CoreOutput(ok=True)
        except Exception as e:
            return _internal_error(
                CoreOutput, e, operation="delete_episode",
                podcast_id=data.podcast_id, episode_id=data.episode_id,
            )

    async def update_episode(self, data: UpdateEpisodeInput) -> CoreOutput:
        try:
            result = await self.get_episode(
                EpisodesSearchInput(podcast_id=data.podcast_id, episode_id=data.episode_id)
            )
            if not result.ok:
                return CoreOutput.from_failure(result)

            episode = result.episode
            changes = data.model_dump(include={"title", "category"}, exclude_none=True)
            for field, value in changes.items():
                setattr(episode, field, value)
            await self.episodes.save(episode)
            return CoreOutput(ok=True)
        except Exception as e:
            return _internal_error(
                CoreOutput, e, operation="update_episode",
                podcast_id=data.podcast_id, episode_id=data.episode_id,
            )
