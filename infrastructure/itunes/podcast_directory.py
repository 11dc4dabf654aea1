"""
iTunes Podcast Directory - Resolves episodes to audio URLs.

Implements IPodcastDirectory interface for dependency injection.

Episode results from ``/lookup?entity=podcastEpisode`` carry ``trackId``,
``episodeGuid`` and ``episodeUrl``; an episode matches when either id equals
the requested one.
"""

from typing import Any, Dict, List, Optional

import httpx  # type: ignore

from core.config import get_settings
from core.errors import UpstreamServiceError
from core.logger import logger
from core.messages import ErrorMessages, LogMessages
from infrastructure.http.client import PooledHttpClient
from interfaces.podcast_directory import EpisodeId, IPodcastDirectory

EPISODE_WRAPPER_TYPE = "podcastEpisode"


class ItunesPodcastDirectory(PooledHttpClient, IPodcastDirectory):
    """iTunes lookup API client with connection pooling."""

    service_name = "itunes"

    def __init__(
        self,
        lookup_url: Optional[str] = None,
        episode_limit: Optional[int] = None,
        client: Optional[httpx.AsyncClient] = None,
    ):
        settings = get_settings()
        super().__init__(client)
        self.lookup_url = lookup_url or settings.itunes_lookup_url
        self.episode_limit = episode_limit or settings.itunes_episode_limit

    async def get_episode_audio_url(
        self,
        episode_id: EpisodeId,
        podcast_id: Optional[EpisodeId] = None,
    ) -> Optional[str]:
        """
        Implements IPodcastDirectory.get_episode_audio_url() interface.

        With a podcast id, the podcast's recent episodes are searched for the
        GUID or track id. Without one, only numeric track ids can be looked up.
        """
        wanted = str(episode_id)

        if podcast_id is not None:
            lookup_id = str(podcast_id)
        elif wanted.isdigit():
            lookup_id = wanted
        else:
            logger.warning(
                f"Cannot look up episode '{wanted}' without a podcast id"
            )
            return None

        for episode in await self._lookup_episodes(lookup_id):
            if wanted in (str(episode.get("trackId")), episode.get("episodeGuid")):
                return episode.get("episodeUrl") or None

        return None

    async def _lookup_episodes(self, lookup_id: str) -> List[Dict[str, Any]]:
        logger.info(LogMessages.ITUNES_LOOKUP.format(lookup_id=lookup_id))

        client = await self._get_client()
        response = await client.get(
            self.lookup_url,
            params={
                "id": lookup_id,
                "media": "podcast",
                "entity": "podcastEpisode",
                "limit": self.episode_limit,
            },
        )
        if response.status_code != 200:
            raise UpstreamServiceError(
                self.service_name,
                ErrorMessages.ITUNES_LOOKUP_FAILED.format(
                    status_code=response.status_code
                ),
            )

        results = response.json().get("results") or []
        return [r for r in results if r.get("wrapperType") == EPISODE_WRAPPER_TYPE]


# Global singleton instance
_podcast_directory: Optional[ItunesPodcastDirectory] = None


def get_podcast_directory() -> ItunesPodcastDirectory:
    """
    Get or create global ItunesPodcastDirectory instance (singleton).

    Returns:
        ItunesPodcastDirectory instance
    """
    global _podcast_directory

    if _podcast_directory is None:
        logger.info("Creating ItunesPodcastDirectory instance...")
        _podcast_directory = ItunesPodcastDirectory()

    return _podcast_directory
