"""
Podcast Directory Interface - Resolves episodes to playable audio URLs.
"""

from abc import ABC, abstractmethod
from typing import Optional, Union

EpisodeId = Union[str, int]


class IPodcastDirectory(ABC):
    """
    Abstract interface for a podcast directory lookup.

    Implementations:
    - infrastructure.itunes.podcast_directory.ItunesPodcastDirectory
    """

    @abstractmethod
    async def get_episode_audio_url(
        self,
        episode_id: EpisodeId,
        podcast_id: Optional[EpisodeId] = None,
    ) -> Optional[str]:
        """
        Get the playable audio URL of an episode.

        Args:
            episode_id: Episode GUID or directory track id
            podcast_id: Optional podcast (collection) id used to narrow the lookup

        Returns:
            Audio URL, or None when the directory has no audio for the episode
        """
        pass
