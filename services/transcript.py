"""
Transcript Service - Fetches transcript snippets for podcast episodes.

This service orchestrates the podcast directory lookup and the
transcription request using dependency injection through interfaces.

Each call is a straight sequence with early exits: no retries, no caching.
Identical requests re-invoke both collaborators.
"""

from typing import Any, Dict, Optional

from core.errors import NotFoundError, ValidationError
from core.messages import ErrorMessages, LogMessages
from interfaces.app_logger import IAppLogger
from interfaces.podcast_directory import IPodcastDirectory
from interfaces.transcription_provider import ITranscriptionProvider, Timestamp


def _is_blank(value: Any) -> bool:
    return value is None or value == "" or value == {}


class TranscriptService:
    """
    Stateless service resolving an episode's audio and transcribing a window of it.

    Uses dependency injection through interfaces:
    - IPodcastDirectory: For resolving the episode audio URL
    - ITranscriptionProvider: For transcribing the audio window
    - IAppLogger: For request logging
    """

    def __init__(
        self,
        podcast_directory: IPodcastDirectory,
        transcription_provider: ITranscriptionProvider,
        app_logger: IAppLogger,
    ):
        self.podcast_directory = podcast_directory
        self.transcription_provider = transcription_provider
        self.app_logger = app_logger

    async def get_transcript(
        self,
        podcast_info: Optional[Dict[str, Any]],
        timestamp: Optional[Timestamp],
        time_range: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        """
        Get the transcript snippet for an episode at a timestamp.

        Args:
            podcast_info: {"validatedPodcast": {...}, "validatedEpisode": {...}}
            timestamp: Seconds or a player clock string
            time_range: Optional {"start", "end"} in seconds

        Returns:
            The transcription provider's payload, unmodified

        Raises:
            ValidationError: If podcast info or timestamp is missing, or the
                validated podcast or episode is not an object
            NotFoundError: If the directory has no audio URL for the episode
        """
        if _is_blank(podcast_info) or _is_blank(timestamp):
            raise ValidationError(ErrorMessages.MISSING_REQUIRED_FIELDS)

        podcast = podcast_info.get("validatedPodcast")
        episode = podcast_info.get("validatedEpisode")
        # Objects pass even when empty; anything else (null, "", false) does not
        if not isinstance(podcast, dict) or not isinstance(episode, dict):
            raise ValidationError(ErrorMessages.PODCAST_INFO_NOT_FOUND)

        episode_id = episode.get("guid") or episode.get("id")
        podcast_id = podcast.get("id")

        self.app_logger.info(
            LogMessages.TRANSCRIPT_REQUEST,
            podcast_id=podcast_id,
            podcast_title=podcast.get("title"),
            episode_id=episode_id,
            episode_title=episode.get("title"),
            timestamp=timestamp,
            time_range=time_range,
        )

        audio_url = None
        if episode_id:
            audio_url = await self.podcast_directory.get_episode_audio_url(
                episode_id, podcast_id=podcast_id
            )
        if not audio_url:
            raise NotFoundError(ErrorMessages.AUDIO_URL_NOT_FOUND)

        self.app_logger.debug(LogMessages.TRANSCRIPT_AUDIO_RESOLVED, audio_url=audio_url)

        result = await self.transcription_provider.get_transcript(
            audio_url, timestamp, time_range
        )

        self.app_logger.info(LogMessages.TRANSCRIPT_COMPLETE, episode_id=episode_id)
        return result

    async def generate_transcript(
        self,
        audio_url: Optional[str],
        start_time: Optional[Timestamp] = None,
        end_time: Optional[Timestamp] = None,
    ) -> Dict[str, Any]:
        """
        Transcribe a raw audio URL, optionally limited to [start_time, end_time].

        Raises:
            ValidationError: If audio_url is missing
        """
        if not audio_url:
            raise ValidationError(ErrorMessages.AUDIO_URL_REQUIRED)

        time_range = None
        if start_time is not None and end_time is not None:
            time_range = {"start": start_time, "end": end_time}

        self.app_logger.info(
            LogMessages.TRANSCRIPT_REQUEST, audio_url=audio_url, time_range=time_range
        )
        return await self.transcription_provider.get_transcript(
            audio_url, None, time_range
        )

    async def get_transcript_status(self, transcript_id: str) -> Dict[str, Any]:
        return await self.transcription_provider.get_transcript_status(transcript_id)
