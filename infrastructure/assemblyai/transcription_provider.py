"""
AssemblyAI Transcription Provider - Transcribes a window of remote audio.

Implements ITranscriptionProvider interface for dependency injection.

Flow:
1. Submit ``POST /transcript`` with ``audio_start_from``/``audio_end_at``
2. Poll ``GET /transcript/{id}`` until ``completed`` or ``error``
3. Return text, words and utterances with the window that was requested
"""

import asyncio
from typing import Any, Dict, Optional

import httpx  # type: ignore

from core.config import get_settings
from core.constants import TranscriptJobStatus
from core.errors import CredentialsError, NotFoundError, UpstreamServiceError
from core.logger import logger
from core.messages import ErrorMessages, LogMessages
from infrastructure.http.client import PooledHttpClient
from interfaces.transcription_provider import ITranscriptionProvider, Timestamp
from models.transcript_window import TranscriptWindow


class AssemblyAITranscriptionProvider(PooledHttpClient, ITranscriptionProvider):
    """AssemblyAI client with connection pooling and job polling."""

    service_name = "assemblyai"

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        poll_interval: Optional[float] = None,
        max_poll_attempts: Optional[int] = None,
        client: Optional[httpx.AsyncClient] = None,
    ):
        settings = get_settings()
        super().__init__(client)
        self.api_key = api_key if api_key is not None else settings.assemblyai_api_key
        self.base_url = (base_url or settings.assemblyai_base_url).rstrip("/")
        self.language = settings.assemblyai_language
        self.poll_interval = (
            poll_interval if poll_interval is not None else settings.assemblyai_poll_interval
        )
        self.max_poll_attempts = max_poll_attempts or settings.assemblyai_max_poll_attempts
        self.window_before = settings.transcript_window_before
        self.window_after = settings.transcript_window_after

    def _require_api_key(self) -> None:
        if not self.api_key:
            raise CredentialsError(ErrorMessages.ASSEMBLYAI_KEY_MISSING)

    def _headers(self) -> Dict[str, str]:
        return {"authorization": self.api_key, "content-type": "application/json"}

    async def get_transcript(
        self,
        audio_url: str,
        timestamp: Optional[Timestamp],
        time_range: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        """
        Implements ITranscriptionProvider.get_transcript() interface.

        Raises:
            CredentialsError: If ASSEMBLYAI_API_KEY is not set
            ValidationError: If the timestamp or time range is malformed
            UpstreamServiceError: If submission fails, the job errors or polling runs out
        """
        self._require_api_key()

        window = TranscriptWindow.build(
            timestamp, time_range, self.window_before, self.window_after
        )

        payload: Dict[str, Any] = {
            "audio_url": audio_url,
            "language_code": self.language,
            "speaker_labels": True,
            "punctuate": True,
            "format_text": True,
        }
        if window is not None:
            payload["audio_start_from"] = window.start_ms
            payload["audio_end_at"] = window.end_ms

        client = await self._get_client()
        response = await client.post(
            f"{self.base_url}/transcript", json=payload, headers=self._headers()
        )
        if response.status_code not in (200, 201):
            raise UpstreamServiceError(
                self.service_name,
                ErrorMessages.ASSEMBLYAI_REQUEST_FAILED.format(
                    status_code=response.status_code
                ),
            )

        transcript_id = response.json()["id"]
        logger.info(LogMessages.ASSEMBLYAI_SUBMITTED.format(transcript_id=transcript_id))

        transcript = await self._poll(transcript_id)

        return {
            "text": transcript.get("text") or "",
            "words": transcript.get("words") or [],
            "utterances": transcript.get("utterances") or [],
            "confidence": transcript.get("confidence") or 0,
            "audioUrl": audio_url,
            "timestamp": timestamp,
            "timeRange": time_range,
            "calculatedTimeRange": window.to_dict() if window else None,
            "transcriptId": transcript_id,
        }

    async def get_transcript_status(self, transcript_id: str) -> Dict[str, Any]:
        """
        Implements ITranscriptionProvider.get_transcript_status() interface.

        Raises:
            NotFoundError: If AssemblyAI does not know the id
            UpstreamServiceError: On any other non-200 response
        """
        self._require_api_key()

        client = await self._get_client()
        response = await client.get(
            f"{self.base_url}/transcript/{transcript_id}", headers=self._headers()
        )
        if response.status_code == 404:
            raise NotFoundError(
                ErrorMessages.TRANSCRIPT_NOT_FOUND.format(transcript_id=transcript_id)
            )
        if response.status_code != 200:
            raise UpstreamServiceError(
                self.service_name,
                ErrorMessages.ASSEMBLYAI_REQUEST_FAILED.format(
                    status_code=response.status_code
                ),
            )
        return response.json()

    async def _poll(self, transcript_id: str) -> Dict[str, Any]:
        for attempt in range(1, self.max_poll_attempts + 1):
            transcript = await self.get_transcript_status(transcript_id)
            status = transcript.get("status")
            logger.debug(
                LogMessages.ASSEMBLYAI_POLL.format(
                    attempt=attempt, max_attempts=self.max_poll_attempts, status=status
                )
            )

            if status == TranscriptJobStatus.COMPLETED.value:
                return transcript
            if status == TranscriptJobStatus.ERROR.value:
                raise UpstreamServiceError(
                    self.service_name,
                    ErrorMessages.TRANSCRIPTION_FAILED.format(error=transcript.get("error")),
                )

            await asyncio.sleep(self.poll_interval)

        raise UpstreamServiceError(
            self.service_name,
            ErrorMessages.TRANSCRIPTION_TIMED_OUT.format(attempts=self.max_poll_attempts),
        )


# Global singleton instance
_transcription_provider: Optional[AssemblyAITranscriptionProvider] = None


def get_transcription_provider() -> AssemblyAITranscriptionProvider:
    """
    Get or create global AssemblyAITranscriptionProvider instance (singleton).

    Returns:
        AssemblyAITranscriptionProvider instance
    """
    global _transcription_provider

    if _transcription_provider is None:
        logger.info("Creating AssemblyAITranscriptionProvider instance...")
        _transcription_provider = AssemblyAITranscriptionProvider()

    return _transcription_provider
