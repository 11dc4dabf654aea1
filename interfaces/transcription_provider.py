"""
Transcription Provider Interface - Abstract interface for speech-to-text services.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional, Union

Timestamp = Union[int, float, str]


class ITranscriptionProvider(ABC):
    """
    Abstract interface for transcribing a window of remote audio.

    Implementations:
    - infrastructure.assemblyai.transcription_provider.AssemblyAITranscriptionProvider
    """

    @abstractmethod
    async def get_transcript(
        self,
        audio_url: str,
        timestamp: Optional[Timestamp],
        time_range: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        """
        Transcribe the audio around a timestamp.

        Args:
            audio_url: Publicly reachable audio URL
            timestamp: Seconds, or "MM:SS" / "HH:MM:SS"
            time_range: Optional {"start": seconds, "end": seconds}

        Returns:
            Provider transcript payload

        Raises:
            CredentialsError: If the provider is not configured
            UpstreamServiceError: If the provider fails
        """
        pass

    @abstractmethod
    async def get_transcript_status(self, transcript_id: str) -> Dict[str, Any]:
        """
        Get the current state of a transcription job.

        Args:
            transcript_id: Provider job id

        Returns:
            Provider job payload (includes "status")
        """
        pass
