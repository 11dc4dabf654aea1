"""
AssemblyAI Infrastructure - Transcription via the AssemblyAI REST API.
"""

from .transcription_provider import (
    AssemblyAITranscriptionProvider,
    get_transcription_provider,
)

__all__ = [
    "AssemblyAITranscriptionProvider",
    "get_transcription_provider",
]
