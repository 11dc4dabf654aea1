"""
Interface Layer - Abstract interfaces for dependency injection.

This layer defines contracts that infrastructure implementations must fulfill.
Services depend on these interfaces, not concrete implementations.
"""

from .app_logger import IAppLogger
from .podcast_directory import IPodcastDirectory
from .screenshot_extractor import IScreenshotExtractor
from .transcription_provider import ITranscriptionProvider

__all__ = [
    "IAppLogger",
    "IPodcastDirectory",
    "IScreenshotExtractor",
    "ITranscriptionProvider",
]
