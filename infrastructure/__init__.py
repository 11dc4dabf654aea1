"""
Infrastructure Layer - External system integrations.

This layer contains implementations of interfaces defined in the interfaces/ layer.
Each subdirectory groups implementations by external dependency.

Structure:
- itunes/     - Podcast directory lookup (IPodcastDirectory)
- assemblyai/ - Transcription (ITranscriptionProvider)
- vision/     - Screenshot text detection (IScreenshotExtractor)
- logging/    - Application logger (IAppLogger)
- http/       - Shared HTTP client and the API client wrapper
"""

from .assemblyai import AssemblyAITranscriptionProvider, get_transcription_provider
from .itunes import ItunesPodcastDirectory, get_podcast_directory
from .logging import LoguruAppLogger, get_app_logger
from .vision import VisionScreenshotExtractor, get_screenshot_extractor

__all__ = [
    "AssemblyAITranscriptionProvider",
    "get_transcription_provider",
    "ItunesPodcastDirectory",
    "get_podcast_directory",
    "LoguruAppLogger",
    "get_app_logger",
    "VisionScreenshotExtractor",
    "get_screenshot_extractor",
]
