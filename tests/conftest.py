"""
Shared fixtures and test doubles.

Collaborators are replaced with in-memory doubles implementing the same
interfaces, so no test touches the network.
"""

import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Set, Tuple

import pytest

# Get project root (parent of tests directory)
PROJECT_ROOT = Path(__file__).parent.parent

# Add project root to sys.path for imports
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from core.config import Settings  # noqa: E402
from interfaces.app_logger import IAppLogger  # noqa: E402
from interfaces.podcast_directory import IPodcastDirectory  # noqa: E402
from interfaces.screenshot_extractor import IScreenshotExtractor  # noqa: E402
from interfaces.transcription_provider import ITranscriptionProvider  # noqa: E402


class RecordingLogger(IAppLogger):
    """Keeps every entry as (level, message, context)."""

    def __init__(self):
        self.entries: List[Tuple[str, str, Dict[str, Any]]] = []

    def info(self, message: str, **context: Any) -> None:
        self.entries.append(("info", message, context))

    def warn(self, message: str, **context: Any) -> None:
        self.entries.append(("warn", message, context))

    def error(self, message: str, **context: Any) -> None:
        self.entries.append(("error", message, context))

    def debug(self, message: str, **context: Any) -> None:
        self.entries.append(("debug", message, context))

    def of_level(self, level: str) -> List[Tuple[str, str, Dict[str, Any]]]:
        return [entry for entry in self.entries if entry[0] == level]


class FakePodcastDirectory(IPodcastDirectory):
    def __init__(self, audio_url: Optional[str] = None, error: Optional[Exception] = None):
        self.audio_url = audio_url
        self.error = error
        self.calls: List[Tuple[Any, Any]] = []

    async def get_episode_audio_url(self, episode_id, podcast_id=None):
        self.calls.append((episode_id, podcast_id))
        if self.error:
            raise self.error
        return self.audio_url


class FakeTranscriptionProvider(ITranscriptionProvider):
    def __init__(
        self,
        result: Optional[Dict[str, Any]] = None,
        error: Optional[Exception] = None,
    ):
        self.result = result if result is not None else {"text": "hello"}
        self.error = error
        self.calls: List[Tuple[Any, Any, Any]] = []
        self.status_calls: List[str] = []

    async def get_transcript(self, audio_url, timestamp, time_range=None):
        self.calls.append((audio_url, timestamp, time_range))
        if self.error:
            raise self.error
        return self.result

    async def get_transcript_status(self, transcript_id):
        self.status_calls.append(transcript_id)
        if self.error:
            raise self.error
        return {"id": transcript_id, "status": "processing"}


class FakeScreenshotExtractor(IScreenshotExtractor):
    """Records each path and whether the file existed when it was read."""

    def __init__(self, error: Optional[Exception] = None, fail_on: Optional[Set[int]] = None):
        """
        Args:
            error: Raised by extract()
            fail_on: 1-based call numbers that raise; every call when omitted
        """
        self.error = error
        self.fail_on = fail_on
        self.seen: List[Tuple[Path, bool]] = []

    async def extract(self, image_path):
        path = Path(image_path)
        self.seen.append((path, path.exists()))
        if self.error and (self.fail_on is None or len(self.seen) in self.fail_on):
            raise self.error
        return {
            "episodeTitle": f"Episode for {path.name}",
            "podcastTitle": "Some Podcast",
            "timestamp": "12:34",
            "candidates": [],
            "rawText": "",
        }


@pytest.fixture
def recording_logger():
    return RecordingLogger()


@pytest.fixture
def upload_dir(tmp_path):
    path = tmp_path / "uploads"
    path.mkdir()
    return path


@pytest.fixture
def settings(upload_dir):
    return Settings(environment="development", upload_dir=str(upload_dir))


@pytest.fixture
def production_settings(upload_dir):
    return Settings(environment="production", upload_dir=str(upload_dir))
