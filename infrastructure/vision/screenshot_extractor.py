"""
Vision Screenshot Extractor - Reads podcast player screenshots.

Implements IScreenshotExtractor interface for dependency injection.

Text detection is delegated to the Google Cloud Vision ``images:annotate``
REST endpoint. The detected lines are reduced to title candidates and the
player timestamp; matching candidates against a podcast directory is left to
the caller.
"""

import asyncio
import base64
import re
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import httpx  # type: ignore

from core.config import get_settings
from core.errors import CredentialsError, UpstreamServiceError
from core.logger import logger
from core.messages import ErrorMessages, LogMessages
from infrastructure.http.client import PooledHttpClient
from interfaces.screenshot_extractor import IScreenshotExtractor

# Elapsed time as shown by players; remaining time is prefixed with "-"
TIMESTAMP_PATTERN = re.compile(r"(?<![-\u2212\d:])(\d{1,2}:\d{2}(?::\d{2})?)(?![\d:])")

MIN_CANDIDATE_LENGTH = 8
MAX_CANDIDATE_LENGTH = 80
MIN_CANDIDATE_WORDS = 2


def find_timestamp(lines: List[str]) -> Optional[str]:
    """Return the first elapsed-time timestamp found in the lines."""
    for line in lines:
        match = TIMESTAMP_PATTERN.search(line)
        if match:
            return match.group(1)
    return None


def find_title_candidates(lines: List[str]) -> List[str]:
    """Lines long enough to be a podcast or episode title, in screen order."""
    candidates = []
    for line in lines:
        text = line.strip()
        if not (MIN_CANDIDATE_LENGTH <= len(text) <= MAX_CANDIDATE_LENGTH):
            continue
        if len(text.split()) < MIN_CANDIDATE_WORDS:
            continue
        if TIMESTAMP_PATTERN.fullmatch(text):
            continue
        if text not in candidates:
            candidates.append(text)
    return candidates


class VisionScreenshotExtractor(PooledHttpClient, IScreenshotExtractor):
    """Google Cloud Vision REST client with connection pooling."""

    service_name = "vision"

    def __init__(
        self,
        api_key: Optional[str] = None,
        endpoint: Optional[str] = None,
        client: Optional[httpx.AsyncClient] = None,
    ):
        settings = get_settings()
        super().__init__(client)
        self.api_key = api_key if api_key is not None else settings.google_vision_api_key
        self.endpoint = endpoint or settings.google_vision_url

    async def extract(self, image_path: Union[str, Path]) -> Dict[str, Any]:
        """
        Implements IScreenshotExtractor.extract() interface.

        Raises:
            CredentialsError: If GOOGLE_VISION_API_KEY is not set
            UpstreamServiceError: If the Vision API rejects the request
        """
        if not self.api_key:
            raise CredentialsError(ErrorMessages.GOOGLE_CREDENTIALS_MISSING)

        path = Path(image_path)
        logger.info(LogMessages.VISION_REQUEST.format(path=path.name))

        loop = asyncio.get_running_loop()
        content = await loop.run_in_executor(None, path.read_bytes)

        client = await self._get_client()
        response = await client.post(
            self.endpoint,
            params={"key": self.api_key},
            json={
                "requests": [
                    {
                        "image": {"content": base64.b64encode(content).decode("ascii")},
                        "features": [{"type": "TEXT_DETECTION"}],
                    }
                ]
            },
        )
        if response.status_code != 200:
            raise UpstreamServiceError(
                self.service_name,
                ErrorMessages.VISION_REQUEST_FAILED.format(
                    status_code=response.status_code
                ),
            )

        result = (response.json().get("responses") or [{}])[0]
        if result.get("error"):
            raise UpstreamServiceError(
                self.service_name,
                ErrorMessages.VISION_RESPONSE_ERROR.format(
                    error=result["error"].get("message")
                ),
            )

        annotations = result.get("textAnnotations") or []
        raw_text = annotations[0].get("description", "") if annotations else ""
        lines = [line.strip() for line in raw_text.splitlines() if line.strip()]
        candidates = find_title_candidates(lines)

        return {
            "episodeTitle": candidates[0] if candidates else None,
            "podcastTitle": candidates[1] if len(candidates) > 1 else None,
            "timestamp": find_timestamp(lines),
            "candidates": candidates,
            "rawText": raw_text,
        }


# Global singleton instance
_screenshot_extractor: Optional[VisionScreenshotExtractor] = None


def get_screenshot_extractor() -> VisionScreenshotExtractor:
    """
    Get or create global VisionScreenshotExtractor instance (singleton).

    Returns:
        VisionScreenshotExtractor instance
    """
    global _screenshot_extractor

    if _screenshot_extractor is None:
        logger.info("Creating VisionScreenshotExtractor instance...")
        _screenshot_extractor = VisionScreenshotExtractor()

    return _screenshot_extractor
