"""
Podcast Snippet API client.

Thin async wrapper over the ``/extract`` and ``/transcript`` endpoints for
scripts and front-end tooling. Responses are returned as parsed envelopes.
"""

from pathlib import Path
from typing import Any, Dict, Iterable, Optional, Tuple, Union

import httpx  # type: ignore

from core.config import get_settings
from core.constants import CLIENT_DEFAULT_TIMEOUT, CLIENT_EXTRACT_TIMEOUT
from core.logger import logger
from core.messages import ErrorMessages

# (filename, content, content_type) or a path to an image on disk
UploadSource = Union[Tuple[str, bytes, str], str, Path]


class ApiClientError(Exception):
    """Raised when the API answers with a non-2xx status."""

    def __init__(self, status_code: int, body: str):
        self.status_code = status_code
        self.body = body
        super().__init__(
            ErrorMessages.CLIENT_HTTP_ERROR.format(status_code=status_code, body=body)
        )


def _upload_part(source: UploadSource) -> Tuple[str, bytes, str]:
    if isinstance(source, tuple):
        return source
    path = Path(source)
    suffix = path.suffix.lower().lstrip(".") or "png"
    content_type = "image/jpeg" if suffix in ("jpg", "jpeg") else f"image/{suffix}"
    return path.name, path.read_bytes(), content_type


def build_transcript_payload(
    podcast_info: Dict[str, Any], time_range: Optional[Dict[str, Any]] = None
) -> Dict[str, Any]:
    """
    Shape an extraction result into a ``/transcript`` request body.

    The timestamp is taken from the result itself, falling back to the
    second and then first extraction pass.
    """
    validation = podcast_info.get("validation") or {}
    timestamp = (
        podcast_info.get("timestamp")
        or (podcast_info.get("secondPass") or {}).get("timestamp")
        or (podcast_info.get("firstPass") or {}).get("timestamp")
    )
    return {
        "podcastInfo": {
            "validatedPodcast": validation.get("validatedPodcast"),
            "validatedEpisode": validation.get("validatedEpisode"),
        },
        "timestamp": timestamp,
        "timeRange": time_range,
    }


class PodcastSnippetClient:
    """Async client for the Podcast Snippet API."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.base_url = (base_url or get_settings().api_url).rstrip("/")
        self._client = client or httpx.AsyncClient(timeout=CLIENT_DEFAULT_TIMEOUT)

    async def __aenter__(self) -> "PodcastSnippetClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def process_screenshots(
        self, files: Iterable[UploadSource], field_name: str = "screenshots"
    ) -> Dict[str, Any]:
        """
        Upload screenshots to ``/extract``.

        Raises:
            TimeoutError: If the server does not answer within 60 seconds
            ApiClientError: On a non-2xx response
        """
        parts = [(field_name, _upload_part(source)) for source in files]
        url = f"{self.base_url}/extract"
        logger.debug(f"POST {url} ({len(parts)} file(s))")

        try:
            response = await self._client.post(
                url, files=parts, timeout=CLIENT_EXTRACT_TIMEOUT
            )
        except httpx.TimeoutException as e:
            raise TimeoutError(ErrorMessages.CLIENT_TIMEOUT) from e

        return self._parse(response)

    async def get_transcript(
        self,
        podcast_info: Dict[str, Any],
        time_range: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        """
        Request a transcript snippet for an extraction result.

        Raises:
            ApiClientError: On a non-2xx response
        """
        response = await self._client.post(
            f"{self.base_url}/transcript",
            json=build_transcript_payload(podcast_info, time_range),
        )
        return self._parse(response)

    @staticmethod
    def _parse(response: httpx.Response) -> Dict[str, Any]:
        if response.is_error:
            logger.error(f"API error response: HTTP {response.status_code}")
            raise ApiClientError(response.status_code, response.text)
        return response.json()
