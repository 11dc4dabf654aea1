"""
Tests for the PodcastSnippetClient wrapper.
"""

import json

import httpx
import pytest

from infrastructure.http.api_client import (
    ApiClientError,
    PodcastSnippetClient,
    build_transcript_payload,
)

EXTRACTION_RESULT = {
    "validation": {
        "validatedPodcast": {"id": 42, "title": "Show"},
        "validatedEpisode": {"guid": "abc", "title": "Episode"},
    },
    "secondPass": {"timestamp": "12:34"},
    "firstPass": {"timestamp": "12:30"},
}


def make_client(handler):
    return PodcastSnippetClient(
        base_url="http://api.test/api/",
        client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
    )


class TestBuildTranscriptPayload:
    def test_prefers_second_pass_timestamp(self):
        payload = build_transcript_payload(EXTRACTION_RESULT)

        assert payload["podcastInfo"]["validatedEpisode"]["guid"] == "abc"
        assert payload["timestamp"] == "12:34"
        assert payload["timeRange"] is None

    def test_own_timestamp_wins(self):
        payload = build_transcript_payload(dict(EXTRACTION_RESULT, timestamp=99), {"start": 1, "end": 2})

        assert payload["timestamp"] == 99
        assert payload["timeRange"] == {"start": 1, "end": 2}

    def test_falls_back_to_first_pass(self):
        result = {"validation": EXTRACTION_RESULT["validation"], "firstPass": {"timestamp": "1:00"}}

        assert build_transcript_payload(result)["timestamp"] == "1:00"


class TestPodcastSnippetClient:
    @pytest.mark.asyncio
    async def test_process_screenshots(self, tmp_path):
        image = tmp_path / "shot.jpg"
        image.write_bytes(b"jpeg-bytes")
        seen = {}

        def handler(request):
            seen["url"] = str(request.url)
            seen["body"] = request.content
            return httpx.Response(200, json={"success": True, "data": [{"timestamp": "1:00"}]})

        async with make_client(handler) as client:
            result = await client.process_screenshots([image, ("b.png", b"png", "image/png")])

        assert seen["url"] == "http://api.test/api/extract"
        assert b'name="screenshots"; filename="shot.jpg"' in seen["body"]
        assert b"Content-Type: image/jpeg" in seen["body"]
        assert result["data"] == [{"timestamp": "1:00"}]

    @pytest.mark.asyncio
    async def test_get_transcript(self):
        seen = {}

        def handler(request):
            seen["url"] = str(request.url)
            seen["json"] = json.loads(request.content)
            return httpx.Response(200, json={"success": True, "data": {"text": "hello"}})

        async with make_client(handler) as client:
            result = await client.get_transcript(EXTRACTION_RESULT, {"start": 1, "end": 5})

        assert seen["url"] == "http://api.test/api/transcript"
        assert seen["json"]["timestamp"] == "12:34"
        assert seen["json"]["timeRange"] == {"start": 1, "end": 5}
        assert result == {"success": True, "data": {"text": "hello"}}

    @pytest.mark.asyncio
    async def test_error_status_raises(self):
        def handler(request):
            return httpx.Response(
                404,
                json={"success": False, "error": {"message": "Audio URL not found for this episode"}},
            )

        async with make_client(handler) as client:
            with pytest.raises(ApiClientError) as exc_info:
                await client.get_transcript(EXTRACTION_RESULT)

        assert exc_info.value.status_code == 404
        assert "Audio URL not found" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_extract_timeout(self):
        def handler(request):
            raise httpx.ReadTimeout("timed out", request=request)

        async with make_client(handler) as client:
            with pytest.raises(TimeoutError, match="server took too long"):
                await client.process_screenshots([("a.png", b"png", "image/png")])
