"""
Unit tests for TranscriptService and ExtractService.

The services use dependency injection, so they are tested with interface
doubles and no network calls.
"""

from pathlib import Path

import pytest

from conftest import (
    FakePodcastDirectory,
    FakeScreenshotExtractor,
    FakeTranscriptionProvider,
)
from core.errors import CredentialsError, NotFoundError, UpstreamServiceError, ValidationError
from models.staged_file import StagedFile
from services.extraction import ExtractService
from services.transcript import TranscriptService

PODCAST_INFO = {
    "validatedPodcast": {"id": 42, "title": "Show"},
    "validatedEpisode": {"guid": "ep-guid", "id": 7, "title": "Episode"},
}


def make_service(recording_logger, directory=None, provider=None):
    return TranscriptService(
        podcast_directory=directory or FakePodcastDirectory("http://audio/ep.mp3"),
        transcription_provider=provider or FakeTranscriptionProvider(),
        app_logger=recording_logger,
    )


class TestGetTranscript:
    @pytest.mark.asyncio
    async def test_guid_preferred_over_id(self, recording_logger):
        directory = FakePodcastDirectory("http://audio/ep.mp3")
        service = make_service(recording_logger, directory)

        await service.get_transcript(PODCAST_INFO, 120)

        assert directory.calls == [("ep-guid", 42)]

    @pytest.mark.asyncio
    async def test_result_is_returned_unmodified(self, recording_logger):
        result = {"text": "hello", "words": [{"text": "hello"}], "extra": True}
        provider = FakeTranscriptionProvider(result=result)
        service = make_service(recording_logger, provider=provider)

        assert await service.get_transcript(PODCAST_INFO, "2:00") is result
        assert provider.calls == [("http://audio/ep.mp3", "2:00", None)]

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "podcast_info,timestamp",
        [(None, 120), ({}, 120), (PODCAST_INFO, None), (PODCAST_INFO, "")],
    )
    async def test_missing_fields(self, recording_logger, podcast_info, timestamp):
        directory = FakePodcastDirectory("http://audio/ep.mp3")
        service = make_service(recording_logger, directory)

        with pytest.raises(ValidationError, match="Missing required fields"):
            await service.get_transcript(podcast_info, timestamp)
        assert directory.calls == []

    @pytest.mark.asyncio
    async def test_episode_without_ids_is_not_found(self, recording_logger):
        directory = FakePodcastDirectory("http://audio/ep.mp3")
        service = make_service(recording_logger, directory)
        info = {"validatedPodcast": {"id": 42}, "validatedEpisode": {"title": "x"}}

        with pytest.raises(NotFoundError):
            await service.get_transcript(info, 120)
        assert directory.calls == []

    @pytest.mark.asyncio
    async def test_not_found_skips_transcription(self, recording_logger):
        provider = FakeTranscriptionProvider()
        service = make_service(
            recording_logger, FakePodcastDirectory(audio_url=""), provider
        )

        with pytest.raises(NotFoundError, match="Audio URL not found for this episode"):
            await service.get_transcript(PODCAST_INFO, 120)
        assert provider.calls == []

    @pytest.mark.asyncio
    async def test_logs_request(self, recording_logger):
        service = make_service(recording_logger)

        await service.get_transcript(PODCAST_INFO, 120)

        messages = [message for level, message, _ in recording_logger.of_level("info")]
        assert "Processing transcript request" in messages


class TestGenerateTranscript:
    @pytest.mark.asyncio
    async def test_partial_window_is_ignored(self, recording_logger):
        provider = FakeTranscriptionProvider()
        service = make_service(recording_logger, provider=provider)

        await service.generate_transcript("http://audio/ep.mp3", start_time=5)

        assert provider.calls == [("http://audio/ep.mp3", None, None)]

    @pytest.mark.asyncio
    async def test_requires_audio_url(self, recording_logger):
        service = make_service(recording_logger)

        with pytest.raises(ValidationError, match="Audio URL is required"):
            await service.generate_transcript(None)


class TestExtractService:
    @pytest.mark.asyncio
    async def test_processes_files_in_order(self, recording_logger, tmp_path):
        files = []
        for name in ("one.png", "two.png"):
            path = tmp_path / name
            path.write_bytes(b"img")
            files.append(
                StagedFile(
                    field_name="screenshots",
                    original_filename=name,
                    content_type="image/png",
                    size=3,
                    path=path,
                )
            )
        extractor = FakeScreenshotExtractor()
        service = ExtractService(extractor=extractor, app_logger=recording_logger)

        results = await service.extract_all(files)

        assert [r["episodeTitle"] for r in results] == [
            "Episode for one.png",
            "Episode for two.png",
        ]
        assert [path for path, _ in extractor.seen] == [f.path for f in files]

    @pytest.mark.asyncio
    async def test_failed_file_keeps_its_slot(self, recording_logger, tmp_path):
        files = []
        for name in ("one.png", "two.png", "three.png"):
            path = tmp_path / name
            path.write_bytes(b"img")
            files.append(StagedFile("screenshots", name, "image/png", 3, path))
        extractor = FakeScreenshotExtractor(
            error=UpstreamServiceError("vision", "boom"), fail_on={2}
        )
        service = ExtractService(
            extractor=extractor, app_logger=recording_logger, expose_errors=True
        )

        results = await service.extract_all(files)

        assert len(results) == 3
        assert results[0]["episodeTitle"] == "Episode for one.png"
        assert results[1] == {"error": True, "message": "Failed to process two.png: boom"}
        assert results[2]["episodeTitle"] == "Episode for three.png"
        assert len(extractor.seen) == 3
        errors = recording_logger.of_level("error")
        assert errors[0][1] == "Failed to process two.png: boom"
        assert [message for _, message, _ in recording_logger.of_level("debug")] == [
            "File 1 processed",
            "File 3 processed",
        ]
        summary = next(
            context
            for _, message, context in recording_logger.of_level("info")
            if message == "All files processed"
        )
        assert summary["succeeded"] == 2
        assert summary["failed"] == 1

    @pytest.mark.asyncio
    async def test_failure_detail_hidden_when_not_exposed(self, recording_logger):
        extractor = FakeScreenshotExtractor(error=RuntimeError("internal path /srv/x"))
        service = ExtractService(
            extractor=extractor, app_logger=recording_logger, expose_errors=False
        )
        staged = StagedFile("screenshots", "a.png", "image/png", 1, Path("/nowhere/a.png"))

        results = await service.extract_all([staged])

        assert results == [
            {"error": True, "message": "Failed to process a.png: Internal server error"}
        ]

    @pytest.mark.asyncio
    async def test_missing_credentials_abort(self, recording_logger):
        extractor = FakeScreenshotExtractor(
            error=CredentialsError("Google Vision API credentials not configured")
        )
        service = ExtractService(extractor=extractor, app_logger=recording_logger)
        staged = StagedFile("screenshots", "a.png", "image/png", 1, Path("/nowhere/a.png"))

        with pytest.raises(CredentialsError):
            await service.extract_all([staged, staged])
        assert len(extractor.seen) == 1
