"""
Tests for the screenshot extract endpoint.

Uploads go through the real UploadStager into a temporary directory; the
OCR collaborator is a double that records what it saw.
"""

from fastapi.testclient import TestClient

from conftest import FakeScreenshotExtractor
from core.dependencies import (
    get_extract_service_dependency,
    get_upload_stager_dependency,
)
from core.errors import UpstreamServiceError
from internal.api.app import create_app
from services.extraction import ExtractService
from services.upload import UploadStager

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 64


def build_client(recording_logger, settings, upload_dir, extractor=None, max_file_size=None):
    extractor = extractor or FakeScreenshotExtractor()
    app = create_app(app_logger=recording_logger, settings=settings)
    stager = UploadStager(
        app_logger=recording_logger,
        upload_dir=str(upload_dir),
        field_name="screenshots",
        max_file_size=max_file_size or 10 * 1024 * 1024,
        max_files=5,
    )
    service = ExtractService(
        extractor=extractor,
        app_logger=recording_logger,
        expose_errors=not settings.is_production,
    )
    app.dependency_overrides[get_upload_stager_dependency] = lambda: stager
    app.dependency_overrides[get_extract_service_dependency] = lambda: service
    return TestClient(app)


def image_parts(count, content=PNG_BYTES, content_type="image/png"):
    return [
        ("screenshots", (f"shot{i}.png", content, content_type)) for i in range(count)
    ]


class TestExtractSuccess:
    def test_extracts_each_file_in_order(self, recording_logger, settings, upload_dir):
        extractor = FakeScreenshotExtractor()
        client = build_client(recording_logger, settings, upload_dir, extractor)

        response = client.post("/api/extract", files=image_parts(2))

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert len(body["data"]) == 2
        assert body["data"][0]["timestamp"] == "12:34"

    def test_staged_files_exist_during_extraction_and_are_removed_after(
        self, recording_logger, settings, upload_dir
    ):
        extractor = FakeScreenshotExtractor()
        client = build_client(recording_logger, settings, upload_dir, extractor)

        client.post("/api/extract", files=image_parts(3))

        assert len(extractor.seen) == 3
        assert all(existed for _, existed in extractor.seen)
        assert all(path.name.startswith("screenshots-") for path, _ in extractor.seen)
        assert all(path.suffix == ".png" for path, _ in extractor.seen)
        assert list(upload_dir.iterdir()) == []

    def test_five_files_are_accepted(self, recording_logger, settings, upload_dir):
        client = build_client(recording_logger, settings, upload_dir)

        response = client.post("/api/extract", files=image_parts(5))

        assert response.status_code == 200
        assert len(response.json()["data"]) == 5


class TestExtractRejections:
    def test_six_files_return_413_file_count(self, recording_logger, settings, upload_dir):
        extractor = FakeScreenshotExtractor()
        client = build_client(recording_logger, settings, upload_dir, extractor)

        response = client.post("/api/extract", files=image_parts(6))

        assert response.status_code == 413
        body = response.json()
        assert body["success"] is False
        assert body["error"]["type"] == "FILE_COUNT_ERROR"
        assert body["error"]["message"] == "Too many files. Maximum is 5 files."
        assert extractor.seen == []
        assert list(upload_dir.iterdir()) == []

    def test_non_image_returns_400_file_type(self, recording_logger, settings, upload_dir):
        extractor = FakeScreenshotExtractor()
        client = build_client(recording_logger, settings, upload_dir, extractor)

        files = image_parts(1) + [
            ("screenshots", ("notes.txt", b"plain text", "text/plain"))
        ]
        response = client.post("/api/extract", files=files)

        assert response.status_code == 400
        assert response.json()["error"] == {
            "message": "Only image files are allowed!",
            "type": "FILE_TYPE_ERROR",
        }
        assert extractor.seen == []
        assert list(upload_dir.iterdir()) == []

    def test_oversize_file_returns_413_file_size(
        self, recording_logger, settings, upload_dir
    ):
        extractor = FakeScreenshotExtractor()
        client = build_client(
            recording_logger, settings, upload_dir, extractor, max_file_size=1024
        )

        response = client.post(
            "/api/extract", files=image_parts(1, content=b"\x00" * 2048)
        )

        assert response.status_code == 413
        assert response.json()["error"]["type"] == "FILE_SIZE_ERROR"
        assert extractor.seen == []
        assert list(upload_dir.iterdir()) == []

    def test_no_files_returns_400(self, recording_logger, settings, upload_dir):
        client = build_client(recording_logger, settings, upload_dir)

        response = client.post("/api/extract", data={"note": "no files"})

        assert response.status_code == 400
        assert response.json()["error"] == {
            "message": "No files uploaded",
            "type": "VALIDATION_ERROR",
        }


class TestExtractFailures:
    def test_failed_file_reported_in_place(self, recording_logger, settings, upload_dir):
        extractor = FakeScreenshotExtractor(
            error=UpstreamServiceError("vision", "boom"), fail_on={2}
        )
        client = build_client(recording_logger, settings, upload_dir, extractor)

        response = client.post("/api/extract", files=image_parts(3))

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert len(body["data"]) == 3
        assert body["data"][0]["timestamp"] == "12:34"
        assert body["data"][1] == {
            "error": True,
            "message": "Failed to process shot1.png: boom",
        }
        assert body["data"][2]["timestamp"] == "12:34"
        assert list(upload_dir.iterdir()) == []

    def test_failed_file_detail_redacted_in_production(
        self, recording_logger, production_settings, upload_dir
    ):
        extractor = FakeScreenshotExtractor(error=RuntimeError("vision down"))
        client = build_client(recording_logger, production_settings, upload_dir, extractor)

        response = client.post("/api/extract", files=image_parts(1))

        assert response.status_code == 200
        assert response.json()["data"] == [
            {"error": True, "message": "Failed to process shot0.png: Internal server error"}
        ]

    def test_google_credentials_failure_maps_to_credentials_error(
        self, recording_logger, production_settings, upload_dir
    ):
        extractor = FakeScreenshotExtractor(
            error=RuntimeError(
                "Could not load the default credentials. "
                "Set GOOGLE_APPLICATION_CREDENTIALS."
            )
        )
        client = build_client(recording_logger, production_settings, upload_dir, extractor)

        response = client.post("/api/extract", files=image_parts(1))

        assert response.status_code == 500
        assert response.json()["error"] == {
            "message": "Google Vision API credentials not configured",
            "type": "CREDENTIALS_ERROR",
        }
