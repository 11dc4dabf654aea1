"""
Runtime dependency validation and FastAPI dependency injection.

This module provides:
- Startup validation (staging directory, collaborator credentials)
- FastAPI dependency injection functions for routes
"""

import os
from pathlib import Path
from typing import List, Optional

from core.config import Settings, get_settings
from core.errors import MissingDependencyError
from core.logger import logger


def check_upload_dir(upload_dir: str) -> Path:
    """
    Ensure the upload staging directory exists and is writable.

    Raises:
        MissingDependencyError: If the directory cannot be created or written
    """
    path = Path(upload_dir)
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise MissingDependencyError(f"Cannot create upload directory {path}: {e}") from e

    if not os.access(path, os.W_OK):
        raise MissingDependencyError(f"Upload directory is not writable: {path}")
    return path


def missing_credentials(settings: Settings) -> List[str]:
    """Names of collaborator credentials that are not configured."""
    missing = []
    if not settings.assemblyai_api_key:
        missing.append("ASSEMBLYAI_API_KEY")
    if not settings.google_vision_api_key:
        missing.append("GOOGLE_VISION_API_KEY")
    return missing


def validate_dependencies(settings: Optional[Settings] = None) -> None:
    """
    Validate runtime dependencies of the API service.

    The staging directory is required. Missing collaborator credentials only
    warn: the affected endpoints answer with CREDENTIALS_ERROR at request time.

    Raises:
        MissingDependencyError: If the staging directory is unusable
    """
    settings = settings or get_settings()
    logger.info("Validating runtime dependencies...")

    upload_dir = check_upload_dir(settings.upload_dir)
    logger.info(f"Upload staging directory: {upload_dir}")

    for name in missing_credentials(settings):
        logger.warning(f"{name} is not set. Requests needing it will fail with CREDENTIALS_ERROR.")

    logger.info("Runtime dependencies check passed")


# =============================================================================
# FastAPI Dependency Injection
# =============================================================================


def get_app_logger_dependency():
    """
    FastAPI dependency for IAppLogger.

    Usage in routes:
        @router.post("/transcript")
        async def transcript(
            app_logger: IAppLogger = Depends(get_app_logger_dependency)
        ):
            ...
    """
    from core.container import get_app_logger

    return get_app_logger()


def get_transcript_service_dependency():
    """FastAPI dependency for TranscriptService."""
    from core.container import get_transcript_service

    return get_transcript_service()


def get_extract_service_dependency():
    """FastAPI dependency for ExtractService."""
    from core.container import get_extract_service

    return get_extract_service()


def get_upload_stager_dependency():
    """FastAPI dependency for UploadStager."""
    from core.container import get_upload_stager

    return get_upload_stager()
