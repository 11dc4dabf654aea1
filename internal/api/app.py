"""
FastAPI application factory for the Podcast Snippet API.
"""

from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

from fastapi import FastAPI  # type: ignore
from fastapi.middleware.cors import CORSMiddleware  # type: ignore

from core.config import Settings, get_settings
from core.constants import CORS_ALLOW_HEADERS, CORS_ALLOW_METHODS, CORS_ALLOW_ORIGINS
from core.dependencies import validate_dependencies
from core.logger import logger, setup_logger
from interfaces.app_logger import IAppLogger
from internal.api.error_handlers import register_exception_handlers
from internal.api.routes.extract_routes import router as extract_router
from internal.api.routes.health_routes import router as health_router
from internal.api.routes.transcript_routes import router as transcript_router
from services.upload import sweep_stale_uploads


async def _close_http_clients() -> None:
    from core.container import (
        get_podcast_directory,
        get_screenshot_extractor,
        get_transcription_provider,
    )

    for get_adapter in (
        get_podcast_directory,
        get_transcription_provider,
        get_screenshot_extractor,
    ):
        adapter = get_adapter()
        aclose = getattr(adapter, "aclose", None)
        if aclose is not None:
            await aclose()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application lifespan - startup and shutdown.

    Startup validates the staging directory, bootstraps the DI container and
    sweeps uploads left behind by a previous process. Shutdown closes the
    pooled collaborator HTTP clients.
    """
    try:
        setup_logger()
        settings = app.state.settings or get_settings()
        logger.info(
            f"========== Starting {settings.app_name} v{settings.app_version} API service =========="
        )
        logger.info(f"Environment: {settings.environment}")
        logger.info(f"Debug mode: {settings.debug}")
        logger.info(f"API: {settings.api_host}:{settings.api_port}")

        validate_dependencies(settings)

        from core.container import bootstrap_container

        bootstrap_container()
        logger.info("DI Container initialized")

        sweep_stale_uploads(Path(settings.upload_dir), settings.upload_retention_seconds)

        logger.info(
            f"========== {settings.app_name} API service started successfully =========="
        )

        yield

        logger.info("========== Shutting down API service ==========")
        await _close_http_clients()
        logger.info("========== API service stopped successfully ==========")

    except Exception as e:
        logger.error(f"Fatal error in application lifespan: {e}")
        logger.exception("Lifespan error details:")
        raise


def create_app(
    app_logger: Optional[IAppLogger] = None,
    settings: Optional[Settings] = None,
) -> FastAPI:
    """
    Factory function to create and configure the FastAPI application.

    Args:
        app_logger: Logger for error entries (container default if omitted)
        settings: Settings override (cached environment settings if omitted)

    Returns:
        FastAPI: Configured application instance
    """
    try:
        settings = settings or get_settings()

        description = """
## Podcast Snippet API

Turns a screenshot of a podcast player into a transcript of what was playing.

### Processing Flow

1. **Extract** - POST player screenshots to `/api/extract` to read episode title and timestamp
2. **Validate** - Match the extracted titles against the podcast directory (client side)
3. **Transcript** - POST the validated podcast, episode and timestamp to `/api/transcript`

Every response is `{"success": true, "data": ...}` or
`{"success": false, "error": {"message": ..., "type": ...}}`.
        """

        tags_metadata = [
            {"name": "Extract", "description": "Screenshot upload and text extraction."},
            {"name": "Transcript", "description": "Transcript snippets for episodes."},
            {"name": "Health", "description": "Health check endpoints for monitoring API status."},
        ]

        app = FastAPI(
            title=settings.app_name,
            version=settings.app_version,
            description=description,
            lifespan=lifespan,
            openapi_tags=tags_metadata,
            docs_url="/docs",
            redoc_url="/redoc",
            openapi_url="/openapi.json",
        )

        app.add_middleware(
            CORSMiddleware,
            allow_origins=CORS_ALLOW_ORIGINS,
            allow_credentials=False,
            allow_methods=CORS_ALLOW_METHODS,
            allow_headers=CORS_ALLOW_HEADERS,
        )

        app.include_router(extract_router)  # /api/extract
        app.include_router(transcript_router)  # /api/transcript
        app.include_router(health_router)  # / and /health

        register_exception_handlers(app, app_logger=app_logger, settings=settings)

        return app

    except Exception as e:
        logger.error(f"Failed to create FastAPI application: {e}")
        logger.exception("Application creation error details:")
        raise
