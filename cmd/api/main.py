"""
FastAPI Service - Main entry point for the Podcast Snippet API.
"""

from core.config import get_settings
from core.logger import logger
from internal.api.app import create_app


# Create application instance
try:
    app = create_app()
except Exception as e:
    logger.error(f"Failed to create application instance: {e}")
    logger.exception("Startup error details:")
    raise


# Run with: python cmd/api/main.py
# or: uvicorn internal.api.app:create_app --factory --host 0.0.0.0 --port 3001
if __name__ == "__main__":
    import os
    import sys

    import uvicorn  # type: ignore

    try:
        settings = get_settings()

        logger.info("========== Starting Uvicorn Server ==========")
        logger.info(f"Host: {settings.api_host}")
        logger.info(f"Port: {settings.api_port}")
        logger.info(f"Reload: {settings.api_reload}")

        # uvicorn's reload subprocess re-imports the app and needs the project root
        project_root = os.path.dirname(
            os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
        )
        if project_root not in sys.path:
            sys.path.insert(0, project_root)

        current_pythonpath = os.environ.get("PYTHONPATH", "")
        if project_root not in current_pythonpath:
            os.environ["PYTHONPATH"] = (
                f"{project_root}:{current_pythonpath}" if current_pythonpath else project_root
            )

        # Reload re-imports by name; the stdlib "cmd" module shadows this package
        uvicorn.run(
            "internal.api.app:create_app" if settings.api_reload else app,
            factory=settings.api_reload,
            host=settings.api_host,
            port=settings.api_port,
            reload=settings.api_reload,
            log_level="info" if settings.debug else "warning",
        )

    except Exception as e:
        logger.error(f"Failed to start Uvicorn server: {e}")
        logger.exception("Uvicorn startup error details:")
        raise
