"""
Extraction Service - Runs screenshot extraction over staged uploads.
"""

import time
from typing import Any, Dict, List, Optional, Sequence

from core.config import get_settings
from core.errors import AppError, CredentialsError, classify_error
from core.messages import ErrorMessages, LogMessages
from interfaces.app_logger import IAppLogger
from interfaces.screenshot_extractor import IScreenshotExtractor
from models.staged_file import StagedFile


class ExtractService:
    """Extracts podcast info from each staged screenshot, in upload order."""

    def __init__(
        self,
        extractor: IScreenshotExtractor,
        app_logger: IAppLogger,
        expose_errors: Optional[bool] = None,
    ):
        """
        Args:
            extractor: OCR collaborator
            app_logger: Application logger
            expose_errors: Put failure details in per-file error entries
                (defaults to every environment but production)
        """
        if expose_errors is None:
            expose_errors = not get_settings().is_production
        self.extractor = extractor
        self.app_logger = app_logger
        self.expose_errors = expose_errors

    async def extract_all(self, staged_files: Sequence[StagedFile]) -> List[Dict[str, Any]]:
        """
        Extract podcast info from every staged file.

        A failing file yields ``{"error": True, "message": ...}`` in its slot
        and the remaining files are still processed. Missing OCR credentials
        fail every file alike, so they abort the request.

        Raises:
            CredentialsError: If the extractor is not configured
        """
        results: List[Dict[str, Any]] = []
        total = len(staged_files)
        failed = 0
        self.app_logger.info(LogMessages.EXTRACT_REQUEST, total_files=total)

        for index, staged in enumerate(staged_files, start=1):
            self.app_logger.info(
                LogMessages.EXTRACT_FILE.format(
                    current=index, total=total, filename=staged.original_filename
                ),
                size_mb=round(staged.size_mb, 2),
            )
            start_time = time.time()
            try:
                info = await self.extractor.extract(staged.path)
            except Exception as e:
                error = classify_error(e)
                if isinstance(error, CredentialsError):
                    if error is e:
                        raise
                    raise error from e
                failed += 1
                results.append(self._failure_entry(staged, error))
                continue

            self.app_logger.debug(
                LogMessages.EXTRACT_FILE_DONE.format(index=index),
                processing_time=f"{(time.time() - start_time) * 1000:.0f}ms",
                episode_title=info.get("episodeTitle"),
                timestamp=info.get("timestamp"),
            )
            results.append(info)

        self.app_logger.info(
            LogMessages.EXTRACT_COMPLETE,
            total_files=total,
            succeeded=total - failed,
            failed=failed,
        )
        return results

    def _failure_entry(self, staged: StagedFile, error: AppError) -> Dict[str, Any]:
        detail = error.message
        self.app_logger.error(
            ErrorMessages.FILE_PROCESSING_FAILED.format(
                filename=staged.original_filename, error=detail
            ),
            error_type=error.error_type.value,
        )
        if not (self.expose_errors or error.expose_message):
            detail = ErrorMessages.INTERNAL_SERVER_ERROR
        return {
            "error": True,
            "message": ErrorMessages.FILE_PROCESSING_FAILED.format(
                filename=staged.original_filename, error=detail
            ),
        }
