"""
Upload Staging - Validates screenshot uploads and stages them on disk.

Staging is a scoped resource: files written by ``UploadStager.stage`` are
removed when the ``async with`` block exits, whatever the outcome. Limits:

- at most ``max_files`` files per request (FileCountError, nothing staged)
- MIME type must start with ``image/`` (FileTypeError)
- at most ``max_file_size`` bytes per file (FileSizeError)
"""

import os
import random
import time
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncIterator, List, Optional, Sequence

from starlette.datastructures import UploadFile  # type: ignore

from core.config import get_settings
from core.constants import ACCEPTED_MIME_PREFIX, UPLOAD_CHUNK_SIZE, UPLOAD_SUFFIX_MAX
from core.errors import FileCountError, FileSizeError, FileTypeError, ValidationError
from core.logger import logger
from core.messages import ErrorMessages, LogMessages
from interfaces.app_logger import IAppLogger
from models.staged_file import StagedFile


def staged_filename(field_name: str, original_filename: Optional[str]) -> str:
    """``{field}-{epoch millis}-{random suffix}{original extension}``"""
    extension = os.path.splitext(Path(original_filename or "").name)[1]
    unique_suffix = f"{int(time.time() * 1000)}-{random.randint(0, UPLOAD_SUFFIX_MAX)}"
    return f"{field_name}-{unique_suffix}{extension}"


class UploadStager:
    """Validates and stages multipart image uploads."""

    def __init__(
        self,
        app_logger: IAppLogger,
        upload_dir: Optional[str] = None,
        field_name: Optional[str] = None,
        max_file_size: Optional[int] = None,
        max_files: Optional[int] = None,
    ):
        settings = get_settings()
        self.app_logger = app_logger
        self.upload_dir = Path(upload_dir or settings.upload_dir)
        self.field_name = field_name or settings.upload_field_name
        self.max_file_size = max_file_size or settings.max_upload_size_bytes
        self.max_files = max_files or settings.max_upload_files

    @property
    def max_file_size_mb(self) -> int:
        return self.max_file_size // (1024 * 1024)

    @asynccontextmanager
    async def stage(self, uploads: Sequence[UploadFile]) -> AsyncIterator[List[StagedFile]]:
        """
        Validate and stage uploads for the duration of the block.

        Raises:
            FileCountError: More than ``max_files`` uploads
            ValidationError: No uploads
            FileTypeError: An upload is not an image
            FileSizeError: An upload exceeds ``max_file_size``
        """
        staged: List[StagedFile] = []
        try:
            if len(uploads) > self.max_files:
                self.app_logger.warn(
                    LogMessages.UPLOAD_REJECTED,
                    code=FileCountError.code.value,
                    count=len(uploads),
                )
                raise FileCountError(ErrorMessages.TOO_MANY_FILES.format(max=self.max_files))

            if not uploads:
                raise ValidationError(ErrorMessages.NO_FILES_UPLOADED)

            self.upload_dir.mkdir(parents=True, exist_ok=True)
            for upload in uploads:
                staged.append(await self._stage_one(upload))

            yield staged
        finally:
            self._cleanup(staged)

    async def _stage_one(self, upload: UploadFile) -> StagedFile:
        content_type = upload.content_type or ""
        if not content_type.startswith(ACCEPTED_MIME_PREFIX):
            self.app_logger.warn(
                LogMessages.UPLOAD_REJECTED,
                code=FileTypeError.code.value,
                filename=upload.filename,
                content_type=content_type,
            )
            raise FileTypeError(ErrorMessages.FILE_TYPE_NOT_ALLOWED)

        path = self.upload_dir / staged_filename(self.field_name, upload.filename)
        size = 0
        try:
            with open(path, "wb") as f:
                while True:
                    chunk = await upload.read(UPLOAD_CHUNK_SIZE)
                    if not chunk:
                        break
                    size += len(chunk)
                    if size > self.max_file_size:
                        raise FileSizeError(
                            ErrorMessages.FILE_TOO_LARGE.format(max=self.max_file_size_mb)
                        )
                    f.write(chunk)
        except FileSizeError:
            self.app_logger.warn(
                LogMessages.UPLOAD_REJECTED,
                code=FileSizeError.code.value,
                filename=upload.filename,
            )
            path.unlink(missing_ok=True)
            raise
        except Exception:
            path.unlink(missing_ok=True)
            raise

        staged = StagedFile(
            field_name=self.field_name,
            original_filename=upload.filename or path.name,
            content_type=content_type,
            size=size,
            path=path,
        )
        self.app_logger.debug(LogMessages.UPLOAD_ACCEPTED, **staged.to_log_dict())
        return staged

    def _cleanup(self, staged: Sequence[StagedFile]) -> None:
        removed = 0
        for item in staged:
            try:
                item.path.unlink(missing_ok=True)
                removed += 1
            except OSError as e:
                self.app_logger.warn(
                    LogMessages.UPLOAD_CLEANUP_FAILED.format(path=item.path, error=e)
                )
        if removed:
            self.app_logger.debug(LogMessages.UPLOAD_CLEANUP.format(count=removed))


def sweep_stale_uploads(upload_dir: Path, max_age_seconds: int) -> int:
    """
    Delete staged files older than ``max_age_seconds``.

    Covers files left behind by a process that died mid-request.

    Returns:
        Number of files removed
    """
    if not upload_dir.is_dir():
        return 0

    cutoff = time.time() - max_age_seconds
    removed = 0
    for path in upload_dir.iterdir():
        try:
            if path.is_file() and path.stat().st_mtime < cutoff:
                path.unlink()
                removed += 1
        except OSError as e:
            logger.warning(LogMessages.UPLOAD_CLEANUP_FAILED.format(path=path, error=e))

    if removed:
        logger.info(LogMessages.UPLOAD_SWEEP.format(count=removed, path=upload_dir))
    return removed
