"""
Error taxonomy for the Podcast Snippet API.

Every failure the API reports is one of the variants below. Each variant
carries its HTTP status and error type, so the boundary layer maps errors to
responses without inspecting messages.
"""

from typing import Any, Dict, Optional

from core.constants import ErrorType, UploadErrorCode


class AppError(Exception):
    """Base exception for all errors surfaced to API clients."""

    status_code: int = 500
    error_type: ErrorType = ErrorType.SERVER_ERROR
    default_message: str = "Internal server error"
    # Messages of these errors are safe to show in production
    expose_message: bool = True

    def __init__(self, message: Optional[str] = None, **details: Any):
        self.message = message or self.default_message
        self.details: Dict[str, Any] = details
        super().__init__(self.message)


class ValidationError(AppError):
    """Raised when request input is missing or malformed."""

    status_code = 400
    error_type = ErrorType.VALIDATION_ERROR
    default_message = "Validation error"


class NotFoundError(AppError):
    """Raised when a requested resource (e.g. an audio URL) does not exist."""

    status_code = 404
    error_type = ErrorType.NOT_FOUND
    default_message = "Not found"


class MethodNotAllowedError(AppError):
    status_code = 405
    error_type = ErrorType.METHOD_NOT_ALLOWED
    default_message = "Method not allowed"


class UploadError(AppError):
    """Base for upload rejections; ``code`` mirrors the multipart limit hit."""

    code: UploadErrorCode


class FileTypeError(UploadError):
    status_code = 400
    error_type = ErrorType.FILE_TYPE_ERROR
    code = UploadErrorCode.FILE_TYPE_ERROR
    default_message = "Only image files are allowed!"


class FileSizeError(UploadError):
    status_code = 413
    error_type = ErrorType.FILE_SIZE_ERROR
    code = UploadErrorCode.LIMIT_FILE_SIZE
    default_message = "File size too large"


class FileCountError(UploadError):
    status_code = 413
    error_type = ErrorType.FILE_COUNT_ERROR
    code = UploadErrorCode.LIMIT_FILE_COUNT
    default_message = "Too many files"


class CredentialsError(AppError):
    """Raised when an upstream service is called without credentials."""

    status_code = 500
    error_type = ErrorType.CREDENTIALS_ERROR
    default_message = "Service credentials not configured"


class InternalError(AppError):
    """Catch-all for unexpected failures. Message is redacted in production."""

    status_code = 500
    error_type = ErrorType.SERVER_ERROR
    expose_message = False


class UpstreamServiceError(InternalError):
    """Raised when a collaborator (directory, transcription, OCR) fails."""

    def __init__(self, service: str, message: Optional[str] = None, **details: Any):
        self.service = service
        super().__init__(message or f"{service} request failed", **details)


class MissingDependencyError(AppError):
    """Raised at startup when a required runtime dependency is unavailable."""


# Untagged exceptions raised by Google client libraries carry this marker
GOOGLE_CREDENTIALS_MARKER = "GOOGLE_APPLICATION_CREDENTIALS"


def classify_error(exc: BaseException) -> AppError:
    """
    Map any exception to a tagged variant.

    Tagged errors are returned unchanged. Untagged exceptions become
    ``InternalError`` unless they are Google credential failures.

    Args:
        exc: Exception caught at the API boundary

    Returns:
        AppError carrying status code and error type
    """
    if isinstance(exc, AppError):
        return exc

    message = str(exc) or exc.__class__.__name__
    if GOOGLE_CREDENTIALS_MARKER in message:
        return CredentialsError("Google Vision API credentials not configured")

    error = InternalError(message)
    error.__cause__ = exc
    return error
