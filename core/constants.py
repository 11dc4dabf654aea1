"""Constants for the Podcast Snippet API."""

from enum import Enum


class ErrorType(str, Enum):
    VALIDATION_ERROR = "VALIDATION_ERROR"
    NOT_FOUND = "NOT_FOUND"
    METHOD_NOT_ALLOWED = "METHOD_NOT_ALLOWED"
    FILE_SIZE_ERROR = "FILE_SIZE_ERROR"
    FILE_COUNT_ERROR = "FILE_COUNT_ERROR"
    FILE_TYPE_ERROR = "FILE_TYPE_ERROR"
    CREDENTIALS_ERROR = "CREDENTIALS_ERROR"
    SERVER_ERROR = "SERVER_ERROR"


class UploadErrorCode(str, Enum):
    """Codes signalled by the upload stage, named after the multipart limits."""

    FILE_TYPE_ERROR = "FILE_TYPE_ERROR"
    LIMIT_FILE_SIZE = "LIMIT_FILE_SIZE"
    LIMIT_FILE_COUNT = "LIMIT_FILE_COUNT"


class TranscriptJobStatus(str, Enum):
    """AssemblyAI transcript job states."""

    QUEUED = "queued"
    PROCESSING = "processing"
    COMPLETED = "completed"
    ERROR = "error"


# =============================================================================
# Upload Constants
# =============================================================================

ACCEPTED_MIME_PREFIX = "image/"

# Read uploads in 1 MiB chunks while enforcing the size limit
UPLOAD_CHUNK_SIZE = 1024 * 1024

# Random suffix range for staged file names
UPLOAD_SUFFIX_MAX = 10**9


# =============================================================================
# HTTP Client Constants
# =============================================================================

# Connection pool limits shared by collaborator clients
HTTP_MAX_KEEPALIVE_CONNECTIONS = 10
HTTP_MAX_CONNECTIONS = 20
HTTP_KEEPALIVE_EXPIRY = 30.0

# Timeout configuration for collaborator calls (in seconds)
HTTP_CONNECT_TIMEOUT = 10.0
HTTP_READ_TIMEOUT = 60.0
HTTP_WRITE_TIMEOUT = 30.0  # screenshot uploads to OCR can be several MB
HTTP_POOL_TIMEOUT = 5.0

# Client wrapper: /extract may run OCR on five images
CLIENT_EXTRACT_TIMEOUT = 60.0
CLIENT_DEFAULT_TIMEOUT = 30.0

USER_AGENT = "PodcastSnippet/1.0"


# =============================================================================
# CORS
# =============================================================================

CORS_ALLOW_ORIGINS = ["*"]
CORS_ALLOW_METHODS = ["GET", "POST", "PUT", "DELETE", "OPTIONS"]
CORS_ALLOW_HEADERS = ["Content-Type", "Authorization"]
