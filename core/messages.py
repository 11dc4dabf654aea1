"""Centralized error and log message templates for the Podcast Snippet API."""


class ErrorMessages:
    """Centralized error message templates."""

    # Request validation
    MISSING_REQUIRED_FIELDS = "Missing required fields"
    PODCAST_INFO_NOT_FOUND = "Podcast or episode information not found"
    AUDIO_URL_REQUIRED = "Audio URL is required"
    INVALID_TIME_RANGE = "timeRange.end must be greater than timeRange.start"
    INVALID_TIMESTAMP = "Invalid timestamp: {timestamp}"
    INVALID_JSON = "Request body must be valid JSON"

    # Lookup
    AUDIO_URL_NOT_FOUND = "Audio URL not found for this episode"
    ROUTE_NOT_FOUND = "Route not found"

    # Method
    METHOD_NOT_ALLOWED = "Method not allowed"

    # Uploads
    NO_FILES_UPLOADED = "No files uploaded"
    FILE_TYPE_NOT_ALLOWED = "Only image files are allowed!"
    FILE_TOO_LARGE = "File size too large. Maximum size is {max}MB."
    TOO_MANY_FILES = "Too many files. Maximum is {max} files."

    # Generic
    INTERNAL_SERVER_ERROR = "Internal server error"

    # Credentials
    ASSEMBLYAI_KEY_MISSING = "AssemblyAI API key not configured"
    GOOGLE_CREDENTIALS_MISSING = "Google Vision API credentials not configured"

    # Collaborators
    ITUNES_LOOKUP_FAILED = "iTunes lookup failed: HTTP {status_code}"
    ASSEMBLYAI_REQUEST_FAILED = "AssemblyAI request failed: HTTP {status_code}"
    TRANSCRIPTION_FAILED = "Transcription failed: {error}"
    TRANSCRIPTION_TIMED_OUT = "Transcription timed out after {attempts} polling attempts"
    TRANSCRIPT_NOT_FOUND = "Transcript not found: {transcript_id}"
    VISION_REQUEST_FAILED = "Vision API request failed: HTTP {status_code}"
    VISION_RESPONSE_ERROR = "Vision API error: {error}"
    FILE_PROCESSING_FAILED = "Failed to process {filename}: {error}"

    # Client wrapper
    CLIENT_TIMEOUT = "Request timed out - server took too long to respond"
    CLIENT_HTTP_ERROR = "HTTP error! status: {status_code}, message: {body}"


class LogMessages:
    """Centralized log message templates."""

    # Requests
    TRANSCRIPT_REQUEST = "Processing transcript request"
    TRANSCRIPT_AUDIO_RESOLVED = "Resolved episode audio URL"
    TRANSCRIPT_COMPLETE = "Transcript snippet retrieved"
    EXTRACT_REQUEST = "Extract request received"
    EXTRACT_FILE = "Processing file {current}/{total}: {filename}"
    EXTRACT_FILE_DONE = "File {index} processed"
    EXTRACT_COMPLETE = "All files processed"

    # Uploads
    UPLOAD_ACCEPTED = "Upload staged"
    UPLOAD_REJECTED = "Upload rejected"
    UPLOAD_CLEANUP = "Removed {count} staged upload(s)"
    UPLOAD_SWEEP = "Swept {count} stale staged upload(s) from {path}"
    UPLOAD_CLEANUP_FAILED = "Failed to remove staged upload {path}: {error}"

    # Errors
    ERROR_OCCURRED = "Error occurred"

    # Collaborators
    INIT_HTTP_CLIENT = "Created HTTP client with connection pooling for {service}"
    ITUNES_LOOKUP = "iTunes lookup for id={lookup_id}"
    ASSEMBLYAI_SUBMITTED = "Transcription job submitted with ID: {transcript_id}"
    ASSEMBLYAI_POLL = "Polling attempt {attempt}/{max_attempts}, status: {status}"
    VISION_REQUEST = "Running text detection on {path}"
