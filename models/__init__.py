"""
Models Layer - Domain models shared by services and infrastructure.

API request/response DTOs live in internal/api/schemas.
"""

from .staged_file import StagedFile
from .transcript_window import TranscriptWindow, parse_timestamp

__all__ = [
    "StagedFile",
    "TranscriptWindow",
    "parse_timestamp",
]
