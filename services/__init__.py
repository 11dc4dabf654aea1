"""
Service Layer - Business logic behind the API routes.

Services depend on interfaces only; implementations are injected by the
container in core/container.py.
"""

from .extraction import ExtractService
from .transcript import TranscriptService
from .upload import UploadStager, sweep_stale_uploads

__all__ = [
    "ExtractService",
    "TranscriptService",
    "UploadStager",
    "sweep_stale_uploads",
]
