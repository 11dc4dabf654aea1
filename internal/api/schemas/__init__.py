from .common_schemas import ErrorDetail, ErrorEnvelope, HealthData, SuccessEnvelope
from .transcript_schemas import (
    GenerateTranscriptRequest,
    TimeRange,
    TranscriptRequest,
)

__all__ = [
    "ErrorDetail",
    "ErrorEnvelope",
    "HealthData",
    "SuccessEnvelope",
    "GenerateTranscriptRequest",
    "TimeRange",
    "TranscriptRequest",
]
