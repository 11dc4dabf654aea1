"""
Transcript Routes - transcript snippets for podcast episodes.

All responses use the unified envelopes:
    {"success": true, "data": {...}}
    {"success": false, "error": {"message": str, "type": str}}

Endpoints:
- POST /api/transcript - Transcript around a timestamp of a validated episode
- OPTIONS /api/transcript - CORS preflight (200, empty body)
- POST /api/transcript/generate - Transcript of a raw audio URL
- GET /api/transcript/status/{transcript_id} - Transcription job status

Other methods on /api/transcript are answered with 405 before the body is read.
"""

from typing import Optional

from fastapi import APIRouter, Body, Depends, Request, Response

from core.constants import CORS_ALLOW_HEADERS, CORS_ALLOW_METHODS, CORS_ALLOW_ORIGINS
from core.dependencies import get_transcript_service_dependency
from core.errors import ValidationError
from core.messages import ErrorMessages
from internal.api.error_handlers import tagged_errors
from internal.api.schemas.common_schemas import ErrorEnvelope, SuccessEnvelope
from internal.api.schemas.transcript_schemas import (
    GenerateTranscriptRequest,
    TranscriptRequest,
)
from internal.api.utils import success_response
from services.transcript import TranscriptService

router = APIRouter(prefix="/api/transcript", tags=["Transcript"])

ERROR_RESPONSES = {
    400: {"model": ErrorEnvelope, "description": "Missing or malformed input"},
    404: {"model": ErrorEnvelope, "description": "No audio URL for the episode"},
    405: {"model": ErrorEnvelope, "description": "Method not allowed"},
    500: {"model": ErrorEnvelope, "description": "Collaborator or server failure"},
}


@router.post(
    "",
    response_model=SuccessEnvelope,
    summary="Get transcript snippet",
    description="Resolve the episode audio and transcribe the window around a timestamp",
    operation_id="get_transcript",
    responses=ERROR_RESPONSES,
)
async def get_transcript(
    request: Request,
    body: Optional[TranscriptRequest] = Body(default=None),
    service: TranscriptService = Depends(get_transcript_service_dependency),
):
    """
    Get the transcript snippet for an episode.

    **Request Body:**
    - `podcastInfo`: `{validatedPodcast, validatedEpisode}` from the validation step
    - `timestamp`: Seconds or `MM:SS` / `HH:MM:SS`
    - `timeRange`: Optional `{start, end}` in seconds

    **Returns:**
    The transcription payload, passed through unmodified.
    """
    if body is None:
        raise ValidationError(ErrorMessages.MISSING_REQUIRED_FIELDS)

    request.state.audit_body = body.model_dump(exclude_none=True)

    with tagged_errors():
        result = await service.get_transcript(
            body.podcastInfo, body.timestamp, body.time_range_dict()
        )
    return success_response(result)


@router.options("", include_in_schema=False)
async def transcript_preflight() -> Response:
    """
    Bare OPTIONS request: 200 with an empty body and the CORS headers.

    A browser preflight (``Origin`` plus ``Access-Control-Request-Method``)
    never reaches this route: CORSMiddleware answers it with 200 and a plain
    ``OK`` body.
    """
    return Response(
        status_code=200,
        headers={
            "Access-Control-Allow-Origin": ", ".join(CORS_ALLOW_ORIGINS),
            "Access-Control-Allow-Methods": ", ".join(CORS_ALLOW_METHODS),
            "Access-Control-Allow-Headers": ", ".join(CORS_ALLOW_HEADERS),
        },
    )


@router.post(
    "/generate",
    response_model=SuccessEnvelope,
    summary="Transcribe audio URL",
    operation_id="generate_transcript",
    responses=ERROR_RESPONSES,
)
async def generate_transcript(
    request: Request,
    body: Optional[GenerateTranscriptRequest] = Body(default=None),
    service: TranscriptService = Depends(get_transcript_service_dependency),
):
    """Transcribe a raw audio URL, optionally limited to `[startTime, endTime]`."""
    body = body or GenerateTranscriptRequest()
    request.state.audit_body = body.model_dump(exclude_none=True)

    with tagged_errors():
        result = await service.generate_transcript(
            body.audioUrl, body.startTime, body.endTime
        )
    return success_response(result)


@router.get(
    "/status/{transcript_id}",
    response_model=SuccessEnvelope,
    summary="Transcription job status",
    operation_id="get_transcript_status",
    responses=ERROR_RESPONSES,
)
async def get_transcript_status(
    transcript_id: str,
    service: TranscriptService = Depends(get_transcript_service_dependency),
):
    with tagged_errors():
        result = await service.get_transcript_status(transcript_id)
    return success_response(result)
