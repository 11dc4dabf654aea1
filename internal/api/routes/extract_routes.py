"""
Extract Routes - podcast info from uploaded player screenshots.

POST /api/extract accepts multipart uploads under the ``screenshots`` field.
Uploads are staged on disk only for the duration of the request.
"""

from fastapi import APIRouter, Depends, Request
from starlette.datastructures import UploadFile  # type: ignore

from core.dependencies import (
    get_extract_service_dependency,
    get_upload_stager_dependency,
)
from internal.api.error_handlers import tagged_errors
from internal.api.schemas.common_schemas import ErrorEnvelope, SuccessEnvelope
from internal.api.utils import success_response
from services.extraction import ExtractService
from services.upload import UploadStager

router = APIRouter(prefix="/api", tags=["Extract"])


@router.post(
    "/extract",
    response_model=SuccessEnvelope,
    summary="Extract podcast info from screenshots",
    description="Upload up to 5 images (10MB each) in the `screenshots` field",
    operation_id="extract_screenshots",
    responses={
        400: {"model": ErrorEnvelope, "description": "No files, or a non-image file"},
        413: {"model": ErrorEnvelope, "description": "File too large or too many files"},
        500: {"model": ErrorEnvelope, "description": "OCR failure or missing credentials"},
    },
)
async def extract(
    request: Request,
    stager: UploadStager = Depends(get_upload_stager_dependency),
    service: ExtractService = Depends(get_extract_service_dependency),
):
    """
    Extract podcast info from each screenshot.

    **Returns:**
    One result per file, in upload order:
    `{episodeTitle, podcastTitle, timestamp, candidates, rawText}`.
    """
    async with request.form() as form:
        uploads = [
            value
            for value in form.getlist(stager.field_name)
            if isinstance(value, UploadFile)
        ]
        request.state.audit_body = {
            stager.field_name: [upload.filename for upload in uploads]
        }

        with tagged_errors():
            async with stager.stage(uploads) as staged_files:
                results = await service.extract_all(staged_files)

    return success_response(results)
