"""
Health Check API Routes.
"""

from fastapi import APIRouter

from core import get_settings
from core.dependencies import missing_credentials
from internal.api.schemas import HealthData
from internal.api.schemas.common_schemas import SuccessEnvelope
from internal.api.utils import success_response


router = APIRouter(tags=["Health"])


@router.get(
    "/",
    response_model=SuccessEnvelope,
    summary="Root Endpoint",
    description="Get basic API information",
    operation_id="get_root",
)
async def root():
    """
    Root endpoint.

    Returns service name, version, and current status.
    """
    settings = get_settings()
    return success_response(
        {
            "service": settings.app_name,
            "version": settings.app_version,
            "status": "running",
        }
    )


@router.get(
    "/health",
    response_model=SuccessEnvelope,
    summary="Health Check",
    description="Check service health including collaborator configuration",
    operation_id="health_check",
    responses={
        200: {
            "description": "Health status",
            "content": {
                "application/json": {
                    "example": {
                        "success": True,
                        "data": {
                            "status": "healthy",
                            "service": "Podcast Snippet API",
                            "version": "1.0.0",
                            "environment": "development",
                            "missingCredentials": [],
                        },
                    }
                }
            },
        }
    },
)
async def health_check():
    """
    Health check endpoint.

    **Returns:**
    - Overall status: `healthy`, or `degraded` when collaborator credentials are missing
    - Service name, version and environment
    - Names of missing collaborator credentials
    """
    settings = get_settings()
    missing = missing_credentials(settings)

    health = HealthData(
        status="degraded" if missing else "healthy",
        service=settings.app_name,
        version=settings.app_version,
        environment=settings.environment,
    ).model_dump()
    health["missingCredentials"] = missing

    return success_response(health)
