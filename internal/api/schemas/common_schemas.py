"""
Common API schemas shared across different endpoints.

Every response body is exactly one of:
    {"success": true, "data": Any}
    {"success": false, "error": {"message": str, "type": str}}
"""

from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class SuccessEnvelope(BaseModel):
    """Envelope for successful responses."""

    success: Literal[True] = True
    data: Optional[Any] = Field(default=None, description="Response data")

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {"success": True, "data": {"text": "hello"}},
            ]
        }
    )


class ErrorDetail(BaseModel):
    message: str = Field(..., description="Human-readable message")
    type: Optional[str] = Field(default=None, description="Error type, e.g. NOT_FOUND")


class ErrorEnvelope(BaseModel):
    """Envelope for error responses."""

    success: Literal[False] = False
    error: ErrorDetail

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "success": False,
                    "error": {
                        "message": "Audio URL not found for this episode",
                        "type": "NOT_FOUND",
                    },
                },
                {
                    "success": False,
                    "error": {
                        "message": "Too many files. Maximum is 5 files.",
                        "type": "FILE_COUNT_ERROR",
                    },
                },
            ]
        }
    )


class HealthData(BaseModel):
    """Data model for health check response."""

    status: str = Field(..., description="Health status")
    service: str = Field(..., description="Service name")
    version: str = Field(..., description="Service version")
    environment: str = Field(..., description="Deployment environment")
