"""
API utility functions for unified response formatting.

All responses follow one of two envelopes:
    {"success": true, "data": Any}
    {"success": false, "error": {"message": str, "type": str}}
"""

from typing import Any, Dict, Optional

from fastapi.responses import JSONResponse


def success_response(data: Any = None) -> Dict[str, Any]:
    """
    Create a success envelope.

    Example:
        >>> success_response({"text": "hello"})
        {"success": True, "data": {"text": "hello"}}
    """
    return {"success": True, "data": data}


def error_response(message: str, error_type: Optional[str] = None) -> Dict[str, Any]:
    """
    Create an error envelope. ``type`` is omitted when not given.

    Example:
        >>> error_response("Audio URL not found for this episode", "NOT_FOUND")
        {"success": False, "error": {"message": "...", "type": "NOT_FOUND"}}
    """
    error: Dict[str, Any] = {"message": message}
    if error_type is not None:
        error["type"] = error_type
    return {"success": False, "error": error}


def json_error_response(
    message: str,
    status_code: int = 500,
    error_type: Optional[str] = None,
) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=error_response(message=message, error_type=error_type),
    )
