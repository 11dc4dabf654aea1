"""
Exception handlers producing the unified error envelope.

Every failure that reaches the API boundary is classified into a tagged
``AppError`` variant, logged with its request context, and answered with
``{"success": false, "error": {"message", "type"}}``.
"""

import traceback
from contextlib import contextmanager
from typing import Any, Iterator, Optional

from fastapi import FastAPI, Request  # type: ignore
from fastapi.exceptions import RequestValidationError  # type: ignore
from fastapi.responses import JSONResponse  # type: ignore
from starlette.exceptions import HTTPException as StarletteHTTPException  # type: ignore

from core.config import Settings, get_settings
from core.errors import (
    AppError,
    FileSizeError,
    InternalError,
    MethodNotAllowedError,
    NotFoundError,
    ValidationError,
    classify_error,
)
from core.messages import ErrorMessages, LogMessages
from interfaces.app_logger import IAppLogger
from internal.api.utils import json_error_response


def _format_stack(exc: BaseException) -> str:
    source = exc.__cause__ or exc
    return "".join(
        traceback.format_exception(type(source), source, source.__traceback__)
    )


def _app_logger(request: Request) -> IAppLogger:
    app_logger = getattr(request.app.state, "app_logger", None)
    if app_logger is None:
        from core.container import get_app_logger

        app_logger = get_app_logger()
    return app_logger


def _settings(request: Request) -> Settings:
    return getattr(request.app.state, "settings", None) or get_settings()


def _validation_message(exc: RequestValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        parts.append(f"{location}: {error.get('msg')}" if location else str(error.get("msg")))
    return "; ".join(parts) or ErrorMessages.INVALID_JSON


def _from_http_exception(exc: StarletteHTTPException) -> AppError:
    if exc.status_code == 404:
        return NotFoundError(ErrorMessages.ROUTE_NOT_FOUND)
    if exc.status_code == 405:
        return MethodNotAllowedError(ErrorMessages.METHOD_NOT_ALLOWED)
    if exc.status_code == 413:
        return FileSizeError(str(exc.detail))
    if exc.status_code < 500:
        return ValidationError(str(exc.detail))
    return InternalError(str(exc.detail))


def build_error_response(
    request: Request, exc: BaseException, body: Any = None
) -> JSONResponse:
    """
    Classify, log and render an exception as an error envelope.

    Args:
        request: Request being answered
        exc: Exception raised while handling it
        body: Request body to include in the log entry, if captured
    """
    error = classify_error(exc)
    settings = _settings(request)

    if body is None:
        body = getattr(request.state, "audit_body", None)

    _app_logger(request).error(
        LogMessages.ERROR_OCCURRED,
        error=error.message,
        error_type=error.error_type.value,
        status_code=error.status_code,
        stack=_format_stack(exc),
        url=str(request.url),
        method=request.method,
        user_agent=request.headers.get("user-agent"),
        body=body,
    )

    message = error.message
    if settings.is_production and not error.expose_message:
        message = ErrorMessages.INTERNAL_SERVER_ERROR

    return json_error_response(
        message=message,
        status_code=error.status_code,
        error_type=error.error_type.value,
    )


def register_exception_handlers(
    app: FastAPI,
    app_logger: Optional[IAppLogger] = None,
    settings: Optional[Settings] = None,
) -> None:
    """
    Install the envelope-producing exception handlers on ``app``.

    Args:
        app: Application to configure
        app_logger: Logger used for error entries (resolved from the container if omitted)
        settings: Settings deciding production redaction (cached settings if omitted)
    """
    app.state.app_logger = app_logger
    app.state.settings = settings

    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError):
        return build_error_response(request, exc)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        error = ValidationError(_validation_message(exc))
        return build_error_response(request, error, body=exc.body)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return build_error_response(request, _from_http_exception(exc))

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        return build_error_response(request, exc)


@contextmanager
def tagged_errors() -> Iterator[None]:
    """
    Re-raise untagged exceptions from the wrapped block as ``AppError`` variants.

    Usage in routes:
        with tagged_errors():
            result = await service.get_transcript(...)
    """
    try:
        yield
    except AppError:
        raise
    except Exception as e:
        raise classify_error(e) from e
