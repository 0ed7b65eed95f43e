"""
Error taxonomy and JSON error payloads.

Every failure that can end a request is one of these. The normalizer's
fallback path is not an error and never raises.
"""
import logging
import traceback
from typing import Any, Dict, Optional

from fastapi import Request, status
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class ResumeAceError(Exception):
    """Base class for request-terminating failures."""
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class ValidationError(ResumeAceError):
    """Missing file or field, wrong MIME type, oversized upload."""
    status_code = status.HTTP_400_BAD_REQUEST


class ExtractionError(ResumeAceError):
    """PDF unreadable or yields no text."""
    status_code = status.HTTP_422_UNPROCESSABLE_ENTITY


class GenerationError(ResumeAceError):
    """Transport, quota or model failure from the LLM provider."""
    status_code = status.HTTP_502_BAD_GATEWAY


class ConfigError(ResumeAceError):
    """Invalid or incomplete startup configuration."""


def format_details(exc: BaseException) -> str:
    return "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))


def error_payload(message: str, details: Optional[str] = None, envelope: bool = False) -> Dict[str, Any]:
    """
    Build the JSON error body.

    Args:
        message: Human readable error message
        details: Internal detail, only passed in development mode
        envelope: Wrap in the {success: false, ...} shape used by the text route
    """
    payload: Dict[str, Any] = {"error": message}
    if envelope:
        payload = {"success": False, **payload}
    if details is not None:
        payload["details"] = details
    return payload


def _show_details(request: Request) -> bool:
    settings = getattr(request.app.state, "settings", None)
    return bool(settings and settings.is_development)


async def resume_ace_error_handler(request: Request, exc: ResumeAceError) -> JSONResponse:
    logger.error(
        f"{type(exc).__name__} on {request.method} {request.url.path}: {exc.message}",
        exc_info=exc if exc.status_code >= 500 else None,
    )
    details = format_details(exc) if _show_details(request) else None
    return JSONResponse(status_code=exc.status_code, content=error_payload(exc.message, details))


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}", exc_info=exc)
    details = format_details(exc) if _show_details(request) else None
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_payload("Internal server error", details),
    )
