"""Rendering of pipeline failures into client error responses.

This is the only place where a ``LangException`` becomes an HTTP status and a
JSON body. Pipelines raise; the handler renders.
"""

from typing import Any, Optional, Protocol

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, Response

from modelgateway.core.config import get_config
from modelgateway.core.error_types import MESSAGE_INTERNAL
from modelgateway.core.exceptions import ErrorKind, LangException
from modelgateway.core.logging import get_logger

logger = get_logger()


class ExceptionHandling(Protocol):
    """Converts a language exception into a standardized client error response."""

    def handle_exception(self, exception: LangException) -> Response: ...


class DefaultExceptionHandler:
    """Render errors as ``{"error": {"message", "type", "code"}}``."""

    def __init__(self, expose_detail: Optional[bool] = None) -> None:
        self._expose_detail = expose_detail

    @property
    def expose_detail(self) -> bool:
        if self._expose_detail is None:
            return get_config().expose_error_detail
        return self._expose_detail

    def build_body(self, exception: LangException) -> dict[str, Any]:
        """Build the JSON error body for an exception."""
        message = exception.message
        if exception.kind == ErrorKind.INTERNAL and not self.expose_detail:
            message = MESSAGE_INTERNAL

        error: dict[str, Any] = {
            "message": message,
            "type": exception.error_type,
            "code": exception.status_code,
        }
        if self.expose_detail and exception.detail is not None:
            error["detail"] = exception.detail
        return {"error": error}

    def handle_exception(self, exception: LangException) -> Response:
        status_code = exception.status_code
        if status_code >= 500:
            logger.error(
                f"{exception.kind.value} error ({status_code}): {exception.message}"
                + (f" | detail: {exception.detail}" if exception.detail is not None else "")
            )
        else:
            logger.warning(
                f"{exception.kind.value} error ({status_code}): {exception.message}"
            )
        return JSONResponse(content=self.build_body(exception), status_code=status_code)


def register_exception_handlers(
    app: FastAPI, handler: Optional[ExceptionHandling] = None
) -> ExceptionHandling:
    """Install ``handler`` on ``app`` for every ``LangException``.

    Returns the handler in use so callers can keep a reference to it.
    """
    handler = handler or DefaultExceptionHandler()

    async def _lang_exception_handler(request: Request, exc: LangException) -> Response:
        return handler.handle_exception(exc)

    app.add_exception_handler(LangException, _lang_exception_handler)
    return handler
