# mediaforge/services/api/errors.py
from __future__ import annotations

from http import HTTPStatus

from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from mediaforge.common.logging import get_logger
from mediaforge.domain.errors import MediaError

logger = get_logger()

# Bytes of tool output appended to an error body.
MAX_DETAIL_CHARS = 4000


def media_http_error(action: str, exc: MediaError) -> HTTPException:
    """Map a tagged engine failure to an HTTPException with a plain-text body."""
    body = f"{action} failed: {exc}"
    if exc.detail:
        body = f"{body}\n{exc.detail[-MAX_DETAIL_CHARS:]}"
    if exc.http_status >= HTTPStatus.INTERNAL_SERVER_ERROR:
        logger.warning("%s failed [%s]: %s", action, exc.tag, exc)
    return HTTPException(status_code=exc.http_status, detail=body)


def _format_validation_errors(exc: RequestValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(x) for x in err.get("loc", ()) if x != "body")
        parts.append(f"{loc}: {err.get('msg')}" if loc else str(err.get("msg")))
    return "Invalid request: " + "; ".join(parts)


def register_exception_handlers(app: FastAPI) -> None:
    """Errors are returned as text/plain; validation problems are 400s."""

    @app.exception_handler(StarletteHTTPException)
    async def _http_exception(request: Request, exc: StarletteHTTPException) -> PlainTextResponse:
        return PlainTextResponse(str(exc.detail), status_code=exc.status_code, headers=getattr(exc, "headers", None))

    @app.exception_handler(RequestValidationError)
    async def _validation_exception(request: Request, exc: RequestValidationError) -> PlainTextResponse:
        return PlainTextResponse(_format_validation_errors(exc), status_code=HTTPStatus.BAD_REQUEST)
