"""Single translation point from failures to ErrorResponse bodies.

Every error leaving the API, whatever layer raised it, goes through
``translate_error`` so that status codes and body shape are decided here only.
"""
import logging
from collections.abc import Sequence
from datetime import datetime, timezone
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from employee_api.api.middleware.request_id import REQUEST_ID_HEADER, request_id_var
from employee_api.core.config import settings
from employee_api.models.dto.common import ErrorResponse

logger = logging.getLogger(__name__)

VALIDATION_FAILED = "Validation failed"
INTERNAL_ERROR = "Internal server error"


def _field_name(loc: Sequence[Any]) -> str:
    # loc is ("body" | "query" | "path", <field>, ...); list indexes are dropped
    parts = [str(p) for p in loc[1:] if isinstance(p, str)]
    if not parts:
        return str(loc[0]) if loc else "request"
    return ".".join(parts)


def field_messages(errors: Sequence[dict[str, Any]]) -> list[str]:
    """One ``"<field>: <message>"`` entry per field, first violation wins."""
    seen: dict[str, str] = {}
    for err in errors:
        field = _field_name(err.get("loc", ()))
        if field in seen:
            continue
        seen[field] = str(err.get("msg", "")).removeprefix("Value error, ")
    return [f"{field}: {msg}" for field, msg in seen.items()]


def translate_error(exc: Exception) -> tuple[int, ErrorResponse]:
    now = datetime.now(timezone.utc)

    if isinstance(exc, RequestValidationError):
        return status.HTTP_400_BAD_REQUEST, ErrorResponse(
            message=VALIDATION_FAILED,
            status=status.HTTP_400_BAD_REQUEST,
            timestamp=now,
            errors=field_messages(exc.errors()),
        )

    if isinstance(exc, StarletteHTTPException):
        return exc.status_code, ErrorResponse(
            message=str(exc.detail) if exc.detail is not None else None,
            status=exc.status_code,
            timestamp=now,
        )

    message = str(exc) if settings.expose_error_details else INTERNAL_ERROR
    return status.HTTP_500_INTERNAL_SERVER_ERROR, ErrorResponse(
        message=message,
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        timestamp=now,
    )


def _to_json_response(exc: Exception) -> JSONResponse:
    status_code, body = translate_error(exc)
    exclude = {"errors"} if body.errors is None else None
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(mode="json", exclude=exclude),
        headers=getattr(exc, "headers", None),
    )


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ) -> JSONResponse:
        logger.info("Validation failed on %s %s", request.method, request.url.path)
        return _to_json_response(exc)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request, exc: StarletteHTTPException,
    ) -> JSONResponse:
        return _to_json_response(exc)

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        # RequestIdMiddleware has already unwound; its id survives on request.state
        request_id = getattr(request.state, "request_id", None)
        token = request_id_var.set(request_id or "")
        try:
            logger.exception(
                "Unhandled exception on %s %s", request.method, request.url.path,
            )
        finally:
            request_id_var.reset(token)

        response = _to_json_response(exc)
        if request_id:
            response.headers[REQUEST_ID_HEADER] = request_id
        return response
