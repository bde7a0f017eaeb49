"""Error envelope for the HTTP interface.

Error bodies are either `{"msg": ...}` or
`{"errors": [{"msg": ..., "param": ..., "location": ...}]}`.
"""

from typing import Any

import logfire
from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

SERVER_ERROR = {"msg": "Server error"}


def message(msg: str) -> dict[str, str]:
    """Single-message error body."""
    return {"msg": msg}


def field_errors(*errors: dict[str, str]) -> dict[str, list[dict[str, str]]]:
    """Field error list body."""
    return {"errors": list(errors)}


def http_error(status_code: int, msg: str) -> HTTPException:
    """HTTPException carrying a `{"msg"}` body."""
    return HTTPException(status_code=status_code, detail=message(msg))


def server_error() -> HTTPException:
    """HTTPException for unexpected failures."""
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=SERVER_ERROR
    )


def _format_validation_error(error: dict[str, Any]) -> dict[str, str]:
    loc = [str(part) for part in error.get("loc", ())]
    location = loc[0] if loc else "body"
    param = loc[-1] if len(loc) > 1 else location
    return {"msg": error.get("msg", "Invalid value"), "param": param, "location": location}


def register_error_handlers(app: FastAPI) -> None:
    """Register global exception handlers."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        errors = [_format_validation_error(error) for error in exc.errors()]
        logfire.warn(
            "Request validation failed",
            path=request.url.path,
            params=[e["param"] for e in errors],
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST, content=field_errors(*errors)
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        content = exc.detail if isinstance(exc.detail, dict) else message(str(exc.detail))
        return JSONResponse(
            status_code=exc.status_code,
            content=content,
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(
        request: Request, exc: Exception
    ) -> JSONResponse:
        logfire.error(
            "Unhandled exception",
            path=request.url.path,
            error=str(exc),
            error_type=type(exc).__name__,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=SERVER_ERROR
        )
