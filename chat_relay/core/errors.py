"""Error taxonomy for the relay and the FastAPI handlers that render it.

Every error leaves the service as ``{"error": "<message>"}``.
"""

from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

MESSAGE_REQUIRED = "message is required (string)"
UPSTREAM_FALLBACK = "Server error calling Gemini API"


class RelayError(Exception):
    status_code = 500

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class ChatValidationError(RelayError):
    status_code = 400


class UpstreamError(RelayError):
    status_code = 500


class StartupError(RuntimeError):
    """Raised when the process cannot start serving, e.g. no API key."""


def error_message(exc: BaseException, fallback: str = UPSTREAM_FALLBACK) -> str:
    # google-genai APIError carries the upstream text on `.message`
    message = exc.__dict__.get("message")
    if isinstance(message, str) and message:
        return message
    return str(exc) or fallback


async def relay_error_handler(request: Request, exc: RelayError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    # Only an unreadable body (invalid JSON, not an object) gets here.
    return JSONResponse(status_code=400, content={"error": MESSAGE_REQUIRED})


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RelayError, relay_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
