"""
API Errors - one exception class per failure the API reports.

Every error renders as JSON with an "error" message; some add
"details" (validation issues) or "raw" (unparseable AI output).
Handlers are registered on the app by register_exception_handlers().
"""

import logging
from typing import Any, Dict, Iterable, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.requests import ClientDisconnect

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """Base class - subclasses set status_code and a default message."""

    status_code: int = 500
    message: str = "Unexpected error"

    def __init__(self, message: Optional[str] = None, **extra: Any):
        self.message = message or self.message
        self.extra = extra
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        body = {"error": self.message}
        body.update({k: v for k, v in self.extra.items() if v is not None})
        return body


class ValidationFailed(ApiError):
    status_code = 400
    message = "Invalid input"


class Unauthenticated(ApiError):
    status_code = 401
    message = "Invalid token"


class InvalidCredentials(ApiError):
    status_code = 401
    message = "Invalid email or password"


class DuplicateEmail(ApiError):
    status_code = 409
    message = "Email already exists"


class NotFound(ApiError):
    status_code = 404
    message = "User not found"


class PrerequisiteMissing(ApiError):
    status_code = 400
    message = "A required step has not been completed"


class AIConfigurationError(ApiError):
    status_code = 500
    message = "OpenAI API key not configured"


class UpstreamFailure(ApiError):
    status_code = 502
    message = "OpenAI request failed"


class EmptyAIResponse(UpstreamFailure):
    message = "AI returned an empty response"


class MalformedAIResponse(UpstreamFailure):
    message = "AI returned non-JSON output"


class AISchemaViolation(UpstreamFailure):
    message = "AI output did not match expected schema"


# ============================================================
# VALIDATION DETAIL FORMATTING
# ============================================================

def flatten_errors(errors: Iterable[dict]) -> Dict[str, Any]:
    """
    Group pydantic errors by top-level field.

    Output:
    {
        "formErrors": ["..."],                # errors not tied to a field
        "fieldErrors": {"age": ["..."], ...}
    }
    """
    form_errors = []
    field_errors: Dict[str, list] = {}

    for err in errors:
        loc = [part for part in err.get("loc", ()) if part not in ("body", "query")]
        if loc:
            field_errors.setdefault(str(loc[0]), []).append(err.get("msg", "Invalid value"))
        else:
            form_errors.append(err.get("msg", "Invalid value"))

    return {"formErrors": form_errors, "fieldErrors": field_errors}


# ============================================================
# HANDLERS
# ============================================================

async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    error = ValidationFailed(details=flatten_errors(exc.errors()))
    return JSONResponse(status_code=error.status_code, content=error.to_dict())


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None)
    )


async def client_disconnect_handler(request: Request, exc: ClientDisconnect) -> Response:
    # Nobody is listening for the reply.
    logger.debug("Client disconnected during %s %s", request.method, request.url.path)
    return Response(status_code=400)


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"error": str(exc) or "Unexpected error"})


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(ClientDisconnect, client_disconnect_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
