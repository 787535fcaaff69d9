"""Domain errors raised by services and translated to HTTP responses.

Authorization failures (not the owner, not an admin) answer 401 rather than
403; clients of this API depend on that status.
"""

import logging
from dataclasses import asdict, dataclass

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Violation:
    """One failed validation rule."""

    field: str
    msg: str


class ApiError(Exception):
    status_code = 500

    def __init__(self, msg: str):
        super().__init__(msg)
        self.msg = msg

    def body(self) -> dict:
        return {"msg": self.msg}


class ValidationError(ApiError):
    status_code = 400

    def __init__(self, violations: list[Violation]):
        super().__init__("; ".join(v.msg for v in violations))
        self.violations = violations

    def body(self) -> dict:
        return {"errors": [asdict(v) for v in self.violations]}


class NotFoundError(ApiError):
    status_code = 404


class ForbiddenError(ApiError):
    status_code = 401


class AuthenticationError(ApiError):
    status_code = 401


class ConflictError(ApiError):
    status_code = 400


def _field_path(loc: tuple) -> str:
    # Drop the "body" prefix FastAPI puts on body errors
    parts = [str(p) for p in loc if p != "body"]
    return ".".join(parts) or "body"


def violations_from_pydantic(errors: list[dict]) -> list[Violation]:
    return [Violation(field=_field_path(e.get("loc", ())), msg=e.get("msg", "Invalid value")) for e in errors]


async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.body())


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    err = ValidationError(violations_from_pydantic(exc.errors()))
    return JSONResponse(status_code=err.status_code, content=err.body())


async def unexpected_error_handler(request: Request, exc: Exception) -> PlainTextResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return PlainTextResponse("Server error", status_code=500)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unexpected_error_handler)
