"""Translation of domain errors into HTTP responses.

Routes let domain errors propagate; the handlers registered here turn
them into status codes once, for the whole app. Field-level problems use
the ``{"errors": {field: message}}`` body.
"""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError

from conduit.domain.error import (
    NotAuthenticatedError,
    NotAuthorizedError,
    NotFoundError,
    ValidationFailedError,
)
from conduit.util.jwt import JWTError

# Unique constraint name -> request field it guards
UNIQUE_CONSTRAINT_FIELDS = {
    "uq_users_username": "username",
    "uq_users_email": "email",
    "uq_articles_slug": "slug",
}


def _errors(errors: dict[str, str], status_code: int) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"errors": errors})


async def handle_not_found(request: Request, exc: NotFoundError) -> JSONResponse:
    """404 for slugs, ids and usernames that do not resolve."""
    return _errors({exc.resource.lower(): "not found"}, status.HTTP_404_NOT_FOUND)


async def handle_not_authenticated(request: Request, exc: Exception) -> JSONResponse:
    """401 for missing, invalid or expired tokens."""
    return _errors({"token": str(exc)}, status.HTTP_401_UNAUTHORIZED)


async def handle_not_authorized(
    request: Request, exc: NotAuthorizedError
) -> JSONResponse:
    """403 when the acting user does not own the resource."""
    return _errors({exc.resource: "forbidden"}, status.HTTP_403_FORBIDDEN)


async def handle_validation_failed(
    request: Request, exc: ValidationFailedError
) -> JSONResponse:
    """422 with the per-field messages."""
    return _errors(exc.errors, status.HTTP_422_UNPROCESSABLE_ENTITY)


async def handle_request_validation(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """422 for malformed request bodies and parameters.

    Each error is keyed by the last element of its location, so
    ``("body", "article", "title")`` becomes ``"title"``.
    """
    errors: dict[str, str] = {}
    for error in exc.errors():
        loc = error.get("loc") or ("body",)
        errors.setdefault(str(loc[-1]), error.get("msg", "is invalid"))
    logfire.warn("Request validation failed", path=request.url.path, errors=errors)
    return _errors(errors, status.HTTP_422_UNPROCESSABLE_ENTITY)


async def handle_integrity_error(
    request: Request, exc: IntegrityError
) -> JSONResponse:
    """422 when a write loses a race on a unique column.

    The services check uniqueness first, so this only fires when two
    requests claim the same username, email or slug concurrently.
    """
    message = str(exc.orig)
    for constraint, field in UNIQUE_CONSTRAINT_FIELDS.items():
        if constraint in message:
            logfire.warn("Unique constraint violated", constraint=constraint)
            return _errors(
                {field: "is already taken"}, status.HTTP_422_UNPROCESSABLE_ENTITY
            )
    logfire.warn("Integrity error", error=message)
    return _errors({"record": "is invalid"}, status.HTTP_422_UNPROCESSABLE_ENTITY)


def register_error_handlers(app: FastAPI) -> None:
    """Register all domain error handlers on the app."""
    app.add_exception_handler(NotFoundError, handle_not_found)
    app.add_exception_handler(NotAuthenticatedError, handle_not_authenticated)
    app.add_exception_handler(JWTError, handle_not_authenticated)
    app.add_exception_handler(NotAuthorizedError, handle_not_authorized)
    app.add_exception_handler(ValidationFailedError, handle_validation_failed)
    app.add_exception_handler(RequestValidationError, handle_request_validation)
    app.add_exception_handler(IntegrityError, handle_integrity_error)
