"""Interface layer errors.

Every error response carries ``{"detail": {"key": ..., "message": ...}}`` so
clients can branch on the key without parsing messages.
"""

import logfire
from fastapi import HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError as PydanticValidationError

from cinema.domain.error import (
    DomainError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)


def error_detail(key: str, message: str) -> dict[str, str]:
    return {"key": key, "message": message}


def unauthenticated(message: str = "Authentication required") -> HTTPException:
    """401 for a missing, expired or invalid auth token."""
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=error_detail("unauthenticated", message),
    )


def to_http_exception(error: Exception) -> HTTPException:
    """Map a domain or input validation error to an HTTP error.

    Args:
        error: Error raised by a use case or while building its request

    Returns:
        HTTPException with a keyed detail payload
    """
    if isinstance(error, NotFoundError):
        code = status.HTTP_404_NOT_FOUND
    elif isinstance(error, NotAuthorizedError):
        code = status.HTTP_403_FORBIDDEN
    elif isinstance(error, (ValidationError, PydanticValidationError, ValueError)):
        code = status.HTTP_422_UNPROCESSABLE_CONTENT
    else:
        code = status.HTTP_400_BAD_REQUEST

    if isinstance(error, DomainError):
        key = error.key
    elif code == status.HTTP_422_UNPROCESSABLE_CONTENT:
        key = ValidationError.key
    else:
        key = DomainError.key

    if isinstance(error, PydanticValidationError):
        message = "; ".join(
            f"{'.'.join(str(p) for p in e['loc'])}: {e['msg']}" for e in error.errors()
        )
    else:
        message = str(error)

    return HTTPException(status_code=code, detail=error_detail(key, message))


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Render FastAPI request validation failures with the keyed payload."""
    logfire.warn(
        "Request validation failed", path=request.url.path, errors=str(exc.errors())
    )
    message = "; ".join(
        f"{'.'.join(str(p) for p in e['loc'])}: {e['msg']}" for e in exc.errors()
    )
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_CONTENT,
        content={"detail": error_detail(ValidationError.key, message)},
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log unexpected failures and return a generic 500.

    Runs in the outermost middleware, after the request session has been
    rolled back.
    """
    logfire.error(
        "Unhandled error",
        path=request.url.path,
        method=request.method,
        error=str(exc),
        error_type=type(exc).__name__,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": error_detail("internalError", "Something went wrong")},
    )
