"""Centralized exception handlers for the FastAPI application.

Identity and auth exceptions are mapped to HTTP responses with a
consistent error format.

Error Response Format:
    {
        "detail": "Human-readable error message",
        "code": "MACHINE_READABLE_ERROR_CODE"
    }

Usage:
    from hrm.presentation.api.exception_handlers import setup_exception_handlers

    app = FastAPI()
    setup_exception_handlers(app)
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from hrm_auth import (
    InvalidCredentialsError,
    InvalidTokenError,
    TokenExpiredError,
    WeakPasswordError,
)
from hrm_identity import (
    CompanyNotFoundError,
    DuplicateKeyError,
    EmailAlreadyExistsError,
    InvalidEmailError,
    RoleEntityNotFoundError,
    StoreUnavailableError,
    UnknownRoleError,
    UserNameTakenError,
    UserNotFoundError,
)

logger = logging.getLogger(__name__)


# =============================================================================
# Exception to HTTP Status Mapping
# =============================================================================

# Most specific classes first; the first isinstance match wins.
EXCEPTION_MAPPING: list[tuple[type[Exception], int, str]] = [
    # 401 Unauthorized
    (InvalidCredentialsError, status.HTTP_401_UNAUTHORIZED, "INVALID_CREDENTIALS"),
    (TokenExpiredError, status.HTTP_401_UNAUTHORIZED, "TOKEN_EXPIRED"),
    (InvalidTokenError, status.HTTP_401_UNAUTHORIZED, "INVALID_TOKEN"),
    # 400 Bad Request
    (WeakPasswordError, status.HTTP_400_BAD_REQUEST, "WEAK_PASSWORD"),
    (InvalidEmailError, status.HTTP_400_BAD_REQUEST, "INVALID_EMAIL"),
    # 404 Not Found
    (UserNotFoundError, status.HTTP_404_NOT_FOUND, "USER_NOT_FOUND"),
    (CompanyNotFoundError, status.HTTP_404_NOT_FOUND, "COMPANY_NOT_FOUND"),
    # 409 Conflict
    (EmailAlreadyExistsError, status.HTTP_409_CONFLICT, "EMAIL_ALREADY_EXISTS"),
    (UserNameTakenError, status.HTTP_409_CONFLICT, "USER_NAME_TAKEN"),
    (DuplicateKeyError, status.HTTP_409_CONFLICT, "DUPLICATE_KEY"),
    # 422 Unprocessable Entity
    (
        RoleEntityNotFoundError,
        status.HTTP_422_UNPROCESSABLE_ENTITY,
        "ROLE_ENTITY_NOT_FOUND",
    ),
    # 503 Service Unavailable
    (StoreUnavailableError, status.HTTP_503_SERVICE_UNAVAILABLE, "STORE_UNAVAILABLE"),
]


def _create_error_response(
    status_code: int,
    message: str,
    code: str,
) -> JSONResponse:
    """Create a standardized error response."""
    return JSONResponse(
        status_code=status_code,
        content={
            "detail": message,
            "code": code,
        },
    )


def _resolve(exc: Exception) -> tuple[int, str]:
    for exc_type, status_code, code in EXCEPTION_MAPPING:
        if isinstance(exc, exc_type):
            return status_code, code
    return status.HTTP_400_BAD_REQUEST, "BAD_REQUEST"


def _message_for(exc: Exception) -> str:
    if isinstance(exc, StoreUnavailableError):
        # Internal description stays in the logs
        return "Service temporarily unavailable. Please try again later."
    return getattr(exc, "message", None) or str(exc)


def setup_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the FastAPI application.

    Parameters
    ----------
    app
        The FastAPI application instance
    """

    async def mapped_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """Handle identity and auth exceptions with a structured response."""
        status_code, code = _resolve(exc)

        logger.warning(
            "%s on %s %s: %s (code=%s)",
            type(exc).__name__,
            request.method,
            request.url.path,
            exc,
            code,
        )

        return _create_error_response(
            status_code=status_code,
            message=_message_for(exc),
            code=code,
        )

    for exc_type, _, _ in EXCEPTION_MAPPING:
        app.add_exception_handler(exc_type, mapped_exception_handler)

    @app.exception_handler(UnknownRoleError)
    async def unknown_role_handler(
        request: Request,
        exc: UnknownRoleError,
    ) -> JSONResponse:
        """A stored role tag outside the known set is data corruption."""
        logger.error(
            "Stored user carries unknown role %r on %s %s",
            exc.role,
            request.method,
            request.url.path,
        )
        return _create_error_response(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            message="User record is inconsistent. Contact an administrator.",
            code="UNKNOWN_ROLE",
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """Handle unhandled exceptions with consistent error format."""
        logger.exception(
            "Unhandled exception on %s %s: %s",
            request.method,
            request.url.path,
            exc,
        )
        return _create_error_response(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            message="An internal error occurred",
            code="INTERNAL_ERROR",
        )
