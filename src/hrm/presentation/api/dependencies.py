"""FastAPI dependency injection for the HRM API.

Provides dependencies for:
- Settings and shared services held on ``app.state``
- Database sessions
- Authentication (current principal from the bearer token)
- Service instances
"""

import logging
from typing import Annotated, AsyncGenerator

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from hrm_auth import InvalidTokenError, JWTService, PasswordHashingService
from hrm_config.settings import Settings
from hrm_identity import AuthenticationService, EntityResolver, PrincipalContext
from hrm_identity.infrastructure.persistence.sqlalchemy import (
    AdminRepositorySQLAlchemy,
    CompanyRepositorySQLAlchemy,
    EmployeeRepositorySQLAlchemy,
    SuperAdminRepositorySQLAlchemy,
    UserRepositorySQLAlchemy,
)

logger = logging.getLogger(__name__)

# Security scheme for JWT Bearer tokens
security = HTTPBearer(auto_error=False)


# -----------------------------------------------------------------------------
# Application state
# -----------------------------------------------------------------------------


def get_app_settings(request: Request) -> Settings:
    """Settings the running application was created with."""
    return request.app.state.settings


def get_jwt_service(request: Request) -> JWTService:
    return request.app.state.jwt_service


def get_password_service(request: Request) -> PasswordHashingService:
    return request.app.state.password_service


SettingsDep = Annotated[Settings, Depends(get_app_settings)]


# -----------------------------------------------------------------------------
# Database Session
# -----------------------------------------------------------------------------


async def get_db_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """
    Database session dependency.

    Opens one session per request from the application's session maker and
    closes it on every exit path.

    Yields
    ------
    AsyncSession for database operations
    """
    async with request.app.state.session_maker() as session:
        yield session


# Type alias for injected session
DBSession = Annotated[AsyncSession, Depends(get_db_session)]


# -----------------------------------------------------------------------------
# Authentication Services
# -----------------------------------------------------------------------------


async def get_authentication_service(
    session: DBSession,
    settings: SettingsDep,
    jwt_service: JWTService = Depends(get_jwt_service),
    password_service: PasswordHashingService = Depends(get_password_service),
) -> AuthenticationService:
    """
    Get authentication service with all dependencies.

    Every repository shares the request's session and the configured store
    timeout.
    """
    timeout = settings.store_timeout_seconds

    entity_resolver = EntityResolver(
        employee_repository=EmployeeRepositorySQLAlchemy(session, timeout),
        admin_repository=AdminRepositorySQLAlchemy(session, timeout),
        super_admin_repository=SuperAdminRepositorySQLAlchemy(session, timeout),
    )

    return AuthenticationService(
        user_repository=UserRepositorySQLAlchemy(session, timeout),
        company_repository=CompanyRepositorySQLAlchemy(session, timeout),
        entity_resolver=entity_resolver,
        password_service=password_service,
        jwt_service=jwt_service,
    )


# Type alias for injected auth service
AuthService = Annotated[AuthenticationService, Depends(get_authentication_service)]


# -----------------------------------------------------------------------------
# Current Principal (JWT Authentication)
# -----------------------------------------------------------------------------


async def get_current_principal(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
    jwt_service: JWTService = Depends(get_jwt_service),
) -> PrincipalContext:
    """
    FastAPI dependency to get the current authenticated principal.

    Raises
    ------
    HTTPException
        401 if the token is missing, invalid or expired
    """
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
            headers={"WWW-Authenticate": "Bearer"},
        )

    try:
        payload = jwt_service.verify(credentials.credentials)
    except InvalidTokenError as e:
        logger.warning("Rejected bearer token: %s", e)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=e.message,
            headers={"WWW-Authenticate": "Bearer"},
        ) from e

    return PrincipalContext.from_token(payload)


CurrentPrincipal = Annotated[PrincipalContext, Depends(get_current_principal)]


async def get_current_user(principal: CurrentPrincipal) -> PrincipalContext:
    """Like get_current_principal, but only for user tokens."""
    if principal.is_company:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Endpoint is only available to users",
        )
    return principal


CurrentUser = Annotated[PrincipalContext, Depends(get_current_user)]
