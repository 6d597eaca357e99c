"""Authentication router for user registration, login and profile."""

import logging

from fastapi import APIRouter, HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from hrm.presentation.api.dependencies import (
    AuthService,
    CurrentPrincipal,
    CurrentUser,
    DBSession,
    SettingsDep,
)
from hrm.presentation.api.schemas.auth import (
    ChangePasswordRequest,
    LoginRequest,
    LoginResponse,
    MessageResponse,
    ProfileResponse,
    RegisterRequest,
    UpdateProfileRequest,
    UserResponse,
    role_entity_data,
)
from hrm_identity import UnknownRoleError

logger = logging.getLogger(__name__)

router = APIRouter()

SECONDS_PER_DAY = 24 * 60 * 60


async def commit_login_side_effects(session: AsyncSession) -> None:
    """Commit the last-login update without failing an accepted login."""
    try:
        await session.commit()
    except SQLAlchemyError as e:
        logger.warning("Could not commit last login update: %s", e)
        await session.rollback()


@router.post(
    "/register",
    status_code=status.HTTP_201_CREATED,
    summary="Register the login of a role entity",
    responses={
        201: {"description": "User registered successfully"},
        400: {"description": "Invalid input (weak password)"},
        404: {"description": "Company not found"},
        409: {"description": "Email or user name already registered"},
        422: {"description": "Unknown role or missing role entity"},
    },
)
async def register(
    request: RegisterRequest,
    auth_service: AuthService,
    session: DBSession,
) -> UserResponse:
    """
    Create the user for an existing employee, admin or super admin record.

    The password is hashed once and never returned.
    """
    try:
        user = await auth_service.register_user(
            email=request.email,
            user_name=request.user_name,
            password=request.password,
            role=request.role,
            role_entity_id=request.role_entity_id,
            company_id=request.company_id,
            first_name=request.first_name,
            last_name=request.last_name,
            mobile=request.mobile,
        )
        await session.commit()
    except UnknownRoleError as e:
        await session.rollback()
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=str(e),
        ) from e
    except Exception:
        await session.rollback()
        raise

    return UserResponse.from_user(user)


@router.post(
    "/login",
    summary="Authenticate user",
    responses={
        200: {"description": "Login successful"},
        401: {"description": "Invalid credentials"},
        500: {"description": "Stored user carries an unknown role"},
        503: {"description": "Credential store unavailable"},
    },
)
async def login(
    request: LoginRequest,
    auth_service: AuthService,
    session: DBSession,
    settings: SettingsDep,
) -> LoginResponse:
    """
    Authenticate with email and password.

    Returns a bearer token, the user and its role entity. ``user_data`` is
    null when the role entity could not be found.
    """
    result = await auth_service.login(
        email=request.email,
        password=request.password,
    )
    await commit_login_side_effects(session)

    return LoginResponse(
        token=result.access_token,
        expires_in=settings.jwt_token_expire_days * SECONDS_PER_DAY,
        user=UserResponse.from_user(result.principal),
        user_data=role_entity_data(result.role_entity),
    )


@router.get(
    "/profile",
    summary="Get current user's profile",
    responses={
        200: {"description": "Current user and role entity"},
        401: {"description": "Not authenticated"},
        404: {"description": "User no longer exists"},
    },
)
async def get_profile(
    principal: CurrentUser,
    auth_service: AuthService,
) -> ProfileResponse:
    result = await auth_service.get_profile(principal.principal_id)
    return ProfileResponse(
        user=UserResponse.from_user(result.principal),
        user_data=role_entity_data(result.role_entity),
    )


@router.put(
    "/profile",
    summary="Update current user's profile",
    responses={
        200: {"description": "Updated user and role entity"},
        401: {"description": "Not authenticated"},
        409: {"description": "User name already taken"},
        422: {"description": "Field too short or too long"},
    },
)
async def update_profile(
    request: UpdateProfileRequest,
    principal: CurrentUser,
    auth_service: AuthService,
    session: DBSession,
) -> ProfileResponse:
    """
    Edit user name, first and last name or mobile number.

    Omitted fields are left unchanged.
    """
    try:
        result = await auth_service.update_profile(
            user_id=principal.principal_id,
            user_name=request.user_name,
            first_name=request.first_name,
            last_name=request.last_name,
            mobile=request.mobile,
        )
        await session.commit()
    except Exception:
        await session.rollback()
        raise

    return ProfileResponse(
        user=UserResponse.from_user(result.principal),
        user_data=role_entity_data(result.role_entity),
    )


@router.put(
    "/change-password",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Change password",
    responses={
        204: {"description": "Password changed successfully"},
        400: {"description": "New password too weak"},
        401: {"description": "Current password incorrect or not authenticated"},
    },
)
async def change_password(
    request: ChangePasswordRequest,
    principal: CurrentUser,
    auth_service: AuthService,
    session: DBSession,
) -> None:
    try:
        await auth_service.change_password(
            user_id=principal.principal_id,
            current_password=request.current_password,
            new_password=request.new_password,
        )
        await session.commit()
    except Exception:
        await session.rollback()
        raise


@router.post(
    "/logout",
    summary="Log out",
    responses={
        200: {"description": "Logged out"},
        401: {"description": "Not authenticated"},
    },
)
async def logout(principal: CurrentPrincipal) -> MessageResponse:
    """
    Acknowledge a logout.

    Tokens are stateless; the client discards its token. Nothing is
    revoked on the server.
    """
    logger.info("Principal logged out: %s", principal)
    return MessageResponse(message="Logged out successfully")
