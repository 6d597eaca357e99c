"""Company router: registration and the company login entry point."""

import logging

from fastapi import APIRouter, status

from hrm.presentation.api.dependencies import AuthService, DBSession, SettingsDep
from hrm.presentation.api.routers.auth import (
    SECONDS_PER_DAY,
    commit_login_side_effects,
)
from hrm.presentation.api.schemas.companies import (
    CompanyLoginRequest,
    CompanyLoginResponse,
    CompanyRegisterRequest,
    CompanyResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Register a company",
    responses={
        201: {"description": "Company registered successfully"},
        400: {"description": "Invalid input (weak password)"},
        409: {"description": "Email already registered"},
    },
)
async def register_company(
    request: CompanyRegisterRequest,
    auth_service: AuthService,
    session: DBSession,
) -> CompanyResponse:
    permissions = (
        request.module_permissions.to_domain() if request.module_permissions else None
    )
    try:
        company = await auth_service.register_company(
            email=request.email,
            company_name=request.company_name,
            password=request.password,
            module_permissions=permissions,
        )
        await session.commit()
    except Exception:
        await session.rollback()
        raise

    return CompanyResponse.from_company(company)


@router.post(
    "/login",
    summary="Authenticate company",
    responses={
        200: {"description": "Login successful"},
        401: {"description": "Invalid credentials"},
        503: {"description": "Credential store unavailable"},
    },
)
async def login_company(
    request: CompanyLoginRequest,
    auth_service: AuthService,
    session: DBSession,
    settings: SettingsDep,
) -> CompanyLoginResponse:
    """
    Authenticate a company with its own email and password.

    Companies have a login of their own; user credentials are never tried
    here.
    """
    result = await auth_service.login_company(
        email=request.email,
        password=request.password,
    )
    await commit_login_side_effects(session)

    return CompanyLoginResponse(
        token=result.access_token,
        expires_in=settings.jwt_token_expire_days * SECONDS_PER_DAY,
        company=CompanyResponse.from_company(result.company),
    )
