"""Pydantic schemas for API requests and responses."""

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
from hrm.presentation.api.schemas.companies import (
    CompanyLoginRequest,
    CompanyLoginResponse,
    CompanyRegisterRequest,
    CompanyResponse,
    ModulePermissionsSchema,
)

__all__ = [
    # Auth
    "ChangePasswordRequest",
    "LoginRequest",
    "LoginResponse",
    "MessageResponse",
    "ProfileResponse",
    "RegisterRequest",
    "UpdateProfileRequest",
    "UserResponse",
    "role_entity_data",
    # Companies
    "CompanyLoginRequest",
    "CompanyLoginResponse",
    "CompanyRegisterRequest",
    "CompanyResponse",
    "ModulePermissionsSchema",
]
