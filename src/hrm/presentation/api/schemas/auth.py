"""Authentication schemas for request/response models."""

from dataclasses import asdict
from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from hrm_identity import RoleEntity, User

# Match the column sizes of the users table
USER_NAME_MIN_LENGTH = 3
USER_NAME_MAX_LENGTH = 30
NAME_MAX_LENGTH = 50
MOBILE_MAX_LENGTH = 20


class RegisterRequest(BaseModel):
    """Request schema for creating the login of an existing role entity."""

    email: EmailStr = Field(..., description="User's email address")
    user_name: str = Field(
        ...,
        min_length=USER_NAME_MIN_LENGTH,
        max_length=USER_NAME_MAX_LENGTH,
    )
    password: str = Field(..., description="Password (8-128 characters)")
    role: str = Field(..., description="One of employee, admin, super_admin")
    role_entity_id: UUID = Field(..., description="Id of the role's profile record")
    company_id: UUID
    first_name: str | None = Field(default=None, max_length=NAME_MAX_LENGTH)
    last_name: str | None = Field(default=None, max_length=NAME_MAX_LENGTH)
    mobile: str | None = Field(default=None, max_length=MOBILE_MAX_LENGTH)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "email": "jane.doe@example.com",
                "user_name": "jdoe",
                "password": "Secret1!",
                "role": "employee",
                "role_entity_id": "550e8400-e29b-41d4-a716-446655440000",
                "company_id": "7c9e6679-7425-40de-944b-e07fc1f90ae7",
            },
        },
    )


class LoginRequest(BaseModel):
    """Request schema for login.

    The email is a plain string: a malformed address is answered like any
    other unknown one.
    """

    email: str
    password: str

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "email": "jane.doe@example.com",
                "password": "Secret1!",
            },
        },
    )


class ChangePasswordRequest(BaseModel):
    """Request schema for changing a user's password."""

    current_password: str
    new_password: str


class UpdateProfileRequest(BaseModel):
    """Request schema for editing the current user's profile.

    Omitted fields keep their stored value. Email, role and password are
    not editable here.
    """

    user_name: str | None = Field(
        default=None,
        min_length=USER_NAME_MIN_LENGTH,
        max_length=USER_NAME_MAX_LENGTH,
    )
    first_name: str | None = Field(default=None, max_length=NAME_MAX_LENGTH)
    last_name: str | None = Field(default=None, max_length=NAME_MAX_LENGTH)
    mobile: str | None = Field(default=None, max_length=MOBILE_MAX_LENGTH)


class UserResponse(BaseModel):
    """Response schema for user data. Never carries the password."""

    id: UUID
    email: str
    user_name: str
    role: str
    role_entity_id: UUID
    company_id: UUID
    first_name: str | None = None
    last_name: str | None = None
    mobile: str | None = None
    is_active: bool
    last_login_at: datetime | None = None
    created_at: datetime

    @classmethod
    def from_user(cls, user: User) -> "UserResponse":
        return cls(
            id=user.id,
            email=user.email,
            user_name=user.user_name,
            role=user.role_tag,
            role_entity_id=user.role_entity_id,
            company_id=user.company_id,
            first_name=user.first_name,
            last_name=user.last_name,
            mobile=user.mobile,
            is_active=user.is_active,
            last_login_at=user.last_login_at,
            created_at=user.created_at,
        )


def role_entity_data(entity: RoleEntity | None) -> dict[str, Any] | None:
    """Flatten a role entity for the ``user_data`` field of a response."""
    if entity is None:
        return None
    data = asdict(entity)
    data["role"] = entity.role.value
    return data


class LoginResponse(BaseModel):
    """Response schema for a successful user login."""

    token: str
    token_type: str = Field(default="bearer")
    expires_in: int
    user: UserResponse
    user_data: dict[str, Any] | None = Field(
        default=None,
        description="Role entity of the user, null when it could not be found",
    )


class ProfileResponse(BaseModel):
    user: UserResponse
    user_data: dict[str, Any] | None = None


class MessageResponse(BaseModel):
    message: str
