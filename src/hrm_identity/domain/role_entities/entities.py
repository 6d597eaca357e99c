"""Role-specific profile records a user can point to.

Each record type lives in its own collection and is owned by it. Users
reference them weakly, so deleting one never deletes the other.
"""

from dataclasses import dataclass, field
from typing import ClassVar, Union
from uuid import UUID, uuid4

from hrm_identity.domain.user.value_objects import UserRole

DEFAULT_ADMIN_PERMISSIONS = ("read", "write", "delete")
DEFAULT_SUPER_ADMIN_PERMISSIONS = (
    "read",
    "write",
    "delete",
    "manage_admins",
    "system_config",
)


@dataclass(frozen=True)
class Employee:
    company_id: UUID
    first_name: str
    last_name: str
    email: str
    emp_code: str | None = None
    department: str | None = None
    designation: str | None = None
    id: UUID = field(default_factory=uuid4)

    role: ClassVar[UserRole] = UserRole.EMPLOYEE


@dataclass(frozen=True)
class Admin:
    company_id: UUID
    first_name: str
    last_name: str
    email: str
    user_name: str
    permissions: tuple[str, ...] = DEFAULT_ADMIN_PERMISSIONS
    id: UUID = field(default_factory=uuid4)

    role: ClassVar[UserRole] = UserRole.ADMIN

    def has_permission(self, permission: str) -> bool:
        return permission in self.permissions


@dataclass(frozen=True)
class SuperAdmin:
    first_name: str
    last_name: str
    email: str
    permissions: tuple[str, ...] = DEFAULT_SUPER_ADMIN_PERMISSIONS
    id: UUID = field(default_factory=uuid4)

    role: ClassVar[UserRole] = UserRole.SUPER_ADMIN

    def has_permission(self, permission: str) -> bool:
        return permission in self.permissions


RoleEntity = Union[Employee, Admin, SuperAdmin]
