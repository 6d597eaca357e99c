"""Role entities: the profile records behind a user's role."""

from hrm_identity.domain.role_entities.entities import (
    DEFAULT_ADMIN_PERMISSIONS,
    DEFAULT_SUPER_ADMIN_PERMISSIONS,
    Admin,
    Employee,
    RoleEntity,
    SuperAdmin,
)
from hrm_identity.domain.role_entities.repositories import (
    AdminRepository,
    EmployeeRepository,
    RoleEntityRepository,
    SuperAdminRepository,
)

__all__ = [
    "DEFAULT_ADMIN_PERMISSIONS",
    "DEFAULT_SUPER_ADMIN_PERMISSIONS",
    "Admin",
    "AdminRepository",
    "Employee",
    "EmployeeRepository",
    "RoleEntity",
    "RoleEntityRepository",
    "SuperAdmin",
    "SuperAdminRepository",
]
