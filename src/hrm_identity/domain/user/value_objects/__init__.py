from hrm_identity.domain.user.value_objects.role_entity_ref import (
    AdminRef,
    EmployeeRef,
    RoleEntityRef,
    SuperAdminRef,
    parse_role,
    role_entity_ref_for,
)
from hrm_identity.domain.user.value_objects.user_role import UserRole

__all__ = [
    "AdminRef",
    "EmployeeRef",
    "RoleEntityRef",
    "SuperAdminRef",
    "UserRole",
    "parse_role",
    "role_entity_ref_for",
]
