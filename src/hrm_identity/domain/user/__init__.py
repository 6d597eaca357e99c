"""User domain: the generic login identity of a person.

This domain handles:
- User aggregate (email, user name, role tag, weak role entity reference)
- The closed set of roles and their typed references
- The repository contract for user persistence
"""

from hrm_identity.domain.user.aggregates import User
from hrm_identity.domain.user.exceptions import (
    RoleEntityNotFoundError,
    UnknownRoleError,
    UserNameTakenError,
    UserNotFoundError,
)
from hrm_identity.domain.user.repositories import UserRepository
from hrm_identity.domain.user.value_objects import (
    AdminRef,
    EmployeeRef,
    RoleEntityRef,
    SuperAdminRef,
    UserRole,
    parse_role,
    role_entity_ref_for,
)

__all__ = [
    "AdminRef",
    "EmployeeRef",
    "RoleEntityNotFoundError",
    "RoleEntityRef",
    "SuperAdminRef",
    "UnknownRoleError",
    "User",
    "UserNameTakenError",
    "UserNotFoundError",
    "UserRepository",
    "UserRole",
    "parse_role",
    "role_entity_ref_for",
]
