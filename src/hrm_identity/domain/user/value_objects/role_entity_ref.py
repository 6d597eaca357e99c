"""Typed weak references from a user to its role-specific profile record.

A user stores only ``(role, role_entity_id)``. This module turns that pair
into one variant of a closed tagged union, so that every consumer
dispatches on a concrete type instead of on a free-form string. Unknown
role tags are rejected here rather than resolving to nothing.
"""

from dataclasses import dataclass
from typing import ClassVar, Union
from uuid import UUID

from hrm_identity.domain.user.exceptions import UnknownRoleError
from hrm_identity.domain.user.value_objects.user_role import UserRole


@dataclass(frozen=True)
class EmployeeRef:
    """Reference to a record in the employees collection."""

    id: UUID
    role: ClassVar[UserRole] = UserRole.EMPLOYEE


@dataclass(frozen=True)
class AdminRef:
    """Reference to a record in the admins collection."""

    id: UUID
    role: ClassVar[UserRole] = UserRole.ADMIN


@dataclass(frozen=True)
class SuperAdminRef:
    """Reference to a record in the super admins collection."""

    id: UUID
    role: ClassVar[UserRole] = UserRole.SUPER_ADMIN


RoleEntityRef = Union[EmployeeRef, AdminRef, SuperAdminRef]

_REF_TYPES: dict[UserRole, type[RoleEntityRef]] = {
    UserRole.EMPLOYEE: EmployeeRef,
    UserRole.ADMIN: AdminRef,
    UserRole.SUPER_ADMIN: SuperAdminRef,
}


def parse_role(role: Union[str, UserRole]) -> UserRole:
    """Parse a stored role tag, rejecting anything outside the closed set."""
    try:
        return UserRole(role)
    except ValueError as e:
        raise UnknownRoleError(str(role)) from e


def role_entity_ref_for(role: Union[str, UserRole], entity_id: UUID) -> RoleEntityRef:
    """Build the typed reference for a ``(role, id)`` pair."""
    return _REF_TYPES[parse_role(role)](entity_id)
