"""Resolution of a user's weak role reference to its profile record."""

import logging

from hrm_identity.domain.role_entities import (
    AdminRepository,
    EmployeeRepository,
    RoleEntity,
    RoleEntityRepository,
    SuperAdminRepository,
)
from hrm_identity.domain.user import (
    AdminRef,
    EmployeeRef,
    RoleEntityNotFoundError,
    RoleEntityRef,
    SuperAdminRef,
    UnknownRoleError,
    User,
)

logger = logging.getLogger(__name__)


class EntityResolver:
    """
    Maps a user's ``(role, role_entity_id)`` to the concrete role entity.

    This is the only component that knows which collection a role lives
    in. Dispatch is over the closed set of typed references; a role tag
    outside that set raises UnknownRoleError and a reference to a record
    that no longer exists raises RoleEntityNotFoundError.
    """

    def __init__(
        self,
        employee_repository: EmployeeRepository,
        admin_repository: AdminRepository,
        super_admin_repository: SuperAdminRepository,
    ):
        self._employee_repo = employee_repository
        self._admin_repo = admin_repository
        self._super_admin_repo = super_admin_repository

    async def resolve(self, user: User) -> RoleEntity:
        ref = user.role_entity_ref
        entity = await self._repository_for(ref).find_by_id(ref.id)

        if entity is None:
            logger.debug(
                "Dangling %s reference on user %s: %s",
                ref.role.value,
                user.id,
                ref.id,
            )
            raise RoleEntityNotFoundError(ref.role.value, ref.id)

        return entity

    def _repository_for(self, ref: RoleEntityRef) -> RoleEntityRepository:
        if isinstance(ref, EmployeeRef):
            return self._employee_repo
        if isinstance(ref, AdminRef):
            return self._admin_repo
        if isinstance(ref, SuperAdminRef):
            return self._super_admin_repo
        raise UnknownRoleError(type(ref).__name__)
