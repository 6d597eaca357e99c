"""Repository interfaces for role entities."""

from abc import ABC, abstractmethod
from typing import Generic, Optional, TypeVar
from uuid import UUID

from hrm_identity.domain.role_entities.entities import Admin, Employee, SuperAdmin

E = TypeVar("E")


class RoleEntityRepository(ABC, Generic[E]):
    """Repository for one role entity collection."""

    @abstractmethod
    async def find_by_id(self, entity_id: UUID) -> Optional[E]:
        """Find a record by its ID."""

    @abstractmethod
    async def save(self, entity: E) -> None:
        """Create or update a record."""

    @abstractmethod
    async def delete(self, entity_id: UUID) -> None:
        """Delete a record by ID. Users pointing to it are left untouched."""


class EmployeeRepository(RoleEntityRepository[Employee], ABC):
    """Repository for employee records."""


class AdminRepository(RoleEntityRepository[Admin], ABC):
    """Repository for admin records."""


class SuperAdminRepository(RoleEntityRepository[SuperAdmin], ABC):
    """Repository for super admin records."""
