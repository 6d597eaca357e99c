"""SQLAlchemy implementations of the role entity repositories."""

import logging
from typing import Any, Generic, TypeVar
from uuid import UUID

from sqlalchemy import select

from hrm_identity.domain.role_entities import (
    Admin,
    AdminRepository,
    Employee,
    EmployeeRepository,
    SuperAdmin,
    SuperAdminRepository,
)
from hrm_identity.infrastructure.persistence.sqlalchemy.models import (
    AdminModel,
    EmployeeModel,
    SuperAdminModel,
)
from hrm_identity.infrastructure.persistence.sqlalchemy.store import SessionRepository

logger = logging.getLogger(__name__)

E = TypeVar("E")


class _RoleEntityRepositorySQLAlchemy(SessionRepository, Generic[E]):
    """Lookup and upsert shared by every role entity collection."""

    model_class: Any
    entity_name: str

    async def find_by_id(self, entity_id: UUID) -> E | None:
        model = await self._find_model_by_id(entity_id)
        return self._map_to_domain(model) if model else None

    async def save(self, entity: E) -> None:
        existing = await self._find_model_by_id(entity.id)  # type: ignore[attr-defined]

        if existing:
            self._update_model(existing, entity)
        else:
            self._session.add(self._map_to_model(entity))
            logger.info("Created %s: %s", self.entity_name, entity.id)  # type: ignore[attr-defined]

        await self._flush(f"save {self.entity_name}")

    async def delete(self, entity_id: UUID) -> None:
        model = await self._find_model_by_id(entity_id)
        if model:
            await self._delete_model(model, f"delete {self.entity_name}")
            logger.info("Deleted %s: %s", self.entity_name, entity_id)

    async def _find_model_by_id(self, entity_id: UUID) -> Any:
        stmt = select(self.model_class).where(self.model_class.id == entity_id)
        result = await self._execute(stmt, f"find {self.entity_name} by id")
        return result.scalar_one_or_none()

    def _map_to_domain(self, model: Any) -> E:
        raise NotImplementedError

    def _map_to_model(self, entity: E) -> Any:
        raise NotImplementedError

    def _update_model(self, model: Any, entity: E) -> None:
        raise NotImplementedError


class EmployeeRepositorySQLAlchemy(
    _RoleEntityRepositorySQLAlchemy[Employee],
    EmployeeRepository,
):
    model_class = EmployeeModel
    entity_name = "employee"

    def _map_to_domain(self, model: EmployeeModel) -> Employee:
        return Employee(
            id=model.id,
            company_id=model.company_id,
            first_name=model.first_name,
            last_name=model.last_name,
            email=model.email,
            emp_code=model.emp_code,
            department=model.department,
            designation=model.designation,
        )

    def _map_to_model(self, entity: Employee) -> EmployeeModel:
        return EmployeeModel(
            id=entity.id,
            company_id=entity.company_id,
            first_name=entity.first_name,
            last_name=entity.last_name,
            email=entity.email,
            emp_code=entity.emp_code,
            department=entity.department,
            designation=entity.designation,
        )

    def _update_model(self, model: EmployeeModel, entity: Employee) -> None:
        model.company_id = entity.company_id
        model.first_name = entity.first_name
        model.last_name = entity.last_name
        model.email = entity.email
        model.emp_code = entity.emp_code
        model.department = entity.department
        model.designation = entity.designation


class AdminRepositorySQLAlchemy(
    _RoleEntityRepositorySQLAlchemy[Admin],
    AdminRepository,
):
    model_class = AdminModel
    entity_name = "admin"

    def _map_to_domain(self, model: AdminModel) -> Admin:
        return Admin(
            id=model.id,
            company_id=model.company_id,
            first_name=model.first_name,
            last_name=model.last_name,
            email=model.email,
            user_name=model.user_name,
            permissions=tuple(model.permissions),
        )

    def _map_to_model(self, entity: Admin) -> AdminModel:
        return AdminModel(
            id=entity.id,
            company_id=entity.company_id,
            first_name=entity.first_name,
            last_name=entity.last_name,
            email=entity.email,
            user_name=entity.user_name,
            permissions=list(entity.permissions),
        )

    def _update_model(self, model: AdminModel, entity: Admin) -> None:
        model.company_id = entity.company_id
        model.first_name = entity.first_name
        model.last_name = entity.last_name
        model.email = entity.email
        model.user_name = entity.user_name
        model.permissions = list(entity.permissions)


class SuperAdminRepositorySQLAlchemy(
    _RoleEntityRepositorySQLAlchemy[SuperAdmin],
    SuperAdminRepository,
):
    model_class = SuperAdminModel
    entity_name = "super admin"

    def _map_to_domain(self, model: SuperAdminModel) -> SuperAdmin:
        return SuperAdmin(
            id=model.id,
            first_name=model.first_name,
            last_name=model.last_name,
            email=model.email,
            permissions=tuple(model.permissions),
        )

    def _map_to_model(self, entity: SuperAdmin) -> SuperAdminModel:
        return SuperAdminModel(
            id=entity.id,
            first_name=entity.first_name,
            last_name=entity.last_name,
            email=entity.email,
            permissions=list(entity.permissions),
        )

    def _update_model(self, model: SuperAdminModel, entity: SuperAdmin) -> None:
        model.first_name = entity.first_name
        model.last_name = entity.last_name
        model.email = entity.email
        model.permissions = list(entity.permissions)
