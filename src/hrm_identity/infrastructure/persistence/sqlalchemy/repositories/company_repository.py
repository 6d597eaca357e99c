"""SQLAlchemy implementation of CompanyRepository."""

import logging
from datetime import datetime
from typing import Union
from uuid import UUID

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError

from hrm_identity.domain.company import Company, CompanyRepository, ModulePermissions
from hrm_identity.domain.shared import (
    Email,
    EmailAlreadyExistsError,
    ensure_tz_aware,
    normalize_email,
)
from hrm_identity.infrastructure.persistence.sqlalchemy.models import CompanyModel
from hrm_identity.infrastructure.persistence.sqlalchemy.store import SessionRepository

logger = logging.getLogger(__name__)


class CompanyRepositorySQLAlchemy(SessionRepository, CompanyRepository):
    """SQLAlchemy implementation of the CompanyRepository interface."""

    async def find_by_id(self, company_id: UUID) -> Company | None:
        model = await self._find_model_by_id(company_id)
        return self._map_to_domain(model) if model else None

    async def find_by_email(self, email: Union[str, Email]) -> Company | None:
        email_value = email.value if isinstance(email, Email) else normalize_email(email)

        stmt = select(CompanyModel).where(CompanyModel.email == email_value)
        result = await self._execute(stmt, "find company by email")
        model = result.scalar_one_or_none()
        return self._map_to_domain(model) if model else None

    async def exists_by_email(self, email: Union[str, Email]) -> bool:
        return await self.find_by_email(email) is not None

    async def fetch_password_hash(self, company_id: UUID) -> str | None:
        stmt = select(CompanyModel.password_hash).where(CompanyModel.id == company_id)
        result = await self._execute(stmt, "load company password hash")
        return result.scalar_one_or_none()

    async def save(self, company: Company) -> None:
        existing = await self._find_model_by_id(company.id)

        if existing is None and not company.password_changed:
            msg = f"Company {company.id} cannot be created without a password"
            raise ValueError(msg)

        try:
            if existing:
                self._update_model(existing, company)
                logger.debug("Updated company: %s", company.id)
            else:
                self._session.add(self._map_to_model(company))
                logger.info(
                    "Created company: %s (email: %s)",
                    company.id,
                    company.email,
                )

            await self._flush("save company")
        except IntegrityError as e:
            raise EmailAlreadyExistsError(company.email) from e

        company.mark_password_persisted()

    async def update_last_login(self, company_id: UUID, at: datetime) -> None:
        stmt = (
            update(CompanyModel)
            .where(CompanyModel.id == company_id)
            .values(last_login_at=at)
        )
        await self._execute(stmt, "update company last login")

    async def delete(self, company_id: UUID) -> None:
        model = await self._find_model_by_id(company_id)
        if model:
            await self._delete_model(model, "delete company")
            logger.info("Deleted company: %s", company_id)

    async def _find_model_by_id(self, company_id: UUID) -> CompanyModel | None:
        stmt = select(CompanyModel).where(CompanyModel.id == company_id)
        result = await self._execute(stmt, "find company by id")
        return result.scalar_one_or_none()

    def _map_to_domain(self, model: CompanyModel) -> Company:
        return Company.reconstitute(
            id=model.id,
            email=model.email,
            company_name=model.company_name,
            module_permissions=ModulePermissions(
                hrm=model.module_hrm,
                crm=model.module_crm,
                recruitment=model.module_recruitment,
            ),
            is_active=model.is_active,
            last_login_at=(
                ensure_tz_aware(model.last_login_at) if model.last_login_at else None
            ),
            created_at=ensure_tz_aware(model.created_at),
            updated_at=ensure_tz_aware(model.updated_at),
        )

    def _map_to_model(self, company: Company) -> CompanyModel:
        permissions = company.module_permissions
        return CompanyModel(
            id=company.id,
            email=company.email,
            company_name=company.company_name,
            password_hash=company.pending_password_hash,
            module_hrm=permissions.hrm,
            module_crm=permissions.crm,
            module_recruitment=permissions.recruitment,
            is_active=company.is_active,
            last_login_at=company.last_login_at,
            created_at=company.created_at,
            updated_at=company.updated_at,
        )

    def _update_model(self, model: CompanyModel, company: Company) -> None:
        permissions = company.module_permissions
        model.email = company.email
        model.company_name = company.company_name
        model.module_hrm = permissions.hrm
        model.module_crm = permissions.crm
        model.module_recruitment = permissions.recruitment
        model.is_active = company.is_active
        model.updated_at = company.updated_at
        if company.password_changed:
            model.password_hash = company.pending_password_hash
