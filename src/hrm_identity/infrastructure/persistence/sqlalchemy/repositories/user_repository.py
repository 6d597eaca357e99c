"""SQLAlchemy implementation of UserRepository."""

import logging
from datetime import datetime
from typing import Union
from uuid import UUID

from sqlalchemy import func, select, update
from sqlalchemy.exc import IntegrityError

from hrm_identity.domain.shared import (
    DuplicateKeyError,
    Email,
    EmailAlreadyExistsError,
    ensure_tz_aware,
    normalize_email,
)
from hrm_identity.domain.user import User, UserNameTakenError, UserRepository
from hrm_identity.infrastructure.persistence.sqlalchemy.models import UserModel
from hrm_identity.infrastructure.persistence.sqlalchemy.store import SessionRepository

logger = logging.getLogger(__name__)


class UserRepositorySQLAlchemy(SessionRepository, UserRepository):
    """SQLAlchemy implementation of the UserRepository interface."""

    async def find_by_id(self, user_id: UUID) -> User | None:
        model = await self._find_model_by_id(user_id)

        if model is None:
            return None

        return self._map_to_domain(model)

    async def find_by_email(self, email: Union[str, Email]) -> User | None:
        email_value = email.value if isinstance(email, Email) else normalize_email(email)

        stmt = select(UserModel).where(UserModel.email == email_value)
        result = await self._execute(stmt, "find user by email")
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._map_to_domain(model)

    async def exists_by_email(self, email: Union[str, Email]) -> bool:
        user = await self.find_by_email(email)
        return user is not None

    async def exists_by_user_name(
        self,
        user_name: str,
        exclude_user_id: UUID | None = None,
    ) -> bool:
        stmt = select(UserModel.id).where(UserModel.user_name == user_name.strip())
        if exclude_user_id is not None:
            stmt = stmt.where(UserModel.id != exclude_user_id)
        result = await self._execute(stmt, "find user by user name")
        return result.first() is not None

    async def fetch_password_hash(self, user_id: UUID) -> str | None:
        stmt = select(UserModel.password_hash).where(UserModel.id == user_id)
        result = await self._execute(stmt, "load user password hash")
        return result.scalar_one_or_none()

    async def save(self, user: User) -> None:
        existing = await self._find_model_by_id(user.id)

        if existing is None and not user.password_changed:
            msg = f"User {user.id} cannot be created without a password"
            raise ValueError(msg)

        try:
            if existing:
                self._update_model(existing, user)
                logger.debug("Updated user: %s", user.id)
            else:
                model = self._map_to_model(user)
                self._session.add(model)
                logger.info("Created user: %s (email: %s)", user.id, user.email)

            await self._flush("save user")
        except IntegrityError as e:
            raise self._duplicate_error(user, e) from e

        user.mark_password_persisted()

    async def update_last_login(self, user_id: UUID, at: datetime) -> None:
        stmt = (
            update(UserModel)
            .where(UserModel.id == user_id)
            .values(last_login_at=at)
        )
        await self._execute(stmt, "update user last login")

    async def delete(self, user_id: UUID) -> None:
        model = await self._find_model_by_id(user_id)

        if model:
            await self._delete_model(model, "delete user")
            logger.info("Deleted user: %s", user_id)

    async def count(self) -> int:
        stmt = select(func.count()).select_from(UserModel)
        result = await self._execute(stmt, "count users")
        return result.scalar_one()

    async def _find_model_by_id(self, user_id: UUID) -> UserModel | None:
        stmt = select(UserModel).where(UserModel.id == user_id)
        result = await self._execute(stmt, "find user by id")
        return result.scalar_one_or_none()

    def _duplicate_error(self, user: User, error: IntegrityError) -> DuplicateKeyError:
        if "user_name" in str(error.orig):
            return UserNameTakenError(user.user_name)
        return EmailAlreadyExistsError(user.email)

    def _map_to_domain(self, model: UserModel) -> User:
        return User.reconstitute(
            id=model.id,
            email=model.email,
            user_name=model.user_name,
            role=model.role,
            role_entity_id=model.role_entity_id,
            company_id=model.company_id,
            first_name=model.first_name,
            last_name=model.last_name,
            mobile=model.mobile,
            is_active=model.is_active,
            last_login_at=(
                ensure_tz_aware(model.last_login_at) if model.last_login_at else None
            ),
            created_at=ensure_tz_aware(model.created_at),
            updated_at=ensure_tz_aware(model.updated_at),
        )

    def _map_to_model(self, user: User) -> UserModel:
        return UserModel(
            id=user.id,
            email=user.email,
            user_name=user.user_name,
            password_hash=user.pending_password_hash,
            role=user.role_tag,
            role_entity_id=user.role_entity_id,
            company_id=user.company_id,
            first_name=user.first_name,
            last_name=user.last_name,
            mobile=user.mobile,
            is_active=user.is_active,
            last_login_at=user.last_login_at,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )

    def _update_model(self, model: UserModel, user: User) -> None:
        # last_login_at is written by update_last_login only
        model.email = user.email
        model.user_name = user.user_name
        model.role = user.role_tag
        model.role_entity_id = user.role_entity_id
        model.company_id = user.company_id
        model.first_name = user.first_name
        model.last_name = user.last_name
        model.mobile = user.mobile
        model.is_active = user.is_active
        model.updated_at = user.updated_at
        if user.password_changed:
            model.password_hash = user.pending_password_hash
