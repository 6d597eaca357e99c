"""User aggregate: the generic login identity of employees and admins."""

from datetime import datetime
from typing import Union
from uuid import UUID, uuid4

from hrm_identity.domain.shared import Email, PasswordHasher, utc_now
from hrm_identity.domain.user.value_objects import (
    RoleEntityRef,
    UserRole,
    parse_role,
    role_entity_ref_for,
)


class User:
    """
    User aggregate root.

    A user is the credential-bearing side of a person. The role-specific
    profile (employee, admin or super admin record) lives in its own
    collection and is referenced weakly through ``role_entity_id``.

    The password digest is never held by a loaded aggregate. Setting a
    new password hashes it once and keeps the digest pending until the
    repository has written it, which is the only time the stored digest
    changes.
    """

    def __init__(  # noqa: PLR0913
        self,
        email: Union[str, Email],
        user_name: str,
        role: Union[str, UserRole],
        role_entity_id: UUID,
        company_id: UUID,
        id: UUID | None = None,
        first_name: str | None = None,
        last_name: str | None = None,
        mobile: str | None = None,
        is_active: bool = True,
        last_login_at: datetime | None = None,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
    ):
        self._email = email if isinstance(email, Email) else Email(email)
        self._user_name = user_name.strip()
        # Kept raw: an unknown tag must survive loading so the entity
        # resolver can report it instead of failing inside the mapper.
        self._role = role.value if isinstance(role, UserRole) else role
        self._role_entity_id = role_entity_id
        self._company_id = company_id
        self._id = id or uuid4()
        self._first_name = first_name
        self._last_name = last_name
        self._mobile = mobile
        self._is_active = is_active
        self._last_login_at = last_login_at
        self._created_at = created_at or utc_now()
        self._updated_at = updated_at or utc_now()
        self._pending_password_hash: str | None = None

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def email(self) -> str:
        return self._email.value

    @property
    def user_name(self) -> str:
        return self._user_name

    @property
    def role_tag(self) -> str:
        """The role exactly as stored, possibly outside the known set."""
        return self._role

    @property
    def role(self) -> UserRole:
        return parse_role(self._role)

    @property
    def role_entity_id(self) -> UUID:
        return self._role_entity_id

    @property
    def role_entity_ref(self) -> RoleEntityRef:
        return role_entity_ref_for(self._role, self._role_entity_id)

    @property
    def company_id(self) -> UUID:
        return self._company_id

    @property
    def first_name(self) -> str | None:
        return self._first_name

    @property
    def last_name(self) -> str | None:
        return self._last_name

    @property
    def full_name(self) -> str | None:
        names = [n for n in (self._first_name, self._last_name) if n]
        return " ".join(names) or None

    @property
    def mobile(self) -> str | None:
        return self._mobile

    @property
    def is_active(self) -> bool:
        return self._is_active

    @property
    def last_login_at(self) -> datetime | None:
        return self._last_login_at

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    @property
    def password_changed(self) -> bool:
        return self._pending_password_hash is not None

    @property
    def pending_password_hash(self) -> str | None:
        return self._pending_password_hash

    def set_password(self, password: str, hasher: PasswordHasher) -> None:
        self._pending_password_hash = hasher.hash(password)
        self._updated_at = utc_now()

    def mark_password_persisted(self) -> None:
        self._pending_password_hash = None

    def update_profile(
        self,
        user_name: str | None = None,
        first_name: str | None = None,
        last_name: str | None = None,
        mobile: str | None = None,
    ) -> None:
        if user_name is not None:
            self._user_name = user_name.strip()
        if first_name is not None:
            self._first_name = first_name
        if last_name is not None:
            self._last_name = last_name
        if mobile is not None:
            self._mobile = mobile
        self._updated_at = utc_now()

    def record_login(self, at: datetime | None = None) -> datetime:
        self._last_login_at = at or utc_now()
        return self._last_login_at

    @classmethod
    def create(  # noqa: PLR0913
        cls,
        email: Union[str, Email],
        user_name: str,
        role: Union[str, UserRole],
        role_entity_id: UUID,
        company_id: UUID,
        first_name: str | None = None,
        last_name: str | None = None,
        mobile: str | None = None,
    ) -> "User":
        return cls(
            email=email,
            user_name=user_name,
            role=parse_role(role),
            role_entity_id=role_entity_id,
            company_id=company_id,
            first_name=first_name,
            last_name=last_name,
            mobile=mobile,
        )

    @classmethod
    def reconstitute(  # noqa: PLR0913
        cls,
        id: UUID,
        email: Union[str, Email],
        user_name: str,
        role: str,
        role_entity_id: UUID,
        company_id: UUID,
        first_name: str | None,
        last_name: str | None,
        mobile: str | None,
        is_active: bool,
        last_login_at: datetime | None,
        created_at: datetime,
        updated_at: datetime,
    ) -> "User":
        return cls(
            id=id,
            email=email,
            user_name=user_name,
            role=role,
            role_entity_id=role_entity_id,
            company_id=company_id,
            first_name=first_name,
            last_name=last_name,
            mobile=mobile,
            is_active=is_active,
            last_login_at=last_login_at,
            created_at=created_at,
            updated_at=updated_at,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, User):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"User(id={self._id}, email={self._email.value}, role={self._role})"
