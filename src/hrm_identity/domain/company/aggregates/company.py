"""Company aggregate: the tenant, which can also log in on its own."""

from datetime import datetime
from typing import Union
from uuid import UUID, uuid4

from hrm_identity.domain.company.value_objects import ModulePermissions
from hrm_identity.domain.shared import Email, PasswordHasher, utc_now


class Company:
    """
    Company aggregate root.

    A company is a top-level principal of its own, authenticated through
    a separate entry point from users. Like User, it never holds its
    stored password digest; only a freshly set one is kept pending until
    saved.
    """

    ROLE = "company"

    def __init__(  # noqa: PLR0913
        self,
        email: Union[str, Email],
        company_name: str,
        id: UUID | None = None,
        module_permissions: ModulePermissions | None = None,
        is_active: bool = True,
        last_login_at: datetime | None = None,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
    ):
        self._email = email if isinstance(email, Email) else Email(email)
        self._company_name = company_name.strip()
        self._id = id or uuid4()
        self._module_permissions = module_permissions or ModulePermissions()
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
    def company_name(self) -> str:
        return self._company_name

    @property
    def module_permissions(self) -> ModulePermissions:
        return self._module_permissions

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

    def rename(self, company_name: str) -> None:
        self._company_name = company_name.strip()
        self._updated_at = utc_now()

    def grant_modules(self, module_permissions: ModulePermissions) -> None:
        self._module_permissions = module_permissions
        self._updated_at = utc_now()

    def record_login(self, at: datetime | None = None) -> datetime:
        self._last_login_at = at or utc_now()
        return self._last_login_at

    @classmethod
    def create(
        cls,
        email: Union[str, Email],
        company_name: str,
        module_permissions: ModulePermissions | None = None,
    ) -> "Company":
        return cls(
            email=email,
            company_name=company_name,
            module_permissions=module_permissions,
        )

    @classmethod
    def reconstitute(  # noqa: PLR0913
        cls,
        id: UUID,
        email: Union[str, Email],
        company_name: str,
        module_permissions: ModulePermissions,
        is_active: bool,
        last_login_at: datetime | None,
        created_at: datetime,
        updated_at: datetime,
    ) -> "Company":
        return cls(
            id=id,
            email=email,
            company_name=company_name,
            module_permissions=module_permissions,
            is_active=is_active,
            last_login_at=last_login_at,
            created_at=created_at,
            updated_at=updated_at,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Company):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"Company(id={self._id}, email={self._email.value})"
