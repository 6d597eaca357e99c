"""Results handed from the authentication service to its callers."""

from dataclasses import dataclass

from hrm_identity.domain.company import Company
from hrm_identity.domain.role_entities import RoleEntity
from hrm_identity.domain.user import User


@dataclass(frozen=True)
class AuthenticationResult:
    """A verified user plus its role entity, when one could be found."""

    principal: User
    role_entity: RoleEntity | None = None


@dataclass(frozen=True)
class LoginResult:
    principal: User
    role_entity: RoleEntity | None
    access_token: str


@dataclass(frozen=True)
class CompanyLoginResult:
    company: Company
    access_token: str
