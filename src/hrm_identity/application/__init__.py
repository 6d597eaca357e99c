"""Application layer: use cases over the identity domain."""

from hrm_identity.application.context import PrincipalContext
from hrm_identity.application.dtos import (
    AuthenticationResult,
    CompanyLoginResult,
    LoginResult,
)
from hrm_identity.application.services import AuthenticationService, EntityResolver

__all__ = [
    "AuthenticationResult",
    "AuthenticationService",
    "CompanyLoginResult",
    "EntityResolver",
    "LoginResult",
    "PrincipalContext",
]
