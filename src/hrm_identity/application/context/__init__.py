"""Request-scoped context objects."""

from hrm_identity.application.context.principal_context import PrincipalContext

__all__ = ["PrincipalContext"]
