"""Application services for identity management."""

from hrm_identity.application.services.authentication_service import (
    AuthenticationService,
)
from hrm_identity.application.services.entity_resolver import EntityResolver

__all__ = ["AuthenticationService", "EntityResolver"]
