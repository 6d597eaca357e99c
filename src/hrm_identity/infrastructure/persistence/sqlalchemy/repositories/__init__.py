# ruff: noqa: E501 - Long import paths in __init__.py re-exports
"""SQLAlchemy repository implementations for identity management."""

from hrm_identity.infrastructure.persistence.sqlalchemy.repositories.company_repository import (
    CompanyRepositorySQLAlchemy,
)
from hrm_identity.infrastructure.persistence.sqlalchemy.repositories.role_entity_repositories import (
    AdminRepositorySQLAlchemy,
    EmployeeRepositorySQLAlchemy,
    SuperAdminRepositorySQLAlchemy,
)
from hrm_identity.infrastructure.persistence.sqlalchemy.repositories.user_repository import (
    UserRepositorySQLAlchemy,
)

__all__ = [
    "AdminRepositorySQLAlchemy",
    "CompanyRepositorySQLAlchemy",
    "EmployeeRepositorySQLAlchemy",
    "SuperAdminRepositorySQLAlchemy",
    "UserRepositorySQLAlchemy",
]
