# ruff: noqa: E501 - Long import paths in __init__.py re-exports
"""SQLAlchemy models for identity management."""

from hrm_identity.infrastructure.persistence.sqlalchemy.models.company_model import (
    CompanyModel,
)
from hrm_identity.infrastructure.persistence.sqlalchemy.models.role_entity_models import (
    AdminModel,
    EmployeeModel,
    SuperAdminModel,
)
from hrm_identity.infrastructure.persistence.sqlalchemy.models.user_model import (
    UserModel,
)

__all__ = [
    "AdminModel",
    "CompanyModel",
    "EmployeeModel",
    "SuperAdminModel",
    "UserModel",
]
