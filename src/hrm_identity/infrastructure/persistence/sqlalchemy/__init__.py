"""SQLAlchemy implementation for hrm_identity persistence.

Provides:
- IdentityBase: Declarative base for identity models
- UserModel, CompanyModel: principal tables
- EmployeeModel, AdminModel, SuperAdminModel: role entity tables
- *RepositorySQLAlchemy: repository implementations, all bounded by a
  per-call store timeout
"""

from hrm_identity.infrastructure.persistence.sqlalchemy.base import (
    IdentityBase,
    TimestampMixin,
)
from hrm_identity.infrastructure.persistence.sqlalchemy.models import (
    AdminModel,
    CompanyModel,
    EmployeeModel,
    SuperAdminModel,
    UserModel,
)
from hrm_identity.infrastructure.persistence.sqlalchemy.repositories import (
    AdminRepositorySQLAlchemy,
    CompanyRepositorySQLAlchemy,
    EmployeeRepositorySQLAlchemy,
    SuperAdminRepositorySQLAlchemy,
    UserRepositorySQLAlchemy,
)
from hrm_identity.infrastructure.persistence.sqlalchemy.store import (
    DEFAULT_STORE_TIMEOUT_SECONDS,
    SessionRepository,
)

__all__ = [
    "DEFAULT_STORE_TIMEOUT_SECONDS",
    "AdminModel",
    "AdminRepositorySQLAlchemy",
    "CompanyModel",
    "CompanyRepositorySQLAlchemy",
    "EmployeeModel",
    "EmployeeRepositorySQLAlchemy",
    "IdentityBase",
    "SessionRepository",
    "SuperAdminModel",
    "SuperAdminRepositorySQLAlchemy",
    "TimestampMixin",
    "UserModel",
    "UserRepositorySQLAlchemy",
]
