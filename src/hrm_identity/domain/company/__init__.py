"""Company domain: tenants of the HR system, and a principal of their own."""

from hrm_identity.domain.company.aggregates import Company
from hrm_identity.domain.company.exceptions import CompanyNotFoundError
from hrm_identity.domain.company.repositories import CompanyRepository
from hrm_identity.domain.company.value_objects import ModulePermissions

__all__ = [
    "Company",
    "CompanyNotFoundError",
    "CompanyRepository",
    "ModulePermissions",
]
