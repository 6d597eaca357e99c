from hrm_identity.domain.company.repositories.company_repository import (
    CompanyRepository,
)

__all__ = ["CompanyRepository"]
