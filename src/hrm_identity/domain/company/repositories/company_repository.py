"""Company repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional, Union
from uuid import UUID

from hrm_identity.domain.company.aggregates.company import Company
from hrm_identity.domain.shared import Email


class CompanyRepository(ABC):
    """Repository interface for Company aggregates.

    Same password contract as UserRepository: the digest is only
    available through ``fetch_password_hash``.
    """

    @abstractmethod
    async def find_by_id(self, company_id: UUID) -> Optional[Company]:
        """Find a company by its ID."""

    @abstractmethod
    async def find_by_email(self, email: Union[str, Email]) -> Optional[Company]:
        """Find a company by its (normalized) email address."""

    @abstractmethod
    async def exists_by_email(self, email: Union[str, Email]) -> bool:
        """Check if a company exists with the given email."""

    @abstractmethod
    async def fetch_password_hash(self, company_id: UUID) -> Optional[str]:
        """Load the stored password digest of a company."""

    @abstractmethod
    async def save(self, company: Company) -> None:
        """Create or update a company (EmailAlreadyExistsError on conflict)."""

    @abstractmethod
    async def update_last_login(self, company_id: UUID, at: datetime) -> None:
        """Persist the time of the latest successful login."""

    @abstractmethod
    async def delete(self, company_id: UUID) -> None:
        """Delete a company by ID."""
