"""User repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional, Union
from uuid import UUID

from hrm_identity.domain.shared import Email
from hrm_identity.domain.user.aggregates.user import User


class UserRepository(ABC):
    """Repository interface for User aggregates.

    Default reads never return the password digest. Verification code has
    to ask for it explicitly through ``fetch_password_hash``.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UUID) -> Optional[User]:
        """Find a user by their ID."""

    @abstractmethod
    async def find_by_email(self, email: Union[str, Email]) -> Optional[User]:
        """Find a user by their (normalized) email address."""

    @abstractmethod
    async def exists_by_email(self, email: Union[str, Email]) -> bool:
        """Check if a user exists with the given email."""

    @abstractmethod
    async def exists_by_user_name(
        self,
        user_name: str,
        exclude_user_id: UUID | None = None,
    ) -> bool:
        """Check if a user name is taken, optionally ignoring one user."""

    @abstractmethod
    async def fetch_password_hash(self, user_id: UUID) -> Optional[str]:
        """Load the stored password digest of a user."""

    @abstractmethod
    async def save(self, user: User) -> None:
        """Create or update a user.

        Writes the password digest only when the aggregate carries a newly
        set password. Raises a DuplicateKeyError subclass when the email or
        user name is already taken.
        """

    @abstractmethod
    async def update_last_login(self, user_id: UUID, at: datetime) -> None:
        """Persist the time of the latest successful login."""

    @abstractmethod
    async def delete(self, user_id: UUID) -> None:
        """Delete a user by ID. Its role entity is left untouched."""

    @abstractmethod
    async def count(self) -> int:
        """Count total users."""
