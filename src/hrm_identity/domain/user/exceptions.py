"""User domain exceptions.

Custom exceptions for the user domain, used for validation
and business rule violations.
"""

from uuid import UUID

from hrm_identity.domain.shared.exceptions import DuplicateKeyError


class UserNameTakenError(DuplicateKeyError):
    """User name already in use."""

    def __init__(self, user_name: str) -> None:
        self.user_name = user_name
        super().__init__(f"User name already taken: {user_name}")


class UserNotFoundError(Exception):
    """User not found."""

    def __init__(self, user_id: str) -> None:
        self.user_id = user_id
        super().__init__(f"User not found: {user_id}")


class UnknownRoleError(Exception):
    """A user carries a role tag outside the known set.

    This is data corruption, not a login failure, and is never
    downgraded to "no profile".
    """

    def __init__(self, role: str) -> None:
        self.role = role
        super().__init__(f"Unknown user role: {role!r}")


class RoleEntityNotFoundError(Exception):
    """The role entity a user points to does not exist (dangling reference)."""

    def __init__(self, role: str, entity_id: UUID) -> None:
        self.role = role
        self.entity_id = entity_id
        super().__init__(f"No {role} record with id {entity_id}")
