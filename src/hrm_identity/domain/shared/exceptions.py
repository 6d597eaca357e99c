"""Exceptions shared by the principal aggregates (users and companies)."""


class InvalidEmailError(ValueError):
    """Raised when email format is invalid."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class DuplicateKeyError(Exception):
    """A unique field of a principal is already taken."""


class EmailAlreadyExistsError(DuplicateKeyError):
    """Email already registered."""

    def __init__(self, email: str) -> None:
        self.email = email
        super().__init__(f"Email already registered: {email}")
