"""Port for the password hashing capability the aggregates rely on."""

from typing import Protocol


class PasswordHasher(Protocol):
    """Anything that can turn a plaintext password into a salted digest."""

    def hash(self, password: str) -> str: ...
