"""Auth schemas and data structures.

These are simple data classes used for transferring auth
data between components.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any
from uuid import UUID


@dataclass(frozen=True)
class TokenPayload:
    """Decoded bearer token payload.

    This represents the data extracted from a verified JWT token.

    Attributes
    ----------
    principal_id
        The unique identifier of the authenticated principal
    role
        Role tag the token was issued for (e.g. "employee", "company")
    exp
        Token expiration timestamp
    claims
        Any extra claims that were issued with the token
    """

    principal_id: UUID
    role: str
    exp: datetime
    claims: dict[str, Any] = field(default_factory=dict)

    def is_expired(self) -> bool:
        """Check if the token has expired."""
        return datetime.now(tz=self.exp.tzinfo) > self.exp

    @property
    def email(self) -> str | None:
        return self.claims.get("email")

    @property
    def kind(self) -> str:
        """Principal kind the token belongs to ("user" or "company")."""
        return self.claims.get("kind", "user")
