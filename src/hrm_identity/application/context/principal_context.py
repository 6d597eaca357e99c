"""Principal context for the request-scoped caller identity."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING
from uuid import UUID

if TYPE_CHECKING:
    from hrm_auth import TokenPayload


@dataclass(frozen=True)
class PrincipalContext:
    """Immutable context for the current authenticated principal."""

    principal_id: UUID
    role: str
    kind: str = "user"
    email: str | None = None

    @property
    def is_company(self) -> bool:
        return self.kind == "company"

    @classmethod
    def from_token(cls, payload: TokenPayload) -> PrincipalContext:
        return cls(
            principal_id=payload.principal_id,
            role=payload.role,
            kind=payload.kind,
            email=payload.email,
        )

    def __str__(self) -> str:
        return f"PrincipalContext({self.kind}:{self.principal_id})"
