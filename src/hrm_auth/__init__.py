"""HRM Auth - Generic authentication infrastructure.

This package provides authentication infrastructure that is independent
of the HR domain. It handles:
- Password hashing (bcrypt)
- Bearer token issuance and verification (JWT)

Architecture:
    hrm_auth/
    ├── services/           # Pure logic (password hashing, JWT)
    ├── schemas.py          # Data classes
    └── exceptions.py       # Auth exceptions

Usage:
    from hrm_auth import PasswordHashingService, JWTService
"""

from hrm_auth.exceptions import (
    INVALID_CREDENTIALS_MESSAGE,
    AuthError,
    InvalidCredentialsError,
    InvalidTokenError,
    TokenExpiredError,
    WeakPasswordError,
)
from hrm_auth.schemas import TokenPayload
from hrm_auth.services import JWTService, PasswordHashingService

__all__ = [
    # Services
    "PasswordHashingService",
    "JWTService",
    # Schemas
    "TokenPayload",
    # Exceptions
    "INVALID_CREDENTIALS_MESSAGE",
    "AuthError",
    "InvalidCredentialsError",
    "InvalidTokenError",
    "TokenExpiredError",
    "WeakPasswordError",
]
