"""Pure auth services (password hashing, JWT tokens)."""

from hrm_auth.services.jwt_service import JWTService
from hrm_auth.services.password_service import PasswordHashingService

__all__ = [
    "JWTService",
    "PasswordHashingService",
]
