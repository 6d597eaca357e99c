"""Building blocks shared by every identity aggregate."""

from hrm_identity.domain.shared.email import Email, normalize_email
from hrm_identity.domain.shared.exceptions import (
    DuplicateKeyError,
    EmailAlreadyExistsError,
    InvalidEmailError,
)
from hrm_identity.domain.shared.password_hasher import PasswordHasher
from hrm_identity.domain.shared.time import ensure_tz_aware, utc_now

__all__ = [
    "DuplicateKeyError",
    "Email",
    "EmailAlreadyExistsError",
    "InvalidEmailError",
    "PasswordHasher",
    "ensure_tz_aware",
    "normalize_email",
    "utc_now",
]
