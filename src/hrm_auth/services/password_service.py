"""Password hashing service using bcrypt.

Provides secure password hashing and verification with configurable
strength validation.
"""

import re

import bcrypt

from hrm_auth.exceptions import WeakPasswordError

_UPPERCASE = re.compile(r"[A-Z]")
_DIGIT = re.compile(r"\d")
_SYMBOL = re.compile(r"[!@#$%^&*()_+\-=\[\]{};':\"\\|,.<>/?]")


class PasswordHashingService:
    """Service for secure password hashing and verification.

    Uses bcrypt for password hashing with configurable work factor.
    Also provides password strength validation.

    Examples
    --------
    >>> service = PasswordHashingService()
    >>> hash = service.hash("My_secure_passw0rd")
    >>> service.verify("My_secure_passw0rd", hash)
    True
    >>> service.verify("wrong_password", hash)
    False
    """

    # Password requirements
    MIN_LENGTH = 8
    MAX_LENGTH = 128

    def __init__(self, rounds: int = 12):
        """Initialize the password hashing service.

        Parameters
        ----------
        rounds
            The bcrypt work factor (log2 of iterations). Default is 12,
            which is a good balance of security and performance.
            Higher values are more secure but slower.
        """
        self._rounds = rounds
        # Built up front at the configured cost
        self._dummy_hash = bcrypt.hashpw(
            b"hrm-dummy-password",
            bcrypt.gensalt(rounds=rounds),
        )

    def hash(self, password: str) -> str:
        """Hash a plaintext password.

        Every call draws a fresh salt, so hashing the same password twice
        yields two different digests that both verify.

        Parameters
        ----------
        password
            The plaintext password to hash

        Returns
        -------
        The bcrypt hash as a string

        Raises
        ------
        WeakPasswordError
            If password doesn't meet requirements
        """
        self.validate_strength(password)
        salt = bcrypt.gensalt(rounds=self._rounds)
        hashed = bcrypt.hashpw(password.encode("utf-8"), salt)
        return hashed.decode("utf-8")

    def verify(self, password: str, password_hash: str) -> bool:
        """Verify a password against a hash.

        Parameters
        ----------
        password
            The plaintext password to check
        password_hash
            The bcrypt hash to verify against

        Returns
        -------
        True if password matches, False otherwise
        """
        try:
            return bcrypt.checkpw(
                password.encode("utf-8"),
                password_hash.encode("utf-8"),
            )
        except (ValueError, TypeError):
            # Invalid hash format
            return False

    def verify_against_dummy(self, password: str) -> bool:
        """Spend the same bcrypt work as a real verification.

        Used when no stored hash exists (unknown email) so that a failed
        lookup costs as much time as a wrong password. Always returns False.
        """
        bcrypt.checkpw(password.encode("utf-8"), self._dummy_hash)
        return False

    def validate_strength(self, password: str) -> None:
        """Validate that a password meets strength requirements.

        Current requirements:
        - Between 8 and 128 characters
        - At least one uppercase letter
        - At least one digit
        - At least one symbol

        Parameters
        ----------
        password
            The password to validate

        Raises
        ------
        WeakPasswordError
            If password doesn't meet requirements
        """
        if not password:
            msg = "Password cannot be empty"
            raise WeakPasswordError(msg)

        if len(password) < self.MIN_LENGTH:
            msg = f"Password must be at least {self.MIN_LENGTH} characters"
            raise WeakPasswordError(msg)

        if len(password) > self.MAX_LENGTH:
            msg = f"Password cannot exceed {self.MAX_LENGTH} characters"
            raise WeakPasswordError(msg)

        if not (
            _UPPERCASE.search(password)
            and _DIGIT.search(password)
            and _SYMBOL.search(password)
        ):
            msg = (
                "Password must contain at least one uppercase letter, "
                "one number, and one symbol"
            )
            raise WeakPasswordError(msg)
