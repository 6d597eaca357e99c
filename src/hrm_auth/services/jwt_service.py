"""JWT token service.

Provides bearer token issuance and verification for authentication.
"""

from datetime import datetime, timedelta, timezone
from typing import Any
from uuid import UUID

import jwt

from hrm_auth.exceptions import InvalidTokenError, TokenExpiredError
from hrm_auth.schemas import TokenPayload

# Claims owned by the service; extra claims can never override them
RESERVED_CLAIMS = frozenset({"sub", "role", "iat", "exp"})


class JWTService:
    """Service for JWT token issuance and verification.

    Tokens carry the principal id and its role, plus optional extra
    claims. Only this service understands the token layout; every other
    component treats the token as an opaque string.

    Examples
    --------
    >>> service = JWTService(secret_key="your-secret-key")
    >>> token = service.issue(user_id, "employee", {"email": "a@x.com"})
    >>> payload = service.verify(token)
    >>> print(payload.principal_id, payload.role)
    """

    DEFAULT_EXPIRE_DAYS = 7
    ALGORITHM = "HS256"

    def __init__(
        self,
        secret_key: str,
        token_expire_days: int = DEFAULT_EXPIRE_DAYS,
    ):
        """Initialize the JWT service.

        Parameters
        ----------
        secret_key
            Secret key for signing tokens. Rotating it invalidates every
            outstanding token.
        token_expire_days
            Days until an issued token expires (default 7)
        """
        if not secret_key:
            msg = "JWT secret key cannot be empty"
            raise ValueError(msg)

        self._secret_key = secret_key
        self._expire = timedelta(days=token_expire_days)

    def issue(
        self,
        principal_id: UUID,
        role: str,
        extra_claims: dict[str, Any] | None = None,
        expires_delta: timedelta | None = None,
    ) -> str:
        """Issue a signed token for a principal.

        Parameters
        ----------
        principal_id
            The principal's unique identifier
        role
            The role tag to embed in the token
        extra_claims
            Additional claims (e.g. email, principal kind)
        expires_delta
            Custom expiration time (optional)

        Returns
        -------
        The encoded JWT token string
        """
        now = datetime.now(tz=timezone.utc)
        expire = now + (expires_delta or self._expire)

        payload: dict[str, Any] = {
            key: value
            for key, value in (extra_claims or {}).items()
            if key not in RESERVED_CLAIMS
        }
        payload.update(
            {
                "sub": str(principal_id),
                "role": role,
                "iat": now,
                "exp": expire,
            },
        )

        return jwt.encode(payload, self._secret_key, algorithm=self.ALGORITHM)

    def verify(self, token: str) -> TokenPayload:
        """Verify and decode a token.

        Parameters
        ----------
        token
            The JWT token string to verify

        Returns
        -------
        TokenPayload containing the decoded data

        Raises
        ------
        TokenExpiredError
            If the token's expiry has passed
        InvalidTokenError
            If token is invalid or malformed
        """
        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self.ALGORITHM],
                options={"require": ["sub", "exp"]},
            )

            principal_id = UUID(payload["sub"])
            role = payload["role"]
            exp = datetime.fromtimestamp(payload["exp"], tz=timezone.utc)
            claims = {
                key: value
                for key, value in payload.items()
                if key not in RESERVED_CLAIMS
            }

            return TokenPayload(
                principal_id=principal_id,
                role=role,
                exp=exp,
                claims=claims,
            )

        except jwt.ExpiredSignatureError as e:
            raise TokenExpiredError from e
        except jwt.InvalidTokenError as e:
            raise InvalidTokenError(f"Invalid token: {e}") from e
        except (KeyError, ValueError, TypeError) as e:
            raise InvalidTokenError(f"Malformed token payload: {e}") from e
