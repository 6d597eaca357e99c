"""Unit tests for JWTService."""

from datetime import timedelta
from uuid import uuid4

import jwt
import pytest

from hrm_auth.exceptions import InvalidTokenError, TokenExpiredError
from hrm_auth.services import JWTService

SECRET = "test-secret-key-12345"


class TestJWTServiceInit:
    """Tests for JWTService initialization."""

    def test_init_with_valid_secret(self):
        """Test that service initializes with valid secret."""
        service = JWTService(secret_key="test-secret-key")
        assert service is not None

    def test_init_with_empty_secret_raises(self):
        """Test that empty secret raises ValueError."""
        with pytest.raises(ValueError, match="cannot be empty"):
            JWTService(secret_key="")


class TestIssueAndVerify:
    """Tests for token issuance and verification."""

    def setup_method(self):
        """Set up test fixtures."""
        self.service = JWTService(secret_key=SECRET)
        self.principal_id = uuid4()

    def test_issue_returns_string(self):
        token = self.service.issue(self.principal_id, "employee")

        assert isinstance(token, str)
        assert len(token) > 0

    def test_token_round_trips(self):
        """A verified token yields the claims it was issued with."""
        token = self.service.issue(
            self.principal_id,
            "admin",
            extra_claims={"email": "a@x.com", "kind": "user"},
        )

        payload = self.service.verify(token)

        assert payload.principal_id == self.principal_id
        assert payload.role == "admin"
        assert payload.email == "a@x.com"
        assert payload.kind == "user"
        assert not payload.is_expired()

    def test_extra_claims_cannot_override_reserved(self):
        other_id = uuid4()
        token = self.service.issue(
            self.principal_id,
            "employee",
            extra_claims={"sub": str(other_id), "role": "super_admin"},
        )

        payload = self.service.verify(token)

        assert payload.principal_id == self.principal_id
        assert payload.role == "employee"

    def test_default_expiry_is_seven_days(self):
        token = self.service.issue(self.principal_id, "employee")

        decoded = jwt.decode(token, SECRET, algorithms=["HS256"])
        assert decoded["exp"] - decoded["iat"] == 7 * 24 * 60 * 60

    def test_verify_expired_token_raises(self):
        """Test that expired token raises TokenExpiredError."""
        token = self.service.issue(
            self.principal_id,
            "employee",
            expires_delta=timedelta(seconds=-1),  # Already expired
        )

        with pytest.raises(TokenExpiredError, match="expired"):
            self.service.verify(token)

    def test_expired_token_is_an_invalid_token(self):
        token = self.service.issue(
            self.principal_id,
            "employee",
            expires_delta=timedelta(seconds=-1),
        )

        with pytest.raises(InvalidTokenError):
            self.service.verify(token)

    def test_verify_token_with_wrong_secret_raises(self):
        other = JWTService(secret_key="another-secret")
        token = other.issue(self.principal_id, "employee")

        with pytest.raises(InvalidTokenError, match="Invalid token"):
            self.service.verify(token)

    def test_verify_garbage_raises(self):
        with pytest.raises(InvalidTokenError):
            self.service.verify("not.a.token")

    def test_verify_token_without_role_raises(self):
        token = jwt.encode(
            {"sub": str(self.principal_id), "exp": 9999999999},
            SECRET,
            algorithm="HS256",
        )

        with pytest.raises(InvalidTokenError, match="Malformed"):
            self.service.verify(token)

    def test_verify_token_with_non_uuid_subject_raises(self):
        token = jwt.encode(
            {"sub": "not-a-uuid", "role": "employee", "exp": 9999999999},
            SECRET,
            algorithm="HS256",
        )

        with pytest.raises(InvalidTokenError, match="Malformed"):
            self.service.verify(token)

    def test_company_token(self):
        token = self.service.issue(
            self.principal_id,
            "company",
            extra_claims={"kind": "company"},
        )

        payload = self.service.verify(token)

        assert payload.role == "company"
        assert payload.kind == "company"
