"""Unit tests for JWTService."""

from datetime import datetime, timedelta, timezone

import jwt
import pytest

from tollgate_auth.exceptions import InvalidTokenError
from tollgate_auth.services import JWTService

TEST_CLAIMS = {
    "id": "7f1c2a52-3f0e-4a55-9a51-2d1d5b1f7c10",
    "email": "a@x.com",
    "name": "Ann",
}


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

    def test_default_expiry_is_two_hours(self):
        """Tokens expire two hours after they are minted."""
        service = JWTService(secret_key="test-secret")
        before = datetime.now(tz=timezone.utc).replace(microsecond=0)

        payload = service.verify(service.sign(TEST_CLAIMS))

        assert payload.expires_at - payload.issued_at == timedelta(hours=2)
        assert payload.issued_at >= before - timedelta(seconds=1)


class TestSignAndVerify:
    """Tests for token creation and verification."""

    def setup_method(self):
        """Set up test fixtures."""
        self.service = JWTService(secret_key="test-secret-key-12345")

    def test_sign_returns_token_string(self):
        token = self.service.sign(TEST_CLAIMS)

        assert isinstance(token, str)
        assert token.count(".") == 2

    def test_verify_returns_original_claims(self):
        """Decoded claims minus reserved fields equal the signed claims."""
        token = self.service.sign(TEST_CLAIMS)

        payload = self.service.verify(token)

        assert payload.claims == TEST_CLAIMS
        assert payload.subject == TEST_CLAIMS["id"]
        assert payload.expires_at > datetime.now(timezone.utc)

    def test_token_carries_reserved_claims(self):
        token = self.service.sign(TEST_CLAIMS)

        raw = jwt.decode(token, options={"verify_signature": False})

        assert raw["sub"] == TEST_CLAIMS["id"]
        assert "iat" in raw
        assert "exp" in raw

    def test_sign_without_id_has_no_subject(self):
        token = self.service.sign({"email": "a@x.com"})

        payload = self.service.verify(token)

        assert payload.subject is None
        assert payload.claims == {"email": "a@x.com"}

    def test_sign_replaces_reserved_claims_in_input(self):
        """Stale iat/exp/sub from a decoded token are not carried over."""
        stale = {**TEST_CLAIMS, "sub": "someone-else", "iat": 1, "exp": 2}

        payload = self.service.verify(self.service.sign(stale))

        assert payload.claims == TEST_CLAIMS
        assert payload.subject == TEST_CLAIMS["id"]

    def test_verify_expired_token_raises(self):
        """Test that expired token raises InvalidTokenError."""
        token = self.service.sign(TEST_CLAIMS, expires_delta=timedelta(seconds=-1))

        with pytest.raises(InvalidTokenError, match="expired"):
            self.service.verify(token)

    def test_verify_invalid_token_raises(self):
        """Test that invalid token raises InvalidTokenError."""
        with pytest.raises(InvalidTokenError):
            self.service.verify("invalid.token.string")

    def test_verify_tampered_token_raises(self):
        """Test that tampered token raises InvalidTokenError."""
        token = self.service.sign(TEST_CLAIMS)
        header, payload, signature = token.split(".")
        tampered_signature = ("A" if signature[0] != "A" else "B") + signature[1:]

        with pytest.raises(InvalidTokenError):
            self.service.verify(f"{header}.{payload}.{tampered_signature}")

    def test_verify_wrong_secret_raises(self):
        """Test that token from different secret raises InvalidTokenError."""
        other_service = JWTService(secret_key="different-secret")
        token = other_service.sign(TEST_CLAIMS)

        with pytest.raises(InvalidTokenError):
            self.service.verify(token)

    def test_verify_token_without_expiry_raises(self):
        """Tokens must carry exp; unbounded tokens are rejected."""
        token = jwt.encode(TEST_CLAIMS, "test-secret-key-12345", algorithm="HS256")

        with pytest.raises(InvalidTokenError):
            self.service.verify(token)

    def test_verify_rejects_other_algorithms(self):
        token = jwt.encode(
            {**TEST_CLAIMS, "iat": 0, "exp": 4102444800},
            "test-secret-key-12345",
            algorithm="HS512",
        )

        with pytest.raises(InvalidTokenError):
            self.service.verify(token)


class TestStripReserved:
    def test_removes_only_reserved_claims(self):
        claims = {**TEST_CLAIMS, "sub": "x", "iat": 1, "exp": 2}

        assert JWTService.strip_reserved(claims) == TEST_CLAIMS

    def test_returns_copy(self):
        claims = dict(TEST_CLAIMS)

        stripped = JWTService.strip_reserved(claims)
        stripped["name"] = "Bob"

        assert claims["name"] == "Ann"
