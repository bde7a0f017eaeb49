"""Unit tests for JWT token utilities."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import jwt as pyjwt
import pytest

from connector.config import AuthSettings
from connector.util.jwt import (
    InvalidTokenError,
    UnauthenticatedError,
    create_token,
    verify_token,
)

SETTINGS = AuthSettings(jwt_secret="unit-test-secret")


class TestCreateToken:
    """Tests for create_token."""

    def test_embeds_user_subject(self):
        user_id = str(uuid4())

        token = create_token(user_id, SETTINGS)

        payload = verify_token(token, SETTINGS)
        assert payload.user.id == user_id

    def test_expires_after_configured_lifetime(self):
        issued_at = datetime.now(timezone.utc).replace(microsecond=0)

        token = create_token("u1", SETTINGS, issued_at=issued_at)

        payload = verify_token(token, SETTINGS)
        assert payload.exp - payload.iat == timedelta(seconds=36000)

    def test_uses_hs256(self):
        token = create_token("u1", SETTINGS)

        assert pyjwt.get_unverified_header(token)["alg"] == "HS256"


class TestVerifyToken:
    """Tests for verify_token."""

    def test_missing_token_is_unauthenticated(self):
        with pytest.raises(UnauthenticatedError):
            verify_token(None, SETTINGS)

    def test_empty_token_is_unauthenticated(self):
        with pytest.raises(UnauthenticatedError):
            verify_token("", SETTINGS)

    def test_token_accepted_just_before_expiry(self):
        issued_at = datetime.now(timezone.utc) - timedelta(seconds=35990)
        token = create_token("u1", SETTINGS, issued_at=issued_at)

        assert verify_token(token, SETTINGS).user.id == "u1"

    def test_expired_token_is_invalid(self):
        issued_at = datetime.now(timezone.utc) - timedelta(seconds=36001)
        token = create_token("u1", SETTINGS, issued_at=issued_at)

        with pytest.raises(InvalidTokenError, match="expired"):
            verify_token(token, SETTINGS)

    def test_wrong_secret_is_invalid(self):
        token = create_token("u1", AuthSettings(jwt_secret="another-secret"))

        with pytest.raises(InvalidTokenError):
            verify_token(token, SETTINGS)

    def test_garbage_is_invalid(self):
        with pytest.raises(InvalidTokenError):
            verify_token("not.a.token", SETTINGS)

    def test_payload_without_user_is_invalid(self):
        now = datetime.now(timezone.utc)
        token = pyjwt.encode(
            {"sub": "u1", "iat": now, "exp": now + timedelta(hours=1)},
            SETTINGS.jwt_secret,
            algorithm="HS256",
        )

        with pytest.raises(InvalidTokenError, match="malformed"):
            verify_token(token, SETTINGS)
