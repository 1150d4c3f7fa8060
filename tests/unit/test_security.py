"""
Unit Tests for password hashing and JWT helpers.
"""

from datetime import datetime, timedelta, timezone

import pytest
from jose import jwt

from src.core.config import settings
from src.core.security import (
    ACCESS_TOKEN_TYPE,
    REFRESH_TOKEN_TYPE,
    TokenDecodeError,
    create_token,
    decode_token,
    hash_password,
    token_lifetime,
    verify_password,
)


class TestPasswordHashing:

    def test_hash_verifies(self):
        hashed = hash_password("Secret123")

        assert hashed != "Secret123"
        assert verify_password("Secret123", hashed)
        assert not verify_password("Secret124", hashed)

    def test_hash_is_salted(self):
        assert hash_password("Secret123") != hash_password("Secret123")


class TestTokens:

    def test_create_and_decode(self):
        token, jti, expires_at = create_token("42", ACCESS_TOKEN_TYPE, {"email": "a@b.co"})

        claims = decode_token(token)

        assert claims["sub"] == "42"
        assert claims["jti"] == jti
        assert claims["token_type"] == ACCESS_TOKEN_TYPE
        assert claims["email"] == "a@b.co"
        assert claims["iss"] == settings.app_name
        assert claims["exp"] == int(expires_at.timestamp())

    def test_refresh_lives_longer_than_access(self):
        assert token_lifetime(REFRESH_TOKEN_TYPE) > token_lifetime(ACCESS_TOKEN_TYPE)

    def test_each_token_gets_new_jti(self):
        _, first, _ = create_token("1", ACCESS_TOKEN_TYPE, {})
        _, second, _ = create_token("1", ACCESS_TOKEN_TYPE, {})

        assert first != second

    def test_expired_token_rejected(self):
        issued = datetime.now(timezone.utc) - timedelta(days=30)
        token, _, _ = create_token("1", ACCESS_TOKEN_TYPE, {}, now=issued)

        with pytest.raises(TokenDecodeError):
            decode_token(token)

    def test_tampered_token_rejected(self):
        token, _, _ = create_token("1", ACCESS_TOKEN_TYPE, {})
        header, payload, signature = token.split(".")
        tampered = ".".join([header, payload, signature[::-1]])

        with pytest.raises(TokenDecodeError):
            decode_token(tampered)

    def test_foreign_issuer_rejected(self):
        now = datetime.now(timezone.utc)
        token = jwt.encode(
            {"sub": "1", "iss": "someone-else", "exp": now + timedelta(minutes=5)},
            settings.jwt_secret_key,
            algorithm=settings.jwt_algorithm,
        )

        with pytest.raises(TokenDecodeError):
            decode_token(token)
