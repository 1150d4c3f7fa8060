"""Password hashing and JWT primitives."""

from datetime import datetime, timedelta, timezone
from typing import Any, Dict
from uuid import uuid4

from jose import jwt, JWTError
from passlib.context import CryptContext

from src.core.config import settings

pwd_context = CryptContext(schemes=["argon2"], deprecated="auto")

ACCESS_TOKEN_TYPE = "access_token"
REFRESH_TOKEN_TYPE = "refresh_token"


class TokenDecodeError(Exception):
    """Raised when a JWT cannot be decoded or verified."""


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


def token_lifetime(token_type: str) -> timedelta:
    """Lifetime configured for the given token type."""
    if token_type == REFRESH_TOKEN_TYPE:
        return timedelta(minutes=settings.refresh_token_expire_minutes)
    return timedelta(minutes=settings.access_token_expire_minutes)


def create_token(
    subject: str,
    token_type: str,
    claims: Dict[str, Any],
    now: datetime | None = None,
) -> tuple[str, str, datetime]:
    """
    Sign a JWT for a customer.

    Returns:
        Tuple of (encoded token, jti, expiry)
    """
    issued_at = now or datetime.now(timezone.utc)
    expires_at = issued_at + token_lifetime(token_type)
    jti = uuid4().hex

    to_encode = dict(claims)
    to_encode.update(
        {
            "sub": subject,
            "iss": settings.app_name,
            "iat": issued_at,
            "nbf": issued_at,
            "exp": expires_at,
            "jti": jti,
            "token_type": token_type,
        }
    )

    token = jwt.encode(to_encode, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)
    return token, jti, expires_at


def decode_token(token: str) -> Dict[str, Any]:
    """
    Verify signature and expiry of a JWT and return its claims.

    Raises:
        TokenDecodeError: If the token is malformed, tampered or expired
    """
    try:
        return jwt.decode(
            token,
            settings.jwt_secret_key,
            algorithms=[settings.jwt_algorithm],
            issuer=settings.app_name,
        )
    except JWTError as e:
        raise TokenDecodeError(str(e)) from e
