"""Registered auth token entity."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class AuthToken:
    """The currently valid token of one type for a customer."""

    customer_id: int
    token_type: str
    jti: str
    expires_at: datetime
