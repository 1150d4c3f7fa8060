"""Customer entities."""

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from typing import List, Optional

from .credit_limit import CreditLimit


@dataclass
class Customer:
    """
    A registered financing customer.

    ``password`` always holds the password hash, never the plain text.
    """

    nik: str
    email: str
    password: str
    full_name: str
    legal_name: str
    birth_place: str
    birth_date: date
    salary: int
    ktp_photo_path: str
    selfie_photo_path: str
    id: Optional[int] = None
    limits: List[CreditLimit] = field(default_factory=list)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


@dataclass(frozen=True)
class CustomerPrincipal:
    """Authenticated caller identity resolved from a bearer token."""

    customer_id: int
    nik: str
    email: str
    full_name: str
