"""Data transfer objects for customer profile operations."""

from dataclasses import dataclass
from typing import List

from src.domain.entities import Customer

from .credit_limit import CreditLimitDTO


@dataclass(frozen=True)
class CustomerProfileResponse:
    """Profile of the authenticated customer, limits ordered by tenor."""

    id: int
    nik: str
    full_name: str
    legal_name: str
    birth_place: str
    birth_date: str
    salary: int
    ktp_photo_path: str
    selfie_photo_path: str
    limits: List[CreditLimitDTO]
    created_at: str
    updated_at: str

    @classmethod
    def from_entity(cls, customer: Customer) -> "CustomerProfileResponse":
        limits = sorted(customer.limits, key=lambda limit: limit.tenor_month)
        return cls(
            id=customer.id,
            nik=customer.nik,
            full_name=customer.full_name,
            legal_name=customer.legal_name,
            birth_place=customer.birth_place,
            birth_date=customer.birth_date.isoformat(),
            salary=customer.salary,
            ktp_photo_path=customer.ktp_photo_path,
            selfie_photo_path=customer.selfie_photo_path,
            limits=[CreditLimitDTO.from_entity(limit) for limit in limits],
            created_at=customer.created_at.isoformat(),
            updated_at=customer.updated_at.isoformat(),
        )
