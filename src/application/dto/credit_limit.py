"""Data transfer objects for credit limits."""

from dataclasses import dataclass

from src.domain.entities import CreditLimit


@dataclass(frozen=True)
class CreditLimitDTO:
    """A single tenor's limit as shown to the customer."""

    tenor: int
    limit_amount: int

    @classmethod
    def from_entity(cls, limit: CreditLimit) -> "CreditLimitDTO":
        return cls(tenor=limit.tenor_month, limit_amount=limit.limit_amount)
