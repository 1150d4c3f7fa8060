"""Credit limit entity."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class CreditLimit:
    """
    Maximum on-the-road price approved for a customer and tenor.

    One limit exists per (customer_id, tenor_month) pair.
    """

    customer_id: int
    tenor_month: int
    limit_amount: int
    id: Optional[int] = None

    def allows(self, on_the_road_price: int) -> bool:
        """A price equal to the limit is still within it."""
        return on_the_road_price <= self.limit_amount
