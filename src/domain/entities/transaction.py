"""Transaction entity representing a financed installment purchase."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional


@dataclass
class Transaction:
    """
    A completed installment purchase.

    Attributes:
        customer_id: Owning customer
        contract_number: Human-facing contract identifier
        on_the_road_price: Financed purchase price
        admin_fee: One-off administration fee
        interest_amount: Flat interest over the whole tenor
        installment_amount: Monthly installment
        asset_name: Description of the financed item
    """

    customer_id: int
    contract_number: str
    on_the_road_price: int
    admin_fee: int
    interest_amount: int
    installment_amount: int
    asset_name: str
    id: Optional[int] = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
