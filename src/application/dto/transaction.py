"""Data transfer objects for transaction operations."""

import math
from dataclasses import dataclass
from typing import List

from src.domain.entities import Transaction


@dataclass(frozen=True)
class CreateTransactionRequest:
    """
    Input data for creating a transaction.

    ``installment_amount`` and ``interest_amount`` are caller-supplied
    figures that are checked for shape only. The stored amounts are
    always recomputed from price and tenor.
    """

    customer_id: int
    on_the_road_price: int
    tenor_month: int
    asset_name: str
    installment_amount: int
    interest_amount: int

    def validate(self) -> List[str]:
        errors = []

        if self.on_the_road_price <= 0:
            errors.append("on_the_road_price must be positive")

        if self.tenor_month <= 0:
            errors.append("tenor_month must be positive")

        if self.installment_amount <= 0:
            errors.append("installment_amount must be positive")

        if self.interest_amount <= 0:
            errors.append("interest_amount must be positive")

        if not self.asset_name or not self.asset_name.strip():
            errors.append("asset_name is required")
        elif len(self.asset_name) > 100:
            errors.append("asset_name must be at most 100 characters")

        return errors


@dataclass(frozen=True)
class TransactionDetail:
    """A stored transaction as returned to its owner."""

    id: int
    customer_id: int
    contract_number: str
    on_the_road_price: int
    admin_fee: int
    installment_amount: int
    interest_amount: int
    asset_name: str
    created_at: str

    @classmethod
    def from_entity(cls, transaction: Transaction) -> "TransactionDetail":
        return cls(
            id=transaction.id,
            customer_id=transaction.customer_id,
            contract_number=transaction.contract_number,
            on_the_road_price=transaction.on_the_road_price,
            admin_fee=transaction.admin_fee,
            installment_amount=transaction.installment_amount,
            interest_amount=transaction.interest_amount,
            asset_name=transaction.asset_name,
            created_at=transaction.created_at.isoformat(),
        )


@dataclass(frozen=True)
class PageMeta:
    page: int
    paginate: int
    total_data: int
    total_page: int

    @classmethod
    def build(cls, page: int, paginate: int, total_data: int) -> "PageMeta":
        return cls(
            page=page,
            paginate=paginate,
            total_data=total_data,
            total_page=math.ceil(total_data / paginate) if total_data else 0,
        )


@dataclass(frozen=True)
class TransactionHistory:
    """One page of a customer's transactions, newest first."""

    items: List[TransactionDetail]
    meta: PageMeta

    @classmethod
    def from_entities(
        cls,
        transactions: List[Transaction],
        page: int,
        paginate: int,
        total: int,
    ) -> "TransactionHistory":
        return cls(
            items=[TransactionDetail.from_entity(t) for t in transactions],
            meta=PageMeta.build(page, paginate, total),
        )
