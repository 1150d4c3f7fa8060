"""SQLAlchemy implementation of CreditLimitRepository."""

from typing import List

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities import CreditLimit
from src.domain.exceptions import CreditLimitNotFoundException, StorageError
from src.domain.interfaces import CreditLimitRepository
from src.infrastructure.database.models import CreditLimitModel


class SqlCreditLimitRepository(CreditLimitRepository):
    """SQL-backed credit limit ledger."""

    async def insert_limit(self, session: AsyncSession, limit: CreditLimit) -> None:
        model = CreditLimitModel(
            customer_id=limit.customer_id,
            tenor_month=limit.tenor_month,
            limit_amount=limit.limit_amount,
        )

        try:
            session.add(model)
            await session.flush()
        except SQLAlchemyError as e:
            raise StorageError(str(e)) from e

    async def find_limits_by_customer(
        self, session: AsyncSession, customer_id: int
    ) -> List[CreditLimit]:
        stmt = (
            select(CreditLimitModel)
            .where(CreditLimitModel.customer_id == customer_id)
            .order_by(CreditLimitModel.tenor_month.asc())
        )
        try:
            result = await session.execute(stmt)
        except SQLAlchemyError as e:
            raise StorageError(str(e)) from e

        return [self._to_entity(model) for model in result.scalars().all()]

    async def find_locked_limit(
        self, session: AsyncSession, customer_id: int, tenor_month: int
    ) -> CreditLimit:
        # SELECT ... FOR UPDATE; held until the caller's transaction ends
        stmt = (
            select(CreditLimitModel)
            .where(
                CreditLimitModel.customer_id == customer_id,
                CreditLimitModel.tenor_month == tenor_month,
            )
            .with_for_update()
        )
        try:
            result = await session.execute(stmt)
            model = result.scalar_one_or_none()
        except SQLAlchemyError as e:
            raise StorageError(str(e)) from e

        if model is None:
            raise CreditLimitNotFoundException(customer_id, tenor_month)

        return self._to_entity(model)

    def _to_entity(self, model: CreditLimitModel) -> CreditLimit:
        return CreditLimit(
            id=model.id,
            customer_id=model.customer_id,
            tenor_month=model.tenor_month,
            limit_amount=model.limit_amount,
        )
