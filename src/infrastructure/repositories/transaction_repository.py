"""SQLAlchemy implementation of TransactionRepository."""

from typing import List, Tuple

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities import Transaction
from src.domain.exceptions import StorageError, TransactionNotFoundException
from src.domain.interfaces import TransactionRepository
from src.infrastructure.database.models import TransactionModel


class SqlTransactionRepository(TransactionRepository):
    """
    SQL implementation of the Transaction repository.

    Transactions are append-only; there is no update or delete.
    """

    async def insert(self, session: AsyncSession, transaction: Transaction) -> Transaction:
        """Append a transaction inside the caller's open transaction."""
        model = TransactionModel(
            customer_id=transaction.customer_id,
            contract_number=transaction.contract_number,
            on_the_road_price=transaction.on_the_road_price,
            admin_fee=transaction.admin_fee,
            installment_amount=transaction.installment_amount,
            interest_amount=transaction.interest_amount,
            asset_name=transaction.asset_name,
            created_at=transaction.created_at,
        )

        try:
            session.add(model)
            await session.flush()
        except SQLAlchemyError as e:
            raise StorageError(str(e)) from e

        transaction.id = model.id
        return transaction

    async def find_by_id_and_customer(
        self, session: AsyncSession, transaction_id: int, customer_id: int
    ) -> Transaction:
        """Retrieve a transaction scoped to its owner."""
        stmt = select(TransactionModel).where(
            TransactionModel.id == transaction_id,
            TransactionModel.customer_id == customer_id,
        )
        try:
            result = await session.execute(stmt)
        except SQLAlchemyError as e:
            raise StorageError(str(e)) from e
        model = result.scalar_one_or_none()

        if model is None:
            raise TransactionNotFoundException(transaction_id)

        return self._to_entity(model)

    async def find_by_customer_paged(
        self,
        session: AsyncSession,
        customer_id: int,
        page: int,
        page_size: int,
    ) -> Tuple[List[Transaction], int]:
        """Retrieve a page of a customer's transactions, newest first."""
        count_stmt = (
            select(func.count())
            .select_from(TransactionModel)
            .where(TransactionModel.customer_id == customer_id)
        )
        stmt = (
            select(TransactionModel)
            .where(TransactionModel.customer_id == customer_id)
            .order_by(TransactionModel.created_at.desc(), TransactionModel.id.desc())
            .limit(page_size)
            .offset(page_size * (page - 1))
        )
        try:
            total = (await session.execute(count_stmt)).scalar_one()
            result = await session.execute(stmt)
        except SQLAlchemyError as e:
            raise StorageError(str(e)) from e

        return [self._to_entity(model) for model in result.scalars().all()], total

    def _to_entity(self, model: TransactionModel) -> Transaction:
        """Convert database model to domain entity."""
        return Transaction(
            id=model.id,
            customer_id=model.customer_id,
            contract_number=model.contract_number,
            on_the_road_price=model.on_the_road_price,
            admin_fee=model.admin_fee,
            interest_amount=model.interest_amount,
            installment_amount=model.installment_amount,
            asset_name=model.asset_name,
            created_at=model.created_at,
        )
