"""Credit limit service - read-only limit listing."""

from typing import List

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from src.application.dto import CreditLimitDTO
from src.domain.interfaces import CreditLimitRepository


class CreditLimitService:
    """Lists a customer's limits without locking them."""

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        credit_limit_repository: CreditLimitRepository,
    ):
        self._session_factory = session_factory
        self._credit_limit_repo = credit_limit_repository

    async def get_credit_limits(self, customer_id: int) -> List[CreditLimitDTO]:
        async with self._session_factory() as session:
            limits = await self._credit_limit_repo.find_limits_by_customer(
                session, customer_id
            )
        return [CreditLimitDTO.from_entity(limit) for limit in limits]
