"""Customer service - profile lookups."""

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from src.application.dto import CustomerProfileResponse
from src.domain.exceptions import CustomerNotFoundException
from src.domain.interfaces import CustomerRepository


class CustomerService:
    """Application service for customer profile use cases."""

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        customer_repository: CustomerRepository,
    ):
        self._session_factory = session_factory
        self._customer_repo = customer_repository

    async def get_customer_profile(self, customer_id: int) -> CustomerProfileResponse:
        """
        Get a customer's profile with their credit limits.

        Raises:
            CustomerNotFoundException: If the customer does not exist
        """
        async with self._session_factory() as session:
            customer = await self._customer_repo.find_by_id(session, customer_id)

        if customer is None:
            raise CustomerNotFoundException(customer_id)

        return CustomerProfileResponse.from_entity(customer)
