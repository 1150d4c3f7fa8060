"""Repository interfaces for data persistence.

Every method receives the open database session it must run in, so
that callers decide the transaction boundaries. Implementations raise
``StorageError`` (or ``UniqueViolationError``) for persistence faults.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, List, Optional, Tuple

from src.domain.entities import AuthToken, CreditLimit, Customer, Transaction

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession


class CustomerRepository(ABC):
    """Abstract repository for Customer persistence."""

    @abstractmethod
    async def insert(self, session: "AsyncSession", customer: Customer) -> Customer:
        """
        Persist a new customer.

        Args:
            session: Session with an open transaction
            customer: The customer to save

        Returns:
            The saved customer with its generated id

        Raises:
            UniqueViolationError: If the NIK or email is already taken
        """
        ...

    @abstractmethod
    async def find_by_email(
        self, session: "AsyncSession", email: str
    ) -> Optional[Customer]:
        """Retrieve a customer by email, or None."""
        ...

    @abstractmethod
    async def find_by_id(
        self, session: "AsyncSession", customer_id: int
    ) -> Optional[Customer]:
        """Retrieve a customer with their credit limits, or None."""
        ...


class CreditLimitRepository(ABC):
    """Abstract repository for per-tenor credit limits."""

    @abstractmethod
    async def insert_limit(self, session: "AsyncSession", limit: CreditLimit) -> None:
        """
        Insert one credit limit inside the caller's transaction.

        No uniqueness check is made here; the caller seeds each
        tenor once.
        """
        ...

    @abstractmethod
    async def find_limits_by_customer(
        self, session: "AsyncSession", customer_id: int
    ) -> List[CreditLimit]:
        """
        Retrieve all limits of a customer ordered by tenor.

        Returns:
            List of limits, empty when the customer has none
        """
        ...

    @abstractmethod
    async def find_locked_limit(
        self, session: "AsyncSession", customer_id: int, tenor_month: int
    ) -> CreditLimit:
        """
        Read the limit for a customer and tenor under a row lock.

        Must run inside the caller's open transaction. The lock is held
        until that transaction commits or rolls back.

        Raises:
            CreditLimitNotFoundException: If no limit matches
            StorageError: On any other database fault
        """
        ...


class TransactionRepository(ABC):
    """Abstract repository for completed transactions."""

    @abstractmethod
    async def insert(self, session: "AsyncSession", transaction: Transaction) -> Transaction:
        """
        Append a transaction inside the caller's transaction.

        Returns:
            The transaction with its generated id
        """
        ...

    @abstractmethod
    async def find_by_id_and_customer(
        self, session: "AsyncSession", transaction_id: int, customer_id: int
    ) -> Transaction:
        """
        Retrieve a transaction owned by the given customer.

        Raises:
            TransactionNotFoundException: If no transaction matches the
                exact (id, customer) pair
        """
        ...

    @abstractmethod
    async def find_by_customer_paged(
        self,
        session: "AsyncSession",
        customer_id: int,
        page: int,
        page_size: int,
    ) -> Tuple[List[Transaction], int]:
        """
        Retrieve one page of a customer's transactions, newest first.

        Returns:
            Tuple of (transactions on the page, total count)
        """
        ...


class AuthTokenRepository(ABC):
    """Abstract registry of the currently valid token per customer and type."""

    @abstractmethod
    async def save(self, session: "AsyncSession", token: AuthToken) -> None:
        """Register a token, replacing any earlier one of the same type."""
        ...

    @abstractmethod
    async def get(
        self, session: "AsyncSession", customer_id: int, token_type: str
    ) -> Optional[AuthToken]:
        """Retrieve the registered token, or None."""
        ...

    @abstractmethod
    async def delete(
        self, session: "AsyncSession", customer_id: int, token_type: str
    ) -> bool:
        """
        Remove a registered token.

        Returns:
            True if a token was removed
        """
        ...
