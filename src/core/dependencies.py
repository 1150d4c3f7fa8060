"""Dependency injection for FastAPI."""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from src.infrastructure.database import get_session_factory
from src.infrastructure.repositories import (
    SqlAuthTokenRepository,
    SqlCreditLimitRepository,
    SqlCustomerRepository,
    SqlTransactionRepository,
)
from src.application.services import (
    AuthService,
    CreditLimitService,
    CustomerService,
    TransactionService,
)

SessionFactory = Annotated[async_sessionmaker[AsyncSession], Depends(get_session_factory)]


# Repository dependencies
def get_customer_repository() -> SqlCustomerRepository:
    """Get a CustomerRepository instance."""
    return SqlCustomerRepository()


def get_credit_limit_repository() -> SqlCreditLimitRepository:
    """Get a CreditLimitRepository instance."""
    return SqlCreditLimitRepository()


def get_transaction_repository() -> SqlTransactionRepository:
    """Get a TransactionRepository instance."""
    return SqlTransactionRepository()


def get_auth_token_repository() -> SqlAuthTokenRepository:
    """Get an AuthTokenRepository instance."""
    return SqlAuthTokenRepository()


# Service dependencies
async def get_auth_service(
    session_factory: SessionFactory,
    customer_repo: Annotated[SqlCustomerRepository, Depends(get_customer_repository)],
    credit_limit_repo: Annotated[SqlCreditLimitRepository, Depends(get_credit_limit_repository)],
    token_repo: Annotated[SqlAuthTokenRepository, Depends(get_auth_token_repository)],
) -> AuthService:
    """Get an AuthService instance with all dependencies."""
    return AuthService(
        session_factory=session_factory,
        customer_repository=customer_repo,
        credit_limit_repository=credit_limit_repo,
        auth_token_repository=token_repo,
    )


async def get_customer_service(
    session_factory: SessionFactory,
    customer_repo: Annotated[SqlCustomerRepository, Depends(get_customer_repository)],
) -> CustomerService:
    """Get a CustomerService instance."""
    return CustomerService(
        session_factory=session_factory,
        customer_repository=customer_repo,
    )


async def get_credit_limit_service(
    session_factory: SessionFactory,
    credit_limit_repo: Annotated[SqlCreditLimitRepository, Depends(get_credit_limit_repository)],
) -> CreditLimitService:
    """Get a CreditLimitService instance."""
    return CreditLimitService(
        session_factory=session_factory,
        credit_limit_repository=credit_limit_repo,
    )


async def get_transaction_service(
    session_factory: SessionFactory,
    credit_limit_repo: Annotated[SqlCreditLimitRepository, Depends(get_credit_limit_repository)],
    transaction_repo: Annotated[SqlTransactionRepository, Depends(get_transaction_repository)],
) -> TransactionService:
    """Get a TransactionService instance with all dependencies."""
    return TransactionService(
        session_factory=session_factory,
        credit_limit_repository=credit_limit_repo,
        transaction_repository=transaction_repo,
    )
