"""Repository implementations."""

from .auth_token_repository import SqlAuthTokenRepository
from .credit_limit_repository import SqlCreditLimitRepository
from .customer_repository import SqlCustomerRepository
from .transaction_repository import SqlTransactionRepository

__all__ = [
    "SqlAuthTokenRepository",
    "SqlCreditLimitRepository",
    "SqlCustomerRepository",
    "SqlTransactionRepository",
]
