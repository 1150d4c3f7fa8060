"""Application services (use cases)."""

from .auth_service import AuthService
from .credit_limit_service import CreditLimitService
from .customer_service import CustomerService
from .transaction_service import TransactionService

__all__ = [
    "AuthService",
    "CreditLimitService",
    "CustomerService",
    "TransactionService",
]
