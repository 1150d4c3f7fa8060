"""
Domain Interfaces (Ports)
"""

from .repositories import (
    AuthTokenRepository,
    CreditLimitRepository,
    CustomerRepository,
    TransactionRepository,
)

__all__ = [
    "AuthTokenRepository",
    "CreditLimitRepository",
    "CustomerRepository",
    "TransactionRepository",
]
