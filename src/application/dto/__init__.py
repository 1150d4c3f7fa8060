"""Data Transfer Objects for application layer."""

from .auth import (
    LoginRequest,
    LoginResponse,
    RefreshTokenResponse,
    RegisterRequest,
    RegisterResponse,
)
from .credit_limit import CreditLimitDTO
from .customer import CustomerProfileResponse
from .transaction import (
    CreateTransactionRequest,
    PageMeta,
    TransactionDetail,
    TransactionHistory,
)

__all__ = [
    "LoginRequest",
    "LoginResponse",
    "RefreshTokenResponse",
    "RegisterRequest",
    "RegisterResponse",
    "CreditLimitDTO",
    "CustomerProfileResponse",
    "CreateTransactionRequest",
    "PageMeta",
    "TransactionDetail",
    "TransactionHistory",
]
