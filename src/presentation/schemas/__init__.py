"""Pydantic schemas for API request/response validation."""

from .auth import (
    LoginRequestSchema,
    LoginResponseSchema,
    MessageResponseSchema,
    RefreshTokenResponseSchema,
    RegisterRequestSchema,
    RegisterResponseSchema,
)
from .credit_limit import CreditLimitSchema
from .customer import CustomerProfileSchema
from .transaction import (
    CreateTransactionRequestSchema,
    PageMetaSchema,
    TransactionDetailSchema,
    TransactionHistoryResponseSchema,
)
from .error import ErrorResponseSchema

__all__ = [
    "LoginRequestSchema",
    "LoginResponseSchema",
    "MessageResponseSchema",
    "RefreshTokenResponseSchema",
    "RegisterRequestSchema",
    "RegisterResponseSchema",
    "CreditLimitSchema",
    "CustomerProfileSchema",
    "CreateTransactionRequestSchema",
    "PageMetaSchema",
    "TransactionDetailSchema",
    "TransactionHistoryResponseSchema",
    "ErrorResponseSchema",
]
