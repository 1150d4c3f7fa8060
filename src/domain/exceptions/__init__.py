"""Domain Exceptions - Business rule violations and domain errors."""

from .base import DomainException
from .credit_limit import (
    CreditLimitExceededException,
    CreditLimitNotFoundException,
    InvalidTenorOrCreditLimitException,
)
from .customer import (
    CustomerAlreadyRegisteredException,
    CustomerNotFoundException,
    InvalidCredentialsException,
    TokenExpiredException,
    UnauthorizedException,
)
from .internal import InternalServiceError
from .storage import StorageError, UniqueViolationError
from .transaction import InvalidTransactionRequestException, TransactionNotFoundException

__all__ = [
    "DomainException",
    "CreditLimitExceededException",
    "CreditLimitNotFoundException",
    "InvalidTenorOrCreditLimitException",
    "CustomerAlreadyRegisteredException",
    "CustomerNotFoundException",
    "InvalidCredentialsException",
    "TokenExpiredException",
    "UnauthorizedException",
    "InternalServiceError",
    "StorageError",
    "UniqueViolationError",
    "InvalidTransactionRequestException",
    "TransactionNotFoundException",
]
