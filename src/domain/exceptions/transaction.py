"""Transaction-related domain exceptions."""

from .base import DomainException


class TransactionNotFoundException(DomainException):
    """Raised when a transaction cannot be found for the requesting customer."""

    def __init__(self, transaction_id: int):
        super().__init__(
            message="Transaction not found",
            code="TRANSACTION_NOT_FOUND",
        )
        self.transaction_id = transaction_id


class InvalidTransactionRequestException(DomainException):
    """Raised when a transaction request fails validation."""

    def __init__(self, message: str):
        super().__init__(
            message=message,
            code="INVALID_TRANSACTION_REQUEST",
        )
