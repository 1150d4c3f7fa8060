"""Internal (500-class) domain exception."""

from .base import DomainException


class InternalServiceError(DomainException):
    """
    Raised when an operation fails for reasons the caller cannot correct.

    The message is generic; details are only logged.
    """

    def __init__(self):
        super().__init__(
            message="Internal server error",
            code="INTERNAL_ERROR",
        )
