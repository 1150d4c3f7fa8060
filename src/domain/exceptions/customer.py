"""Customer and authentication domain exceptions."""

from .base import DomainException


class CustomerNotFoundException(DomainException):
    """Raised when a customer cannot be found."""

    def __init__(self, customer_id: int):
        super().__init__(
            message="User not found",
            code="CUSTOMER_NOT_FOUND",
        )
        self.customer_id = customer_id


class CustomerAlreadyRegisteredException(DomainException):
    """Raised when a NIK or email is already registered."""

    MESSAGES = {
        "nik": "NIK already registered",
        "email": "Email already registered",
    }

    def __init__(self, field: str | None):
        super().__init__(
            message=self.MESSAGES.get(field, "Customer already registered"),
            code=f"{(field or 'customer').upper()}_ALREADY_REGISTERED",
        )
        self.field = field


class InvalidCredentialsException(DomainException):
    """Raised when an email/password pair does not match."""

    def __init__(self):
        super().__init__(
            message="Email or password is incorrect",
            code="INVALID_CREDENTIALS",
        )


class UnauthorizedException(DomainException):
    """Raised when a bearer token is missing, invalid or revoked."""

    def __init__(self, message: str = "Unauthorized", code: str = "UNAUTHORIZED"):
        super().__init__(message=message, code=code)


class TokenExpiredException(UnauthorizedException):
    """Raised when a token is no longer registered for its customer."""

    def __init__(self):
        super().__init__(
            message="Token already expired",
            code="TOKEN_EXPIRED",
        )
