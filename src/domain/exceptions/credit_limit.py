"""Credit limit related domain exceptions."""

from .base import DomainException


class CreditLimitNotFoundException(DomainException):
    """Raised when no credit limit exists for a customer and tenor."""

    def __init__(self, customer_id: int, tenor_month: int):
        super().__init__(
            message=f"Credit limit not found for tenor {tenor_month}",
            code="CREDIT_LIMIT_NOT_FOUND",
        )
        self.customer_id = customer_id
        self.tenor_month = tenor_month


class InvalidTenorOrCreditLimitException(DomainException):
    """Raised when the requested tenor has no usable credit limit."""

    def __init__(self):
        super().__init__(
            message="Invalid tenor or credit limit",
            code="INVALID_TENOR_OR_CREDIT_LIMIT",
        )


class CreditLimitExceededException(DomainException):
    """Raised when the on-the-road price is above the tenor's limit."""

    def __init__(self, on_the_road_price: int, limit_amount: int):
        super().__init__(
            message="On the road price exceeds credit limit",
            code="CREDIT_LIMIT_EXCEEDED",
        )
        self.on_the_road_price = on_the_road_price
        self.limit_amount = limit_amount
