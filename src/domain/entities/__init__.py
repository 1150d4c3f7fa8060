"""Domain Entities - Core business objects."""

from .auth_token import AuthToken
from .credit_limit import CreditLimit
from .customer import Customer, CustomerPrincipal
from .transaction import Transaction

__all__ = [
    "AuthToken",
    "CreditLimit",
    "Customer",
    "CustomerPrincipal",
    "Transaction",
]
