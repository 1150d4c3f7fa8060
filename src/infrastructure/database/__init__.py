"""Database infrastructure."""

from .connection import get_session_factory, DatabaseSessionManager, db_manager
from .models import (
    Base,
    AuthTokenModel,
    CreditLimitModel,
    CustomerModel,
    TransactionModel,
)

__all__ = [
    "get_session_factory",
    "DatabaseSessionManager",
    "db_manager",
    "Base",
    "AuthTokenModel",
    "CreditLimitModel",
    "CustomerModel",
    "TransactionModel",
]
