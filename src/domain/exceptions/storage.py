"""Storage-layer errors raised by repository implementations."""

from typing import Optional


class StorageError(Exception):
    """Raised for any persistence failure without a more specific type."""

    def __init__(self, message: str = "Storage operation failed"):
        self.message = message
        super().__init__(message)


class UniqueViolationError(StorageError):
    """
    Raised when an insert collides with a unique key.

    Attributes:
        field: Name of the colliding field, or None when it
            could not be determined
    """

    def __init__(self, field: Optional[str] = None):
        super().__init__(f"Unique constraint violated: {field or 'unknown'}")
        self.field = field
