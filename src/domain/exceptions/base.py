"""Base domain exception."""


class DomainException(Exception):
    """
    Base exception for business rule violations.

    ``code`` is a stable machine-readable identifier returned to API
    clients; ``message`` is safe to show to the customer.
    """

    def __init__(self, message: str, code: str = "DOMAIN_ERROR"):
        self.message = message
        self.code = code
        super().__init__(self.message)

    def to_dict(self) -> dict:
        return {"error": self.code, "message": self.message}
