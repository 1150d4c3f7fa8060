"""Contract number generation."""

from datetime import date, datetime, timezone

CONTRACT_PREFIX = "TRX"


def generate_contract_number(customer_id: int, on_date: date | None = None) -> str:
    """
    Build a contract number: prefix, creation date and customer id.

    The date is the UTC calendar date, the same clock that stamps
    ``created_at``, so numbers do not depend on the server's time zone.
    Two transactions of the same customer on the same UTC day get the
    same number.

    Examples:
        >>> generate_contract_number(7, date(2024, 3, 1))
        'TRX202403010007'
    """
    day = on_date or datetime.now(timezone.utc).date()
    return f"{CONTRACT_PREFIX}{day:%Y%m%d}{customer_id:04d}"
