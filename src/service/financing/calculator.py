"""
Fee and Interest Calculator.

Pure functions over integer currency units. Percentages are applied
with integer arithmetic so results truncate toward zero for the
non-negative amounts handled here.
"""

from .settings import FinancingSettings, financing_settings


def calculate_admin_fee(
    on_the_road_price: int,
    settings: FinancingSettings = financing_settings,
) -> int:
    """
    Admin fee charged once per transaction.

    A percentage of the price, never below the configured minimum.

    Examples:
        >>> calculate_admin_fee(5_000_000)
        100000
        >>> calculate_admin_fee(100_000)
        50000
    """
    fee = on_the_road_price * settings.admin_fee_percent // 100
    return max(fee, settings.admin_fee_minimum)


def calculate_interest(
    on_the_road_price: int,
    tenor_month: int,
    settings: FinancingSettings = financing_settings,
) -> int:
    """
    Flat simple interest over the whole tenor.

    Examples:
        >>> calculate_interest(500_000, 12)
        60000
    """
    return on_the_road_price * settings.monthly_interest_percent * tenor_month // 100


def calculate_installment(
    on_the_road_price: int,
    interest_amount: int,
    tenor_month: int,
) -> int:
    """
    Monthly installment: price plus interest spread over the tenor.

    ``tenor_month`` must be positive; request validation guarantees it.

    Examples:
        >>> calculate_installment(500_000, 60_000, 12)
        46666
    """
    return (on_the_road_price + interest_amount) // tenor_month
