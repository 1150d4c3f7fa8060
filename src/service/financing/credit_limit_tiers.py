"""
Salary Tier Mapping.

Maps a customer's declared salary to the credit limits seeded for each
tenor at registration.
"""

from typing import List

from src.domain.entities import CreditLimit

from .settings import FinancingSettings, financing_settings


def limits_for_salary(
    salary: int,
    settings: FinancingSettings = financing_settings,
) -> dict[int, int]:
    """
    Select the tenor limits for a salary.

    Args:
        salary: Declared monthly salary
        settings: Financing settings (uses defaults if not provided)

    Returns:
        Mapping of tenor_month to limit_amount
    """
    for ceiling, limits in settings.salary_tiers:
        if ceiling is None or salary <= ceiling:
            return dict(limits)

    # validated settings always end with an open-ended tier
    return {}


def build_default_limits(
    customer_id: int,
    salary: int,
    settings: FinancingSettings = financing_settings,
) -> List[CreditLimit]:
    """Credit limit entities for a newly registered customer, ordered by tenor."""
    limits = limits_for_salary(salary, settings)
    return [
        CreditLimit(customer_id=customer_id, tenor_month=tenor, limit_amount=amount)
        for tenor, amount in sorted(limits.items())
    ]
