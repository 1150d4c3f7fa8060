"""
Financing Settings for the Multifinance installment engine.

This module contains the configurable parameters for fee/interest
calculation and for the salary tiers that seed credit limits at
registration.

Environment variables use the FINANCING_ prefix:
    FINANCING_ADMIN_FEE_PERCENT=2
    FINANCING_ADMIN_FEE_MINIMUM=50000
    FINANCING_MONTHLY_INTEREST_PERCENT=1

Usage:
    from src.service.financing.settings import financing_settings

    fee_floor = financing_settings.admin_fee_minimum

    # Or create custom settings for testing
    custom = FinancingSettings(admin_fee_minimum=25000)
"""

import json
from functools import lru_cache
from typing import Dict, List, Tuple

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_SALARY_TIERS = [
    # [max_salary_inclusive or null, {tenor_month: limit_amount}]
    [4_999_999, {"1": 100_000, "2": 200_000, "3": 500_000, "6": 700_000}],
    [10_000_000, {"1": 200_000, "2": 400_000, "3": 800_000, "6": 1_200_000}],
    [None, {"1": 500_000, "2": 1_000_000, "3": 1_500_000, "6": 2_000_000}],
]


class FinancingSettings(BaseSettings):
    """
    Configurable parameters for installment pricing and limit seeding.

    All monetary values are integer currency units.
    Percentages are whole numbers (2 means 2%).
    """

    model_config = SettingsConfigDict(
        env_prefix="FINANCING_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # === Fees ===
    admin_fee_percent: int = Field(
        default=2,
        ge=0,
        le=100,
        description="Admin fee as a percentage of the on-the-road price",
    )
    admin_fee_minimum: int = Field(
        default=50_000,
        ge=0,
        description="Admin fee floor",
    )

    # === Interest ===
    monthly_interest_percent: int = Field(
        default=1,
        ge=0,
        le=100,
        description="Flat simple interest per tenor month, in percent",
    )

    # === Salary Tiers ===
    salary_tiers_json: str = Field(
        default=json.dumps(DEFAULT_SALARY_TIERS),
        description=(
            "Salary tiers as JSON array: [[max_salary_or_null, {tenor: limit}], ...], "
            "ascending, last tier open-ended"
        ),
    )

    @field_validator("salary_tiers_json")
    @classmethod
    def validate_tiers_json(cls, v: str) -> str:
        """Validate that tiers JSON is parseable and well-formed."""
        try:
            tiers = json.loads(v)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON: {e}")

        if not isinstance(tiers, list) or not tiers:
            raise ValueError("Tiers must be a non-empty list")

        previous_ceiling = -1
        for index, tier in enumerate(tiers):
            if not isinstance(tier, list) or len(tier) != 2:
                raise ValueError("Each tier must be [max_salary_or_null, {tenor: limit}]")
            ceiling, limits = tier
            is_last = index == len(tiers) - 1
            if ceiling is None and not is_last:
                raise ValueError("Only the last tier may be open-ended")
            if ceiling is not None:
                if not isinstance(ceiling, int) or ceiling <= previous_ceiling:
                    raise ValueError("Tier ceilings must be ascending integers")
                previous_ceiling = ceiling
            if not isinstance(limits, dict) or not limits:
                raise ValueError("Each tier needs at least one tenor limit")
            for tenor, amount in limits.items():
                if not str(tenor).isdigit() or int(tenor) <= 0:
                    raise ValueError(f"Tenor must be a positive integer: {tenor}")
                if not isinstance(amount, int) or amount < 0:
                    raise ValueError(f"Limit cannot be negative: {amount}")
        if tiers[-1][0] is not None:
            raise ValueError("The last tier must be open-ended (null ceiling)")
        return v

    @property
    def salary_tiers(self) -> List[Tuple[int | None, Dict[int, int]]]:
        """Salary tiers as (inclusive ceiling, {tenor_month: limit_amount})."""
        return [
            (ceiling, {int(tenor): amount for tenor, amount in limits.items()})
            for ceiling, limits in json.loads(self.salary_tiers_json)
        ]


@lru_cache
def get_financing_settings() -> FinancingSettings:
    """Get cached financing settings instance."""
    return FinancingSettings()


financing_settings = get_financing_settings()
