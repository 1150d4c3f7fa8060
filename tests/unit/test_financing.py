"""
Unit Tests for the Financing Rules Module.

These tests verify:
1. Admin fee, interest and installment calculation
2. Contract number format
3. Salary tier selection and default limit seeding
4. Financing settings validation

Test Categories:
- test_admin_fee_*: Admin fee tests
- test_interest_*: Interest tests
- test_installment_*: Installment tests
- test_contract_number_*: Contract number tests
- test_tier_*: Salary tier tests
- test_settings_*: Settings validation tests
"""

import json
from datetime import date, datetime, timezone

import pytest
from pydantic import ValidationError

from src.service.financing import (
    FinancingSettings,
    build_default_limits,
    calculate_admin_fee,
    calculate_installment,
    calculate_interest,
    generate_contract_number,
    limits_for_salary,
)


# =============================================================================
# Calculator Tests
# =============================================================================

class TestAdminFee:
    """Tests for calculate_admin_fee."""

    def test_admin_fee_floor_applies_to_small_prices(self):
        assert calculate_admin_fee(100_000) == 50_000

    def test_admin_fee_floor_applies_at_one_million(self):
        """2% of 1,000,000 is 20,000, below the 50,000 floor."""
        assert calculate_admin_fee(1_000_000) == 50_000

    def test_admin_fee_percentage_above_floor(self):
        assert calculate_admin_fee(5_000_000) == 100_000

    def test_admin_fee_at_floor_crossover(self):
        """2,500,000 is the price where 2% equals the floor."""
        assert calculate_admin_fee(2_500_000) == 50_000
        assert calculate_admin_fee(2_500_050) == 50_001

    def test_admin_fee_truncates(self):
        assert calculate_admin_fee(3_333_333) == 66_666

    def test_admin_fee_uses_settings(self):
        custom = FinancingSettings(admin_fee_percent=5, admin_fee_minimum=0)
        assert calculate_admin_fee(100_000, custom) == 5_000


class TestInterest:
    """Tests for calculate_interest."""

    def test_interest_twelve_months(self):
        assert calculate_interest(500_000, 12) == 60_000

    def test_interest_scales_with_tenor(self):
        assert calculate_interest(500_000, 3) == 15_000
        assert calculate_interest(500_000, 6) == 30_000

    def test_interest_truncates(self):
        assert calculate_interest(99, 1) == 0
        assert calculate_interest(150, 1) == 1

    def test_interest_uses_settings(self):
        custom = FinancingSettings(monthly_interest_percent=2)
        assert calculate_interest(500_000, 12, custom) == 120_000


class TestInstallment:
    """Tests for calculate_installment."""

    def test_installment_twelve_months(self):
        assert calculate_installment(500_000, 60_000, 12) == 46_666

    def test_installment_single_month(self):
        assert calculate_installment(100_000, 1_000, 1) == 101_000

    def test_installment_floors(self):
        assert calculate_installment(500_000, 15_000, 3) == 171_666


# =============================================================================
# Contract Number Tests
# =============================================================================

class TestContractNumber:
    """Tests for generate_contract_number."""

    def test_contract_number_format(self):
        assert generate_contract_number(7, date(2024, 3, 1)) == "TRX202403010007"

    def test_contract_number_pads_to_four_digits(self):
        assert generate_contract_number(42, date(2024, 12, 31)).endswith("0042")

    def test_contract_number_longer_ids_not_truncated(self):
        assert generate_contract_number(123_456, date(2024, 1, 1)) == "TRX20240101123456"

    def test_contract_number_repeats_same_day(self):
        """Same customer, same day: identical numbers."""
        day = date(2024, 5, 5)
        assert generate_contract_number(1, day) == generate_contract_number(1, day)

    def test_contract_number_defaults_to_utc_today(self):
        today = datetime.now(timezone.utc).date()
        assert generate_contract_number(1).startswith(f"TRX{today:%Y%m%d}")


# =============================================================================
# Salary Tier Tests
# =============================================================================

class TestSalaryTiers:
    """Tests for limits_for_salary and build_default_limits."""

    LOW = {1: 100_000, 2: 200_000, 3: 500_000, 6: 700_000}
    MID = {1: 200_000, 2: 400_000, 3: 800_000, 6: 1_200_000}
    HIGH = {1: 500_000, 2: 1_000_000, 3: 1_500_000, 6: 2_000_000}

    @pytest.mark.parametrize(
        "salary,tier",
        [
            (1, "LOW"),
            (4_000_000, "LOW"),
            (4_999_999, "LOW"),
            (5_000_000, "MID"),
            (7_500_000, "MID"),
            (10_000_000, "MID"),
            (10_000_001, "HIGH"),
            (50_000_000, "HIGH"),
        ],
    )
    def test_tier_boundaries(self, salary, tier):
        assert limits_for_salary(salary) == getattr(self, tier)

    def test_tier_build_default_limits_ordered(self):
        limits = build_default_limits(customer_id=9, salary=4_000_000)

        assert [limit.tenor_month for limit in limits] == [1, 2, 3, 6]
        assert [limit.limit_amount for limit in limits] == [100_000, 200_000, 500_000, 700_000]
        assert all(limit.customer_id == 9 for limit in limits)
        assert all(limit.id is None for limit in limits)

    def test_tier_custom_table(self):
        custom = FinancingSettings(
            salary_tiers_json=json.dumps([[1_000, {"12": 10}], [None, {"12": 20}]])
        )

        assert limits_for_salary(1_000, custom) == {12: 10}
        assert limits_for_salary(1_001, custom) == {12: 20}


# =============================================================================
# Settings Validation Tests
# =============================================================================

class TestFinancingSettings:
    """Tests for FinancingSettings validation."""

    def test_settings_defaults(self):
        settings = FinancingSettings()

        assert settings.admin_fee_percent == 2
        assert settings.admin_fee_minimum == 50_000
        assert settings.monthly_interest_percent == 1
        assert len(settings.salary_tiers) == 3

    @pytest.mark.parametrize(
        "tiers_json",
        [
            "not json",
            "[]",
            json.dumps([[1000, {"1": 10}]]),
            json.dumps([[None, {"1": 10}], [None, {"1": 20}]]),
            json.dumps([[2000, {"1": 10}], [1000, {"1": 10}], [None, {"1": 10}]]),
            json.dumps([[1000, {"0": 10}], [None, {"1": 10}]]),
            json.dumps([[1000, {"1": -5}], [None, {"1": 10}]]),
            json.dumps([[1000, {}], [None, {"1": 10}]]),
        ],
    )
    def test_settings_rejects_malformed_tiers(self, tiers_json):
        with pytest.raises(ValidationError):
            FinancingSettings(salary_tiers_json=tiers_json)

    def test_settings_rejects_negative_fee(self):
        with pytest.raises(ValidationError):
            FinancingSettings(admin_fee_minimum=-1)
