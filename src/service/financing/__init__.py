"""
Financing Rules Module for the Multifinance installment engine
"""

from .settings import FinancingSettings, financing_settings
from .calculator import (
    calculate_admin_fee,
    calculate_interest,
    calculate_installment,
)
from .contract_number import generate_contract_number
from .credit_limit_tiers import build_default_limits, limits_for_salary

__all__ = [
    # Settings
    "FinancingSettings",
    "financing_settings",
    # Calculator
    "calculate_admin_fee",
    "calculate_interest",
    "calculate_installment",
    # Contract Number
    "generate_contract_number",
    # Tiers
    "build_default_limits",
    "limits_for_salary",
]
