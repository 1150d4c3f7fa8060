"""
Multifinance Service - Installment Financing Back-Office API

A FastAPI-based service that handles customer onboarding, authentication,
per-tenor credit limits and credit-limited installment transactions.
"""

__version__ = "0.1.0"
