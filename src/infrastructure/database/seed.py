"""
Demo data seeding.

Fills a development database with customers, their credit limits and
one transaction each, or wipes those tables. Run with
``multifinance-seed --table all --total 10``.
"""

import argparse
import asyncio
from datetime import date

import structlog
from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from src.core.logging import setup_logging
from src.core.security import hash_password
from src.domain.entities import Customer, Transaction
from src.infrastructure.repositories import (
    SqlCreditLimitRepository,
    SqlCustomerRepository,
    SqlTransactionRepository,
)
from src.service.financing import (
    FinancingSettings,
    build_default_limits,
    calculate_admin_fee,
    calculate_installment,
    calculate_interest,
    financing_settings,
    generate_contract_number,
)

from .connection import db_manager
from .models import AuthTokenModel, CreditLimitModel, CustomerModel, TransactionModel

logger = structlog.get_logger(__name__)

TABLES = ("customers", "credit_limits", "transactions", "all", "delete-all")
SEED_PASSWORD = "Password123"
SEED_SALARY = 5_000_000
SEED_TENOR = 3


def seed_customer(index: int, password_hash: str) -> Customer:
    """Demo customer number ``index`` (1-based)."""
    return Customer(
        nik=f"{index:016d}",
        email=f"user{index}@example.com",
        password=password_hash,
        full_name=f"User {index}",
        legal_name=f"User Legal {index}",
        birth_place="Jakarta",
        birth_date=date(1990, 1, 1),
        salary=SEED_SALARY,
        ktp_photo_path=f"uploads/ktp/user{index}.jpg",
        selfie_photo_path=f"uploads/selfie/user{index}.jpg",
    )


async def seed_customers(session: AsyncSession, total: int) -> int:
    """Insert up to ``total`` demo customers, skipping emails already present."""
    repo = SqlCustomerRepository()
    password_hash = hash_password(SEED_PASSWORD)
    created = 0

    for index in range(1, total + 1):
        customer = seed_customer(index, password_hash)
        if await repo.find_by_email(session, customer.email) is not None:
            continue
        await repo.insert(session, customer)
        created += 1

    logger.info("customers_seeded", created=created, requested=total)
    return created


async def seed_credit_limits(
    session: AsyncSession,
    settings: FinancingSettings = financing_settings,
) -> int:
    """Give every customer without limits the limits of their salary tier."""
    repo = SqlCreditLimitRepository()
    customers = (
        await session.execute(
            select(CustomerModel.id, CustomerModel.salary)
            .where(~CustomerModel.id.in_(select(CreditLimitModel.customer_id)))
            .order_by(CustomerModel.id)
        )
    ).all()

    created = 0
    for customer_id, salary in customers:
        for limit in build_default_limits(customer_id, salary, settings):
            await repo.insert_limit(session, limit)
            created += 1

    logger.info("credit_limits_seeded", created=created, customers=len(customers))
    return created


async def seed_transactions(
    session: AsyncSession,
    settings: FinancingSettings = financing_settings,
) -> int:
    """Book one purchase at the full limit for every customer without transactions."""
    repo = SqlTransactionRepository()
    limits = (
        await session.execute(
            select(CreditLimitModel.customer_id, CreditLimitModel.limit_amount)
            .where(
                CreditLimitModel.tenor_month == SEED_TENOR,
                ~CreditLimitModel.customer_id.in_(select(TransactionModel.customer_id)),
            )
            .order_by(CreditLimitModel.customer_id)
        )
    ).all()

    for customer_id, price in limits:
        interest = calculate_interest(price, SEED_TENOR, settings)
        transaction = Transaction(
            customer_id=customer_id,
            contract_number="",
            on_the_road_price=price,
            admin_fee=calculate_admin_fee(price, settings),
            interest_amount=interest,
            installment_amount=calculate_installment(price, interest, SEED_TENOR),
            asset_name=f"Asset {customer_id}",
        )
        transaction.contract_number = generate_contract_number(
            customer_id, transaction.created_at.date()
        )
        await repo.insert(session, transaction)

    logger.info("transactions_seeded", created=len(limits))
    return len(limits)


async def delete_all(session: AsyncSession) -> None:
    """Remove every row from the seeded tables, children first."""
    for model in (TransactionModel, CreditLimitModel, AuthTokenModel, CustomerModel):
        await session.execute(delete(model))
    logger.info("seeded_tables_cleared")


async def run_seed(
    session_factory: async_sessionmaker[AsyncSession],
    table: str,
    total: int = 1,
) -> None:
    """
    Run one seeder inside a single transaction.

    Args:
        session_factory: Factory for the target database
        table: One of ``TABLES``
        total: Number of customers to create for ``customers``/``all``
    """
    if table not in TABLES:
        raise ValueError(f"unknown seed table: {table}")

    async with session_factory() as session:
        async with session.begin():
            if table == "delete-all":
                await delete_all(session)
                return
            if table in ("customers", "all"):
                await seed_customers(session, total)
            if table in ("credit_limits", "all"):
                await seed_credit_limits(session)
            if table in ("transactions", "all"):
                await seed_transactions(session)


async def _main(table: str, total: int, create_tables: bool) -> None:
    db_manager.init()
    try:
        if create_tables:
            await db_manager.create_all()
        await run_seed(db_manager.sessionmaker, table, total)
    finally:
        await db_manager.close()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Seed the multifinance database with demo data")
    parser.add_argument("--table", choices=TABLES, required=True, help="Seed to run")
    parser.add_argument("--total", type=int, default=1, help="Number of customers to create")
    parser.add_argument(
        "--create-tables",
        action="store_true",
        help="Create missing tables before seeding",
    )
    args = parser.parse_args(argv)

    if args.total < 1:
        parser.error("--total must be at least 1")

    setup_logging()
    asyncio.run(_main(args.table, args.total, args.create_tables))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
