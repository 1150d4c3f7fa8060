"""SQLAlchemy implementation of CustomerRepository."""

from typing import Optional

import structlog
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from src.domain.entities import CreditLimit, Customer
from src.domain.exceptions import StorageError, UniqueViolationError
from src.domain.interfaces import CustomerRepository
from src.infrastructure.database.models import CustomerModel

logger = structlog.get_logger(__name__)


class SqlCustomerRepository(CustomerRepository):
    """
    SQL implementation of the Customer repository.

    Duplicate NIK or email is reported as ``UniqueViolationError``
    carrying the colliding field name.
    """

    UNIQUE_FIELDS = ("nik", "email")

    async def insert(self, session: AsyncSession, customer: Customer) -> Customer:
        """Persist a new customer."""
        for field in self.UNIQUE_FIELDS:
            if await self._exists(session, field, getattr(customer, field)):
                raise UniqueViolationError(field)

        model = CustomerModel(
            nik=customer.nik,
            email=customer.email,
            password=customer.password,
            full_name=customer.full_name,
            legal_name=customer.legal_name,
            birth_place=customer.birth_place,
            birth_date=customer.birth_date,
            salary=customer.salary,
            ktp_photo_path=customer.ktp_photo_path,
            selfie_photo_path=customer.selfie_photo_path,
            created_at=customer.created_at,
            updated_at=customer.updated_at,
        )

        try:
            session.add(model)
            await session.flush()
        except IntegrityError as e:
            # Lost a race with a concurrent registration
            logger.warning("customer_insert_conflict", error=str(e.orig))
            raise UniqueViolationError(None) from e
        except SQLAlchemyError as e:
            raise StorageError(str(e)) from e

        customer.id = model.id
        return customer

    async def find_by_email(
        self, session: AsyncSession, email: str
    ) -> Optional[Customer]:
        """Retrieve a customer by email."""
        stmt = select(CustomerModel).where(CustomerModel.email == email)
        try:
            result = await session.execute(stmt)
        except SQLAlchemyError as e:
            raise StorageError(str(e)) from e
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._to_entity(model, with_limits=False)

    async def find_by_id(
        self, session: AsyncSession, customer_id: int
    ) -> Optional[Customer]:
        """Retrieve a customer with credit limits by ID."""
        stmt = (
            select(CustomerModel)
            .options(selectinload(CustomerModel.limits))
            .where(CustomerModel.id == customer_id)
        )
        try:
            result = await session.execute(stmt)
        except SQLAlchemyError as e:
            raise StorageError(str(e)) from e
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._to_entity(model, with_limits=True)

    async def _exists(self, session: AsyncSession, field: str, value: str) -> bool:
        stmt = select(CustomerModel.id).where(getattr(CustomerModel, field) == value)
        try:
            result = await session.execute(stmt)
        except SQLAlchemyError as e:
            raise StorageError(str(e)) from e
        return result.first() is not None

    def _to_entity(self, model: CustomerModel, with_limits: bool) -> Customer:
        """Convert database model to domain entity."""
        limits = []
        if with_limits:
            limits = [
                CreditLimit(
                    id=limit.id,
                    customer_id=limit.customer_id,
                    tenor_month=limit.tenor_month,
                    limit_amount=limit.limit_amount,
                )
                for limit in model.limits
            ]

        return Customer(
            id=model.id,
            nik=model.nik,
            email=model.email,
            password=model.password,
            full_name=model.full_name,
            legal_name=model.legal_name,
            birth_place=model.birth_place,
            birth_date=model.birth_date,
            salary=model.salary,
            ktp_photo_path=model.ktp_photo_path,
            selfie_photo_path=model.selfie_photo_path,
            limits=limits,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
