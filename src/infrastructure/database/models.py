"""SQLAlchemy ORM models for financing entities."""

from datetime import date, datetime, timezone

from sqlalchemy import (
    BigInteger,
    Date,
    DateTime,
    ForeignKey,
    Integer,
    String,
    UniqueConstraint,
)
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    pass


class CustomerModel(Base):
    """Persisted customer record."""

    __tablename__ = "customers"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    nik: Mapped[str] = mapped_column(String(16), nullable=False, unique=True)
    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    password: Mapped[str] = mapped_column(String(255), nullable=False)
    full_name: Mapped[str] = mapped_column(String(100), nullable=False)
    legal_name: Mapped[str] = mapped_column(String(100), nullable=False)
    birth_place: Mapped[str] = mapped_column(String(100), nullable=False)
    birth_date: Mapped[date] = mapped_column(Date, nullable=False)
    salary: Mapped[int] = mapped_column(BigInteger, nullable=False)
    ktp_photo_path: Mapped[str] = mapped_column(String(255), nullable=False)
    selfie_photo_path: Mapped[str] = mapped_column(String(255), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
        onupdate=_utcnow,
    )

    limits: Mapped[list["CreditLimitModel"]] = relationship(
        "CreditLimitModel",
        back_populates="customer",
        order_by="CreditLimitModel.tenor_month",
    )


class CreditLimitModel(Base):
    """Persisted credit limit for one customer and tenor."""

    __tablename__ = "credit_limits"
    __table_args__ = (
        UniqueConstraint("customer_id", "tenor_month", name="uq_credit_limits_customer_tenor"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    customer_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("customers.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    tenor_month: Mapped[int] = mapped_column(Integer, nullable=False)
    limit_amount: Mapped[int] = mapped_column(BigInteger, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
    )

    customer: Mapped["CustomerModel"] = relationship(
        "CustomerModel",
        back_populates="limits",
    )


class TransactionModel(Base):
    """Persisted installment transaction."""

    __tablename__ = "transactions"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    customer_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("customers.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    # Not unique: the number only carries date and customer id
    contract_number: Mapped[str] = mapped_column(String(32), nullable=False, index=True)
    on_the_road_price: Mapped[int] = mapped_column(BigInteger, nullable=False)
    admin_fee: Mapped[int] = mapped_column(BigInteger, nullable=False)
    installment_amount: Mapped[int] = mapped_column(BigInteger, nullable=False)
    interest_amount: Mapped[int] = mapped_column(BigInteger, nullable=False)
    asset_name: Mapped[str] = mapped_column(String(100), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
    )


class AuthTokenModel(Base):
    """Currently valid token per customer and token type."""

    __tablename__ = "auth_tokens"
    __table_args__ = (
        UniqueConstraint("customer_id", "token_type", name="uq_auth_tokens_customer_type"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    customer_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("customers.id", ondelete="CASCADE"),
        nullable=False,
    )
    token_type: Mapped[str] = mapped_column(String(32), nullable=False)
    jti: Mapped[str] = mapped_column(String(64), nullable=False)
    expires_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
