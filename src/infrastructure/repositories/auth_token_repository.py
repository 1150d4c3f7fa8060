"""SQLAlchemy implementation of AuthTokenRepository."""

from typing import Optional

from sqlalchemy import delete, select
from sqlalchemy.dialects.postgresql import insert as postgresql_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities import AuthToken
from src.domain.exceptions import StorageError
from src.domain.interfaces import AuthTokenRepository
from src.infrastructure.database.models import AuthTokenModel


def _dialect_insert(session: AsyncSession):
    """Pick the INSERT construct that supports ON CONFLICT for the bound database."""
    if session.get_bind().dialect.name == "postgresql":
        return postgresql_insert
    return sqlite_insert


class SqlAuthTokenRepository(AuthTokenRepository):
    """Keeps the latest issued token per customer and token type."""

    async def save(self, session: AsyncSession, token: AuthToken) -> None:
        # Upsert on uq_auth_tokens_customer_type; concurrent logins of one
        # customer converge on a single row
        insert = _dialect_insert(session)
        stmt = insert(AuthTokenModel).values(
            customer_id=token.customer_id,
            token_type=token.token_type,
            jti=token.jti,
            expires_at=token.expires_at,
        )
        stmt = stmt.on_conflict_do_update(
            index_elements=[AuthTokenModel.customer_id, AuthTokenModel.token_type],
            set_={"jti": stmt.excluded.jti, "expires_at": stmt.excluded.expires_at},
        )
        try:
            await session.execute(stmt)
        except SQLAlchemyError as e:
            raise StorageError(str(e)) from e

    async def get(
        self, session: AsyncSession, customer_id: int, token_type: str
    ) -> Optional[AuthToken]:
        stmt = select(AuthTokenModel).where(
            AuthTokenModel.customer_id == customer_id,
            AuthTokenModel.token_type == token_type,
        )
        try:
            model = (await session.execute(stmt)).scalar_one_or_none()
        except SQLAlchemyError as e:
            raise StorageError(str(e)) from e

        if model is None:
            return None

        return AuthToken(
            customer_id=model.customer_id,
            token_type=model.token_type,
            jti=model.jti,
            expires_at=model.expires_at,
        )

    async def delete(
        self, session: AsyncSession, customer_id: int, token_type: str
    ) -> bool:
        stmt = delete(AuthTokenModel).where(
            AuthTokenModel.customer_id == customer_id,
            AuthTokenModel.token_type == token_type,
        )
        try:
            result = await session.execute(stmt)
        except SQLAlchemyError as e:
            raise StorageError(str(e)) from e
        return result.rowcount > 0
