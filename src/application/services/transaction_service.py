"""Transaction service - orchestrates installment purchase creation."""

import structlog
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, AsyncSessionTransaction, async_sessionmaker

from src.application.dto import (
    CreateTransactionRequest,
    TransactionDetail,
    TransactionHistory,
)
from src.core.metrics import (
    record_financed_amount,
    record_rollback_failure,
    record_transaction_outcome,
    track_transaction_latency,
)
from src.domain.entities import Transaction
from src.domain.exceptions import (
    CreditLimitExceededException,
    CreditLimitNotFoundException,
    InternalServiceError,
    InvalidTenorOrCreditLimitException,
    InvalidTransactionRequestException,
    StorageError,
)
from src.domain.interfaces import CreditLimitRepository, TransactionRepository
from src.service.financing import (
    FinancingSettings,
    calculate_admin_fee,
    calculate_installment,
    calculate_interest,
    financing_settings,
    generate_contract_number,
)

logger = structlog.get_logger(__name__)


class TransactionService:
    """
    Application service for transaction use cases.

    Creating a transaction runs in a single database transaction:
    lock the credit limit row, validate the price against it, compute
    fee/interest/installment, insert, commit. Any failure after begin
    rolls the transaction back before the error is raised.
    """

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        credit_limit_repository: CreditLimitRepository,
        transaction_repository: TransactionRepository,
        settings: FinancingSettings = financing_settings,
    ):
        self._session_factory = session_factory
        self._credit_limit_repo = credit_limit_repository
        self._transaction_repo = transaction_repository
        self._settings = settings

    async def create_transaction(self, request: CreateTransactionRequest) -> TransactionDetail:
        """
        Create an installment purchase within the customer's credit limit.

        Args:
            request: Price, tenor and asset of the purchase

        Returns:
            The stored transaction

        Raises:
            InvalidTransactionRequestException: If request validation fails
            InvalidTenorOrCreditLimitException: If no limit exists for the tenor
            CreditLimitExceededException: If the price is above the limit
            InternalServiceError: On begin, insert or commit failure
        """
        errors = request.validate()
        if errors:
            raise InvalidTransactionRequestException("; ".join(errors))

        log = logger.bind(
            customer_id=request.customer_id,
            tenor_month=request.tenor_month,
            on_the_road_price=request.on_the_road_price,
        )
        log.info("transaction_requested")

        with track_transaction_latency():
            async with self._session_factory() as session:
                try:
                    db_tx = await session.begin()
                except SQLAlchemyError as e:
                    log.error("transaction_begin_failed", error=str(e))
                    record_transaction_outcome("error")
                    raise InternalServiceError() from e

                try:
                    transaction = await self._run(session, request, log)
                except Exception:
                    await self._rollback(db_tx, log)
                    raise

                await self._commit(db_tx, log)

        record_transaction_outcome("created")
        record_financed_amount(request.tenor_month, request.on_the_road_price)
        log.info(
            "transaction_created",
            transaction_id=transaction.id,
            contract_number=transaction.contract_number,
            admin_fee=transaction.admin_fee,
            installment_amount=transaction.installment_amount,
        )

        return TransactionDetail.from_entity(transaction)

    async def get_transaction_detail(
        self, transaction_id: int, customer_id: int
    ) -> TransactionDetail:
        """
        Get a transaction owned by the customer.

        Raises:
            TransactionNotFoundException: If the id does not exist for this customer
        """
        async with self._session_factory() as session:
            transaction = await self._transaction_repo.find_by_id_and_customer(
                session, transaction_id, customer_id
            )
        return TransactionDetail.from_entity(transaction)

    async def get_transaction_history(
        self, page: int, page_size: int, customer_id: int
    ) -> TransactionHistory:
        """Get one page of the customer's transactions, newest first."""
        async with self._session_factory() as session:
            transactions, total = await self._transaction_repo.find_by_customer_paged(
                session, customer_id, page, page_size
            )
        return TransactionHistory.from_entities(transactions, page, page_size, total)

    async def _run(
        self,
        session: AsyncSession,
        request: CreateTransactionRequest,
        log,
    ) -> Transaction:
        # The limit must be read under the row lock before validating
        try:
            limit = await self._credit_limit_repo.find_locked_limit(
                session, request.customer_id, request.tenor_month
            )
        except (CreditLimitNotFoundException, StorageError) as e:
            log.warning("credit_limit_lookup_failed", error=str(e))
            record_transaction_outcome("invalid_tenor")
            raise InvalidTenorOrCreditLimitException() from e

        if not limit.allows(request.on_the_road_price):
            log.info("credit_limit_exceeded", limit_amount=limit.limit_amount)
            record_transaction_outcome("limit_exceeded")
            raise CreditLimitExceededException(
                request.on_the_road_price, limit.limit_amount
            )

        transaction = self._compute(request)

        try:
            return await self._transaction_repo.insert(session, transaction)
        except StorageError as e:
            log.error("transaction_insert_failed", error=str(e))
            record_transaction_outcome("error")
            raise InternalServiceError() from e

    def _compute(self, request: CreateTransactionRequest) -> Transaction:
        """Derive contract number and amounts; caller hints are not used."""
        interest = calculate_interest(
            request.on_the_road_price, request.tenor_month, self._settings
        )
        transaction = Transaction(
            customer_id=request.customer_id,
            contract_number="",
            on_the_road_price=request.on_the_road_price,
            admin_fee=calculate_admin_fee(request.on_the_road_price, self._settings),
            interest_amount=interest,
            installment_amount=calculate_installment(
                request.on_the_road_price, interest, request.tenor_month
            ),
            asset_name=request.asset_name,
        )
        transaction.contract_number = generate_contract_number(
            request.customer_id, transaction.created_at.date()
        )
        return transaction

    async def _commit(self, db_tx: AsyncSessionTransaction, log) -> None:
        try:
            await db_tx.commit()
        except SQLAlchemyError as e:
            # The row may or may not have been persisted
            log.error("transaction_commit_failed", error=str(e))
            await self._rollback(db_tx, log)
            record_transaction_outcome("error")
            raise InternalServiceError() from e

    async def _rollback(self, db_tx: AsyncSessionTransaction, log) -> None:
        try:
            await db_tx.rollback()
        except SQLAlchemyError as e:
            record_rollback_failure()
            log.error("transaction_rollback_failed", error=str(e))
