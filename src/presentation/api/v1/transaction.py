"""Transaction API endpoints."""

from dataclasses import asdict
from typing import Annotated

from fastapi import APIRouter, Depends, Path, Query

from src.application.dto import CreateTransactionRequest
from src.application.services import TransactionService
from src.core.dependencies import get_transaction_service
from src.presentation.middleware import CurrentCustomer
from src.presentation.schemas import (
    CreateTransactionRequestSchema,
    ErrorResponseSchema,
    TransactionDetailSchema,
    TransactionHistoryResponseSchema,
)

transaction_router = APIRouter(
    prefix="/transaction",
    responses={
        401: {"model": ErrorResponseSchema, "description": "Unauthorized"},
    },
)


@transaction_router.post(
    "",
    response_model=TransactionDetailSchema,
    status_code=201,
    summary="Create Transaction",
    description="""
    Finance a purchase against the customer's credit limit for the tenor.

    Admin fee, interest and installment are computed by the service; the
    amounts sent by the caller are validated but not stored.
    """,
    responses={
        400: {"model": ErrorResponseSchema, "description": "Invalid tenor or limit exceeded"},
        500: {"model": ErrorResponseSchema, "description": "Transaction could not be stored"},
    },
)
async def create_transaction(
    request: CreateTransactionRequestSchema,
    customer: CurrentCustomer,
    transaction_service: Annotated[TransactionService, Depends(get_transaction_service)],
) -> TransactionDetailSchema:
    dto = CreateTransactionRequest(
        customer_id=customer.customer_id,
        on_the_road_price=request.on_the_road_price,
        tenor_month=request.tenor_month,
        asset_name=request.asset_name,
        installment_amount=request.installment_amount,
        interest_amount=request.interest_amount,
    )

    response = await transaction_service.create_transaction(dto)

    return TransactionDetailSchema.model_validate(asdict(response))


@transaction_router.get(
    "/history",
    response_model=TransactionHistoryResponseSchema,
    summary="Get Transaction History",
    description="Paged transactions of the authenticated customer, newest first.",
)
async def get_transaction_history(
    customer: CurrentCustomer,
    transaction_service: Annotated[TransactionService, Depends(get_transaction_service)],
    page: Annotated[int, Query(ge=1, description="Page number, starting at 1")] = 1,
    paginate: Annotated[int, Query(ge=1, le=100, description="Page size")] = 10,
) -> TransactionHistoryResponseSchema:
    history = await transaction_service.get_transaction_history(
        page, paginate, customer.customer_id
    )
    return TransactionHistoryResponseSchema.model_validate(asdict(history))


@transaction_router.get(
    "/{transaction_id}",
    response_model=TransactionDetailSchema,
    summary="Get Transaction",
    responses={
        404: {"model": ErrorResponseSchema, "description": "Transaction not found"},
    },
)
async def get_transaction(
    transaction_id: Annotated[int, Path(ge=1)],
    customer: CurrentCustomer,
    transaction_service: Annotated[TransactionService, Depends(get_transaction_service)],
) -> TransactionDetailSchema:
    """Only the owner of a transaction can see it."""
    detail = await transaction_service.get_transaction_detail(
        transaction_id, customer.customer_id
    )
    return TransactionDetailSchema.model_validate(asdict(detail))
