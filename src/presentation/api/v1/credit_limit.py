"""Credit limit endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends

from src.application.services import CreditLimitService
from src.core.dependencies import get_credit_limit_service
from src.presentation.middleware import CurrentCustomer
from src.presentation.schemas import CreditLimitSchema, ErrorResponseSchema

credit_limit_router = APIRouter(
    prefix="/credit",
    responses={
        401: {"model": ErrorResponseSchema, "description": "Unauthorized"},
    },
)


@credit_limit_router.get(
    "/limits",
    response_model=list[CreditLimitSchema],
    summary="List Credit Limits",
    description="Credit limits of the authenticated customer, ordered by tenor.",
)
async def get_credit_limits(
    customer: CurrentCustomer,
    credit_limit_service: Annotated[CreditLimitService, Depends(get_credit_limit_service)],
) -> list[CreditLimitSchema]:
    limits = await credit_limit_service.get_credit_limits(customer.customer_id)
    return [
        CreditLimitSchema(tenor=limit.tenor, limit_amount=limit.limit_amount)
        for limit in limits
    ]
