"""Customer profile endpoints."""

from dataclasses import asdict
from typing import Annotated

from fastapi import APIRouter, Depends

from src.application.services import CustomerService
from src.core.dependencies import get_customer_service
from src.presentation.middleware import CurrentCustomer
from src.presentation.schemas import CustomerProfileSchema, ErrorResponseSchema

customer_router = APIRouter(
    prefix="/customer",
    responses={
        401: {"model": ErrorResponseSchema, "description": "Unauthorized"},
    },
)


@customer_router.get(
    "/profile",
    response_model=CustomerProfileSchema,
    summary="Get Customer Profile",
    description="Profile of the authenticated customer including credit limits.",
    responses={
        404: {"model": ErrorResponseSchema, "description": "Customer not found"},
    },
)
async def get_profile(
    customer: CurrentCustomer,
    customer_service: Annotated[CustomerService, Depends(get_customer_service)],
) -> CustomerProfileSchema:
    profile = await customer_service.get_customer_profile(customer.customer_id)
    return CustomerProfileSchema.model_validate(asdict(profile))
