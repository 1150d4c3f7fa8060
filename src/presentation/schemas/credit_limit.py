"""Credit limit Pydantic schemas."""

from pydantic import BaseModel, Field


class CreditLimitSchema(BaseModel):
    """A customer's limit for one tenor."""

    tenor: int = Field(..., description="Tenor in months", examples=[3])
    limit_amount: int = Field(
        ...,
        ge=0,
        description="Maximum on-the-road price for this tenor",
        examples=[500000],
    )
