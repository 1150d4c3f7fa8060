"""Customer profile Pydantic schemas."""

from pydantic import BaseModel, Field

from .credit_limit import CreditLimitSchema


class CustomerProfileSchema(BaseModel):
    """Schema for GET /customer/profile response."""

    id: int
    nik: str
    full_name: str
    legal_name: str
    birth_place: str
    birth_date: str = Field(..., description="YYYY-MM-DD")
    salary: int
    ktp_photo_path: str
    selfie_photo_path: str
    limits: list[CreditLimitSchema] = Field(
        ...,
        description="Credit limits ordered by tenor",
    )
    created_at: str
    updated_at: str
