"""Transaction-related Pydantic schemas."""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class CreateTransactionRequestSchema(BaseModel):
    """Schema for POST /transaction request body."""

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "on_the_road_price": 500000,
                    "tenor_month": 3,
                    "installment_amount": 171666,
                    "interest_amount": 15000,
                    "asset_name": "Honda Beat",
                }
            ]
        }
    )

    on_the_road_price: int = Field(
        ...,
        gt=0,
        description="Total purchase price of the financed asset",
        examples=[500000],
    )
    tenor_month: int = Field(
        ...,
        gt=0,
        description="Installment tenor in months",
        examples=[3],
    )
    installment_amount: int = Field(
        ...,
        gt=0,
        description="Expected monthly installment; the stored value is recomputed",
    )
    interest_amount: int = Field(
        ...,
        gt=0,
        description="Expected interest; the stored value is recomputed",
    )
    asset_name: str = Field(
        ...,
        min_length=1,
        max_length=100,
        description="Description of the financed item",
        examples=["Honda Beat"],
    )

    @field_validator("asset_name")
    @classmethod
    def validate_asset_name(cls, v: str) -> str:
        """Ensure asset_name is not just whitespace."""
        if not v.strip():
            raise ValueError("asset_name cannot be empty or whitespace")
        return v.strip()


class TransactionDetailSchema(BaseModel):
    """Schema for a stored transaction."""

    id: int
    customer_id: int
    contract_number: str = Field(..., examples=["TRX202403010007"])
    on_the_road_price: int
    admin_fee: int
    installment_amount: int
    interest_amount: int
    asset_name: str
    created_at: str = Field(..., description="ISO 8601 timestamp")


class PageMetaSchema(BaseModel):
    page: int
    paginate: int
    total_data: int
    total_page: int


class TransactionHistoryResponseSchema(BaseModel):
    """Schema for GET /transaction/history response."""

    items: list[TransactionDetailSchema] = Field(
        ...,
        description="Transactions on this page, newest first",
    )
    meta: PageMetaSchema
