"""Pydantic schema for API error responses."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ErrorResponseSchema(BaseModel):
    """Body returned by every domain error handler."""

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "error": "CREDIT_LIMIT_EXCEEDED",
                    "message": "On the road price exceeds credit limit",
                    "request_id": "5f0c1d0e9a7b4c2e8f3a6b1d2c4e5f60",
                }
            ]
        }
    )

    error: str = Field(..., description="Stable error code", examples=["TRANSACTION_NOT_FOUND"])
    message: str = Field(..., description="Message safe to show to the customer")
    request_id: Optional[str] = Field(None, description="Echo of the X-Request-ID header")
