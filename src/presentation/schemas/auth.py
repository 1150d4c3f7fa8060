"""Registration and authentication Pydantic schemas."""

import re
from datetime import date

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

NIK_PATTERN = re.compile(r"^\d{16}$")


class RegisterRequestSchema(BaseModel):
    """Schema for POST /auth/register request body."""

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "nik": "3201011503900001",
                    "email": "budi@example.com",
                    "password": "Secret123",
                    "full_name": "Budi Santoso",
                    "legal_name": "Budi Santoso",
                    "birth_place": "Bandung",
                    "birth_date": "1990-03-15",
                    "salary": 4000000,
                    "ktp_photo_path": "uploads/ktp/budi.jpg",
                    "selfie_photo_path": "uploads/selfie/budi.jpg",
                }
            ]
        }
    )

    nik: str = Field(..., description="16-digit national identity number")
    email: EmailStr
    password: str = Field(..., min_length=8, max_length=128)
    full_name: str = Field(..., min_length=1, max_length=100)
    legal_name: str = Field(..., min_length=1, max_length=100)
    birth_place: str = Field(..., min_length=1, max_length=100)
    birth_date: date = Field(..., description="Birth date, YYYY-MM-DD")
    salary: int = Field(..., gt=0, description="Monthly salary")
    ktp_photo_path: str = Field(..., min_length=1, max_length=255)
    selfie_photo_path: str = Field(..., min_length=1, max_length=255)

    @field_validator("nik")
    @classmethod
    def validate_nik(cls, v: str) -> str:
        if not NIK_PATTERN.match(v):
            raise ValueError("nik must be exactly 16 digits")
        return v

    @field_validator("password")
    @classmethod
    def validate_password(cls, v: str) -> str:
        """Require upper case, lower case and a digit."""
        if not (
            any(c.isupper() for c in v)
            and any(c.islower() for c in v)
            and any(c.isdigit() for c in v)
        ):
            raise ValueError(
                "password must contain an upper case letter, a lower case letter and a digit"
            )
        return v

    @field_validator("full_name", "legal_name", "birth_place", "ktp_photo_path", "selfie_photo_path")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be blank")
        return v.strip()

    @field_validator("birth_date")
    @classmethod
    def validate_birth_date(cls, v: date) -> date:
        if v >= date.today():
            raise ValueError("birth_date must be in the past")
        return v


class RegisterResponseSchema(BaseModel):
    id: int
    email: str


class LoginRequestSchema(BaseModel):
    """Schema for POST /auth/login request body."""

    email: EmailStr
    password: str = Field(..., min_length=1)


class LoginResponseSchema(BaseModel):
    id: int
    email: str
    full_name: str
    token: str = Field(..., description="Access token")
    refresh_token: str


class RefreshTokenResponseSchema(BaseModel):
    token: str = Field(..., description="New access token")


class MessageResponseSchema(BaseModel):
    message: str
