"""Data transfer objects for registration and authentication."""

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class RegisterRequest:
    """Input data for registering a customer. Validated at the HTTP edge."""

    nik: str
    email: str
    password: str
    full_name: str
    legal_name: str
    birth_place: str
    birth_date: date
    salary: int
    ktp_photo_path: str
    selfie_photo_path: str


@dataclass(frozen=True)
class RegisterResponse:
    id: int
    email: str


@dataclass(frozen=True)
class LoginRequest:
    email: str
    password: str


@dataclass(frozen=True)
class LoginResponse:
    """Issued credentials for a logged-in customer."""

    id: int
    email: str
    full_name: str
    token: str
    refresh_token: str


@dataclass(frozen=True)
class RefreshTokenResponse:
    token: str
