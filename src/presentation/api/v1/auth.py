"""Registration and authentication endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends

from src.application.dto import LoginRequest, RegisterRequest
from src.application.services import AuthService
from src.core.dependencies import get_auth_service
from src.presentation.middleware import CurrentCustomer, get_bearer_token
from src.presentation.schemas import (
    ErrorResponseSchema,
    LoginRequestSchema,
    LoginResponseSchema,
    MessageResponseSchema,
    RefreshTokenResponseSchema,
    RegisterRequestSchema,
    RegisterResponseSchema,
)

auth_router = APIRouter(prefix="/auth")


@auth_router.post(
    "/register",
    response_model=RegisterResponseSchema,
    status_code=201,
    summary="Register Customer",
    description="Register a customer and issue credit limits based on salary.",
    responses={
        409: {"model": ErrorResponseSchema, "description": "NIK or email already registered"},
    },
)
async def register(
    request: RegisterRequestSchema,
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
) -> RegisterResponseSchema:
    response = await auth_service.register(
        RegisterRequest(
            nik=request.nik,
            email=str(request.email),
            password=request.password,
            full_name=request.full_name,
            legal_name=request.legal_name,
            birth_place=request.birth_place,
            birth_date=request.birth_date,
            salary=request.salary,
            ktp_photo_path=request.ktp_photo_path,
            selfie_photo_path=request.selfie_photo_path,
        )
    )
    return RegisterResponseSchema(id=response.id, email=response.email)


@auth_router.post(
    "/login",
    response_model=LoginResponseSchema,
    summary="Login",
    responses={
        422: {"model": ErrorResponseSchema, "description": "Email or password is incorrect"},
    },
)
async def login(
    request: LoginRequestSchema,
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
) -> LoginResponseSchema:
    """Exchange email and password for an access and a refresh token."""
    response = await auth_service.login(
        LoginRequest(email=str(request.email), password=request.password)
    )
    return LoginResponseSchema(
        id=response.id,
        email=response.email,
        full_name=response.full_name,
        token=response.token,
        refresh_token=response.refresh_token,
    )


@auth_router.post(
    "/refresh-token",
    response_model=RefreshTokenResponseSchema,
    summary="Refresh Access Token",
    description="Send the refresh token as the bearer token to obtain a new access token.",
    responses={
        401: {"model": ErrorResponseSchema, "description": "Invalid or revoked refresh token"},
    },
)
async def refresh_token(
    token: Annotated[str, Depends(get_bearer_token)],
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
) -> RefreshTokenResponseSchema:
    response = await auth_service.refresh_token(token)
    return RefreshTokenResponseSchema(token=response.token)


@auth_router.post(
    "/logout",
    response_model=MessageResponseSchema,
    summary="Logout",
    responses={
        401: {"model": ErrorResponseSchema, "description": "Invalid or revoked token"},
    },
)
async def logout(
    customer: CurrentCustomer,
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
) -> MessageResponseSchema:
    """Revoke the current access token."""
    await auth_service.logout(customer)
    return MessageResponseSchema(message="Logged out")
