"""Auth service - customer registration and token lifecycle."""

import structlog
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from src.application.dto import (
    LoginRequest,
    LoginResponse,
    RefreshTokenResponse,
    RegisterRequest,
    RegisterResponse,
)
from src.core.metrics import record_login, record_registration
from src.core.security import (
    ACCESS_TOKEN_TYPE,
    REFRESH_TOKEN_TYPE,
    TokenDecodeError,
    create_token,
    decode_token,
    hash_password,
    verify_password,
)
from src.domain.entities import AuthToken, Customer, CustomerPrincipal
from src.domain.exceptions import (
    CustomerAlreadyRegisteredException,
    InternalServiceError,
    InvalidCredentialsException,
    StorageError,
    TokenExpiredException,
    UnauthorizedException,
    UniqueViolationError,
)
from src.domain.interfaces import (
    AuthTokenRepository,
    CreditLimitRepository,
    CustomerRepository,
)
from src.service.financing import (
    FinancingSettings,
    build_default_limits,
    financing_settings,
)

logger = structlog.get_logger(__name__)


class AuthService:
    """
    Application service for registration and authentication.

    Only the most recently issued token of each type is accepted for a
    customer; its ``jti`` is kept in the token registry.
    """

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        customer_repository: CustomerRepository,
        credit_limit_repository: CreditLimitRepository,
        auth_token_repository: AuthTokenRepository,
        financing: FinancingSettings = financing_settings,
    ):
        self._session_factory = session_factory
        self._customer_repo = customer_repository
        self._credit_limit_repo = credit_limit_repository
        self._token_repo = auth_token_repository
        self._financing = financing

    async def register(self, request: RegisterRequest) -> RegisterResponse:
        """
        Register a customer and seed their credit limits.

        The customer row and all four limits are written in one
        transaction.

        Raises:
            CustomerAlreadyRegisteredException: If the NIK or email is taken
            InternalServiceError: On any other persistence failure
        """
        log = logger.bind(email=request.email)

        customer = Customer(
            nik=request.nik,
            email=request.email,
            password=hash_password(request.password),
            full_name=request.full_name,
            legal_name=request.legal_name,
            birth_place=request.birth_place,
            birth_date=request.birth_date,
            salary=request.salary,
            ktp_photo_path=request.ktp_photo_path,
            selfie_photo_path=request.selfie_photo_path,
        )

        try:
            async with self._session_factory() as session:
                async with session.begin():
                    await self._customer_repo.insert(session, customer)
                    for limit in build_default_limits(
                        customer.id, customer.salary, self._financing
                    ):
                        await self._credit_limit_repo.insert_limit(session, limit)
        except UniqueViolationError as e:
            log.info("registration_duplicate", field=e.field)
            record_registration("duplicate")
            raise CustomerAlreadyRegisteredException(e.field) from e
        except (StorageError, SQLAlchemyError) as e:
            log.error("registration_failed", error=str(e))
            record_registration("error")
            raise InternalServiceError() from e

        record_registration("registered")
        log.info("customer_registered", customer_id=customer.id)

        return RegisterResponse(id=customer.id, email=customer.email)

    async def login(self, request: LoginRequest) -> LoginResponse:
        """
        Verify credentials and issue access and refresh tokens.

        Raises:
            InvalidCredentialsException: If the email is unknown or the
                password does not match
        """
        async with self._session_factory() as session:
            async with session.begin():
                customer = await self._customer_repo.find_by_email(session, request.email)
                if customer is None or not verify_password(
                    request.password, customer.password
                ):
                    record_login("invalid_credentials")
                    logger.info("login_rejected", email=request.email)
                    raise InvalidCredentialsException()

                claims = {
                    "nik": customer.nik,
                    "email": customer.email,
                    "full_name": customer.full_name,
                }
                token = await self._issue(session, customer.id, ACCESS_TOKEN_TYPE, claims)
                refresh_token = await self._issue(
                    session, customer.id, REFRESH_TOKEN_TYPE, claims
                )

        record_login("success")
        logger.info("customer_logged_in", customer_id=customer.id)

        return LoginResponse(
            id=customer.id,
            email=customer.email,
            full_name=customer.full_name,
            token=token,
            refresh_token=refresh_token,
        )

    async def refresh_token(self, refresh_token: str) -> RefreshTokenResponse:
        """Issue a new access token for a registered refresh token."""
        principal = await self.authenticate(refresh_token, REFRESH_TOKEN_TYPE)

        async with self._session_factory() as session:
            async with session.begin():
                token = await self._issue(
                    session,
                    principal.customer_id,
                    ACCESS_TOKEN_TYPE,
                    {
                        "nik": principal.nik,
                        "email": principal.email,
                        "full_name": principal.full_name,
                    },
                )

        logger.info("access_token_refreshed", customer_id=principal.customer_id)
        return RefreshTokenResponse(token=token)

    async def logout(self, principal: CustomerPrincipal) -> None:
        """Revoke the customer's current access token."""
        async with self._session_factory() as session:
            async with session.begin():
                await self._token_repo.delete(
                    session, principal.customer_id, ACCESS_TOKEN_TYPE
                )

        logger.info("customer_logged_out", customer_id=principal.customer_id)

    async def authenticate(
        self, token: str, token_type: str = ACCESS_TOKEN_TYPE
    ) -> CustomerPrincipal:
        """
        Resolve a bearer token to the calling customer.

        Raises:
            UnauthorizedException: If the token is invalid, expired or of
                the wrong type
            TokenExpiredException: If the token is no longer the
                registered one (revoked or superseded)
        """
        try:
            claims = decode_token(token)
        except TokenDecodeError as e:
            logger.info("token_rejected", reason=str(e))
            raise UnauthorizedException() from e

        if claims.get("token_type") != token_type:
            raise UnauthorizedException()

        try:
            customer_id = int(claims["sub"])
        except (KeyError, TypeError, ValueError) as e:
            raise UnauthorizedException() from e

        async with self._session_factory() as session:
            registered = await self._token_repo.get(session, customer_id, token_type)

        if registered is None or registered.jti != claims.get("jti"):
            raise TokenExpiredException()

        return CustomerPrincipal(
            customer_id=customer_id,
            nik=claims.get("nik", ""),
            email=claims.get("email", ""),
            full_name=claims.get("full_name", ""),
        )

    async def _issue(
        self,
        session: AsyncSession,
        customer_id: int,
        token_type: str,
        claims: dict,
    ) -> str:
        token, jti, expires_at = create_token(str(customer_id), token_type, claims)
        await self._token_repo.save(
            session,
            AuthToken(
                customer_id=customer_id,
                token_type=token_type,
                jti=jti,
                expires_at=expires_at,
            ),
        )
        return token
