from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, EmailStr, Field

from src.api.error import ClientError, ServerError
from src.app.services.token_consumer import TokenConsumer
from src.app.services.token_issuer import TokenIssuer
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.accounts import (
    SignupCommand,
    SignupUseCase,
    ResendVerificationUseCase,
    VerifyEmailUseCase,
    RequestPasswordResetUseCase,
    ResetPasswordUseCase,
    SignupResponse,
    ResendVerificationResponse,
    VerifyEmailResponse,
    RequestPasswordResetResponse,
    ResetPasswordResponse,
)
from src.depends import get_token_consumer, get_token_issuer, get_unit_of_work
from src.domain.errors import (
    ConcurrentModificationError,
    DomainError,
    InvalidPasswordError,
    StudyNotFoundError,
    TokenExpiredOrInvalidError,
)

router = APIRouter(prefix="/auth", tags=["Authentication"])


def _raise_boundary_error(exc: DomainError):
    """Map a domain exception to the HTTP error the API exposes"""
    if isinstance(exc, TokenExpiredOrInvalidError):
        raise ClientError(exc.error, status_code=status.HTTP_400_BAD_REQUEST) from exc
    if isinstance(exc, InvalidPasswordError):
        raise ClientError(exc.error, status_code=status.HTTP_400_BAD_REQUEST) from exc
    if isinstance(exc, StudyNotFoundError):
        raise ClientError(exc.error, status_code=status.HTTP_404_NOT_FOUND) from exc
    if isinstance(exc, ConcurrentModificationError):
        raise ClientError(exc.error, status_code=status.HTTP_409_CONFLICT) from exc
    # InvalidArgumentError and EntityNotFoundError are server-side faults
    raise ServerError(exc.error) from exc


class SignupRequest(BaseModel):
    """
    Signup HTTP request payload

    Validates incoming HTTP request before converting to SignupCommand.
    """

    study: str = Field(..., min_length=1, max_length=60, description="Study identifier")
    email: EmailStr = Field(..., description="Account email address")
    password: str = Field(..., min_length=8, description="Account password (min 8 chars)")


@router.post("/signup", status_code=status.HTTP_201_CREATED, response_model=SignupResponse)
async def signup(
    request: SignupRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    issuer: TokenIssuer = Depends(get_token_issuer),
):
    """
    Account Signup

    Creates an unverified account and emails a verification link. If the
    email is already registered, the owner is emailed a password reset link
    instead. The response is the same in both cases.

    Raises:
        - 404 Not Found: Unknown study
        - 422 Unprocessable Entity: Invalid input (handled by FastAPI)
    """
    command = SignupCommand(study=request.study, email=request.email, password=request.password)

    try:
        return await SignupUseCase(uow, issuer).execute(command)
    except DomainError as exc:
        _raise_boundary_error(exc)


class ResendVerificationRequest(BaseModel):
    """Resend verification email HTTP request payload"""

    study: str = Field(..., min_length=1, max_length=60, description="Study identifier")
    email: EmailStr = Field(..., description="Account email address")


@router.post(
    "/resend-verification",
    status_code=status.HTTP_200_OK,
    response_model=ResendVerificationResponse,
)
async def resend_verification(
    request: ResendVerificationRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    issuer: TokenIssuer = Depends(get_token_issuer),
):
    """
    Resend Verification Email

    Security:
        - No email enumeration (same response for valid/invalid emails)

    Returns:
        - 200 OK: Always returns success for a known study
        - 404 Not Found: Unknown study
    """
    try:
        return await ResendVerificationUseCase(uow, issuer).execute(request.study, request.email)
    except DomainError as exc:
        _raise_boundary_error(exc)


class VerifyEmailRequest(BaseModel):
    """Verify email HTTP request payload"""

    sptoken: str = Field(..., min_length=1, description="Email verification token")


@router.post("/verify-email", status_code=status.HTTP_200_OK, response_model=VerifyEmailResponse)
async def verify_email(
    request: VerifyEmailRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    consumer: TokenConsumer = Depends(get_token_consumer),
):
    """
    Email Verification

    Raises:
        - 400 Bad Request: Token expired, already used or never issued
        - 500 Internal Server Error: Token referenced an account that no longer exists
    """
    try:
        return await VerifyEmailUseCase(uow, consumer).execute(request.sptoken)
    except DomainError as exc:
        _raise_boundary_error(exc)


class RequestPasswordResetRequest(BaseModel):
    """Request password reset HTTP request payload"""

    study: str = Field(..., min_length=1, max_length=60, description="Study identifier")
    email: EmailStr = Field(..., description="Account email address")


@router.post(
    "/request-password-reset",
    status_code=status.HTTP_200_OK,
    response_model=RequestPasswordResetResponse,
)
async def request_password_reset(
    request: RequestPasswordResetRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    issuer: TokenIssuer = Depends(get_token_issuer),
):
    """
    Request Password Reset

    Security:
        - No email enumeration (same response for valid/invalid emails)
        - Rate limiting should be applied at middleware layer
    """
    try:
        return await RequestPasswordResetUseCase(uow, issuer).execute(
            request.study, request.email
        )
    except DomainError as exc:
        _raise_boundary_error(exc)


class ResetPasswordRequest(BaseModel):
    """Reset password HTTP request payload"""

    sptoken: str = Field(..., min_length=1, description="Password reset token from email")
    study: str = Field(..., min_length=1, max_length=60, description="Study identifier")
    password: str = Field(..., min_length=8, description="New password (min 8 chars)")


@router.post("/reset-password", status_code=status.HTTP_200_OK, response_model=ResetPasswordResponse)
async def reset_password(
    request: ResetPasswordRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    consumer: TokenConsumer = Depends(get_token_consumer),
):
    """
    Reset Password

    Raises:
        - 400 Bad Request: Token expired, already used or never issued
        - 500 Internal Server Error: Token referenced an account that no longer exists
    """
    try:
        return await ResetPasswordUseCase(uow, consumer).execute(
            request.sptoken, request.study, request.password
        )
    except DomainError as exc:
        _raise_boundary_error(exc)
