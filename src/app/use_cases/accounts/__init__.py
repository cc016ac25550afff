"""
Account Workflow Use Cases

Signup, email verification and password reset.
"""

from .signup_use_case import SignupUseCase
from .resend_verification_use_case import ResendVerificationUseCase
from .verify_email_use_case import VerifyEmailUseCase
from .request_password_reset_use_case import RequestPasswordResetUseCase
from .reset_password_use_case import ResetPasswordUseCase
from .dtos import (
    SignupCommand,
    SignupResponse,
    ResendVerificationResponse,
    VerifyEmailResponse,
    RequestPasswordResetResponse,
    ResetPasswordResponse,
)

__all__ = [
    # Use Cases
    "SignupUseCase",
    "ResendVerificationUseCase",
    "VerifyEmailUseCase",
    "RequestPasswordResetUseCase",
    "ResetPasswordUseCase",
    # DTOs - Commands
    "SignupCommand",
    # DTOs - Responses
    "SignupResponse",
    "ResendVerificationResponse",
    "VerifyEmailResponse",
    "RequestPasswordResetResponse",
    "ResetPasswordResponse",
]
