"""
Use Cases

- accounts/: Signup, email verification and password reset flows

Import from subdirectories for better organization.
"""

from .accounts import (
    SignupUseCase,
    SignupCommand,
    SignupResponse,
    ResendVerificationUseCase,
    VerifyEmailUseCase,
    RequestPasswordResetUseCase,
    ResetPasswordUseCase,
)

__all__ = [
    "SignupUseCase",
    "SignupCommand",
    "SignupResponse",
    "ResendVerificationUseCase",
    "VerifyEmailUseCase",
    "RequestPasswordResetUseCase",
    "ResetPasswordUseCase",
]
