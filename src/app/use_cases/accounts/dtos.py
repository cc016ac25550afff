"""
Account Workflow DTOs (Data Transfer Objects)

Command and Response classes for the account domain.
"""

from pydantic import BaseModel


# ============================================================================
# Command DTOs
# ============================================================================


class SignupCommand(BaseModel):
    """
    Signup command - represents validated signup intent

    Created by API layer after request validation passes.
    """

    study: str
    email: str
    password: str


# ============================================================================
# Response DTOs
# ============================================================================


class SignupResponse(BaseModel):
    """Identical for new and already-registered emails"""

    status: str
    message: str


class ResendVerificationResponse(BaseModel):
    """Response for resend verification email use case"""

    status: str
    message: str


class VerifyEmailResponse(BaseModel):
    """Response for email verification use case"""

    status: str
    message: str


class RequestPasswordResetResponse(BaseModel):
    """Response for request password reset use case"""

    status: str
    message: str


class ResetPasswordResponse(BaseModel):
    """Response for reset password use case"""

    status: str
    message: str
