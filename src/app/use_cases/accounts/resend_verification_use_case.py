"""
Resend Verification Email Use Case

Re-derives the account from an email address and sends a fresh verification
token. Earlier tokens stay valid until they expire.
"""

from src.app.services.token_issuer import TokenIssuer
from src.app.services.unit_of_work import UnitOfWork
from .dtos import ResendVerificationResponse


class ResendVerificationUseCase:
    """
    Use case for resending email verification.

    Returns the same response for known and unknown emails (no enumeration).
    """

    def __init__(self, uow: UnitOfWork, issuer: TokenIssuer):
        self.uow = uow
        self.issuer = issuer

    async def execute(self, study_identifier: str, email: str) -> ResendVerificationResponse:
        async with self.uow:
            await self.issuer.resend_verification_token(study_identifier, email)

        return ResendVerificationResponse(
            status="sent",
            message="If the email exists, a verification link has been sent",
        )
