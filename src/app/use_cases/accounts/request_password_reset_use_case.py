"""
Request Password Reset Use Case

Sends a password reset link to an account's email address.
"""

from src.app.services.token_issuer import TokenIssuer
from src.app.services.unit_of_work import UnitOfWork
from .dtos import RequestPasswordResetResponse


class RequestPasswordResetUseCase:
    """
    Use case for requesting password reset.

    Business Rules:
    - Token expires with the store TTL (2 hours by default)
    - No email enumeration (same response for valid/invalid emails)
    - Rate limiting to be handled at middleware/infrastructure layer
    """

    def __init__(self, uow: UnitOfWork, issuer: TokenIssuer):
        self.uow = uow
        self.issuer = issuer

    async def execute(self, study_identifier: str, email: str) -> RequestPasswordResetResponse:
        async with self.uow:
            await self.issuer.request_reset(study_identifier, email)

        return RequestPasswordResetResponse(
            status="sent",
            message="If the email exists, a password reset link has been sent",
        )
