"""
Verify Email Use Case

Consumes an email verification token and enables the account.
"""

from src.app.services.token_consumer import TokenConsumer
from src.app.services.unit_of_work import UnitOfWork
from .dtos import VerifyEmailResponse


class VerifyEmailUseCase:
    """
    Use case for email verification.

    Business Rules:
    - Token is single-use: removed from the store before the account is touched
    - Unknown, expired and used tokens fail alike with TokenExpiredOrInvalidError
    - A valid token pointing at a deleted account is a server fault
    - Only the account status changes (to enabled)
    """

    def __init__(self, uow: UnitOfWork, consumer: TokenConsumer):
        self.uow = uow
        self.consumer = consumer

    async def execute(self, token: str) -> VerifyEmailResponse:
        """
        Execute email verification use case.

        Args:
            token: Verification token from email link

        Raises:
            TokenExpiredOrInvalidError, EntityNotFoundError
        """
        async with self.uow:
            await self.consumer.consume_verification_token(token)
            await self.uow.commit()

        return VerifyEmailResponse(status="verified", message="Email successfully verified")
