"""
Reset Password Use Case

Consumes a password reset token and changes the account's password.
"""

from src.app.services.token_consumer import TokenConsumer
from src.app.services.unit_of_work import UnitOfWork
from .dtos import ResetPasswordResponse


class ResetPasswordUseCase:
    def __init__(self, uow: UnitOfWork, consumer: TokenConsumer):
        self.uow = uow
        self.consumer = consumer

    async def execute(
        self, token: str, study_identifier: str, new_password: str
    ) -> ResetPasswordResponse:
        async with self.uow:
            await self.consumer.consume_reset_token(token, study_identifier, new_password)
            await self.uow.commit()

        return ResetPasswordResponse(
            status="success",
            message="Password has been reset successfully",
        )
