"""
Signup Use Case

Creates an unverified account in a study and starts email verification.
"""

import logging

import bcrypt

from src.app.services.study_lookup import load_study
from src.app.services.token_issuer import TokenIssuer
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Account, AccountStatus
from src.domain.errors import InvalidPasswordError
from .dtos import SignupCommand, SignupResponse

logger = logging.getLogger(__name__)

SIGNUP_MESSAGE = "Check your email to verify your account"


class SignupUseCase:
    """
    Signup Use Case

    Business Rules:
    - Account starts with status=unverified
    - Password hashed with bcrypt cost factor 12
    - A verification token is issued for the new account
    - If the email is already registered in the study, the owner is sent an
      "account exists" message with a reset link instead
    - Both branches return the same response (no enumeration)
    """

    def __init__(self, uow: UnitOfWork, issuer: TokenIssuer):
        self.uow = uow
        self.issuer = issuer

    async def execute(self, command: SignupCommand) -> SignupResponse:
        if len(command.password) < 8:
            raise InvalidPasswordError("Password must be at least 8 characters long")

        # Hash before the lookup so both branches pay the same bcrypt cost
        password_hash = bcrypt.hashpw(command.password.encode("utf-8"), bcrypt.gensalt(12))

        async with self.uow:
            study = await load_study(self.uow, command.study)

            existing = await self.uow.accounts.get_by_email(study, command.email)
            if existing is not None:
                await self.issuer.notify_account_exists(study, command.email)
                return SignupResponse(status="pending_verification", message=SIGNUP_MESSAGE)

            account = Account(
                study_id=study.identifier,
                email=command.email,
                password_hash=password_hash.decode("utf-8"),
                status=AccountStatus.unverified,
            )
            account = await self.uow.accounts.create(account)

            # The account must be durable before a link to it goes out
            await self.uow.commit()
            logger.info(f"Account {account.id} created in study {study.identifier}")

            await self.issuer.issue_verification_token(study, account.id, command.email)

            return SignupResponse(status="pending_verification", message=SIGNUP_MESSAGE)
