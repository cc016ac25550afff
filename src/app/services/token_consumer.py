"""
Token Consumer

Redeems tokens issued by TokenIssuer. A token is popped from the store before
anything else happens, so it is single-use even if a later step fails.
"""

import logging

from src.app.services.study_lookup import load_study
from src.app.services.token_issuer import reset_token_key
from src.app.services.token_store import ITokenStore
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Account, AccountStatus
from src.domain.errors import EntityNotFoundError, TokenExpiredOrInvalidError, require_not_blank
from src.domain.payloads import ResetPayload, VerificationPayload

logger = logging.getLogger(__name__)

VERIFY_EMAIL_TOKEN_EXPIRED = "Email verification token has expired (or already been used)."
PASSWORD_RESET_TOKEN_EXPIRED = "Password reset token has expired (or already been used)."


class TokenConsumer:
    def __init__(self, uow: UnitOfWork, token_store: ITokenStore):
        self.uow = uow
        self.token_store = token_store

    async def consume_verification_token(self, token: str) -> Account:
        """
        Verify an email address with the token that was sent to it.

        Args:
            token: Token from the verification link

        Returns:
            The account, now enabled

        Raises:
            TokenExpiredOrInvalidError: token never issued, expired or already used
            EntityNotFoundError: token was valid but its account no longer exists
        """
        require_not_blank(token, "token")

        raw = await self.token_store.pop(token)
        if raw is None:
            raise TokenExpiredOrInvalidError(VERIFY_EMAIL_TOKEN_EXPIRED)
        payload = VerificationPayload.from_json(raw)

        study = await load_study(self.uow, payload.study_id)
        account = await self.uow.accounts.get_by_id(study, payload.subject_id)
        if account is None:
            logger.error(
                f"Verification token resolved to missing account in study {study.identifier}"
            )
            raise EntityNotFoundError("Account")

        account.status = AccountStatus.enabled
        account = await self.uow.accounts.update(account)
        logger.info(f"Account {account.id} verified in study {study.identifier}")
        return account

    async def consume_reset_token(
        self, token: str, study_identifier: str, new_password: str
    ) -> Account:
        """
        Change an account's password with a reset token.

        Password validation and hashing belong to the account store.

        Raises:
            TokenExpiredOrInvalidError: no live token for this study
            EntityNotFoundError: token was valid but its account no longer exists
        """
        require_not_blank(token, "token")
        require_not_blank(study_identifier, "study identifier")

        raw = await self.token_store.pop(reset_token_key(token, study_identifier))
        if raw is None:
            raise TokenExpiredOrInvalidError(PASSWORD_RESET_TOKEN_EXPIRED)
        payload = ResetPayload.from_json(raw)

        study = await load_study(self.uow, study_identifier)
        account = await self.uow.accounts.get_by_email(study, payload.email)
        if account is None:
            logger.error(f"Reset token resolved to missing account in study {study.identifier}")
            raise EntityNotFoundError("Account")

        account = await self.uow.accounts.change_password(account, new_password)
        logger.info(f"Password reset for account {account.id} in study {study.identifier}")
        return account
