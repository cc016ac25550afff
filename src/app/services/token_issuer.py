"""
Token Issuer

Creates time-limited, single-use tokens for email verification and password
reset, stores their payloads in the TTL store and dispatches the action URL
through the notification channel.
"""

import logging
from urllib.parse import quote

from src.app.services.enumeration_policy import resolve_subject_or_none
from src.app.services.notification_sender import INotificationSender, Notification
from src.app.services.study_lookup import load_study
from src.app.services.token_store import ITokenStore
from src.app.services.unit_of_work import UnitOfWork
from src.app.services.workflow_settings import WorkflowSettings
from src.domain.base import generate_token
from src.domain.entities import EmailTemplate, Study
from src.domain.errors import InvalidArgumentError, require_not_blank
from src.domain.payloads import ResetPayload, VerificationPayload

logger = logging.getLogger(__name__)

VERIFY_EMAIL_URL = "{base}/mobile/verifyEmail.html?study={study}&sptoken={token}"
RESET_PASSWORD_URL = "{base}/mobile/resetPassword.html?study={study}&sptoken={token}"
URL_TOKEN = "url"
EXP_WINDOW_TOKEN = "expirationWindow"


def encode_uri_component(value: str) -> str:
    return quote(value, safe="!~*'()")


def reset_token_key(token: str, study_identifier: str) -> str:
    return f"{token}:{study_identifier}"


class TokenIssuer:
    """
    Issues verification and reset tokens.

    Stateless over its collaborators: the token store owns token lifetime and
    the unit of work (entered by the caller) provides study and account lookups.
    Issuing twice yields two independent valid tokens; earlier tokens are not
    revoked.
    """

    def __init__(
        self,
        uow: UnitOfWork,
        token_store: ITokenStore,
        notification_sender: INotificationSender,
        settings: WorkflowSettings,
    ):
        self.uow = uow
        self.token_store = token_store
        self.notification_sender = notification_sender
        self.settings = settings

    async def issue_verification_token(self, study: Study, subject_id: str, email: str) -> str:
        """
        Send an email verification token for an account that already exists.

        Args:
            study: Study the account belongs to
            subject_id: Account ID
            email: Address to send the verification link to

        Returns:
            The issued token

        Raises:
            InvalidArgumentError: study missing or subject_id/email blank
        """
        if study is None:
            raise InvalidArgumentError("study must not be None")
        require_not_blank(subject_id, "subject_id")
        require_not_blank(email, "email")

        token = generate_token()
        payload = VerificationPayload(study_id=study.identifier, subject_id=subject_id)
        await self.token_store.set(token, payload.to_json(), self.settings.token_ttl_seconds)

        url = VERIFY_EMAIL_URL.format(
            base=self.settings.base_url,
            study=encode_uri_component(study.identifier),
            token=token,
        )
        logger.info(f"Issued verification token {token[:6]}... in study {study.identifier}")

        await self.notification_sender.send(
            Notification(
                template=study.get_verify_email_template(),
                recipient=email,
                study_name=study.name,
                support_email=study.support_email,
                tokens={URL_TOKEN: url},
            )
        )
        return token

    async def resend_verification_token(self, study_identifier: str, email: str) -> None:
        """
        Send another verification token, starting from the email address.

        Silently does nothing when the email has no account in the study.
        """
        require_not_blank(email, "email")
        study = await load_study(self.uow, study_identifier)

        account = await resolve_subject_or_none(self.uow.accounts, study, email)
        if account is not None:
            await self.issue_verification_token(study, account.id, email)

    async def notify_account_exists(self, study: Study, email: str) -> str:
        """
        Tell the owner of an existing account that a signup collided with it,
        including a reset link. The caller already knows the email exists.
        """
        if study is None:
            raise InvalidArgumentError("study must not be None")
        require_not_blank(email, "email")
        return await self._send_reset_related(study, email, study.get_account_exists_template())

    async def issue_reset_token(self, study: Study, email: str) -> str:
        if study is None:
            raise InvalidArgumentError("study must not be None")
        require_not_blank(email, "email")
        return await self._send_reset_related(study, email, study.get_reset_password_template())

    async def request_reset(self, study_identifier: str, email: str) -> None:
        """
        Request a password reset link. Silently does nothing when the email has
        no account in the study, to prevent account enumeration.
        """
        require_not_blank(email, "email")
        study = await load_study(self.uow, study_identifier)

        account = await resolve_subject_or_none(self.uow.accounts, study, email)
        if account is not None:
            await self.issue_reset_token(study, email)

    async def _send_reset_related(self, study: Study, email: str, template: EmailTemplate) -> str:
        token = generate_token()
        payload = ResetPayload(study_id=study.identifier, email=email)
        await self.token_store.set(
            reset_token_key(token, study.identifier),
            payload.to_json(),
            self.settings.token_ttl_seconds,
        )

        url = RESET_PASSWORD_URL.format(
            base=self.settings.base_url,
            study=encode_uri_component(study.identifier),
            token=token,
        )
        logger.info(f"Issued reset token {token[:6]}... in study {study.identifier}")

        await self.notification_sender.send(
            Notification(
                template=template,
                recipient=email,
                study_name=study.name,
                support_email=study.support_email,
                tokens={
                    URL_TOKEN: url,
                    EXP_WINDOW_TOKEN: str(self.settings.expiration_window_hours),
                },
            )
        )
        return token
