"""
Enumeration Safety Policy

Every public entry point that starts a token workflow from an email address
resolves the account through resolve_subject_or_none. An unknown email is a
normal, side-effect-free success: callers must not be able to tell "no such
account" from "message sent" by looking at the result.
"""

import logging
from typing import Optional

from src.app.repositories.account_repository import IAccountRepository
from src.domain.entities import Account, Study

logger = logging.getLogger(__name__)


async def resolve_subject_or_none(
    accounts: IAccountRepository, study: Study, email: str
) -> Optional[Account]:
    account = await accounts.get_by_email(study, email)
    if account is None:
        logger.debug(f"No account for email in study {study.identifier}; skipping silently")
    return account
