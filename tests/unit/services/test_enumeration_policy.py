"""
Unit tests for resolve_subject_or_none
"""
from unittest.mock import AsyncMock, MagicMock

import pytest

from src.app.services.enumeration_policy import resolve_subject_or_none


@pytest.mark.asyncio
async def test_returns_account_when_found(study, account):
    accounts = MagicMock()
    accounts.get_by_email = AsyncMock(return_value=account)

    assert await resolve_subject_or_none(accounts, study, "a@example.com") is account
    accounts.get_by_email.assert_awaited_once_with(study, "a@example.com")


@pytest.mark.asyncio
async def test_returns_none_without_raising_when_missing(study):
    accounts = MagicMock()
    accounts.get_by_email = AsyncMock(return_value=None)

    assert await resolve_subject_or_none(accounts, study, "ghost@example.com") is None
