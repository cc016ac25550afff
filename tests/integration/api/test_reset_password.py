"""
Integration tests for password reset request and confirmation
"""
from urllib.parse import parse_qs, urlparse

import bcrypt
import pytest
from httpx import AsyncClient
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.domain.entities import Account, Study


def token_from(notification) -> str:
    return parse_qs(urlparse(notification.tokens["url"]).query)["sptoken"][0]


async def create_test_account(db_session: AsyncSession, study: Study, email: str) -> Account:
    password_hash = bcrypt.hashpw("OldPass123!".encode(), bcrypt.gensalt(4))
    account = Account(study_id=study.identifier, email=email, password_hash=password_hash.decode())
    db_session.add(account)
    await db_session.commit()
    await db_session.refresh(account)
    return account


@pytest.mark.asyncio
async def test_request_and_confirm_password_reset(
    client: AsyncClient, db_session: AsyncSession, study, sender, token_store
):
    account = await create_test_account(db_session, study, "reset@example.com")

    response = await client.post("/auth/request-password-reset", json={
        "study": "study-x", "email": "reset@example.com",
    })
    assert response.status_code == 200
    assert response.json()["status"] == "sent"

    assert len(sender.sent) == 1
    notification = sender.sent[0]
    assert notification.recipient == "reset@example.com"
    assert notification.tokens["expirationWindow"] == "2"
    token = token_from(notification)
    assert token_store.ttl(f"{token}:study-x") == 7200

    response = await client.post("/auth/reset-password", json={
        "sptoken": token, "study": "study-x", "password": "NewSecurePass123!",
    })
    assert response.status_code == 200
    assert response.json()["status"] == "success"

    await db_session.refresh(account)
    assert bcrypt.checkpw(b"NewSecurePass123!", account.password_hash.encode())

    response = await client.post("/auth/reset-password", json={
        "sptoken": token, "study": "study-x", "password": "AnotherPass123!",
    })
    assert response.status_code == 400
    assert response.json()["error"]["code"] == "TOKEN_EXPIRED_OR_INVALID"


@pytest.mark.asyncio
async def test_request_reset_for_ghost_email(
    client: AsyncClient, study, sender, token_store
):
    response = await client.post("/auth/request-password-reset", json={
        "study": "study-x", "email": "ghost@example.com",
    })

    assert response.status_code == 200
    assert response.json()["status"] == "sent"
    assert len(token_store) == 0
    assert sender.sent == []


@pytest.mark.asyncio
async def test_reset_token_only_valid_for_its_study(
    client: AsyncClient, db_session: AsyncSession, study, sender
):
    await create_test_account(db_session, study, "reset@example.com")
    db_session.add(Study(identifier="study-y", name="Study Y"))
    await db_session.commit()

    await client.post("/auth/request-password-reset", json={
        "study": "study-x", "email": "reset@example.com",
    })
    token = token_from(sender.sent[0])

    response = await client.post("/auth/reset-password", json={
        "sptoken": token, "study": "study-y", "password": "NewSecurePass123!",
    })
    assert response.status_code == 400


@pytest.mark.asyncio
async def test_expired_reset_token(
    client: AsyncClient, db_session: AsyncSession, study, sender, clock
):
    await create_test_account(db_session, study, "reset@example.com")
    await client.post("/auth/request-password-reset", json={
        "study": "study-x", "email": "reset@example.com",
    })
    token = token_from(sender.sent[0])

    clock.advance(60 * 60 * 3)

    response = await client.post("/auth/reset-password", json={
        "sptoken": token, "study": "study-x", "password": "NewSecurePass123!",
    })
    assert response.status_code == 400


@pytest.mark.asyncio
async def test_reset_password_too_short_is_rejected(client: AsyncClient, study):
    response = await client.post("/auth/reset-password", json={
        "sptoken": "abc", "study": "study-x", "password": "short",
    })

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_request_reset_invalid_email_format(client: AsyncClient, study):
    response = await client.post("/auth/request-password-reset", json={
        "study": "study-x", "email": "not-a-valid-email",
    })

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_only_matching_study_account_is_reset(
    client: AsyncClient, db_session: AsyncSession, study, sender
):
    other = Study(identifier="study-y", name="Study Y")
    db_session.add(other)
    await db_session.commit()
    await create_test_account(db_session, other, "shared@example.com")

    response = await client.post("/auth/request-password-reset", json={
        "study": "study-x", "email": "shared@example.com",
    })

    assert response.status_code == 200
    assert sender.sent == []
    accounts = (await db_session.exec(select(Account))).all()
    assert len(accounts) == 1
