"""
Unit tests for DeferredNotificationSender
"""
import pytest
from fastapi import BackgroundTasks

from src.adapter.services.deferred_notification_sender import DeferredNotificationSender
from src.app.services.notification_sender import Notification
from src.app.services.token_issuer import TokenIssuer
from src.domain.entities import EmailTemplate


@pytest.mark.asyncio
async def test_send_is_delivered_only_when_background_tasks_run(sender):
    background_tasks = BackgroundTasks()
    deferred = DeferredNotificationSender(sender, background_tasks)
    notification = Notification(
        template=EmailTemplate(), recipient="a@example.com", study_name="Study X", tokens={"url": "u"}
    )

    await deferred.send(notification)
    assert sender.sent == []

    await background_tasks()
    assert sender.sent == [notification]


@pytest.mark.asyncio
async def test_issuer_returns_before_verification_email_is_delivered(
    mock_uow, token_store, sender, settings, study
):
    background_tasks = BackgroundTasks()
    issuer = TokenIssuer(
        mock_uow, token_store, DeferredNotificationSender(sender, background_tasks), settings
    )

    token = await issuer.issue_verification_token(study, "user-1", "a@example.com")

    assert await token_store.get(token) is not None
    assert sender.sent == []

    await background_tasks()
    assert len(sender.sent) == 1
    assert token in sender.sent[0].tokens["url"]
