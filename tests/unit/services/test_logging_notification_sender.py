import logging

import pytest

from src.adapter.services.logging_notification_sender import LoggingNotificationSender
from src.app.services.notification_sender import Notification
from src.domain.entities import EmailTemplate


@pytest.mark.asyncio
async def test_logs_subject_with_masked_recipient(caplog):
    notification = Notification(
        template=EmailTemplate(subject="Welcome to ${studyName}", body="${url}"),
        recipient="alice@example.com",
        study_name="Study X",
        tokens={"url": "https://ws.example.org/mobile/verifyEmail.html?study=x&sptoken=secret"},
    )

    with caplog.at_level(logging.INFO):
        await LoggingNotificationSender().send(notification)

    assert "Welcome to Study X" in caplog.text
    assert "a***@example.com" in caplog.text
    assert "secret" not in caplog.text


def test_notification_tokens_are_read_only():
    notification = Notification(
        template=EmailTemplate(), recipient="a@example.com", study_name="Study X", tokens={"url": "u"}
    )

    with pytest.raises(TypeError):
        notification.tokens["url"] = "other"
