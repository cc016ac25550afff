import logging

from src.app.services.notification_sender import INotificationSender, Notification

logger = logging.getLogger(__name__)


class LoggingNotificationSender(INotificationSender):
    """
    Notification channel that renders the message and writes it to the log.

    Stands in for the mail relay; swap in a real transport via dependency
    injection in production.
    """

    async def send(self, notification: Notification) -> None:
        logger.info(
            f"Sending '{notification.subject}' to {_mask_email(notification.recipient)} "
            f"for study {notification.study_name}"
        )


def _mask_email(email: str) -> str:
    local, _, domain = email.partition("@")
    return f"{local[:1]}***@{domain}" if domain else "***"
