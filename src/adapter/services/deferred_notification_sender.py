from fastapi import BackgroundTasks

from src.app.services.notification_sender import INotificationSender, Notification


class DeferredNotificationSender(INotificationSender):
    """
    Queues notifications on the request's background tasks.

    Delivery runs after the response has been sent, so a request that sends a
    message answers as fast as one that sends nothing.
    """

    def __init__(self, delegate: INotificationSender, background_tasks: BackgroundTasks):
        self.delegate = delegate
        self.background_tasks = background_tasks

    async def send(self, notification: Notification) -> None:
        self.background_tasks.add_task(self.delegate.send, notification)
