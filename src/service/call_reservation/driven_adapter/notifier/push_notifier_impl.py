"""
Push notifier

When Kafka is enabled the notification is published to PUSH_NOTIFICATION_TOPIC
for the push gateway to consume; otherwise it is only logged.
"""

from datetime import datetime, timezone
from typing import Optional

from src.platform.config.core_setting import settings
from src.platform.logging.loguru_io import Logger
from src.platform.message_queue.event_publisher import publish_message
from src.service.call_reservation.app.interface.i_push_notifier import IPushNotifier


class PushNotifierImpl(IPushNotifier):
    def __init__(self, *, kafka_enabled: Optional[bool] = None, topic: Optional[str] = None):
        self.kafka_enabled = settings.KAFKA_ENABLED if kafka_enabled is None else kafka_enabled
        self.topic = topic or settings.PUSH_NOTIFICATION_TOPIC

    @Logger.io(reraise=False)
    async def send_push_notification(
        self, *, push_notification_key: str, title: str, body: str
    ) -> None:
        Logger.base.info(
            f'🔔 [PUSH] Send Push Notification to {push_notification_key}, '
            f'title: {title}, content: {body}'
        )
        if not self.kafka_enabled:
            return

        await publish_message(
            topic=self.topic,
            key=push_notification_key,
            payload={
                'pushNotificationKey': push_notification_key,
                'title': title,
                'content': body,
                'timestamp': datetime.now(timezone.utc).isoformat(),
            },
        )

    @Logger.io(reraise=False)
    async def send_call_reminder(self, *, push_notification_key: str, minutes: int) -> None:
        unit = 'minute' if minutes == 1 else 'minutes'
        await self.send_push_notification(
            push_notification_key=push_notification_key,
            title='Call Reminder',
            body=f'Your call is scheduled in {minutes} {unit}. Please be ready!',
        )
