from abc import ABC, abstractmethod


class IPushNotifier(ABC):
    """Fire-and-forget push delivery; implementations never raise"""

    @abstractmethod
    async def send_push_notification(
        self, *, push_notification_key: str, title: str, body: str
    ) -> None:
        pass

    @abstractmethod
    async def send_call_reminder(self, *, push_notification_key: str, minutes: int) -> None:
        pass
