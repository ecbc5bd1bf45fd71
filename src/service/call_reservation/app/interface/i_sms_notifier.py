from abc import ABC, abstractmethod


class ISmsNotifier(ABC):
    """Fire-and-forget SMS delivery; implementations never raise"""

    @abstractmethod
    async def send_sms(self, *, phone: str, body: str) -> None:
        pass

    @abstractmethod
    async def send_call_reminder(self, *, phone: str, start_time: str, minutes: int) -> None:
        pass
