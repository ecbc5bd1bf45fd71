from abc import ABC, abstractmethod


class IEmailNotifier(ABC):
    """Fire-and-forget e-mail delivery; implementations never raise"""

    @abstractmethod
    async def send_email(self, *, to: str, subject: str, body: str) -> None:
        pass

    @abstractmethod
    async def send_call_reminder(self, *, to: str, start_time: str, minutes: int) -> None:
        pass

    @abstractmethod
    async def send_cancellation_notice_to_admin(
        self, *, admin_email: str, reservation_id: str, user_email: str
    ) -> None:
        pass

    @abstractmethod
    async def send_rejection_notice_to_user(self, *, user_email: str, reservation_id: str) -> None:
        pass
