"""
E-mail notifier

No SMTP transport is wired in: messages are logged and the most recent
EMAIL_OUTBOX_SIZE of them are kept in memory for inspection.
"""

from collections import deque
from datetime import datetime, timezone
from typing import Deque, Optional

from src.platform.config.core_setting import settings
from src.platform.logging.loguru_io import Logger
from src.service.call_reservation.app.interface.i_email_notifier import IEmailNotifier


class EmailNotifierImpl(IEmailNotifier):
    def __init__(self, *, outbox_size: Optional[int] = None) -> None:
        # Oldest messages are dropped once the outbox is full
        self.sent_emails: Deque[dict] = deque(
            maxlen=settings.EMAIL_OUTBOX_SIZE if outbox_size is None else outbox_size
        )

    @Logger.io(reraise=False)
    async def send_email(self, *, to: str, subject: str, body: str) -> None:
        email_data = {
            'to': to,
            'subject': subject,
            'body': body,
            'sent_at': datetime.now(timezone.utc),
        }
        self.sent_emails.append(email_data)
        Logger.base.info(f'📧 [EMAIL] Send Email to {to}, subject: {subject}, content: {body}')

    @Logger.io(reraise=False)
    async def send_call_reminder(self, *, to: str, start_time: str, minutes: int) -> None:
        await self.send_email(
            to=to,
            subject=f'Call Reminder - {minutes} minutes',
            body=f'Your call is scheduled in {minutes} minutes at {start_time}. Please be ready!',
        )

    @Logger.io(reraise=False)
    async def send_cancellation_notice_to_admin(
        self, *, admin_email: str, reservation_id: str, user_email: str
    ) -> None:
        body = f"""
        A reservation has been cancelled by the user.
        Reservation ID: {reservation_id}
        User Email: {user_email}
        Cancellation Time: {datetime.now(timezone.utc).isoformat()}
        """
        await self.send_email(
            to=admin_email,
            subject='Reservation Cancellation Notification',
            body=body.strip(),
        )

    @Logger.io(reraise=False)
    async def send_rejection_notice_to_user(self, *, user_email: str, reservation_id: str) -> None:
        body = f"""
        Your reservation has been rejected by our support team.
        Reservation ID: {reservation_id}
        Rejection Time: {datetime.now(timezone.utc).isoformat()}
        Please contact support if you have any questions.
        """
        await self.send_email(to=user_email, subject='Reservation Rejected', body=body.strip())
