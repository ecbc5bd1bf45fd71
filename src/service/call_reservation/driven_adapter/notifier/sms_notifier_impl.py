from src.platform.logging.loguru_io import Logger
from src.service.call_reservation.app.interface.i_sms_notifier import ISmsNotifier


class SmsNotifierImpl(ISmsNotifier):
    """Logs outgoing SMS; no carrier integration"""

    @Logger.io(reraise=False)
    async def send_sms(self, *, phone: str, body: str) -> None:
        Logger.base.info(f'📱 [SMS] Send SMS to {phone}, content: {body}')

    @Logger.io(reraise=False)
    async def send_call_reminder(self, *, phone: str, start_time: str, minutes: int) -> None:
        await self.send_sms(
            phone=phone,
            body=f'Your call is scheduled in {minutes} minutes at {start_time}. Please be ready!',
        )
