"""Application layer interfaces (Ports)"""

from src.service.call_reservation.app.interface.i_email_notifier import IEmailNotifier
from src.service.call_reservation.app.interface.i_push_notifier import IPushNotifier
from src.service.call_reservation.app.interface.i_reservation_command_repo import (
    IReservationCommandRepo,
)
from src.service.call_reservation.app.interface.i_reservation_query_repo import (
    IReservationQueryRepo,
)
from src.service.call_reservation.app.interface.i_reservation_reminder_repo import (
    IReservationReminderRepo,
)
from src.service.call_reservation.app.interface.i_sms_notifier import ISmsNotifier

__all__ = [
    'IEmailNotifier',
    'IPushNotifier',
    'IReservationCommandRepo',
    'IReservationQueryRepo',
    'IReservationReminderRepo',
    'ISmsNotifier',
]
