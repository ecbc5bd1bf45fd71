import attrs

from src.service.call_reservation.domain.entity.reservation_entity import Reservation
from src.service.call_reservation.domain.enum.notification_channel import NotificationChannel


@attrs.frozen
class ReminderIntent:
    """A reminder channel that is due for a reservation at the scan instant"""

    reservation: Reservation
    channel: NotificationChannel
    minutes_until_call: int
