"""Call Reservation Domain Enums"""

from src.service.call_reservation.domain.enum.notification_channel import (
    REMINDER_LEAD_MINUTES,
    NotificationChannel,
)
from src.service.call_reservation.domain.enum.reservation_action import (
    AdminDecision,
    ReservationAction,
)
from src.service.call_reservation.domain.enum.reservation_status import ReservationStatus

__all__ = [
    'REMINDER_LEAD_MINUTES',
    'AdminDecision',
    'NotificationChannel',
    'ReservationAction',
    'ReservationStatus',
]
