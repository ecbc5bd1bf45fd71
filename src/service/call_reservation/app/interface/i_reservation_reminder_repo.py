"""
Reservation Reminder Repository Interface

Stores one "already notified" marker per (reservation, channel).
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Iterable, Set, Tuple

from src.service.call_reservation.domain.enum.notification_channel import NotificationChannel


class IReservationReminderRepo(ABC):
    @abstractmethod
    async def list_sent(
        self, *, reservation_ids: Iterable[str]
    ) -> Set[Tuple[str, NotificationChannel]]:
        """Return the (reservation_id, channel) pairs that already have a marker"""
        pass

    @abstractmethod
    async def try_claim(
        self, *, reservation_id: str, channel: NotificationChannel, sent_at: datetime
    ) -> bool:
        """
        Insert the marker for a reminder about to be sent

        Returns:
            True if this caller owns the delivery, False if a marker already existed
        """
        pass
