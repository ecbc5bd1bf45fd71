"""
Reservation Command Repository Interface

Write side of the reservation store. Implementations must guarantee that at
most one QUEUED reservation exists per (reservation_date, start_time) and
surface a violation as SlotConflictError.
"""

from abc import ABC, abstractmethod
from datetime import date
from typing import Optional

from src.service.call_reservation.domain.entity.reservation_entity import Reservation


class IReservationCommandRepo(ABC):
    @abstractmethod
    async def get_by_id(self, *, reservation_id: str) -> Optional[Reservation]:
        """Load a reservation for a state change, or None if absent"""
        pass

    @abstractmethod
    async def find_queued_at_slot(
        self,
        *,
        reservation_date: date,
        start_time: str,
        exclude_id: Optional[str] = None,
    ) -> Optional[Reservation]:
        """
        Find the QUEUED reservation occupying a slot

        Args:
            reservation_date: Slot date
            start_time: Slot start, two-digit HH:MM
            exclude_id: Reservation to ignore (the one being rescheduled)

        Returns:
            The occupying reservation or None
        """
        pass

    @abstractmethod
    async def create(self, *, reservation: Reservation) -> Reservation:
        """
        Persist a new reservation

        Returns:
            Reservation with store timestamps populated

        Raises:
            SlotConflictError: another QUEUED reservation took the slot first
        """
        pass

    @abstractmethod
    async def save(self, *, reservation: Reservation) -> Reservation:
        """
        Persist status and time changes of an existing reservation

        Raises:
            ReservationNotFoundError: the row no longer exists
            SlotConflictError: the new time collides with another QUEUED reservation
        """
        pass
