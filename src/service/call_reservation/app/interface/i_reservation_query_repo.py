from abc import ABC, abstractmethod
from datetime import date
from typing import List, Optional

from src.service.call_reservation.domain.entity.reservation_entity import Reservation
from src.service.call_reservation.domain.enum.reservation_status import ReservationStatus


class IReservationQueryRepo(ABC):
    @abstractmethod
    async def get_by_id(self, *, reservation_id: str) -> Optional[Reservation]:
        pass

    @abstractmethod
    async def list_all(self, *, status: Optional[ReservationStatus] = None) -> List[Reservation]:
        """All reservations ordered by created_time descending, optionally filtered by status"""
        pass

    @abstractmethod
    async def list_by_date_and_status(
        self, *, reservation_date: date, status: ReservationStatus
    ) -> List[Reservation]:
        """Reservations on one date with one status (used by the reminder scan)"""
        pass
