"""Call Reservation Domain Value Objects"""

from src.service.call_reservation.domain.value_object.slot_time import (
    SlotTime,
    compute_end_time,
)

__all__ = ['SlotTime', 'compute_end_time']
