"""Call Reservation Domain Entities"""

from src.service.call_reservation.domain.entity.reservation_entity import Reservation

__all__ = ['Reservation']
