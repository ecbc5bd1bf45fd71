"""
Database Models

Import all models here to ensure they are registered with SQLAlchemy
"""

from src.service.call_reservation.driven_adapter.model.reservation_model import ReservationModel
from src.service.call_reservation.driven_adapter.model.reservation_reminder_model import (
    ReservationReminderModel,
)

__all__ = ['ReservationModel', 'ReservationReminderModel']
