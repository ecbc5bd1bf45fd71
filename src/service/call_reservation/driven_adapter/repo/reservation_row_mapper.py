from datetime import datetime, timezone
from typing import Optional

from src.service.call_reservation.domain.entity.reservation_entity import Reservation
from src.service.call_reservation.domain.enum.reservation_status import ReservationStatus
from src.service.call_reservation.driven_adapter.model.reservation_model import ReservationModel


def _as_utc(value: Optional[datetime]) -> Optional[datetime]:
    # SQLite hands back naive datetimes; everything is written in UTC
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def model_to_entity(model: ReservationModel) -> Reservation:
    return Reservation(
        id=model.id,
        reservation_date=model.reservation_date,
        start_time=model.start_time,
        end_time=model.end_time,
        email=model.email,
        phone=model.phone,
        push_notification_key=model.push_notification_key,
        receive_email=model.receive_email,
        receive_sms_notification=model.receive_sms_notification,
        receive_push_notification=model.receive_push_notification,
        status=ReservationStatus(model.status),
        created_time=_as_utc(model.created_time),
        updated_time=_as_utc(model.updated_time),
    )


def entity_to_model(reservation: Reservation) -> ReservationModel:
    return ReservationModel(
        id=reservation.id,
        reservation_date=reservation.reservation_date,
        start_time=reservation.start_time,
        end_time=reservation.end_time,
        email=reservation.email,
        phone=reservation.phone,
        push_notification_key=reservation.push_notification_key,
        receive_email=reservation.receive_email,
        receive_sms_notification=reservation.receive_sms_notification,
        receive_push_notification=reservation.receive_push_notification,
        status=reservation.status.value,
    )
