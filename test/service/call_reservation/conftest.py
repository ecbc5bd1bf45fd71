"""Shared fixtures for call reservation tests"""

from collections.abc import Callable
from datetime import date, datetime, timezone
from typing import Any

import pytest

from src.service.call_reservation.domain.entity.reservation_entity import Reservation
from src.service.call_reservation.domain.enum.reservation_status import ReservationStatus
from src.service.call_reservation.domain.value_object.slot_time import compute_end_time


DEFAULT_DATE = date(2024, 1, 15)
DEFAULT_EMAIL = 'user@example.com'
DEFAULT_PHONE = '+1234567890'
DEFAULT_PUSH_KEY = 'user-push-key-123'


@pytest.fixture
def make_reservation() -> Callable[..., Reservation]:
    """Build a persisted-looking Reservation with overridable fields"""
    counter = {'n': 0}

    def _make(**overrides: Any) -> Reservation:
        counter['n'] += 1
        start_time = overrides.pop('start_time', '13:15')
        fields: dict[str, Any] = {
            'id': f'reservation-{counter["n"]}',
            'reservation_date': DEFAULT_DATE,
            'start_time': start_time,
            'end_time': compute_end_time(start_time),
            'email': DEFAULT_EMAIL,
            'phone': DEFAULT_PHONE,
            'push_notification_key': DEFAULT_PUSH_KEY,
            'receive_email': True,
            'receive_sms_notification': True,
            'receive_push_notification': True,
            'status': ReservationStatus.QUEUED,
            'created_time': datetime(2024, 1, 10, 10, 30, tzinfo=timezone.utc),
            'updated_time': datetime(2024, 1, 10, 10, 30, tzinfo=timezone.utc),
        }
        fields.update(overrides)
        return Reservation(**fields)

    return _make


@pytest.fixture
def booking_payload() -> Callable[..., dict[str, Any]]:
    """camelCase request body for POST /api/reservation"""

    def _payload(**overrides: Any) -> dict[str, Any]:
        body: dict[str, Any] = {
            'reservationDate': DEFAULT_DATE.isoformat(),
            'startTime': '13:15',
            'email': DEFAULT_EMAIL,
            'phone': DEFAULT_PHONE,
            'pushNotificationKey': DEFAULT_PUSH_KEY,
            'receiveEmail': True,
            'receiveSmsNotification': True,
            'receivePushNotification': True,
        }
        body.update(overrides)
        return body

    return _payload
