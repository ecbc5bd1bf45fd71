from datetime import date

import pytest

from src.service.call_reservation.domain.entity.reservation_entity import Reservation
from src.service.call_reservation.domain.enum.reservation_status import ReservationStatus
from src.service.call_reservation.domain.reservation_errors import (
    InvalidTimeFormatError,
    InvalidTransitionError,
)


pytestmark = pytest.mark.unit


def _create(**overrides) -> Reservation:
    fields = {
        'reservation_date': date(2024, 1, 15),
        'start_time': '13:15',
        'email': 'user@example.com',
        'phone': '+1234567890',
        'push_notification_key': 'user-push-key-123',
    }
    fields.update(overrides)
    return Reservation.create(**fields)


class TestReservationCreate:
    def test_create_queues_reservation_with_derived_end_time(self):
        reservation = _create()

        assert reservation.status == ReservationStatus.QUEUED
        assert reservation.start_time == '13:15'
        assert reservation.end_time == '13:45'
        assert reservation.reservation_date == date(2024, 1, 15)
        assert reservation.created_time is None

    def test_create_normalizes_single_digit_hour(self):
        reservation = _create(start_time='9:00')

        assert reservation.start_time == '09:00'
        assert reservation.end_time == '09:30'

    def test_create_assigns_unique_ids(self):
        assert _create().id != _create().id

    def test_create_keeps_channel_flags(self):
        reservation = _create(receive_email=False, receive_push_notification=False)

        assert reservation.receive_email is False
        assert reservation.receive_sms_notification is True
        assert reservation.receive_push_notification is False

    def test_create_rejects_off_grid_time(self):
        with pytest.raises(InvalidTimeFormatError):
            _create(start_time='13:20')

    def test_late_evening_slot_stays_on_its_date(self):
        reservation = _create(start_time='23:45')

        assert reservation.end_time == '00:15'
        assert reservation.reservation_date == date(2024, 1, 15)


class TestReservationReschedule:
    def test_reschedule_moves_start_and_end_together(self, make_reservation):
        reservation = make_reservation(status=ReservationStatus.ACCEPTED)

        updated = reservation.reschedule(start_time='14:30')

        assert (updated.start_time, updated.end_time) == ('14:30', '15:00')
        assert updated.status == ReservationStatus.ACCEPTED
        assert updated.reservation_date == reservation.reservation_date
        assert updated.id == reservation.id

    def test_reschedule_checks_status_before_time_format(self, make_reservation):
        reservation = make_reservation(status=ReservationStatus.CANCELLED)

        with pytest.raises(InvalidTransitionError):
            reservation.reschedule(start_time='bad')

    def test_reschedule_rejects_off_grid_time(self, make_reservation):
        reservation = make_reservation()

        with pytest.raises(InvalidTimeFormatError):
            reservation.reschedule(start_time='14:10')
