"""
Integration tests for the reservation HTTP API

Runs the real app (lifespan, DI wiring, SQLite store) through TestClient.
"""

from typing import Any, Callable, Deque

from fastapi.testclient import TestClient
import pytest

from src.platform.constant.route_constant import (
    ADMIN_PENDING_RESERVATIONS,
    ADMIN_RESERVATIONS,
    ADMIN_SEND_REMINDERS,
    HEALTH,
    METRICS,
    RESERVATION_BASE,
)


def _book(client: TestClient, body: dict[str, Any]) -> dict[str, Any]:
    response = client.post(RESERVATION_BASE, json=body)
    assert response.status_code == 201, response.text
    return response.json()['record']


def _url(reservation_id: str, suffix: str = '') -> str:
    return f'{RESERVATION_BASE}/{reservation_id}{suffix}'


@pytest.mark.integration
class TestBookReservation:
    def test_book_returns_queued_record(
        self, client: TestClient, booking_payload: Callable[..., dict]
    ):
        response = client.post(RESERVATION_BASE, json=booking_payload())

        assert response.status_code == 201
        data = response.json()
        assert data['status'] == 'success'
        record = data['record']
        assert record['id']
        assert record['reservationDate'] == '2024-01-15'
        assert record['startTime'] == '13:15'
        assert record['endTime'] == '13:45'
        assert record['email'] == 'user@example.com'
        assert record['phone'] == '+1234567890'
        assert record['pushNotificationKey'] == 'user-push-key-123'
        assert record['status'] == 'QUEUED'
        assert record['createdTime']

    def test_single_digit_hour_is_normalized(
        self, client: TestClient, booking_payload: Callable[..., dict]
    ):
        record = _book(client, booking_payload(startTime='9:00'))

        assert record['startTime'] == '09:00'
        assert record['endTime'] == '09:30'

    def test_last_slot_of_the_day_ends_after_midnight(
        self, client: TestClient, booking_payload: Callable[..., dict]
    ):
        record = _book(client, booking_payload(startTime='23:45'))

        assert record['reservationDate'] == '2024-01-15'
        assert record['endTime'] == '00:15'

    @pytest.mark.parametrize('start_time', ['13:10', '24:00', '1:5', 'noon'])
    def test_off_grid_time_is_rejected(
        self, client: TestClient, booking_payload: Callable[..., dict], start_time: str
    ):
        response = client.post(RESERVATION_BASE, json=booking_payload(startTime=start_time))

        assert response.status_code == 400
        assert 'Invalid time format' in response.json()['detail']

    def test_missing_flag_is_a_validation_error(
        self, client: TestClient, booking_payload: Callable[..., dict]
    ):
        body = booking_payload()
        del body['receiveEmail']

        response = client.post(RESERVATION_BASE, json=body)

        assert response.status_code == 400

    def test_queued_slot_conflict(self, client: TestClient, booking_payload: Callable[..., dict]):
        # Given
        _book(client, booking_payload())

        # When
        response = client.post(
            RESERVATION_BASE, json=booking_payload(email='other@example.com')
        )

        # Then
        assert response.status_code == 409
        assert response.json()['detail'] == (
            'A reservation already exists for 2024-01-15 at 13:15'
        )

    def test_same_time_on_another_date_is_free(
        self, client: TestClient, booking_payload: Callable[..., dict]
    ):
        _book(client, booking_payload())

        record = _book(client, booking_payload(reservationDate='2024-01-16'))

        assert record['startTime'] == '13:15'

    def test_accepted_reservation_frees_the_slot(
        self, client: TestClient, booking_payload: Callable[..., dict]
    ):
        # Given: the first booking has been accepted by an operator
        first = _book(client, booking_payload())
        response = client.put(
            _url(first['id'], '/admin-action'),
            json={'action': 'accept', 'adminEmail': 'admin@example.com'},
        )
        assert response.status_code == 200

        # When
        second = _book(client, booking_payload(email='other@example.com'))

        # Then
        assert second['status'] == 'QUEUED'
        assert second['id'] != first['id']


@pytest.mark.integration
class TestReadReservations:
    def test_list_is_newest_first(self, client: TestClient, booking_payload: Callable[..., dict]):
        ids = [_book(client, booking_payload(startTime=t))['id'] for t in ('10:00', '11:00', '12:00')]

        response = client.get(RESERVATION_BASE)

        assert response.status_code == 200
        assert [r['id'] for r in response.json()['records']] == list(reversed(ids))

    def test_get_by_id(self, client: TestClient, booking_payload: Callable[..., dict]):
        record = _book(client, booking_payload())

        response = client.get(_url(record['id']))

        assert response.status_code == 200
        assert response.json()['id'] == record['id']
        assert response.json()['status'] == 'QUEUED'

    def test_get_unknown_id(self, client: TestClient):
        response = client.get(_url('missing-id'))

        assert response.status_code == 404
        assert response.json()['detail'] == 'Reservation with ID missing-id not found'

    def test_admin_lists(self, client: TestClient, booking_payload: Callable[..., dict]):
        # Given: one accepted and one still queued
        accepted = _book(client, booking_payload(startTime='10:00'))
        queued = _book(client, booking_payload(startTime='11:00'))
        client.put(
            _url(accepted['id'], '/admin-action'),
            json={'action': 'accept', 'adminEmail': 'admin@example.com'},
        )

        all_records = client.get(ADMIN_RESERVATIONS).json()['records']
        pending = client.get(ADMIN_PENDING_RESERVATIONS).json()['records']

        assert {r['id'] for r in all_records} == {accepted['id'], queued['id']}
        assert [r['id'] for r in pending] == [queued['id']]


@pytest.mark.integration
class TestCancelReservation:
    def test_cancel_notifies_configured_admin(
        self,
        client: TestClient,
        booking_payload: Callable[..., dict],
        email_outbox: Deque[dict],
    ):
        record = _book(client, booking_payload())

        response = client.put(_url(record['id'], '/cancel'))

        assert response.status_code == 200
        assert response.json()['record']['status'] == 'CANCELLED'
        [email] = email_outbox
        assert email['to'] == 'admin@example.com'
        assert email['subject'] == 'Reservation Cancellation Notification'
        assert record['id'] in email['body']

    def test_cancel_notifies_address_from_body(
        self,
        client: TestClient,
        booking_payload: Callable[..., dict],
        email_outbox: Deque[dict],
    ):
        record = _book(client, booking_payload())

        response = client.put(_url(record['id'], '/cancel'), json={'adminEmail': 'ops@example.com'})

        assert response.status_code == 200
        assert [e['to'] for e in email_outbox] == ['ops@example.com']

    def test_cancelled_slot_can_be_rebooked(
        self, client: TestClient, booking_payload: Callable[..., dict]
    ):
        record = _book(client, booking_payload())
        client.put(_url(record['id'], '/cancel'))

        again = _book(client, booking_payload())

        assert again['status'] == 'QUEUED'

    def test_cancel_twice_is_invalid(
        self,
        client: TestClient,
        booking_payload: Callable[..., dict],
        email_outbox: Deque[dict],
    ):
        record = _book(client, booking_payload())
        client.put(_url(record['id'], '/cancel'))

        response = client.put(_url(record['id'], '/cancel'))

        assert response.status_code == 400
        assert response.json()['detail'] == 'Cannot cancel reservation with status CANCELLED'
        assert len(email_outbox) == 1

    def test_cancel_unknown_id(self, client: TestClient, email_outbox: Deque[dict]):
        response = client.put(_url('missing-id', '/cancel'))

        assert response.status_code == 404
        assert list(email_outbox) == []


@pytest.mark.integration
class TestAdminAction:
    def test_reject_notifies_owner(
        self,
        client: TestClient,
        booking_payload: Callable[..., dict],
        email_outbox: Deque[dict],
    ):
        record = _book(client, booking_payload())

        response = client.put(
            _url(record['id'], '/admin-action'),
            json={'action': 'reject', 'adminEmail': 'admin@example.com'},
        )

        assert response.status_code == 200
        assert response.json()['record']['status'] == 'REJECTED'
        [email] = email_outbox
        assert email['to'] == 'user@example.com'
        assert email['subject'] == 'Reservation Rejected'

    def test_accept_sends_nothing(
        self,
        client: TestClient,
        booking_payload: Callable[..., dict],
        email_outbox: Deque[dict],
    ):
        record = _book(client, booking_payload())

        response = client.put(
            _url(record['id'], '/admin-action'),
            json={'action': 'accept', 'adminEmail': 'admin@example.com'},
        )

        assert response.json()['record']['status'] == 'ACCEPTED'
        assert list(email_outbox) == []

    def test_unknown_action_is_a_validation_error(
        self, client: TestClient, booking_payload: Callable[..., dict]
    ):
        record = _book(client, booking_payload())

        response = client.put(
            _url(record['id'], '/admin-action'),
            json={'action': 'cancel', 'adminEmail': 'admin@example.com'},
        )

        assert response.status_code == 400

    def test_accept_twice_is_invalid(self, client: TestClient, booking_payload: Callable[..., dict]):
        record = _book(client, booking_payload())
        body = {'action': 'accept', 'adminEmail': 'admin@example.com'}
        client.put(_url(record['id'], '/admin-action'), json=body)

        response = client.put(_url(record['id'], '/admin-action'), json=body)

        assert response.status_code == 400
        assert response.json()['detail'] == 'Cannot accept reservation with status ACCEPTED'


@pytest.mark.integration
class TestRescheduleReservation:
    def test_move_to_free_slot(self, client: TestClient, booking_payload: Callable[..., dict]):
        record = _book(client, booking_payload())

        response = client.put(_url(record['id'], '/time'), json={'startTime': '14:30'})

        assert response.status_code == 200
        moved = response.json()['record']
        assert moved['startTime'] == '14:30'
        assert moved['endTime'] == '15:00'
        assert moved['status'] == 'QUEUED'

    def test_move_onto_queued_slot_conflicts(
        self, client: TestClient, booking_payload: Callable[..., dict]
    ):
        # Given
        _book(client, booking_payload(startTime='13:15'))
        other = _book(client, booking_payload(startTime='13:30'))

        # When
        response = client.put(_url(other['id'], '/time'), json={'startTime': '13:15'})

        # Then: unchanged
        assert response.status_code == 409
        assert client.get(_url(other['id'])).json()['startTime'] == '13:30'

    def test_move_to_own_time_is_allowed(
        self, client: TestClient, booking_payload: Callable[..., dict]
    ):
        record = _book(client, booking_payload())

        response = client.put(_url(record['id'], '/time'), json={'startTime': '13:15'})

        assert response.status_code == 200
        assert response.json()['record']['startTime'] == '13:15'

    def test_accepted_reservation_keeps_status(
        self, client: TestClient, booking_payload: Callable[..., dict]
    ):
        record = _book(client, booking_payload())
        client.put(
            _url(record['id'], '/admin-action'),
            json={'action': 'accept', 'adminEmail': 'admin@example.com'},
        )

        response = client.put(_url(record['id'], '/time'), json={'startTime': '16:00'})

        assert response.status_code == 200
        assert response.json()['record']['status'] == 'ACCEPTED'

    def test_terminal_reservation_cannot_move(
        self, client: TestClient, booking_payload: Callable[..., dict]
    ):
        record = _book(client, booking_payload())
        client.put(_url(record['id'], '/cancel'))

        response = client.put(_url(record['id'], '/time'), json={'startTime': '16:00'})

        assert response.status_code == 400
        assert response.json()['detail'] == 'Cannot reschedule reservation with status CANCELLED'

    def test_off_grid_time(self, client: TestClient, booking_payload: Callable[..., dict]):
        record = _book(client, booking_payload())

        response = client.put(_url(record['id'], '/time'), json={'startTime': '13:20'})

        assert response.status_code == 400


@pytest.mark.integration
class TestMarkSuccessful:
    def test_mark_queued_successful(self, client: TestClient, booking_payload: Callable[..., dict]):
        record = _book(client, booking_payload())

        response = client.put(_url(record['id'], '/successful'))

        assert response.status_code == 200
        assert response.json()['record']['status'] == 'SUCCESSFUL'

    def test_successful_is_terminal(
        self, client: TestClient, booking_payload: Callable[..., dict]
    ):
        record = _book(client, booking_payload())
        client.put(_url(record['id'], '/successful'))

        response = client.put(_url(record['id'], '/cancel'))

        assert response.status_code == 400


@pytest.mark.integration
class TestSystemEndpoints:
    def test_send_reminders_with_nothing_due(self, client: TestClient):
        response = client.put(ADMIN_SEND_REMINDERS)

        assert response.status_code == 200
        assert response.json() == {
            'status': 'success',
            'message': 'Reminder notifications sent successfully',
            'dispatched': 0,
        }

    def test_health(self, client: TestClient):
        response = client.get(HEALTH)

        assert response.status_code == 200
        assert response.json()['status'] == 'healthy'

    def test_metrics_after_booking(
        self, client: TestClient, booking_payload: Callable[..., dict]
    ):
        _book(client, booking_payload())

        response = client.get(METRICS)

        assert response.status_code == 200
        assert 'reservation_operations_total' in response.text
