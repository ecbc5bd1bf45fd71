"""
Unit tests for the reservation status transition table

Every (status, action) pair that is not a listed edge must fail with
InvalidTransitionError and leave the reservation untouched.
"""

import itertools

import pytest

from src.service.call_reservation.domain.enum.reservation_action import ReservationAction
from src.service.call_reservation.domain.enum.reservation_status import ReservationStatus
from src.service.call_reservation.domain.reservation_errors import InvalidTransitionError
from src.service.call_reservation.domain.reservation_state_machine import (
    TRANSITIONS,
    next_status,
)


pytestmark = pytest.mark.unit

S = ReservationStatus
A = ReservationAction

VALID_EDGES = {
    (S.QUEUED, A.ACCEPT): S.ACCEPTED,
    (S.QUEUED, A.REJECT): S.REJECTED,
    (S.QUEUED, A.CANCEL): S.CANCELLED,
    (S.ACCEPTED, A.CANCEL): S.CANCELLED,
    (S.QUEUED, A.COMPLETE): S.SUCCESSFUL,
    (S.ACCEPTED, A.COMPLETE): S.SUCCESSFUL,
    (S.QUEUED, A.RESCHEDULE): S.QUEUED,
    (S.ACCEPTED, A.RESCHEDULE): S.ACCEPTED,
}

INVALID_PAIRS = [
    pair for pair in itertools.product(ReservationStatus, ReservationAction) if pair not in VALID_EDGES
]

# Entity method for each action
ENTITY_CALLS = {
    A.ACCEPT: lambda r: r.accept(),
    A.REJECT: lambda r: r.reject(),
    A.CANCEL: lambda r: r.cancel(),
    A.COMPLETE: lambda r: r.mark_as_successful(),
    A.RESCHEDULE: lambda r: r.reschedule(start_time='14:00'),
}


class TestTransitionTable:
    def test_table_matches_lifecycle_graph(self):
        assert TRANSITIONS == VALID_EDGES

    @pytest.mark.parametrize('pair, expected', list(VALID_EDGES.items()))
    def test_valid_edges(self, pair, expected):
        status, action = pair

        assert next_status(status, action) == expected

    @pytest.mark.parametrize('status, action', INVALID_PAIRS)
    def test_invalid_pairs_raise_with_status_and_action(self, status, action):
        with pytest.raises(InvalidTransitionError) as exc_info:
            next_status(status, action)

        error = exc_info.value
        assert error.current_status == status.value
        assert error.action == action.value
        assert error.message == f'Cannot {action.value} reservation with status {status.value}'
        assert error.status_code == 400

    @pytest.mark.parametrize('status', [S.REJECTED, S.CANCELLED, S.SUCCESSFUL])
    def test_terminal_statuses_have_no_outgoing_edges(self, status):
        assert status.is_terminal
        assert not any((status, action) in TRANSITIONS for action in ReservationAction)


class TestEntityTransitions:
    @pytest.mark.parametrize('status, action', INVALID_PAIRS)
    def test_invalid_action_leaves_status_unchanged(self, make_reservation, status, action):
        reservation = make_reservation(status=status)

        with pytest.raises(InvalidTransitionError):
            ENTITY_CALLS[action](reservation)

        assert reservation.status == status
        assert reservation.start_time == '13:15'

    @pytest.mark.parametrize('pair, expected', list(VALID_EDGES.items()))
    def test_valid_action_returns_new_status(self, make_reservation, pair, expected):
        status, action = pair
        reservation = make_reservation(status=status)

        updated = ENTITY_CALLS[action](reservation)

        assert updated.status == expected
        assert reservation.status == status
