"""
Reservation status transitions

Every legal (status, action) pair is listed in ``TRANSITIONS``; anything
absent is forbidden. Terminal statuses have no outgoing edges.
"""

from src.service.call_reservation.domain.enum.reservation_action import ReservationAction
from src.service.call_reservation.domain.enum.reservation_status import ReservationStatus
from src.service.call_reservation.domain.reservation_errors import InvalidTransitionError


QUEUED = ReservationStatus.QUEUED
ACCEPTED = ReservationStatus.ACCEPTED

TRANSITIONS: dict[tuple[ReservationStatus, ReservationAction], ReservationStatus] = {
    (QUEUED, ReservationAction.ACCEPT): ReservationStatus.ACCEPTED,
    (QUEUED, ReservationAction.REJECT): ReservationStatus.REJECTED,
    (QUEUED, ReservationAction.CANCEL): ReservationStatus.CANCELLED,
    (ACCEPTED, ReservationAction.CANCEL): ReservationStatus.CANCELLED,
    (QUEUED, ReservationAction.COMPLETE): ReservationStatus.SUCCESSFUL,
    (ACCEPTED, ReservationAction.COMPLETE): ReservationStatus.SUCCESSFUL,
    # Time change keeps the status
    (QUEUED, ReservationAction.RESCHEDULE): QUEUED,
    (ACCEPTED, ReservationAction.RESCHEDULE): ACCEPTED,
}


def next_status(current: ReservationStatus, action: ReservationAction) -> ReservationStatus:
    try:
        return TRANSITIONS[(ReservationStatus(current), ReservationAction(action))]
    except KeyError:
        raise InvalidTransitionError(current_status=str(current), action=str(action)) from None
