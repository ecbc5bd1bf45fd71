from enum import StrEnum


class ReservationAction(StrEnum):
    """Actions that may change a reservation after it is booked"""

    ACCEPT = 'accept'
    REJECT = 'reject'
    CANCEL = 'cancel'
    COMPLETE = 'complete'
    RESCHEDULE = 'reschedule'


class AdminDecision(StrEnum):
    """Subset of actions an operator may take on a queued reservation"""

    ACCEPT = 'accept'
    REJECT = 'reject'

    def to_action(self) -> ReservationAction:
        return ReservationAction(self.value)
