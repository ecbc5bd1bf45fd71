from enum import StrEnum


class ReservationStatus(StrEnum):
    QUEUED = 'QUEUED'
    ACCEPTED = 'ACCEPTED'
    REJECTED = 'REJECTED'
    CANCELLED = 'CANCELLED'
    SUCCESSFUL = 'SUCCESSFUL'

    @property
    def is_terminal(self) -> bool:
        return self in (
            ReservationStatus.REJECTED,
            ReservationStatus.CANCELLED,
            ReservationStatus.SUCCESSFUL,
        )
