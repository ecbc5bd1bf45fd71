"""
Call reservation business errors

All of them are synchronous and non-retryable; the HTTP layer renders them
through the platform exception handlers using their status_code.
"""

from src.platform.exception.exceptions import ConflictError, DomainError, NotFoundError


class InvalidTimeFormatError(DomainError):
    def __init__(self, value: str):
        self.value = value
        super().__init__(
            f'Invalid time format: {value!r}. Expected HH:MM with minutes in 00, 15, 30 or 45',
            400,
        )


class SlotConflictError(ConflictError):
    def __init__(self, reservation_date: object, start_time: str):
        self.reservation_date = reservation_date
        self.start_time = start_time
        super().__init__(
            f'A reservation already exists for {reservation_date} at {start_time}'
        )


class InvalidTransitionError(DomainError):
    def __init__(self, *, current_status: str, action: str):
        self.current_status = current_status
        self.action = action
        super().__init__(f'Cannot {action} reservation with status {current_status}', 400)


class ReservationNotFoundError(NotFoundError):
    def __init__(self, reservation_id: object):
        self.reservation_id = reservation_id
        super().__init__(f'Reservation with ID {reservation_id} not found')
