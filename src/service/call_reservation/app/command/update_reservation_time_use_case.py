from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.reservation_metrics import metrics
from src.service.call_reservation.app.interface.i_reservation_command_repo import (
    IReservationCommandRepo,
)
from src.service.call_reservation.domain.entity.reservation_entity import Reservation
from src.service.call_reservation.domain.reservation_errors import (
    ReservationNotFoundError,
    SlotConflictError,
)


class UpdateReservationTimeUseCase:
    def __init__(self, *, reservation_command_repo: IReservationCommandRepo) -> None:
        self.reservation_command_repo = reservation_command_repo

    @classmethod
    @inject
    def depends(
        cls,
        reservation_command_repo: IReservationCommandRepo = Depends(
            Provide[Container.reservation_command_repo]
        ),
    ) -> Self:
        return cls(reservation_command_repo=reservation_command_repo)

    @Logger.io
    async def execute(self, *, reservation_id: str, start_time: str) -> Reservation:
        """
        Move a QUEUED or ACCEPTED reservation to a new start time on the same date.

        The conflict check ignores the reservation itself, so rescheduling to the
        current time is a no-op that succeeds.
        """
        reservation = await self.reservation_command_repo.get_by_id(reservation_id=reservation_id)
        if not reservation:
            raise ReservationNotFoundError(reservation_id)

        rescheduled = reservation.reschedule(start_time=start_time)

        conflict = await self.reservation_command_repo.find_queued_at_slot(
            reservation_date=rescheduled.reservation_date,
            start_time=rescheduled.start_time,
            exclude_id=rescheduled.id,
        )
        if conflict:
            metrics.record_operation(action='reschedule', result='conflict')
            raise SlotConflictError(rescheduled.reservation_date, rescheduled.start_time)

        saved = await self.reservation_command_repo.save(reservation=rescheduled)
        metrics.record_operation(action='reschedule', result='success')
        return saved
