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
from src.service.call_reservation.domain.reservation_errors import ReservationNotFoundError


class MarkReservationSuccessfulUseCase:
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
    async def execute(self, *, reservation_id: str) -> Reservation:
        reservation = await self.reservation_command_repo.get_by_id(reservation_id=reservation_id)
        if not reservation:
            raise ReservationNotFoundError(reservation_id)

        saved = await self.reservation_command_repo.save(
            reservation=reservation.mark_as_successful()
        )
        metrics.record_operation(action='complete', result='success')
        return saved
