from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.call_reservation.app.interface.i_reservation_query_repo import (
    IReservationQueryRepo,
)
from src.service.call_reservation.domain.entity.reservation_entity import Reservation
from src.service.call_reservation.domain.reservation_errors import ReservationNotFoundError


class GetReservationUseCase:
    def __init__(self, *, reservation_query_repo: IReservationQueryRepo) -> None:
        self.reservation_query_repo = reservation_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        reservation_query_repo: IReservationQueryRepo = Depends(
            Provide[Container.reservation_query_repo]
        ),
    ) -> Self:
        return cls(reservation_query_repo=reservation_query_repo)

    @Logger.io
    async def execute(self, *, reservation_id: str) -> Reservation:
        reservation = await self.reservation_query_repo.get_by_id(reservation_id=reservation_id)
        if not reservation:
            raise ReservationNotFoundError(reservation_id)
        return reservation
