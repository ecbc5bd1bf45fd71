from typing import List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.call_reservation.app.interface.i_reservation_query_repo import (
    IReservationQueryRepo,
)
from src.service.call_reservation.domain.entity.reservation_entity import Reservation
from src.service.call_reservation.domain.enum.reservation_status import ReservationStatus


class ListReservationsUseCase:
    """Newest first (created_time descending)"""

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
    async def list_all(self) -> List[Reservation]:
        return await self.reservation_query_repo.list_all()

    @Logger.io
    async def list_pending(self) -> List[Reservation]:
        return await self.reservation_query_repo.list_all(status=ReservationStatus.QUEUED)
