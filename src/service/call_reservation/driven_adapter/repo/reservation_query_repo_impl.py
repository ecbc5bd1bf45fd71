from datetime import date
from typing import AsyncContextManager, Callable, List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.call_reservation.app.interface.i_reservation_query_repo import (
    IReservationQueryRepo,
)
from src.service.call_reservation.domain.entity.reservation_entity import Reservation
from src.service.call_reservation.domain.enum.reservation_status import ReservationStatus
from src.service.call_reservation.driven_adapter.model.reservation_model import ReservationModel
from src.service.call_reservation.driven_adapter.repo.reservation_row_mapper import (
    model_to_entity,
)


class ReservationQueryRepoImpl(IReservationQueryRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]):
        self.session_factory = session_factory

    @Logger.io
    async def get_by_id(self, *, reservation_id: str) -> Optional[Reservation]:
        async with self.session_factory() as session:
            model = await session.get(ReservationModel, reservation_id)
            return model_to_entity(model) if model else None

    @Logger.io
    async def list_all(self, *, status: Optional[ReservationStatus] = None) -> List[Reservation]:
        # UUID7 ids are time ordered, which breaks created_time ties
        stmt = select(ReservationModel).order_by(
            ReservationModel.created_time.desc(), ReservationModel.id.desc()
        )
        if status is not None:
            stmt = stmt.where(ReservationModel.status == status.value)

        async with self.session_factory() as session:
            result = await session.execute(stmt)
            return [model_to_entity(model) for model in result.scalars().all()]

    @Logger.io
    async def list_by_date_and_status(
        self, *, reservation_date: date, status: ReservationStatus
    ) -> List[Reservation]:
        stmt = (
            select(ReservationModel)
            .where(
                ReservationModel.reservation_date == reservation_date,
                ReservationModel.status == status.value,
            )
            .order_by(ReservationModel.start_time)
        )
        async with self.session_factory() as session:
            result = await session.execute(stmt)
            return [model_to_entity(model) for model in result.scalars().all()]
