from datetime import date
from typing import AsyncContextManager, Callable, Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.call_reservation.app.interface.i_reservation_command_repo import (
    IReservationCommandRepo,
)
from src.service.call_reservation.domain.entity.reservation_entity import Reservation
from src.service.call_reservation.domain.enum.reservation_status import ReservationStatus
from src.service.call_reservation.domain.reservation_errors import (
    ReservationNotFoundError,
    SlotConflictError,
)
from src.service.call_reservation.driven_adapter.model.reservation_model import ReservationModel
from src.service.call_reservation.driven_adapter.repo.reservation_row_mapper import (
    entity_to_model,
    model_to_entity,
)


QUEUED_SLOT_INDEX = 'uq_reservation_queued_slot'


def _is_queued_slot_violation(error: IntegrityError) -> bool:
    # PostgreSQL names the index; SQLite lists the indexed columns
    message = str(error.orig)
    if QUEUED_SLOT_INDEX in message:
        return True
    return 'UNIQUE constraint failed' in message and 'reservation.start_time' in message


class ReservationCommandRepoImpl(IReservationCommandRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]):
        self.session_factory = session_factory

    @Logger.io
    async def get_by_id(self, *, reservation_id: str) -> Optional[Reservation]:
        async with self.session_factory() as session:
            model = await session.get(ReservationModel, reservation_id)
            return model_to_entity(model) if model else None

    @Logger.io
    async def find_queued_at_slot(
        self,
        *,
        reservation_date: date,
        start_time: str,
        exclude_id: Optional[str] = None,
    ) -> Optional[Reservation]:
        stmt = select(ReservationModel).where(
            ReservationModel.reservation_date == reservation_date,
            ReservationModel.start_time == start_time,
            ReservationModel.status == ReservationStatus.QUEUED.value,
        )
        if exclude_id:
            stmt = stmt.where(ReservationModel.id != exclude_id)

        async with self.session_factory() as session:
            model = (await session.execute(stmt.limit(1))).scalar_one_or_none()
            return model_to_entity(model) if model else None

    @Logger.io
    async def create(self, *, reservation: Reservation) -> Reservation:
        async with self.session_factory() as session:
            model = entity_to_model(reservation)
            session.add(model)
            try:
                await session.commit()
            except IntegrityError as e:
                await session.rollback()
                if _is_queued_slot_violation(e):
                    raise SlotConflictError(
                        reservation.reservation_date, reservation.start_time
                    ) from e
                raise
            await session.refresh(model)
            return model_to_entity(model)

    @Logger.io
    async def save(self, *, reservation: Reservation) -> Reservation:
        async with self.session_factory() as session:
            model = await session.get(ReservationModel, reservation.id)
            if not model:
                raise ReservationNotFoundError(reservation.id)

            model.start_time = reservation.start_time
            model.end_time = reservation.end_time
            model.status = reservation.status.value
            try:
                await session.commit()
            except IntegrityError as e:
                await session.rollback()
                if _is_queued_slot_violation(e):
                    raise SlotConflictError(
                        reservation.reservation_date, reservation.start_time
                    ) from e
                raise
            await session.refresh(model)
            return model_to_entity(model)
