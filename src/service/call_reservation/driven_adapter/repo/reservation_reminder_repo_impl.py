from datetime import datetime
from typing import AsyncContextManager, Callable, Iterable, Set, Tuple

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.call_reservation.app.interface.i_reservation_reminder_repo import (
    IReservationReminderRepo,
)
from src.service.call_reservation.domain.enum.notification_channel import NotificationChannel
from src.service.call_reservation.driven_adapter.model.reservation_reminder_model import (
    ReservationReminderModel,
)


class ReservationReminderRepoImpl(IReservationReminderRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]):
        self.session_factory = session_factory

    @Logger.io
    async def list_sent(
        self, *, reservation_ids: Iterable[str]
    ) -> Set[Tuple[str, NotificationChannel]]:
        ids = list(reservation_ids)
        if not ids:
            return set()

        stmt = select(
            ReservationReminderModel.reservation_id, ReservationReminderModel.channel
        ).where(ReservationReminderModel.reservation_id.in_(ids))
        async with self.session_factory() as session:
            rows = (await session.execute(stmt)).all()
            return {(row.reservation_id, NotificationChannel(row.channel)) for row in rows}

    @Logger.io
    async def try_claim(
        self, *, reservation_id: str, channel: NotificationChannel, sent_at: datetime
    ) -> bool:
        async with self.session_factory() as session:
            session.add(
                ReservationReminderModel(
                    reservation_id=reservation_id,
                    channel=channel.value,
                    sent_at=sent_at,
                )
            )
            try:
                await session.commit()
            except IntegrityError:
                await session.rollback()
                Logger.base.info(
                    f'⏭️ [REMINDER] {channel} reminder for {reservation_id} already claimed'
                )
                return False
            return True
