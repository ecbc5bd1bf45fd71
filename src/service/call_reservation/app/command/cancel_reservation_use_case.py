from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.reservation_metrics import metrics
from src.service.call_reservation.app.interface.i_email_notifier import IEmailNotifier
from src.service.call_reservation.app.interface.i_reservation_command_repo import (
    IReservationCommandRepo,
)
from src.service.call_reservation.domain.entity.reservation_entity import Reservation
from src.service.call_reservation.domain.reservation_errors import ReservationNotFoundError


class CancelReservationUseCase:
    """
    Cancel a QUEUED or ACCEPTED reservation and notify the operator.

    The notice is best effort: the notifier swallows its own failures, so the
    cancellation is committed even when the e-mail cannot be sent.
    """

    def __init__(
        self,
        *,
        reservation_command_repo: IReservationCommandRepo,
        email_notifier: IEmailNotifier,
    ) -> None:
        self.reservation_command_repo = reservation_command_repo
        self.email_notifier = email_notifier

    @classmethod
    @inject
    def depends(
        cls,
        reservation_command_repo: IReservationCommandRepo = Depends(
            Provide[Container.reservation_command_repo]
        ),
        email_notifier: IEmailNotifier = Depends(Provide[Container.email_notifier]),
    ) -> Self:
        return cls(reservation_command_repo=reservation_command_repo, email_notifier=email_notifier)

    @Logger.io
    async def execute(self, *, reservation_id: str, notify_address: str) -> Reservation:
        reservation = await self.reservation_command_repo.get_by_id(reservation_id=reservation_id)
        if not reservation:
            raise ReservationNotFoundError(reservation_id)

        saved = await self.reservation_command_repo.save(reservation=reservation.cancel())
        metrics.record_operation(action='cancel', result='success')

        await self.email_notifier.send_cancellation_notice_to_admin(
            admin_email=notify_address,
            reservation_id=saved.id,
            user_email=saved.email,
        )
        return saved
