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
from src.service.call_reservation.domain.enum.reservation_action import AdminDecision
from src.service.call_reservation.domain.enum.reservation_status import ReservationStatus
from src.service.call_reservation.domain.reservation_errors import ReservationNotFoundError


class AdminActionUseCase:
    """Operator accepts or rejects a QUEUED reservation; rejection notifies the owner"""

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
    async def execute(self, *, reservation_id: str, action: AdminDecision) -> Reservation:
        reservation = await self.reservation_command_repo.get_by_id(reservation_id=reservation_id)
        if not reservation:
            raise ReservationNotFoundError(reservation_id)

        match AdminDecision(action):
            case AdminDecision.ACCEPT:
                updated = reservation.accept()
            case AdminDecision.REJECT:
                updated = reservation.reject()

        saved = await self.reservation_command_repo.save(reservation=updated)
        metrics.record_operation(action=str(action), result='success')

        if saved.status == ReservationStatus.REJECTED:
            await self.email_notifier.send_rejection_notice_to_user(
                user_email=saved.email, reservation_id=saved.id
            )
        return saved
