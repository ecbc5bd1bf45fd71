from datetime import date
from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from opentelemetry import trace

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.reservation_metrics import metrics
from src.service.call_reservation.app.interface.i_reservation_command_repo import (
    IReservationCommandRepo,
)
from src.service.call_reservation.domain.entity.reservation_entity import Reservation
from src.service.call_reservation.domain.reservation_errors import SlotConflictError


class CreateReservationUseCase:
    """
    Book a 30-minute call slot.

    Flow:
    1. Validate start time and derive end time (Reservation.create)
    2. Reject if a QUEUED reservation already holds (date, start_time)
    3. Insert; the store's partial unique index closes the race between
       two requests that both passed step 2
    """

    def __init__(self, *, reservation_command_repo: IReservationCommandRepo) -> None:
        self.reservation_command_repo = reservation_command_repo
        self.tracer = trace.get_tracer(__name__)

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
    async def execute(
        self,
        *,
        reservation_date: date,
        start_time: str,
        email: str,
        phone: str,
        push_notification_key: str,
        receive_email: bool = True,
        receive_sms_notification: bool = True,
        receive_push_notification: bool = True,
    ) -> Reservation:
        with self.tracer.start_as_current_span(
            'use_case.create_reservation',
            attributes={
                'reservation.date': reservation_date.isoformat(),
                'reservation.start_time': start_time,
            },
        ):
            reservation = Reservation.create(
                reservation_date=reservation_date,
                start_time=start_time,
                email=email,
                phone=phone,
                push_notification_key=push_notification_key,
                receive_email=receive_email,
                receive_sms_notification=receive_sms_notification,
                receive_push_notification=receive_push_notification,
            )

            try:
                existing = await self.reservation_command_repo.find_queued_at_slot(
                    reservation_date=reservation.reservation_date,
                    start_time=reservation.start_time,
                )
                if existing:
                    raise SlotConflictError(reservation.reservation_date, reservation.start_time)

                created = await self.reservation_command_repo.create(reservation=reservation)
            except SlotConflictError:
                metrics.record_operation(action='book', result='conflict')
                raise

            metrics.record_operation(action='book', result='success')
            Logger.base.info(
                f'📅 [BOOK] Reservation {created.id} queued for '
                f'{created.reservation_date} {created.start_time}-{created.end_time}'
            )
            return created
