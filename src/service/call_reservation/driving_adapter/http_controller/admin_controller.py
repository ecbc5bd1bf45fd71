from fastapi import APIRouter, Depends

from src.platform.logging.loguru_io import Logger
from src.service.call_reservation.app.command.send_reminder_notifications_use_case import (
    SendReminderNotificationsUseCase,
)
from src.service.call_reservation.app.query.list_reservations_use_case import (
    ListReservationsUseCase,
)
from src.service.call_reservation.driving_adapter.http_controller.schema.reservation_schema import (
    ReservationListResponse,
    SendRemindersResponse,
)


router = APIRouter()


@router.get('/reservations')
@Logger.io
async def list_all_reservations(
    use_case: ListReservationsUseCase = Depends(ListReservationsUseCase.depends),
) -> ReservationListResponse:
    return ReservationListResponse.from_entities(await use_case.list_all())


@router.get('/reservations/pending')
@Logger.io
async def list_pending_reservations(
    use_case: ListReservationsUseCase = Depends(ListReservationsUseCase.depends),
) -> ReservationListResponse:
    return ReservationListResponse.from_entities(await use_case.list_pending())


@router.put('/send-reminders')
@Logger.io
async def send_reminders(
    use_case: SendReminderNotificationsUseCase = Depends(SendReminderNotificationsUseCase.depends),
) -> SendRemindersResponse:
    """Run one reminder scan now (the scheduler does this every minute)"""
    dispatched = await use_case.execute()
    return SendRemindersResponse(dispatched=len(dispatched))
