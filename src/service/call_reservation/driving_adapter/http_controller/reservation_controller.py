from typing import Optional

from fastapi import APIRouter, Body, Depends, status
from opentelemetry import trace

from src.platform.config.core_setting import settings
from src.platform.logging.loguru_io import Logger
from src.service.call_reservation.app.command.admin_action_use_case import AdminActionUseCase
from src.service.call_reservation.app.command.cancel_reservation_use_case import (
    CancelReservationUseCase,
)
from src.service.call_reservation.app.command.create_reservation_use_case import (
    CreateReservationUseCase,
)
from src.service.call_reservation.app.command.mark_reservation_successful_use_case import (
    MarkReservationSuccessfulUseCase,
)
from src.service.call_reservation.app.command.update_reservation_time_use_case import (
    UpdateReservationTimeUseCase,
)
from src.service.call_reservation.app.query.get_reservation_use_case import (
    GetReservationUseCase,
)
from src.service.call_reservation.app.query.list_reservations_use_case import (
    ListReservationsUseCase,
)
from src.service.call_reservation.domain.enum.reservation_action import AdminDecision
from src.service.call_reservation.driving_adapter.http_controller.schema.reservation_schema import (
    AdminActionRequest,
    ReservationCancelRequest,
    ReservationCreateRequest,
    ReservationListResponse,
    ReservationRecord,
    ReservationResponse,
    ReservationTimeUpdateRequest,
)


router = APIRouter()
tracer = trace.get_tracer(__name__)


@router.post('', status_code=status.HTTP_201_CREATED)
@Logger.io
async def create_reservation(
    request: ReservationCreateRequest,
    use_case: CreateReservationUseCase = Depends(CreateReservationUseCase.depends),
) -> ReservationResponse:
    with tracer.start_as_current_span('controller.create_reservation') as span:
        reservation = await use_case.execute(
            reservation_date=request.reservation_date,
            start_time=request.start_time,
            email=request.email,
            phone=request.phone,
            push_notification_key=request.push_notification_key,
            receive_email=request.receive_email,
            receive_sms_notification=request.receive_sms_notification,
            receive_push_notification=request.receive_push_notification,
        )
        span.set_attribute('reservation.id', reservation.id)
        return ReservationResponse(record=ReservationRecord.from_entity(reservation))


@router.get('')
@Logger.io
async def list_reservations(
    use_case: ListReservationsUseCase = Depends(ListReservationsUseCase.depends),
) -> ReservationListResponse:
    return ReservationListResponse.from_entities(await use_case.list_all())


@router.get('/{reservation_id}')
@Logger.io
async def get_reservation(
    reservation_id: str,
    use_case: GetReservationUseCase = Depends(GetReservationUseCase.depends),
) -> ReservationRecord:
    reservation = await use_case.execute(reservation_id=reservation_id)
    return ReservationRecord.from_entity(reservation)


@router.put('/{reservation_id}/cancel')
@Logger.io
async def cancel_reservation(
    reservation_id: str,
    request: Optional[ReservationCancelRequest] = Body(default=None),
    use_case: CancelReservationUseCase = Depends(CancelReservationUseCase.depends),
) -> ReservationResponse:
    """Cancel by the requester; the operator at adminEmail (or ADMIN_EMAIL) is notified"""
    notify_address = (request and request.admin_email) or settings.ADMIN_EMAIL
    reservation = await use_case.execute(
        reservation_id=reservation_id, notify_address=notify_address
    )
    return ReservationResponse(record=ReservationRecord.from_entity(reservation))


@router.put('/{reservation_id}/time')
@Logger.io
async def update_reservation_time(
    reservation_id: str,
    request: ReservationTimeUpdateRequest,
    use_case: UpdateReservationTimeUseCase = Depends(UpdateReservationTimeUseCase.depends),
) -> ReservationResponse:
    reservation = await use_case.execute(
        reservation_id=reservation_id, start_time=request.start_time
    )
    return ReservationResponse(record=ReservationRecord.from_entity(reservation))


@router.put('/{reservation_id}/admin-action')
@Logger.io
async def admin_action(
    reservation_id: str,
    request: AdminActionRequest,
    use_case: AdminActionUseCase = Depends(AdminActionUseCase.depends),
) -> ReservationResponse:
    reservation = await use_case.execute(
        reservation_id=reservation_id, action=AdminDecision(request.action)
    )
    return ReservationResponse(record=ReservationRecord.from_entity(reservation))


@router.put('/{reservation_id}/successful')
@Logger.io
async def mark_reservation_successful(
    reservation_id: str,
    use_case: MarkReservationSuccessfulUseCase = Depends(MarkReservationSuccessfulUseCase.depends),
) -> ReservationResponse:
    reservation = await use_case.execute(reservation_id=reservation_id)
    return ReservationResponse(record=ReservationRecord.from_entity(reservation))
