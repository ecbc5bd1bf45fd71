from datetime import date, datetime
from typing import Optional

import attrs
from uuid_utils import uuid7

from src.platform.logging.loguru_io import Logger
from src.service.call_reservation.domain.enum.reservation_action import ReservationAction
from src.service.call_reservation.domain.enum.reservation_status import ReservationStatus
from src.service.call_reservation.domain.reservation_state_machine import next_status
from src.service.call_reservation.domain.value_object.slot_time import SlotTime


@attrs.define
class Reservation:
    id: str
    reservation_date: date
    start_time: str
    end_time: str
    email: str
    phone: str
    push_notification_key: str
    receive_email: bool = True
    receive_sms_notification: bool = True
    receive_push_notification: bool = True
    status: ReservationStatus = ReservationStatus.QUEUED
    # Set by the store on insert / update
    created_time: Optional[datetime] = None
    updated_time: Optional[datetime] = None

    @classmethod
    @Logger.io
    def create(
        cls,
        *,
        reservation_date: date,
        start_time: str,
        email: str,
        phone: str,
        push_notification_key: str,
        receive_email: bool = True,
        receive_sms_notification: bool = True,
        receive_push_notification: bool = True,
    ) -> 'Reservation':
        """
        Build a new QUEUED reservation

        Raises:
            InvalidTimeFormatError: start_time is malformed or off the quarter-hour grid
        """
        slot = SlotTime.parse(start_time)
        return cls(
            id=str(uuid7()),
            reservation_date=reservation_date,
            start_time=str(slot),
            end_time=str(slot.end_time()),
            email=email,
            phone=phone,
            push_notification_key=push_notification_key,
            receive_email=receive_email,
            receive_sms_notification=receive_sms_notification,
            receive_push_notification=receive_push_notification,
            status=ReservationStatus.QUEUED,
        )

    @property
    def slot(self) -> SlotTime:
        return SlotTime.parse(self.start_time)

    @Logger.io
    def accept(self) -> 'Reservation':
        return self._apply(ReservationAction.ACCEPT)

    @Logger.io
    def reject(self) -> 'Reservation':
        return self._apply(ReservationAction.REJECT)

    @Logger.io
    def cancel(self) -> 'Reservation':
        return self._apply(ReservationAction.CANCEL)

    @Logger.io
    def mark_as_successful(self) -> 'Reservation':
        return self._apply(ReservationAction.COMPLETE)

    @Logger.io
    def reschedule(self, *, start_time: str) -> 'Reservation':
        """
        Move the reservation to a new start time on the same date

        Raises:
            InvalidTransitionError: reservation is already terminal
            InvalidTimeFormatError: start_time is malformed or off the quarter-hour grid
        """
        status = next_status(self.status, ReservationAction.RESCHEDULE)
        slot = SlotTime.parse(start_time)
        return attrs.evolve(
            self,
            status=status,
            start_time=str(slot),
            end_time=str(slot.end_time()),
        )

    def _apply(self, action: ReservationAction) -> 'Reservation':
        return attrs.evolve(self, status=next_status(self.status, action))
