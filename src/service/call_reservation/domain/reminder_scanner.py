"""
Reminder Scanner

Pure decision logic: given the local wall-clock instant and today's
reservations, report which reminder channels are due. Delivery, marker
persistence and scheduling live in the app layer.
"""

from datetime import datetime
from typing import AbstractSet, Iterable

from src.service.call_reservation.domain.entity.reservation_entity import Reservation
from src.service.call_reservation.domain.enum.notification_channel import (
    REMINDER_LEAD_MINUTES,
    NotificationChannel,
)
from src.service.call_reservation.domain.enum.reservation_status import ReservationStatus
from src.service.call_reservation.domain.value_object.reminder_intent import ReminderIntent


def minutes_until_call(*, now: datetime, reservation: Reservation) -> int:
    """Whole-minute distance from now to the call start (seconds ignored)"""
    return reservation.slot.minute_of_day - (now.hour * 60 + now.minute)


def channel_enabled(reservation: Reservation, channel: NotificationChannel) -> bool:
    match channel:
        case NotificationChannel.EMAIL:
            return reservation.receive_email
        case NotificationChannel.SMS:
            return reservation.receive_sms_notification
        case NotificationChannel.PUSH:
            return reservation.receive_push_notification


def scan_due_reminders(
    *,
    now: datetime,
    reservations: Iterable[Reservation],
    already_sent: AbstractSet[tuple[str, NotificationChannel]] = frozenset(),
    grace_minutes: int = 0,
) -> list[ReminderIntent]:
    """
    Emit one intent per (reservation, channel) that is due at ``now``.

    A channel with lead L fires when ``L - grace_minutes <= minutes_until_call <= L``;
    with no grace this is exact equality. Pairs listed in ``already_sent`` are
    skipped, so a late scan inside the grace window never repeats a reminder.
    """
    if grace_minutes < 0:
        raise ValueError('grace_minutes must be non-negative')

    today = now.date()
    intents: list[ReminderIntent] = []
    for reservation in reservations:
        if reservation.status != ReservationStatus.QUEUED:
            continue
        if reservation.reservation_date != today:
            continue

        remaining = minutes_until_call(now=now, reservation=reservation)
        for channel, lead in REMINDER_LEAD_MINUTES.items():
            if not channel_enabled(reservation, channel):
                continue
            if not lead - grace_minutes <= remaining <= lead:
                continue
            if (reservation.id, channel) in already_sent:
                continue
            intents.append(
                ReminderIntent(
                    reservation=reservation,
                    channel=channel,
                    minutes_until_call=remaining,
                )
            )
    return intents
