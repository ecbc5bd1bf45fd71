"""
Send Reminder Notifications Use Case

One reminder scan: read today's QUEUED reservations, ask the scanner which
channels are due, claim a marker per (reservation, channel) and hand the
reminder to the notifier. A lost claim means another scan already owns
that delivery.
"""

from datetime import datetime
import time
from typing import List, Optional, Self
import zoneinfo

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from opentelemetry import trace

from src.platform.config.core_setting import settings
from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.reservation_metrics import metrics
from src.service.call_reservation.app.interface.i_email_notifier import IEmailNotifier
from src.service.call_reservation.app.interface.i_push_notifier import IPushNotifier
from src.service.call_reservation.app.interface.i_reservation_query_repo import (
    IReservationQueryRepo,
)
from src.service.call_reservation.app.interface.i_reservation_reminder_repo import (
    IReservationReminderRepo,
)
from src.service.call_reservation.app.interface.i_sms_notifier import ISmsNotifier
from src.service.call_reservation.domain.enum.notification_channel import NotificationChannel
from src.service.call_reservation.domain.enum.reservation_status import ReservationStatus
from src.service.call_reservation.domain.reminder_scanner import scan_due_reminders
from src.service.call_reservation.domain.value_object.reminder_intent import ReminderIntent


class SendReminderNotificationsUseCase:
    def __init__(
        self,
        *,
        reservation_query_repo: IReservationQueryRepo,
        reservation_reminder_repo: IReservationReminderRepo,
        email_notifier: IEmailNotifier,
        sms_notifier: ISmsNotifier,
        push_notifier: IPushNotifier,
        grace_minutes: Optional[int] = None,
    ) -> None:
        self.reservation_query_repo = reservation_query_repo
        self.reservation_reminder_repo = reservation_reminder_repo
        self.email_notifier = email_notifier
        self.sms_notifier = sms_notifier
        self.push_notifier = push_notifier
        self.grace_minutes = (
            settings.REMINDER_GRACE_MINUTES if grace_minutes is None else grace_minutes
        )
        self.tracer = trace.get_tracer(__name__)

    @classmethod
    @inject
    def depends(
        cls,
        reservation_query_repo: IReservationQueryRepo = Depends(
            Provide[Container.reservation_query_repo]
        ),
        reservation_reminder_repo: IReservationReminderRepo = Depends(
            Provide[Container.reservation_reminder_repo]
        ),
        email_notifier: IEmailNotifier = Depends(Provide[Container.email_notifier]),
        sms_notifier: ISmsNotifier = Depends(Provide[Container.sms_notifier]),
        push_notifier: IPushNotifier = Depends(Provide[Container.push_notifier]),
    ) -> Self:
        return cls(
            reservation_query_repo=reservation_query_repo,
            reservation_reminder_repo=reservation_reminder_repo,
            email_notifier=email_notifier,
            sms_notifier=sms_notifier,
            push_notifier=push_notifier,
        )

    @staticmethod
    def local_now() -> datetime:
        return datetime.now(zoneinfo.ZoneInfo(settings.TIMEZONE))

    @Logger.io
    async def execute(self, *, now: Optional[datetime] = None) -> List[ReminderIntent]:
        """
        Run one scan at ``now`` (local wall clock, defaults to the current minute)

        Returns:
            The intents this scan delivered
        """
        now = now or self.local_now()
        started = time.perf_counter()

        with self.tracer.start_as_current_span(
            'use_case.send_reminder_notifications',
            attributes={'reminder.now': now.isoformat(timespec='minutes')},
        ):
            reservations = await self.reservation_query_repo.list_by_date_and_status(
                reservation_date=now.date(), status=ReservationStatus.QUEUED
            )
            already_sent = (
                await self.reservation_reminder_repo.list_sent(
                    reservation_ids=[r.id for r in reservations]
                )
                if reservations
                else set()
            )

            intents = scan_due_reminders(
                now=now,
                reservations=reservations,
                already_sent=already_sent,
                grace_minutes=self.grace_minutes,
            )

            dispatched: List[ReminderIntent] = []
            for intent in intents:
                claimed = await self.reservation_reminder_repo.try_claim(
                    reservation_id=intent.reservation.id,
                    channel=intent.channel,
                    sent_at=now,
                )
                if not claimed:
                    metrics.record_reminder(channel=intent.channel, result='skipped')
                    continue

                await self._deliver(intent)
                metrics.record_reminder(channel=intent.channel, result='sent')
                dispatched.append(intent)

        metrics.observe_scan(duration=time.perf_counter() - started)
        if dispatched:
            Logger.base.info(
                f'⏰ [REMINDER] Dispatched {len(dispatched)} reminder(s) '
                f'for {len(reservations)} queued reservation(s) at {now:%H:%M}'
            )
        return dispatched

    async def _deliver(self, intent: ReminderIntent) -> None:
        reservation = intent.reservation
        match intent.channel:
            case NotificationChannel.EMAIL:
                await self.email_notifier.send_call_reminder(
                    to=reservation.email,
                    start_time=reservation.start_time,
                    minutes=intent.minutes_until_call,
                )
            case NotificationChannel.SMS:
                await self.sms_notifier.send_call_reminder(
                    phone=reservation.phone,
                    start_time=reservation.start_time,
                    minutes=intent.minutes_until_call,
                )
            case NotificationChannel.PUSH:
                await self.push_notifier.send_call_reminder(
                    push_notification_key=reservation.push_notification_key,
                    minutes=intent.minutes_until_call,
                )
