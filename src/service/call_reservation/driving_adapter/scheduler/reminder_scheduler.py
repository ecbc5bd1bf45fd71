"""
Reminder Scheduler

Runs one reminder scan per wall-clock minute inside the app lifespan task
group. Each tick scans the minute it was scheduled for, so a late wake-up
still scans the intended minute, and a scan that overruns its minute is
followed at once by the next one rather than skipping it.
"""

from datetime import datetime, timedelta
from typing import Callable, Optional

import anyio
from anyio.abc import TaskGroup

from src.platform.logging.loguru_io import Logger
from src.service.call_reservation.app.command.send_reminder_notifications_use_case import (
    SendReminderNotificationsUseCase,
)


class ReminderScheduler:
    def __init__(
        self,
        *,
        use_case_factory: Callable[[], SendReminderNotificationsUseCase],
        clock: Optional[Callable[[], datetime]] = None,
    ) -> None:
        self.use_case_factory = use_case_factory
        self.clock = clock or SendReminderNotificationsUseCase.local_now

    async def start(self, *, task_group: TaskGroup) -> None:
        task_group.start_soon(self._run_loop)  # pyrefly: ignore[bad-argument-type]
        Logger.base.info('⏰ [Reminder Scheduler] Started (every minute)')

    @staticmethod
    def next_minute(now: datetime) -> datetime:
        return now.replace(second=0, microsecond=0) + timedelta(minutes=1)

    def next_scheduled(self, previous: Optional[datetime]) -> datetime:
        """The minute after the last scan, so an overrunning scan never skips one"""
        if previous is None:
            return self.next_minute(self.clock())
        return previous + timedelta(minutes=1)

    async def _run_loop(self) -> None:
        scheduled: Optional[datetime] = None
        while True:
            scheduled = self.next_scheduled(scheduled)
            delay = (scheduled - self.clock()).total_seconds()
            await anyio.sleep(max(0.0, delay))
            await self.tick(now=scheduled)

    async def tick(self, *, now: datetime) -> int:
        """Run one scan; errors are logged and the loop keeps going"""
        try:
            dispatched = await self.use_case_factory().execute(now=now)
        except Exception as e:
            Logger.base.error(f'❌ [Reminder Scheduler] Scan at {now:%H:%M} failed: {e}')
            return 0
        return len(dispatched)
