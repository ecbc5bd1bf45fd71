"""
Production FastAPI Application

API server plus the once-per-minute reminder scheduler.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import anyio
from fastapi import FastAPI

from src.platform.app_factory import create_app
from src.platform.config.core_setting import settings
from src.platform.config.di import cleanup, container
from src.platform.config.wire_modules import WIRE_MODULES
from src.platform.database.orm_db_setting import create_db_and_tables, dispose_engine
from src.platform.logging.loguru_io import Logger
from src.platform.message_queue.event_publisher import close_producer
from src.service.call_reservation.app.command.send_reminder_notifications_use_case import (
    SendReminderNotificationsUseCase,
)
from src.service.call_reservation.driving_adapter.scheduler.reminder_scheduler import (
    ReminderScheduler,
)


def build_send_reminders_use_case() -> SendReminderNotificationsUseCase:
    return SendReminderNotificationsUseCase(
        reservation_query_repo=container.reservation_query_repo(),
        reservation_reminder_repo=container.reservation_reminder_repo(),
        email_notifier=container.email_notifier(),
        sms_notifier=container.sms_notifier(),
        push_notifier=container.push_notifier(),
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application lifespan: startup and shutdown."""
    Logger.base.info('🚀 [Call Reservation] Starting up...')

    # Wire dependency injection for all modules
    container.wire(modules=WIRE_MODULES)
    Logger.base.info('🔌 [Call Reservation] Dependency injection wired')

    await create_db_and_tables()
    Logger.base.info('🗄️  [Call Reservation] Database tables ready')

    async with anyio.create_task_group() as tg:
        if settings.REMINDER_SCHEDULER_ENABLED:
            scheduler = ReminderScheduler(use_case_factory=build_send_reminders_use_case)
            await scheduler.start(task_group=tg)

        Logger.base.info('✅ [Call Reservation] Ready to serve requests')

        yield

        Logger.base.info('🛑 [Call Reservation] Shutting down...')
        tg.cancel_scope.cancel()

    # Flush and close Kafka producer before shutdown
    if settings.KAFKA_ENABLED:
        try:
            await close_producer()
            Logger.base.info('📤 [Call Reservation] Kafka producer closed')
        except Exception as e:
            Logger.base.error(f'❌ [Call Reservation] Failed to close Kafka producer: {e}')

    await dispose_engine()
    Logger.base.info('🗄️  [Call Reservation] Database engine disposed')

    # Unwire DI and drop singletons (in-memory outbox, repos)
    container.unwire()
    cleanup()

    Logger.base.info('👋 [Call Reservation] Shutdown complete')


# Create FastAPI app using shared factory
app = create_app(lifespan=lifespan)


if __name__ == '__main__':
    import uvicorn

    uvicorn.run('src.main:app', host='0.0.0.0', port=8000)
