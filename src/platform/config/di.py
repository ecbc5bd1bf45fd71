"""
https://python-dependency-injector.ets-labs.org/index.html
https://python-dependency-injector.ets-labs.org/examples/fastapi-sqlalchemy.html
"""

from dependency_injector import containers, providers

from src.platform.database.orm_db_setting import Database
from src.service.call_reservation.driven_adapter.notifier.email_notifier_impl import (
    EmailNotifierImpl,
)
from src.service.call_reservation.driven_adapter.notifier.push_notifier_impl import (
    PushNotifierImpl,
)
from src.service.call_reservation.driven_adapter.notifier.sms_notifier_impl import (
    SmsNotifierImpl,
)
from src.service.call_reservation.driven_adapter.repo.reservation_command_repo_impl import (
    ReservationCommandRepoImpl,
)
from src.service.call_reservation.driven_adapter.repo.reservation_query_repo_impl import (
    ReservationQueryRepoImpl,
)
from src.service.call_reservation.driven_adapter.repo.reservation_reminder_repo_impl import (
    ReservationReminderRepoImpl,
)


class Container(containers.DeclarativeContainer):
    # Database (AsyncEngineManager configured from core settings)
    database = providers.Singleton(Database)

    # Repositories (stateless - use session_factory per-operation)
    reservation_command_repo = providers.Singleton(
        ReservationCommandRepoImpl, session_factory=database.provided.session
    )
    reservation_query_repo = providers.Singleton(
        ReservationQueryRepoImpl, session_factory=database.provided.session
    )
    reservation_reminder_repo = providers.Singleton(
        ReservationReminderRepoImpl, session_factory=database.provided.session
    )

    # Notifiers (fire-and-forget, failures are swallowed inside)
    email_notifier = providers.Singleton(EmailNotifierImpl)
    sms_notifier = providers.Singleton(SmsNotifierImpl)
    push_notifier = providers.Singleton(PushNotifierImpl)


container = Container()


def cleanup() -> None:
    container.reset_singletons()
