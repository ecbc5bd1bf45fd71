"""
Wire Modules Configuration

Defines the modules that need dependency injection wiring.
Shared between production and test environments.
"""

from types import ModuleType

from src.service.call_reservation.app.command import (
    admin_action_use_case,
    cancel_reservation_use_case,
    create_reservation_use_case,
    mark_reservation_successful_use_case,
    send_reminder_notifications_use_case,
    update_reservation_time_use_case,
)
from src.service.call_reservation.app.query import (
    get_reservation_use_case,
    list_reservations_use_case,
)


WIRE_MODULES: list[ModuleType] = [
    create_reservation_use_case,
    update_reservation_time_use_case,
    cancel_reservation_use_case,
    admin_action_use_case,
    mark_reservation_successful_use_case,
    send_reminder_notifications_use_case,
    get_reservation_use_case,
    list_reservations_use_case,
]
