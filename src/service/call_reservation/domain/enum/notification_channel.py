from enum import StrEnum


class NotificationChannel(StrEnum):
    EMAIL = 'email'
    SMS = 'sms'
    PUSH = 'push'


# Minutes before the call at which each channel's reminder fires
REMINDER_LEAD_MINUTES: dict[NotificationChannel, int] = {
    NotificationChannel.EMAIL: 10,
    NotificationChannel.SMS: 5,
    NotificationChannel.PUSH: 1,
}
