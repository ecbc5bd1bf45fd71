from pathlib import Path
from typing import List

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


_PROJECT_ROOT = Path(__file__).resolve().parents[3]
_ENV_PATH = _PROJECT_ROOT / '.env'
_ENV_FILE = _ENV_PATH if _ENV_PATH.exists() else (_PROJECT_ROOT / '.env.example')


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_ignore_empty=True,
        extra='ignore',
    )

    PROJECT_NAME: str = 'Call Reservation Tool'
    VERSION: str = '1.0.0'
    DEBUG: bool = False

    # CORS
    BACKEND_CORS_ORIGINS: List[str] = ['http://localhost:3000']

    @field_validator('BACKEND_CORS_ORIGINS', mode='before')
    @classmethod
    def assemble_cors_origins(cls, v: str | List[str]) -> List[str]:
        if isinstance(v, str) and not v.startswith('['):
            return [i.strip() for i in v.split(',')]
        elif isinstance(v, list):
            return v
        return []

    # Database (SQLite by default, postgresql+asyncpg in production)
    DATABASE_URL: str = 'sqlite+aiosqlite:///./reservations.db'
    DB_POOL_SIZE: int = 10
    DB_POOL_MAX_OVERFLOW: int = 5
    DB_POOL_TIMEOUT: int = 30  # seconds
    DB_POOL_RECYCLE: int = 1800  # seconds
    DB_POOL_PRE_PING: bool = True

    @property
    def DATABASE_IS_SQLITE(self) -> bool:
        return self.DATABASE_URL.startswith('sqlite')

    # Operator mailbox for cancellation notices
    ADMIN_EMAIL: str = 'admin@example.com'
    # Recent messages kept by the log-only e-mail notifier
    EMAIL_OUTBOX_SIZE: int = 100

    # Wall-clock zone used for "today" and reminder minute arithmetic
    TIMEZONE: str = 'UTC'

    # Reminder scheduler
    REMINDER_SCHEDULER_ENABLED: bool = True
    REMINDER_GRACE_MINUTES: int = 0

    @field_validator('REMINDER_GRACE_MINUTES')
    @classmethod
    def validate_grace_minutes(cls, v: int) -> int:
        if v < 0:
            raise ValueError('REMINDER_GRACE_MINUTES must not be negative')
        return v

    # Kafka (push notification transport)
    KAFKA_ENABLED: bool = False
    KAFKA_BOOTSTRAP_SERVERS: str = 'localhost:9092'
    PUSH_NOTIFICATION_TOPIC: str = 'push_notifications'

    @property
    def KAFKA_PRODUCER_CONFIG(self) -> dict:
        return {
            'bootstrap.servers': self.KAFKA_BOOTSTRAP_SERVERS,
            'acks': 'all',
            'retries': 3,
            'linger.ms': 10,
            'compression.type': 'snappy',
        }


settings = Settings()  # type: ignore
