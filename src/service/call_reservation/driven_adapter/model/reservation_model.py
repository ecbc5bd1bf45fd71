from datetime import date, datetime, timezone

from sqlalchemy import Boolean, Date, DateTime, Index, String, text
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql import func

from src.platform.database.orm_db_setting import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ReservationModel(Base):
    __tablename__ = 'reservation'

    id: Mapped[str] = mapped_column(String(36), primary_key=True)  # UUID7
    reservation_date: Mapped[date] = mapped_column(Date, nullable=False, index=True)
    start_time: Mapped[str] = mapped_column(String(5), nullable=False)
    end_time: Mapped[str] = mapped_column(String(5), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    phone: Mapped[str] = mapped_column(String(32), nullable=False)
    push_notification_key: Mapped[str] = mapped_column(String(255), nullable=False)
    receive_email: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    receive_sms_notification: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    receive_push_notification: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    status: Mapped[str] = mapped_column(String(20), default='QUEUED', nullable=False, index=True)
    # Python-side defaults keep sub-second ordering on SQLite, whose CURRENT_TIMESTAMP is whole seconds
    created_time: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=_utcnow, server_default=func.now(), nullable=False
    )
    updated_time: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=_utcnow,
        server_default=func.now(),
        onupdate=_utcnow,
        nullable=False,
    )

    __table_args__ = (
        # At most one QUEUED reservation per slot
        Index(
            'uq_reservation_queued_slot',
            'reservation_date',
            'start_time',
            unique=True,
            sqlite_where=text("status = 'QUEUED'"),
            postgresql_where=text("status = 'QUEUED'"),
        ),
        Index('ix_reservation_date_status', 'reservation_date', 'status'),
    )

    def __repr__(self):
        return (
            f'<ReservationModel(id={self.id}, date={self.reservation_date}, '
            f'start_time={self.start_time}, status={self.status})>'
        )
