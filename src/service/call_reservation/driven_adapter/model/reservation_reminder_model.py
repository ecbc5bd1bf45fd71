from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from src.platform.database.orm_db_setting import Base


class ReservationReminderModel(Base):
    """Marker row: the reminder for (reservation, channel) has been handed to a notifier"""

    __tablename__ = 'reservation_reminder'

    reservation_id: Mapped[str] = mapped_column(
        String(36), ForeignKey('reservation.id', ondelete='CASCADE'), primary_key=True
    )
    channel: Mapped[str] = mapped_column(String(10), primary_key=True)
    sent_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)

    def __repr__(self):
        return f'<ReservationReminderModel({self.reservation_id}, {self.channel})>'
