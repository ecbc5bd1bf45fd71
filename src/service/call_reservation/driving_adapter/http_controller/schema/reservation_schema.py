from datetime import date, datetime
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field
from pydantic.alias_generators import to_camel

from src.service.call_reservation.domain.entity.reservation_entity import Reservation


class CamelModel(BaseModel):
    """Request and response bodies use camelCase keys on the wire"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ReservationCreateRequest(CamelModel):
    model_config = ConfigDict(
        json_schema_extra={
            'example': {
                'reservationDate': '2024-01-15',
                'startTime': '13:15',
                'email': 'user@example.com',
                'phone': '+1234567890',
                'pushNotificationKey': 'user-push-key-123',
                'receiveEmail': True,
                'receiveSmsNotification': True,
                'receivePushNotification': True,
            }
        }
    )

    reservation_date: date
    # Quarter-hour grid is checked by the domain (InvalidTimeFormatError)
    start_time: str = Field(min_length=1)
    email: EmailStr
    phone: str = Field(min_length=1)
    push_notification_key: str = Field(min_length=1)
    receive_email: bool
    receive_sms_notification: bool
    receive_push_notification: bool


class ReservationTimeUpdateRequest(CamelModel):
    model_config = ConfigDict(json_schema_extra={'example': {'startTime': '14:30'}})

    start_time: str = Field(min_length=1)


class ReservationCancelRequest(CamelModel):
    admin_email: Optional[EmailStr] = None


class AdminActionRequest(CamelModel):
    model_config = ConfigDict(
        json_schema_extra={'example': {'action': 'accept', 'adminEmail': 'admin@example.com'}}
    )

    action: Literal['accept', 'reject']
    admin_email: EmailStr


class ReservationRecord(CamelModel):
    model_config = ConfigDict(
        json_schema_extra={
            'example': {
                'id': '01234567-89ab-7def-0123-456789abcdef',
                'reservationDate': '2024-01-15',
                'startTime': '13:15',
                'endTime': '13:45',
                'email': 'user@example.com',
                'phone': '+1234567890',
                'pushNotificationKey': 'user-push-key-123',
                'status': 'QUEUED',
                'createdTime': '2024-01-10T10:30:00+00:00',
            }
        }
    )

    id: str
    reservation_date: date
    start_time: str
    end_time: str
    email: str
    phone: str
    push_notification_key: str
    status: str
    created_time: Optional[datetime] = None

    @classmethod
    def from_entity(cls, reservation: Reservation) -> 'ReservationRecord':
        return cls(
            id=reservation.id,
            reservation_date=reservation.reservation_date,
            start_time=reservation.start_time,
            end_time=reservation.end_time,
            email=reservation.email,
            phone=reservation.phone,
            push_notification_key=reservation.push_notification_key,
            status=reservation.status.value,
            created_time=reservation.created_time,
        )


class ReservationResponse(CamelModel):
    status: str = 'success'
    record: ReservationRecord


class ReservationListResponse(CamelModel):
    records: List[ReservationRecord]

    @classmethod
    def from_entities(cls, reservations: List[Reservation]) -> 'ReservationListResponse':
        return cls(records=[ReservationRecord.from_entity(r) for r in reservations])


class SendRemindersResponse(CamelModel):
    status: str = 'success'
    message: str = 'Reminder notifications sent successfully'
    dispatched: int
