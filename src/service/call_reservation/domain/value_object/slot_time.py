"""
Slot Time Value Object

A time of day on the quarter-hour grid, always rendered as two-digit
``HH:MM``. End times wrap modulo one day, so a 23:45 slot ends at 00:15
and stays on its reservation date.
"""

import re
from typing import Self

import attrs

from src.service.call_reservation.domain.reservation_errors import InvalidTimeFormatError


MINUTES_PER_DAY = 24 * 60
SLOT_LENGTH_MINUTES = 30

_TIME_PATTERN = re.compile(r'^([01]?\d|2[0-3]):(00|15|30|45)$')


@attrs.frozen(order=True)
class SlotTime:
    minute_of_day: int = attrs.field()

    @minute_of_day.validator
    def _check_grid(self, _attribute: attrs.Attribute, value: int) -> None:
        if not 0 <= value < MINUTES_PER_DAY or value % 15:
            raise InvalidTimeFormatError(f'{value // 60}:{value % 60:02d}')

    @classmethod
    def parse(cls, value: str) -> Self:
        if not isinstance(value, str) or not (match := _TIME_PATTERN.match(value.strip())):
            raise InvalidTimeFormatError(str(value))
        return cls(int(match.group(1)) * 60 + int(match.group(2)))

    @property
    def hour(self) -> int:
        return self.minute_of_day // 60

    @property
    def minute(self) -> int:
        return self.minute_of_day % 60

    def end_time(self) -> 'SlotTime':
        return SlotTime((self.minute_of_day + SLOT_LENGTH_MINUTES) % MINUTES_PER_DAY)

    def __str__(self) -> str:
        return f'{self.hour:02d}:{self.minute:02d}'


def compute_end_time(start_time: str) -> str:
    return str(SlotTime.parse(start_time).end_time())
