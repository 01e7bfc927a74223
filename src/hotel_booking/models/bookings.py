from enum import Enum
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional


class BookingStatus(str, Enum):
    PENDING = "PENDING"
    CONFIRMED = "CONFIRMED"
    CANCELLED = "CANCELLED"
    COMPLETED = "COMPLETED"


@dataclass
class Booking:
    booking_id: str
    room_id: str
    customer_id: str
    check_in_date: date
    check_out_date: date
    number_of_guests: int
    total_price: Decimal
    status: BookingStatus = BookingStatus.CONFIRMED
    special_requests: Optional[str] = None

    @property
    def is_active(self) -> bool:
        return self.status != BookingStatus.CANCELLED

    @property
    def nights(self) -> int:
        return (self.check_out_date - self.check_in_date).days
