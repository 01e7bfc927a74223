from dataclasses import dataclass
from decimal import Decimal
from typing import Optional


@dataclass
class Room:
    room_id: str
    hotel_id: str
    room_number: str
    room_type: str
    price_per_night: Decimal
    capacity: int
    description: Optional[str] = None
