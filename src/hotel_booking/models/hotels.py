from dataclasses import dataclass
from typing import Optional


@dataclass
class Hotel:
    hotel_id: str
    name: str
    city: str
    country: str
    address: Optional[str] = None
    state: Optional[str] = None
    zip_code: Optional[str] = None
    phone: Optional[str] = None
    description: Optional[str] = None
    star_rating: Optional[int] = None
