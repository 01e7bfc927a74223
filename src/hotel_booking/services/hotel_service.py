from typing import List, Optional

from hotel_booking.models.hotels import Hotel
from hotel_booking.repository.hotel_repo import HotelRepository


class HotelService:
    def __init__(self, hotel_repo: HotelRepository):
        self.hotel_repo = hotel_repo

    def get_hotels(self) -> List[Hotel]:
        return self.hotel_repo.find_all()

    def get_hotel(self, hotel_id: str) -> Optional[Hotel]:
        return self.hotel_repo.find_by_id(hotel_id)

    def get_hotels_by_city(self, city: str) -> List[Hotel]:
        return self.hotel_repo.find_by_city(city)

    def get_hotels_by_country(self, country: str) -> List[Hotel]:
        return self.hotel_repo.find_by_country(country)
