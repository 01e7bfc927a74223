from typing import List

from hotel_booking.models.hotels import Hotel
from hotel_booking.repository.base_repo import TableRepository
from hotel_booking.storage.table_adapter import DynamoTableAdapter, Item
from hotel_booking.utils.constants import HOTELS_TABLE


class HotelRepository(TableRepository[Hotel]):
    entity_name = "hotel"

    def __init__(self, adapter: DynamoTableAdapter, table_name: str = HOTELS_TABLE):
        super().__init__(adapter, table_name)

    def _identifier(self, hotel: Hotel) -> str:
        return hotel.hotel_id

    def _to_item(self, hotel: Hotel) -> Item:
        item = {
            "id": hotel.hotel_id,
            "name": hotel.name,
            "address": hotel.address,
            "city": hotel.city,
            "state": hotel.state,
            "zipCode": hotel.zip_code,
            "country": hotel.country,
            "phone": hotel.phone,
            "description": hotel.description,
            "starRating": hotel.star_rating,
        }
        return {k: v for k, v in item.items() if v is not None}

    def _to_domain(self, item: Item) -> Hotel:
        star_rating = item.get("starRating")
        return Hotel(
            hotel_id=item["id"],
            name=item["name"],
            address=item.get("address"),
            city=item["city"],
            state=item.get("state"),
            zip_code=item.get("zipCode"),
            country=item["country"],
            phone=item.get("phone"),
            description=item.get("description"),
            star_rating=int(star_rating) if star_rating is not None else None,
        )

    def find_by_city(self, city: str) -> List[Hotel]:
        return self._filter(lambda h: h.city == city)

    def find_by_country(self, country: str) -> List[Hotel]:
        return self._filter(lambda h: h.country == country)
