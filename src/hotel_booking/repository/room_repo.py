from decimal import Decimal
from typing import List

from hotel_booking.models.rooms import Room
from hotel_booking.repository.base_repo import TableRepository
from hotel_booking.storage.table_adapter import DynamoTableAdapter, Item
from hotel_booking.utils.constants import ROOMS_TABLE


class RoomRepository(TableRepository[Room]):
    entity_name = "room"

    def __init__(self, adapter: DynamoTableAdapter, table_name: str = ROOMS_TABLE):
        super().__init__(adapter, table_name)

    def _identifier(self, room: Room) -> str:
        return room.room_id

    def _to_item(self, room: Room) -> Item:
        item = {
            "id": room.room_id,
            "hotelId": room.hotel_id,
            "roomNumber": room.room_number,
            "roomType": room.room_type,
            "pricePerNight": Decimal(str(room.price_per_night)),
            "capacity": room.capacity,
            "description": room.description,
        }
        return {k: v for k, v in item.items() if v is not None}

    def _to_domain(self, item: Item) -> Room:
        return Room(
            room_id=item["id"],
            hotel_id=item["hotelId"],
            room_number=item["roomNumber"],
            room_type=item["roomType"],
            price_per_night=Decimal(str(item["pricePerNight"])),
            capacity=int(item["capacity"]),
            description=item.get("description"),
        )

    def find_by_hotel(self, hotel_id: str) -> List[Room]:
        return self._filter(lambda r: r.hotel_id == hotel_id)
