import logging
from collections import defaultdict
from datetime import date
from typing import List, Optional

from hotel_booking.models.rooms import Room
from hotel_booking.repository.booking_repo import BookingRepository
from hotel_booking.repository.room_repo import RoomRepository
from hotel_booking.services.availability import is_available
from hotel_booking.utils.custom_exceptions import InvalidArgument

logger = logging.getLogger(__name__)


class RoomService:
    def __init__(self, room_repo: RoomRepository, booking_repo: BookingRepository):
        self.room_repo = room_repo
        self.booking_repo = booking_repo

    def get_room(self, room_id: str) -> Optional[Room]:
        return self.room_repo.find_by_id(room_id)

    def get_rooms_by_hotel(self, hotel_id: str) -> List[Room]:
        return self.room_repo.find_by_hotel(hotel_id)

    def get_available_rooms(self, hotel_id: str, check_in: date, check_out: date) -> List[Room]:
        if check_out <= check_in:
            raise InvalidArgument("checkOut must be after checkIn")
        logger.info(f"Checking availability for hotel {hotel_id} from {check_in} to {check_out}")

        rooms = self.room_repo.find_by_hotel(hotel_id)
        if not rooms:
            return []

        bookings_by_room = defaultdict(list)
        for booking in self.booking_repo.find_all():
            bookings_by_room[booking.room_id].append(booking)

        return [
            room
            for room in rooms
            if is_available(room.room_id, check_in, check_out, bookings_by_room[room.room_id])
        ]
