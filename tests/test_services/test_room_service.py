import unittest
from unittest.mock import MagicMock
from datetime import date
from decimal import Decimal

from hotel_booking.services.room_service import RoomService
from hotel_booking.models.bookings import Booking, BookingStatus
from hotel_booking.models.rooms import Room
from hotel_booking.utils.custom_exceptions import InvalidArgument


def make_room(room_id):
    return Room(
        room_id=room_id,
        hotel_id="h1",
        room_number=room_id,
        room_type="Standard",
        price_per_night=Decimal("120.00"),
        capacity=2,
    )


class TestRoomService(unittest.TestCase):

    def setUp(self):
        self.room_repo = MagicMock()
        self.booking_repo = MagicMock()
        self.service = RoomService(self.room_repo, self.booking_repo)

    def test_get_room(self):
        self.room_repo.find_by_id.return_value = make_room("r1")

        self.assertEqual(self.service.get_room("r1").room_id, "r1")

    def test_get_rooms_by_hotel(self):
        self.service.get_rooms_by_hotel("h1")

        self.room_repo.find_by_hotel.assert_called_once_with("h1")

    def test_get_available_rooms_filters_booked_rooms(self):
        self.room_repo.find_by_hotel.return_value = [make_room("r1"), make_room("r2"), make_room("r3")]
        self.booking_repo.find_all.return_value = [
            Booking("b1", "r1", "c1", date(2024, 1, 1), date(2024, 1, 5), 1, Decimal("480")),
            Booking("b2", "r2", "c1", date(2024, 1, 1), date(2024, 1, 5), 1, Decimal("480"),
                    status=BookingStatus.CANCELLED),
            Booking("b3", "r3", "c1", date(2024, 1, 5), date(2024, 1, 8), 1, Decimal("360")),
        ]

        result = self.service.get_available_rooms("h1", date(2024, 1, 3), date(2024, 1, 5))

        self.assertEqual([r.room_id for r in result], ["r2", "r3"])

    def test_get_available_rooms_no_rooms(self):
        self.room_repo.find_by_hotel.return_value = []

        result = self.service.get_available_rooms("h1", date(2024, 1, 1), date(2024, 1, 2))

        self.assertEqual(result, [])
        self.booking_repo.find_all.assert_not_called()

    def test_get_available_rooms_checkout_before_checkin(self):
        with self.assertRaises(InvalidArgument):
            self.service.get_available_rooms("h1", date(2024, 1, 2), date(2024, 1, 1))


if __name__ == "__main__":
    unittest.main()
