import unittest
from unittest.mock import MagicMock
from datetime import date
from decimal import Decimal

from hotel_booking.services.booking_service import BookingService
from hotel_booking.models.bookings import Booking, BookingStatus
from hotel_booking.models.rooms import Room
from hotel_booking.utils.custom_exceptions import (
    BookingConflict,
    InvalidArgument,
    NotFoundException,
)


class TestBookingService(unittest.TestCase):

    def setUp(self):
        self.booking_repo = MagicMock()
        self.room_repo = MagicMock()
        self.customer_repo = MagicMock()

        self.service = BookingService(
            booking_repo=self.booking_repo,
            room_repo=self.room_repo,
            customer_repo=self.customer_repo,
        )

        self.room = Room(
            room_id="r1",
            hotel_id="h1",
            room_number="101",
            room_type="Deluxe",
            price_per_night=Decimal("180.00"),
            capacity=2,
        )
        self.room_repo.find_by_id.return_value = self.room
        self.customer_repo.find_by_id.return_value = MagicMock()
        self.booking_repo.find_by_room.return_value = []

        self.existing = Booking(
            booking_id="b1",
            room_id="r1",
            customer_id="c1",
            check_in_date=date(2024, 1, 1),
            check_out_date=date(2024, 1, 5),
            number_of_guests=2,
            total_price=Decimal("720.00"),
        )

    def test_create_booking_success(self):
        booking = self.service.create_booking(
            "r1", "c1", date(2024, 1, 10), date(2024, 1, 12), 2, "Late check-in please"
        )

        self.booking_repo.add_booking.assert_called_once_with(booking)
        self.assertEqual(booking.total_price, Decimal("360.00"))
        self.assertEqual(booking.status, BookingStatus.CONFIRMED)
        self.assertEqual(booking.special_requests, "Late check-in please")
        self.assertTrue(booking.booking_id)

    def test_create_booking_generates_unique_ids(self):
        first = self.service.create_booking("r1", "c1", date(2024, 1, 10), date(2024, 1, 12), 1)
        second = self.service.create_booking("r1", "c1", date(2024, 2, 10), date(2024, 2, 12), 1)

        self.assertNotEqual(first.booking_id, second.booking_id)

    def test_create_booking_room_not_found(self):
        self.room_repo.find_by_id.return_value = None

        with self.assertRaises(NotFoundException) as ctx:
            self.service.create_booking("r1", "c1", date(2024, 1, 10), date(2024, 1, 12), 1)

        self.assertEqual(ctx.exception.resource, "room")
        self.booking_repo.add_booking.assert_not_called()

    def test_create_booking_customer_not_found(self):
        self.customer_repo.find_by_id.return_value = None

        with self.assertRaises(NotFoundException) as ctx:
            self.service.create_booking("r1", "c1", date(2024, 1, 10), date(2024, 1, 12), 1)

        self.assertEqual(ctx.exception.resource, "customer")

    def test_create_booking_too_many_guests(self):
        with self.assertRaises(InvalidArgument):
            self.service.create_booking("r1", "c1", date(2024, 1, 10), date(2024, 1, 12), 3)

        self.booking_repo.find_by_room.assert_not_called()
        self.booking_repo.add_booking.assert_not_called()

    def test_create_booking_checkout_before_checkin(self):
        with self.assertRaises(InvalidArgument):
            self.service.create_booking("r1", "c1", date(2024, 1, 12), date(2024, 1, 10), 1)

    def test_create_booking_overlap_conflict(self):
        self.booking_repo.find_by_room.return_value = [self.existing]

        with self.assertRaises(BookingConflict):
            self.service.create_booking("r1", "c1", date(2024, 1, 3), date(2024, 1, 7), 1)

        self.booking_repo.add_booking.assert_not_called()

    def test_create_booking_ignores_cancelled_overlap(self):
        self.existing.status = BookingStatus.CANCELLED
        self.booking_repo.find_by_room.return_value = [self.existing]

        self.service.create_booking("r1", "c1", date(2024, 1, 3), date(2024, 1, 7), 1)

        self.booking_repo.add_booking.assert_called_once()

    def test_cancel_booking(self):
        self.booking_repo.find_by_id.return_value = self.existing
        self.booking_repo.cancel.return_value = MagicMock(status=BookingStatus.CANCELLED)

        result = self.service.cancel_booking("b1")

        self.booking_repo.cancel.assert_called_once_with(self.existing)
        self.assertEqual(result.status, BookingStatus.CANCELLED)

    def test_cancel_already_cancelled_skips_write(self):
        self.existing.status = BookingStatus.CANCELLED
        self.booking_repo.find_by_id.return_value = self.existing

        result = self.service.cancel_booking("b1")

        self.assertIs(result, self.existing)
        self.booking_repo.cancel.assert_not_called()

    def test_cancel_booking_not_found(self):
        self.booking_repo.find_by_id.return_value = None

        with self.assertRaises(NotFoundException):
            self.service.cancel_booking("missing")

    def test_find_overlapping_rejects_empty_range(self):
        with self.assertRaises(InvalidArgument):
            self.service.find_overlapping_bookings("r1", date(2024, 1, 1), date(2024, 1, 1))

    def test_find_overlapping_delegates_to_repo(self):
        self.booking_repo.find_overlapping.return_value = [self.existing]

        result = self.service.find_overlapping_bookings("r1", date(2024, 1, 1), date(2024, 1, 3))

        self.booking_repo.find_overlapping.assert_called_once_with(
            "r1", date(2024, 1, 1), date(2024, 1, 3)
        )
        self.assertEqual(result, [self.existing])

    def test_get_upcoming_bookings_uses_given_date(self):
        self.service.get_upcoming_bookings(date(2024, 6, 1))

        self.booking_repo.find_upcoming.assert_called_once_with(date(2024, 6, 1))

    def test_get_customer_bookings(self):
        self.booking_repo.find_by_customer.return_value = [self.existing]

        result = self.service.get_customer_bookings("c1")

        self.booking_repo.find_by_customer.assert_called_once_with("c1")
        self.assertEqual(result, [self.existing])


if __name__ == "__main__":
    unittest.main()
