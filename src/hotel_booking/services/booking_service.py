import logging
from datetime import date
from decimal import Decimal
from typing import List, Optional
from uuid import uuid4

from hotel_booking.models.bookings import Booking, BookingStatus
from hotel_booking.repository.booking_repo import BookingRepository
from hotel_booking.repository.customer_repo import CustomerRepository
from hotel_booking.repository.room_repo import RoomRepository
from hotel_booking.services.availability import is_available
from hotel_booking.utils.constants import MAX_STAY
from hotel_booking.utils.custom_exceptions import (
    BookingConflict,
    InvalidArgument,
    NotFoundException,
)

logger = logging.getLogger(__name__)


class BookingService:
    def __init__(
        self,
        booking_repo: BookingRepository,
        room_repo: RoomRepository,
        customer_repo: CustomerRepository,
    ):
        self.booking_repo = booking_repo
        self.room_repo = room_repo
        self.customer_repo = customer_repo

    def create_booking(
        self,
        room_id: str,
        customer_id: str,
        check_in: date,
        check_out: date,
        number_of_guests: int,
        special_requests: Optional[str] = None,
    ) -> Booking:
        logger.info(f"Creating booking for room {room_id}, customer {customer_id}")

        room = self.room_repo.find_by_id(room_id)
        if room is None:
            raise NotFoundException("room", room_id)
        if self.customer_repo.find_by_id(customer_id) is None:
            raise NotFoundException("customer", customer_id)

        if check_in >= check_out:
            raise InvalidArgument("checkOutDate must be after checkInDate")
        if (check_out - check_in).days > MAX_STAY:
            raise InvalidArgument(f"Maximum stay is {MAX_STAY} nights")
        if number_of_guests < 1 or number_of_guests > room.capacity:
            raise InvalidArgument(
                f"numberOfGuests must be between 1 and {room.capacity} for room {room_id}"
            )

        existing = self.booking_repo.find_by_room(room_id)
        if not is_available(room_id, check_in, check_out, existing):
            raise BookingConflict("room not available for selected dates")

        nights = (check_out - check_in).days
        booking = Booking(
            booking_id=str(uuid4()),
            room_id=room_id,
            customer_id=customer_id,
            check_in_date=check_in,
            check_out_date=check_out,
            number_of_guests=number_of_guests,
            total_price=room.price_per_night * Decimal(nights),
            status=BookingStatus.CONFIRMED,
            special_requests=special_requests,
        )
        self.booking_repo.add_booking(booking)
        logger.info(f"Booking created with ID: {booking.booking_id}")
        return booking

    def cancel_booking(self, booking_id: str) -> Booking:
        """Cancel a booking; cancelling an already cancelled booking is a no-op."""
        logger.info(f"Cancelling booking with ID: {booking_id}")
        booking = self.booking_repo.find_by_id(booking_id)
        if booking is None:
            raise NotFoundException("booking", booking_id)
        if booking.status == BookingStatus.CANCELLED:
            logger.info(f"Booking {booking_id} already cancelled")
            return booking

        cancelled = self.booking_repo.cancel(booking)
        logger.info(f"Booking {booking_id} cancelled successfully")
        return cancelled

    def find_overlapping_bookings(
        self, room_id: str, check_in: date, check_out: date
    ) -> List[Booking]:
        if check_in >= check_out:
            raise InvalidArgument("checkOutDate must be after checkInDate")
        return self.booking_repo.find_overlapping(room_id, check_in, check_out)

    def get_booking(self, booking_id: str) -> Optional[Booking]:
        return self.booking_repo.find_by_id(booking_id)

    def get_customer_bookings(self, customer_id: str) -> List[Booking]:
        return self.booking_repo.find_by_customer(customer_id)

    def get_upcoming_bookings(self, as_of: Optional[date] = None) -> List[Booking]:
        return self.booking_repo.find_upcoming(as_of or date.today())
