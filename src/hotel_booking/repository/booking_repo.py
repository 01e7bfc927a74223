import logging
from dataclasses import replace
from datetime import date
from decimal import Decimal
from typing import List

from hotel_booking.models.bookings import Booking, BookingStatus
from hotel_booking.repository.base_repo import TableRepository
from hotel_booking.services.availability import conflicting_bookings, occupied_nights
from hotel_booking.storage.table_adapter import DynamoTableAdapter, Item, WriteOperation
from hotel_booking.utils.constants import BOOKINGS_TABLE, ROOM_NIGHTS_TABLE
from hotel_booking.utils.custom_exceptions import (
    BookingConflict,
    ConditionalWriteFailed,
    NotFoundException,
)
from hotel_booking.utils.date_parsing import from_iso_date

logger = logging.getLogger(__name__)


class BookingRepository(TableRepository[Booking]):
    """Bookings plus one claim item per occupied room-night.

    A claim is keyed ``<room_id>#<night>`` and written with
    ``attribute_not_exists(id)`` in the same transaction as the booking, so two
    writers racing for the same night cannot both succeed.
    """

    entity_name = "booking"

    def __init__(
        self,
        adapter: DynamoTableAdapter,
        table_name: str = BOOKINGS_TABLE,
        claims_table_name: str = ROOM_NIGHTS_TABLE,
    ):
        super().__init__(adapter, table_name)
        self.claims_table_name = claims_table_name

    def _identifier(self, booking: Booking) -> str:
        return booking.booking_id

    @staticmethod
    def claim_id(room_id: str, night: date) -> str:
        return f"{room_id}#{night.isoformat()}"

    def _to_item(self, booking: Booking) -> Item:
        item = {
            "id": booking.booking_id,
            "roomId": booking.room_id,
            "customerId": booking.customer_id,
            "checkInDate": booking.check_in_date.isoformat(),
            "checkOutDate": booking.check_out_date.isoformat(),
            "numberOfGuests": booking.number_of_guests,
            "totalPrice": Decimal(str(booking.total_price)),
            "status": booking.status.value,
            "specialRequests": booking.special_requests,
        }
        return {k: v for k, v in item.items() if v is not None}

    def _to_domain(self, item: Item) -> Booking:
        return Booking(
            booking_id=item["id"],
            room_id=item["roomId"],
            customer_id=item["customerId"],
            check_in_date=from_iso_date(item["checkInDate"]),
            check_out_date=from_iso_date(item["checkOutDate"]),
            number_of_guests=int(item["numberOfGuests"]),
            total_price=Decimal(str(item["totalPrice"])),
            status=BookingStatus(item["status"]),
            special_requests=item.get("specialRequests"),
        )

    def _claim_puts(self, booking: Booking) -> List[WriteOperation]:
        return [
            WriteOperation.put(
                self.claims_table_name,
                {
                    "id": self.claim_id(booking.room_id, night),
                    "roomId": booking.room_id,
                    "night": night.isoformat(),
                    "bookingId": booking.booking_id,
                },
                require_absent="id",
            )
            for night in occupied_nights(booking.check_in_date, booking.check_out_date)
        ]

    def _claim_deletes(self, booking: Booking) -> List[WriteOperation]:
        return [
            WriteOperation.delete(
                self.claims_table_name,
                {"id": self.claim_id(booking.room_id, night)},
                expected={"bookingId": booking.booking_id},
            )
            for night in occupied_nights(booking.check_in_date, booking.check_out_date)
        ]

    def save(self, booking: Booking) -> Booking:
        return self.add_booking(booking)

    def add_booking(self, booking: Booking) -> Booking:
        operations = [
            WriteOperation.put(self.table_name, self._to_item(booking), require_absent="id")
        ]
        if booking.is_active:
            operations.extend(self._claim_puts(booking))
        try:
            self.adapter.transact_write(operations)
        except ConditionalWriteFailed as err:
            logger.warning(
                f"Booking {booking.booking_id} lost the race for room {booking.room_id}"
            )
            raise BookingConflict("room not available for selected dates") from err
        logger.info(f"Saved booking: {booking.booking_id}")
        return booking

    def cancel(self, booking: Booking) -> Booking:
        cancelled = replace(booking, status=BookingStatus.CANCELLED)
        operations = [WriteOperation.put(self.table_name, self._to_item(cancelled))]
        if booking.is_active:
            operations.extend(self._claim_deletes(booking))
        try:
            self.adapter.transact_write(operations)
        except ConditionalWriteFailed as err:
            # Night claims now belong to another booking.
            current = self.find_by_id(booking.booking_id)
            if current is not None and current.status == BookingStatus.CANCELLED:
                logger.info(f"Booking {booking.booking_id} was already cancelled")
                return current
            logger.warning(f"Booking {booking.booking_id} changed while cancelling")
            raise BookingConflict("booking was modified concurrently") from err
        logger.info(f"Released {len(operations) - 1} night claims for booking {booking.booking_id}")
        return cancelled

    def delete(self, entity_id: str):
        booking = self.find_by_id(entity_id)
        if booking is None:
            raise NotFoundException("booking", entity_id)
        logger.info(f"Deleting booking: {entity_id}")
        operations = [WriteOperation.delete(self.table_name, {"id": entity_id})]
        if booking.is_active:
            operations.extend(self._claim_deletes(booking))
        try:
            self.adapter.transact_write(operations)
        except ConditionalWriteFailed as err:
            logger.warning(f"Booking {entity_id} changed while deleting")
            raise BookingConflict("booking was modified concurrently") from err

    def find_by_room(self, room_id: str) -> List[Booking]:
        return self._filter(lambda b: b.room_id == room_id)

    def find_by_customer(self, customer_id: str) -> List[Booking]:
        return self._filter(lambda b: b.customer_id == customer_id)

    def find_upcoming(self, as_of: date) -> List[Booking]:
        return self._filter(lambda b: b.is_active and b.check_in_date >= as_of)

    def find_overlapping(self, room_id: str, check_in: date, check_out: date) -> List[Booking]:
        return conflicting_bookings(room_id, check_in, check_out, self.find_by_room(room_id))

