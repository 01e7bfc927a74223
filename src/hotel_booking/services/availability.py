"""Room availability under half-open ``[check_in, check_out)`` stays.

Check-out and the next check-in may fall on the same date; only cancelled
bookings release their nights.
"""
from datetime import date, timedelta
from typing import Iterable, Iterator, List

from hotel_booking.models.bookings import Booking


def overlaps(
    first_check_in: date,
    first_check_out: date,
    second_check_in: date,
    second_check_out: date,
) -> bool:
    return first_check_in < second_check_out and second_check_in < first_check_out


def conflicts(booking: Booking, check_in: date, check_out: date) -> bool:
    return booking.is_active and overlaps(
        booking.check_in_date, booking.check_out_date, check_in, check_out
    )


def conflicting_bookings(
    room_id: str, check_in: date, check_out: date, existing: Iterable[Booking]
) -> List[Booking]:
    return [
        b for b in existing if b.room_id == room_id and conflicts(b, check_in, check_out)
    ]


def is_available(
    room_id: str, check_in: date, check_out: date, existing: Iterable[Booking]
) -> bool:
    """Precondition: ``check_in < check_out``."""
    return not conflicting_bookings(room_id, check_in, check_out, existing)


def occupied_nights(check_in: date, check_out: date) -> Iterator[date]:
    night = check_in
    while night < check_out:
        yield night
        night += timedelta(days=1)
