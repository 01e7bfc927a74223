"""AppSync direct Lambda resolver for the hotel GraphQL API.

AppSync passes ``info.parentTypeName``/``info.fieldName`` to pick the field,
``arguments`` for its inputs and ``source`` for nested fields. Raised
exceptions surface as GraphQL errors whose ``errorType`` is the exception
class name.
"""
from boto3 import resource
from pydantic import ValidationError

from hotel_booking.bootstrap import build_services, configure_logging, dynamodb_settings
from hotel_booking.schemas.bookings import (
    AvailableRoomsQuery,
    CreateBookingRequest,
    OverlapQuery,
)
from hotel_booking.schemas.views import BookingView, CustomerView, HotelView, RoomView
from hotel_booking.storage.table_adapter import DynamoTableAdapter
from hotel_booking.utils.custom_exceptions import (
    BookingConflict,
    InvalidArgument,
    NotFoundException,
    StorageUnavailable,
)
from hotel_booking.utils.date_parsing import optional_iso_date

logger = configure_logging()

dynamodb = resource("dynamodb", **dynamodb_settings())
services = build_services(DynamoTableAdapter(dynamodb))


def _one(view, entity):
    return view.from_domain(entity).to_payload() if entity else None


def _many(view, entities):
    return [view.from_domain(e).to_payload() for e in entities]


def _stay(args: dict) -> dict:
    return {"checkInDate": args.get("checkIn"), "checkOutDate": args.get("checkOut")}


def hotels(args, source):
    return _many(HotelView, services.hotel_service.get_hotels())


def hotel(args, source):
    return _one(HotelView, services.hotel_service.get_hotel(args["id"]))


def hotels_by_city(args, source):
    return _many(HotelView, services.hotel_service.get_hotels_by_city(args["city"]))


def hotels_by_country(args, source):
    return _many(HotelView, services.hotel_service.get_hotels_by_country(args["country"]))


def room(args, source):
    return _one(RoomView, services.room_service.get_room(args["id"]))


def rooms_by_hotel(args, source):
    return _many(RoomView, services.room_service.get_rooms_by_hotel(args["hotelId"]))


def available_rooms(args, source):
    query = AvailableRoomsQuery.model_validate({"hotelId": args.get("hotelId"), **_stay(args)})
    rooms = services.room_service.get_available_rooms(
        query.hotel_id, query.check_in_date, query.check_out_date
    )
    return _many(RoomView, rooms)


def booking(args, source):
    return _one(BookingView, services.booking_service.get_booking(args["id"]))


def bookings_by_customer(args, source):
    return _many(
        BookingView, services.booking_service.get_customer_bookings(args["customerId"])
    )


def upcoming_bookings(args, source):
    as_of = optional_iso_date(args.get("asOf"))
    return _many(BookingView, services.booking_service.get_upcoming_bookings(as_of))


def overlapping_bookings(args, source):
    query = OverlapQuery.model_validate({"roomId": args.get("roomId"), **_stay(args)})
    found = services.booking_service.find_overlapping_bookings(
        query.room_id, query.check_in_date, query.check_out_date
    )
    return _many(BookingView, found)


def customer(args, source):
    return _one(CustomerView, services.customer_service.get_customer(args["id"]))


def customer_by_email(args, source):
    return _one(CustomerView, services.customer_service.get_customer_by_email(args["email"]))


def create_booking(args, source):
    request = CreateBookingRequest.model_validate(args)
    created = services.booking_service.create_booking(
        room_id=request.room_id,
        customer_id=request.customer_id,
        check_in=request.check_in_date,
        check_out=request.check_out_date,
        number_of_guests=request.number_of_guests,
        special_requests=request.special_requests,
    )
    return BookingView.from_domain(created).to_payload()


def cancel_booking(args, source):
    cancelled = services.booking_service.cancel_booking(args["bookingId"])
    return BookingView.from_domain(cancelled).to_payload()


def booking_room(args, source):
    return _one(RoomView, services.room_service.get_room(source["roomId"]))


def booking_customer(args, source):
    return _one(CustomerView, services.customer_service.get_customer(source["customerId"]))


def room_hotel(args, source):
    return _one(HotelView, services.hotel_service.get_hotel(source["hotelId"]))


RESOLVERS = {
    ("Query", "hotels"): hotels,
    ("Query", "hotel"): hotel,
    ("Query", "hotelsByCity"): hotels_by_city,
    ("Query", "hotelsByCountry"): hotels_by_country,
    ("Query", "room"): room,
    ("Query", "roomsByHotel"): rooms_by_hotel,
    ("Query", "availableRooms"): available_rooms,
    ("Query", "booking"): booking,
    ("Query", "bookingsByCustomer"): bookings_by_customer,
    ("Query", "upcomingBookings"): upcoming_bookings,
    ("Query", "overlappingBookings"): overlapping_bookings,
    ("Query", "customer"): customer,
    ("Query", "customerByEmail"): customer_by_email,
    ("Mutation", "createBooking"): create_booking,
    ("Mutation", "cancelBooking"): cancel_booking,
    ("Booking", "room"): booking_room,
    ("Booking", "customer"): booking_customer,
    ("Room", "hotel"): room_hotel,
}


def _batch_entry(event):
    try:
        return {"data": _resolve_field(event)}
    except (NotFoundException, InvalidArgument, BookingConflict, StorageUnavailable) as err:
        return {"data": None, "errorMessage": str(err), "errorType": type(err).__name__}


def resolve(event, context):
    """Resolve one AppSync field, or a list of them for batch invocations.

    Batch results carry one entry per item so a failing item does not hide
    the others.
    """
    if isinstance(event, list):
        return [_batch_entry(e) for e in event]
    return _resolve_field(event)


def _resolve_field(event):
    info = event.get("info") or {}
    parent_type = info.get("parentTypeName")
    field_name = info.get("fieldName")
    resolver = RESOLVERS.get((parent_type, field_name))
    if resolver is None:
        raise InvalidArgument(f"No resolver for {parent_type}.{field_name}")

    logger.info(f"Resolving {parent_type}.{field_name}")
    try:
        return resolver(event.get("arguments") or {}, event.get("source") or {})
    except ValidationError as e:
        formatted = "; ".join(f"{err['msg']}" for err in e.errors())
        logger.warning(f"Invalid arguments for {field_name}: {formatted}")
        raise InvalidArgument(formatted) from e
    except ValueError as e:
        logger.warning(f"Invalid arguments for {field_name}: {e}")
        raise InvalidArgument(str(e)) from e
    except (NotFoundException, InvalidArgument, BookingConflict) as err:
        logger.warning(f"{field_name} rejected: {err}")
        raise
    except StorageUnavailable as err:
        logger.error(f"Storage unavailable while resolving {field_name}: {err}")
        raise
