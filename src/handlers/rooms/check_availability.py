from boto3 import resource
from pydantic import ValidationError

from hotel_booking.bootstrap import build_services, configure_logging, dynamodb_settings
from hotel_booking.schemas.bookings import OverlapQuery
from hotel_booking.schemas.views import BookingView
from hotel_booking.storage.table_adapter import DynamoTableAdapter
from hotel_booking.utils.custom_response import send_custom_response
from hotel_booking.utils.custom_exceptions import StorageUnavailable

logger = configure_logging()

dynamodb = resource("dynamodb", **dynamodb_settings())
services = build_services(DynamoTableAdapter(dynamodb))
booking_service = services.booking_service


def check_availability(event, context):
    path_params = event.get("pathParameters") or {}
    params = event.get("queryStringParameters") or {}

    room_id = path_params.get("room_id")
    check_in = params.get("check_in")
    check_out = params.get("check_out")

    if not room_id or not check_in or not check_out:
        return send_custom_response(400, "room_id, check_in and check_out are required")

    try:
        query = OverlapQuery(roomId=room_id, checkInDate=check_in, checkOutDate=check_out)
    except ValidationError as e:
        formatted = "; ".join(f"{err['msg']}" for err in e.errors())
        return send_custom_response(400, formatted)

    try:
        overlapping = booking_service.find_overlapping_bookings(
            query.room_id, query.check_in_date, query.check_out_date
        )
        return send_custom_response(
            200,
            "successfully retrieved",
            {
                "roomId": query.room_id,
                "checkInDate": query.check_in_date.isoformat(),
                "checkOutDate": query.check_out_date.isoformat(),
                "available": not overlapping,
                "overlappingBookings": [
                    BookingView.from_domain(b).to_payload() for b in overlapping
                ],
            },
        )

    except StorageUnavailable as err:
        logger.error(f"Storage unavailable while checking room {room_id}: {err}")
        return send_custom_response(err.status_code, "Service temporarily unavailable")

    except Exception:
        logger.exception(f"Unhandled error while checking room {room_id}")
        return send_custom_response(500, "Internal server error")
