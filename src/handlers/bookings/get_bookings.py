from boto3 import resource

from hotel_booking.bootstrap import build_services, configure_logging, dynamodb_settings
from hotel_booking.schemas.views import BookingView
from hotel_booking.storage.table_adapter import DynamoTableAdapter
from hotel_booking.utils.custom_response import send_custom_response
from hotel_booking.utils.custom_exceptions import StorageUnavailable
from hotel_booking.utils.date_parsing import optional_iso_date

logger = configure_logging()

dynamodb = resource("dynamodb", **dynamodb_settings())
services = build_services(DynamoTableAdapter(dynamodb))
booking_service = services.booking_service


def get_bookings(event, context):
    params = event.get("queryStringParameters") or {}
    customer_id = params.get("customer_id")
    upcoming = str(params.get("upcoming", "")).lower() == "true"

    if not customer_id and not upcoming:
        return send_custom_response(400, "customer_id or upcoming=true is required")

    try:
        as_of = optional_iso_date(params.get("as_of"))
    except ValueError as e:
        return send_custom_response(400, str(e))

    try:
        if customer_id:
            bookings = booking_service.get_customer_bookings(customer_id)
        else:
            bookings = booking_service.get_upcoming_bookings(as_of)

        result = [BookingView.from_domain(b).to_payload() for b in bookings]
        return send_custom_response(
            200,
            "Bookings retrieved successfully",
            {"count": len(result), "bookings": result},
        )

    except StorageUnavailable as err:
        logger.error(f"Storage unavailable while listing bookings: {err}")
        return send_custom_response(err.status_code, "Service temporarily unavailable")

    except Exception:
        logger.exception("Unhandled error while listing bookings")
        return send_custom_response(500, "Internal server error")
