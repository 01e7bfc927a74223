from boto3 import resource

from hotel_booking.bootstrap import build_services, configure_logging, dynamodb_settings
from hotel_booking.schemas.views import BookingView
from hotel_booking.storage.table_adapter import DynamoTableAdapter
from hotel_booking.utils.custom_response import send_custom_response
from hotel_booking.utils.custom_exceptions import (
    BookingConflict,
    NotFoundException,
    StorageUnavailable,
)

logger = configure_logging()

dynamodb = resource("dynamodb", **dynamodb_settings())
services = build_services(DynamoTableAdapter(dynamodb))
booking_service = services.booking_service


def cancel_booking(event, context):
    path_params = event.get("pathParameters") or {}
    booking_id = path_params.get("booking_id")

    if not booking_id:
        return send_custom_response(400, "booking_id is required in the path")

    try:
        booking = booking_service.cancel_booking(booking_id)
        return send_custom_response(
            200, "Booking cancelled successfully", BookingView.from_domain(booking).to_payload()
        )

    except NotFoundException as err:
        return send_custom_response(err.status_code, str(err))

    except BookingConflict as err:
        return send_custom_response(err.status_code, str(err))

    except StorageUnavailable as err:
        logger.error(f"Storage unavailable while cancelling booking {booking_id}: {err}")
        return send_custom_response(err.status_code, "Service temporarily unavailable")

    except Exception:
        logger.exception(f"Unhandled error while cancelling booking {booking_id}")
        return send_custom_response(500, "Internal server error")
