from boto3 import resource
from pydantic import ValidationError

from hotel_booking.bootstrap import build_services, configure_logging, dynamodb_settings
from hotel_booking.schemas.bookings import CreateBookingRequest
from hotel_booking.schemas.views import BookingView
from hotel_booking.storage.table_adapter import DynamoTableAdapter
from hotel_booking.utils.custom_response import send_custom_response
from hotel_booking.utils.custom_exceptions import (
    BookingConflict,
    InvalidArgument,
    NotFoundException,
    StorageUnavailable,
)

logger = configure_logging()

dynamodb = resource("dynamodb", **dynamodb_settings())
services = build_services(DynamoTableAdapter(dynamodb))
booking_service = services.booking_service


def create_booking(event, context):
    if not event.get("body"):
        return send_custom_response(400, "Request body is required")

    try:
        request_body = CreateBookingRequest.model_validate_json(event["body"])
    except ValidationError as e:
        formatted = "; ".join(f"{err['msg']}" for err in e.errors())
        return send_custom_response(400, formatted)

    try:
        booking = booking_service.create_booking(
            room_id=request_body.room_id,
            customer_id=request_body.customer_id,
            check_in=request_body.check_in_date,
            check_out=request_body.check_out_date,
            number_of_guests=request_body.number_of_guests,
            special_requests=request_body.special_requests,
        )
        return send_custom_response(
            201, "Booking created successfully", BookingView.from_domain(booking).to_payload()
        )

    except NotFoundException as err:
        return send_custom_response(err.status_code, str(err))

    except InvalidArgument as err:
        return send_custom_response(err.status_code, str(err))

    except BookingConflict as err:
        return send_custom_response(err.status_code, str(err))

    except StorageUnavailable as err:
        logger.error(f"Storage unavailable while creating booking: {err}")
        return send_custom_response(err.status_code, "Service temporarily unavailable")

    except Exception:
        logger.exception("Unhandled error while creating booking")
        return send_custom_response(500, "Internal server error")
