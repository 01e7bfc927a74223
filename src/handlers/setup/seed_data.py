import random
from dataclasses import asdict

from boto3 import resource

from hotel_booking.bootstrap import build_services, configure_logging, dynamodb_settings
from hotel_booking.services.seed_service import DataSeeder
from hotel_booking.storage.table_adapter import DynamoTableAdapter
from hotel_booking.utils.date_parsing import optional_iso_date

logger = configure_logging()

dynamodb = resource("dynamodb", **dynamodb_settings())
services = build_services(DynamoTableAdapter(dynamodb))


def seed_data(event, context):
    """Populate empty tables with sample hotels, rooms, customers and bookings.

    Invoked manually during environment setup. ``seed`` and ``today`` in the
    event make a run reproducible.
    """
    event = event or {}
    rng = random.Random(event.get("seed"))
    seeder = DataSeeder(
        hotel_repo=services.hotel_repo,
        room_repo=services.room_repo,
        customer_repo=services.customer_repo,
        booking_repo=services.booking_repo,
        rng=rng,
        today=optional_iso_date(event.get("today")),
    )
    summary = seeder.seed()
    logger.info(f"Seed finished: {summary}")
    return asdict(summary)
