import logging
import os
from dataclasses import dataclass

from hotel_booking.repository.booking_repo import BookingRepository
from hotel_booking.repository.customer_repo import CustomerRepository
from hotel_booking.repository.hotel_repo import HotelRepository
from hotel_booking.repository.room_repo import RoomRepository
from hotel_booking.services.booking_service import BookingService
from hotel_booking.services.customer_service import CustomerService
from hotel_booking.services.hotel_service import HotelService
from hotel_booking.services.room_service import RoomService
from hotel_booking.storage.table_adapter import DynamoTableAdapter
from hotel_booking.utils import constants


@dataclass
class TableNames:
    hotels: str = constants.HOTELS_TABLE
    rooms: str = constants.ROOMS_TABLE
    customers: str = constants.CUSTOMERS_TABLE
    bookings: str = constants.BOOKINGS_TABLE
    room_nights: str = constants.ROOM_NIGHTS_TABLE

    @classmethod
    def from_env(cls) -> "TableNames":
        return cls(
            hotels=os.environ.get("HOTELS_TABLE", constants.HOTELS_TABLE),
            rooms=os.environ.get("ROOMS_TABLE", constants.ROOMS_TABLE),
            customers=os.environ.get("CUSTOMERS_TABLE", constants.CUSTOMERS_TABLE),
            bookings=os.environ.get("BOOKINGS_TABLE", constants.BOOKINGS_TABLE),
            room_nights=os.environ.get("ROOM_NIGHTS_TABLE", constants.ROOM_NIGHTS_TABLE),
        )


@dataclass
class Services:
    hotel_repo: HotelRepository
    room_repo: RoomRepository
    customer_repo: CustomerRepository
    booking_repo: BookingRepository
    hotel_service: HotelService
    room_service: RoomService
    customer_service: CustomerService
    booking_service: BookingService


def dynamodb_settings() -> dict:
    settings = {"region_name": os.environ.get("AWS_REGION", constants.DEFAULT_REGION)}
    endpoint = os.environ.get("DYNAMODB_ENDPOINT_URL")
    if endpoint:
        settings["endpoint_url"] = endpoint
    return settings


def configure_logging():
    logger = logging.getLogger()
    logger.setLevel(os.environ.get("LOG_LEVEL", "INFO").upper())
    return logger


def build_services(adapter: DynamoTableAdapter, tables: TableNames = None) -> Services:
    tables = tables or TableNames.from_env()
    hotel_repo = HotelRepository(adapter, tables.hotels)
    room_repo = RoomRepository(adapter, tables.rooms)
    customer_repo = CustomerRepository(adapter, tables.customers)
    booking_repo = BookingRepository(adapter, tables.bookings, tables.room_nights)
    return Services(
        hotel_repo=hotel_repo,
        room_repo=room_repo,
        customer_repo=customer_repo,
        booking_repo=booking_repo,
        hotel_service=HotelService(hotel_repo),
        room_service=RoomService(room_repo, booking_repo),
        customer_service=CustomerService(customer_repo),
        booking_service=BookingService(booking_repo, room_repo, customer_repo),
    )
