from datetime import date
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from hotel_booking.models.bookings import Booking, BookingStatus
from hotel_booking.models.customers import Customer
from hotel_booking.models.hotels import Hotel
from hotel_booking.models.rooms import Room


class _View(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_payload(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)


class BookingView(_View):
    id: str
    room_id: str
    customer_id: str
    check_in_date: date
    check_out_date: date
    number_of_guests: int
    total_price: Decimal
    status: BookingStatus
    special_requests: Optional[str] = None

    @classmethod
    def from_domain(cls, booking: Booking) -> "BookingView":
        return cls(
            id=booking.booking_id,
            room_id=booking.room_id,
            customer_id=booking.customer_id,
            check_in_date=booking.check_in_date,
            check_out_date=booking.check_out_date,
            number_of_guests=booking.number_of_guests,
            total_price=booking.total_price,
            status=booking.status,
            special_requests=booking.special_requests,
        )


class RoomView(_View):
    id: str
    hotel_id: str
    room_number: str
    room_type: str
    price_per_night: Decimal
    capacity: int
    description: Optional[str] = None

    @classmethod
    def from_domain(cls, room: Room) -> "RoomView":
        return cls(
            id=room.room_id,
            hotel_id=room.hotel_id,
            room_number=room.room_number,
            room_type=room.room_type,
            price_per_night=room.price_per_night,
            capacity=room.capacity,
            description=room.description,
        )


class HotelView(_View):
    id: str
    name: str
    address: Optional[str] = None
    city: str
    state: Optional[str] = None
    zip_code: Optional[str] = None
    country: str
    phone: Optional[str] = None
    description: Optional[str] = None
    star_rating: Optional[int] = None

    @classmethod
    def from_domain(cls, hotel: Hotel) -> "HotelView":
        return cls(
            id=hotel.hotel_id,
            name=hotel.name,
            address=hotel.address,
            city=hotel.city,
            state=hotel.state,
            zip_code=hotel.zip_code,
            country=hotel.country,
            phone=hotel.phone,
            description=hotel.description,
            star_rating=hotel.star_rating,
        )


class CustomerView(_View):
    id: str
    first_name: str
    last_name: str
    email: str
    phone: Optional[str] = None
    address: Optional[str] = None

    @classmethod
    def from_domain(cls, customer: Customer) -> "CustomerView":
        return cls(
            id=customer.customer_id,
            first_name=customer.first_name,
            last_name=customer.last_name,
            email=customer.email,
            phone=customer.phone,
            address=customer.address,
        )
