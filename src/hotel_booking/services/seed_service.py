"""Sample data for local and test environments.

Nothing here runs implicitly: callers pass the random generator and the
reference date so a seed is reproducible.
"""
import calendar
import logging
import random
import uuid
from collections import defaultdict
from dataclasses import dataclass
from datetime import date, timedelta
from decimal import Decimal
from typing import Dict, List, Optional

from hotel_booking.models.bookings import Booking, BookingStatus
from hotel_booking.models.customers import Customer
from hotel_booking.models.hotels import Hotel
from hotel_booking.models.rooms import Room
from hotel_booking.repository.booking_repo import BookingRepository
from hotel_booking.repository.customer_repo import CustomerRepository
from hotel_booking.repository.hotel_repo import HotelRepository
from hotel_booking.repository.room_repo import RoomRepository
from hotel_booking.services.availability import is_available
from hotel_booking.utils.custom_exceptions import BookingConflict

logger = logging.getLogger(__name__)

CUSTOMERS = [
    ("John", "Doe", "john.doe@example.com", "+1-555-0101", "123 Main St, New York, NY 10001"),
    ("Jane", "Smith", "jane.smith@example.com", "+1-555-0102", "456 Oak Ave, Los Angeles, CA 90001"),
    ("Michael", "Johnson", "michael.johnson@example.com", "+1-555-0103", "789 Pine Rd, Chicago, IL 60601"),
    ("Emily", "Williams", "emily.williams@example.com", "+1-555-0104", "321 Elm St, Houston, TX 77001"),
    ("David", "Brown", "david.brown@example.com", "+1-555-0105", "654 Maple Dr, Phoenix, AZ 85001"),
    ("Sarah", "Davis", "sarah.davis@example.com", "+1-555-0106", "987 Cedar Ln, Philadelphia, PA 19101"),
    ("James", "Miller", "james.miller@example.com", "+1-555-0107", "147 Birch Ct, San Antonio, TX 78201"),
    ("Lisa", "Wilson", "lisa.wilson@example.com", "+1-555-0108", "258 Spruce Way, San Diego, CA 92101"),
    ("Robert", "Moore", "robert.moore@example.com", "+1-555-0109", "369 Walnut Blvd, Dallas, TX 75201"),
    ("Jennifer", "Taylor", "jennifer.taylor@example.com", "+1-555-0110", "753 Ash Ave, San Jose, CA 95101"),
]

# name, address, city, description, star rating, number of rooms
HOTELS = [
    ("Grand Pacific Resort", "100 Beachfront Drive", "Miami Beach",
     "A luxurious beachfront resort featuring world-class amenities, spa services, and fine dining.", 5, 20),
    ("Metropolitan Business Hotel", "250 Corporate Plaza", "New York",
     "Modern business hotel in the heart of Manhattan with state-of-the-art conference facilities.", 4, 25),
    ("The Vintage Inn", "75 Historic District", "Charleston",
     "Charming boutique hotel in a restored 19th-century building with unique character.", 4, 15),
    ("Alpine Mountain Lodge", "500 Summit Road", "Aspen",
     "Cozy mountain lodge offering breathtaking views and easy access to ski slopes.", 4, 18),
    ("Sky Harbor Hotel", "1000 Airport Boulevard", "Los Angeles",
     "Convenient airport hotel with complimentary shuttle service and comfortable accommodations.", 3, 30),
]

ROOM_TYPES = ["Standard", "Deluxe", "Suite", "Executive Suite"]
BASE_PRICES = [Decimal("120.00"), Decimal("180.00"), Decimal("250.00"), Decimal("350.00")]
CAPACITIES = [2, 2, 4, 4]

SPECIAL_REQUESTS = [
    None,
    "Late check-in please",
    "High floor preferred",
    "Non-smoking room",
    "Extra towels needed",
    "Quiet room please",
]

MAX_SEED_STAY = 14
SEED_HORIZON_MONTHS = 3


@dataclass
class SeedSummary:
    customers: int = 0
    hotels: int = 0
    rooms: int = 0
    bookings: int = 0
    skipped: bool = False


def add_months(start: date, months: int) -> date:
    month_index = start.month - 1 + months
    year = start.year + month_index // 12
    month = month_index % 12 + 1
    day = min(start.day, calendar.monthrange(year, month)[1])
    return date(year, month, day)


def room_number(index: int) -> str:
    floor = (index - 1) // 10 + 1
    number = (index - 1) % 10 + 1
    return f"{floor}{number:02d}"


class DataSeeder:
    def __init__(
        self,
        hotel_repo: HotelRepository,
        room_repo: RoomRepository,
        customer_repo: CustomerRepository,
        booking_repo: BookingRepository,
        rng: random.Random,
        today: Optional[date] = None,
    ):
        self.hotel_repo = hotel_repo
        self.room_repo = room_repo
        self.customer_repo = customer_repo
        self.booking_repo = booking_repo
        self.rng = rng
        self.today = today or date.today()

    def _new_id(self) -> str:
        return str(uuid.UUID(int=self.rng.getrandbits(128), version=4))

    def seed(self) -> SeedSummary:
        if self.hotel_repo.count() > 0:
            logger.info("Database already initialized, skipping data initialization")
            return SeedSummary(skipped=True)

        logger.info("Initializing database with sample data...")
        customers = self.create_customers()
        logger.info(f"Created {len(customers)} customers")

        hotels, rooms = self.create_hotels()
        logger.info(f"Created {len(hotels)} hotels with {len(rooms)} rooms")

        bookings = self.create_bookings(rooms, customers)
        logger.info("Database initialization completed")
        return SeedSummary(
            customers=len(customers),
            hotels=len(hotels),
            rooms=len(rooms),
            bookings=len(bookings),
        )

    def create_customers(self) -> List[Customer]:
        customers = []
        for first_name, last_name, email, phone, address in CUSTOMERS:
            customer = Customer(
                customer_id=self._new_id(),
                first_name=first_name,
                last_name=last_name,
                email=email,
                phone=phone,
                address=address,
            )
            self.customer_repo.save(customer)
            customers.append(customer)
        return customers

    def create_hotels(self):
        hotels: List[Hotel] = []
        rooms: List[Room] = []
        for name, address, city, description, stars, room_count in HOTELS:
            hotel = Hotel(
                hotel_id=self._new_id(),
                name=name,
                address=address,
                city=city,
                country="USA",
                description=description,
                star_rating=stars,
            )
            self.hotel_repo.save(hotel)
            hotels.append(hotel)
            rooms.extend(self.create_rooms(hotel, room_count))
        return hotels, rooms

    def create_rooms(self, hotel: Hotel, count: int) -> List[Room]:
        rooms = []
        for i in range(1, count + 1):
            type_index = i % len(ROOM_TYPES)
            room = Room(
                room_id=self._new_id(),
                hotel_id=hotel.hotel_id,
                room_number=room_number(i),
                room_type=ROOM_TYPES[type_index],
                price_per_night=BASE_PRICES[type_index],
                capacity=CAPACITIES[type_index],
                description=f"{ROOM_TYPES[type_index]} room with modern amenities",
            )
            self.room_repo.save(room)
            rooms.append(room)
        return rooms

    def create_bookings(self, rooms: List[Room], customers: List[Customer]) -> List[Booking]:
        if not rooms or not customers:
            return []

        end_date = add_months(self.today, SEED_HORIZON_MONTHS)
        horizon = (end_date - self.today).days
        # ~50% occupancy assuming week-long stays
        target = int(len(rooms) * 45 * 0.5 / 7)
        logger.info(f"Creating approximately {target} bookings for {len(rooms)} total rooms")

        placed: Dict[str, List[Booking]] = defaultdict(list)
        created: List[Booking] = []
        for _ in range(target):
            room = self.rng.choice(rooms)
            customer = self.rng.choice(customers)

            check_in = self.today + timedelta(days=self.rng.randrange(horizon - 7))
            check_out = min(
                check_in + timedelta(days=self.rng.randint(1, MAX_SEED_STAY)), end_date
            )
            if check_out <= check_in:
                continue
            if not is_available(room.room_id, check_in, check_out, placed[room.room_id]):
                continue

            nights = (check_out - check_in).days
            booking = Booking(
                booking_id=self._new_id(),
                room_id=room.room_id,
                customer_id=customer.customer_id,
                check_in_date=check_in,
                check_out_date=check_out,
                number_of_guests=self.rng.randint(1, room.capacity),
                total_price=room.price_per_night * Decimal(nights),
                status=BookingStatus.CONFIRMED if self.rng.random() < 0.9 else BookingStatus.PENDING,
                special_requests=self.rng.choice(SPECIAL_REQUESTS),
            )
            try:
                self.booking_repo.add_booking(booking)
            except BookingConflict as err:
                logger.warning(f"Failed to create booking: {err}")
                continue
            placed[room.room_id].append(booking)
            created.append(booking)

        logger.info(f"Successfully created {len(created)} bookings")
        return created
