# One transaction holds the booking item plus one claim per night; DynamoDB
# caps transactions at 100 items.
MAX_STAY = 90

DEFAULT_REGION = "us-east-1"

HOTELS_TABLE = "hotels"
ROOMS_TABLE = "rooms"
CUSTOMERS_TABLE = "customers"
BOOKINGS_TABLE = "bookings"
ROOM_NIGHTS_TABLE = "room_nights"
