from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from hotel_booking.utils.constants import MAX_STAY


class StayRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    check_in_date: date = Field(alias="checkInDate")
    check_out_date: date = Field(alias="checkOutDate")

    @model_validator(mode="after")
    def validate_stay(self):
        if self.check_out_date <= self.check_in_date:
            raise ValueError("checkOutDate must be after checkInDate")
        if (self.check_out_date - self.check_in_date).days > MAX_STAY:
            raise ValueError(f"Maximum stay is {MAX_STAY} nights")
        return self


class CreateBookingRequest(StayRequest):
    room_id: str = Field(alias="roomId", min_length=1)
    customer_id: str = Field(alias="customerId", min_length=1)
    number_of_guests: int = Field(alias="numberOfGuests", ge=1)
    special_requests: Optional[str] = Field(default=None, alias="specialRequests")


class OverlapQuery(StayRequest):
    room_id: str = Field(alias="roomId", min_length=1)


class AvailableRoomsQuery(StayRequest):
    hotel_id: str = Field(alias="hotelId", min_length=1)
