import os
from pydantic import BaseModel
from typing import Any, Generic, TypeVar, Optional

from hotel_booking.utils.constants import DEFAULT_REGION

T = TypeVar("T")

AWS_REGION_HEADER = "X-AWS-Region"


class APIResponse(BaseModel, Generic[T]):
    status_code: int
    message: str
    data: Optional[T] = None


def send_custom_response(status_code: int, message: str, data: Optional[Any] = None):
    return {
        "statusCode": status_code,
        "headers": {
            "Content-Type": "application/json",
            AWS_REGION_HEADER: os.environ.get("AWS_REGION", DEFAULT_REGION),
        },
        "body": APIResponse[Any](
            status_code=status_code, message=message, data=data
        ).model_dump_json(),
    }
