from dataclasses import dataclass
from typing import Optional


@dataclass
class Customer:
    customer_id: str
    first_name: str
    last_name: str
    email: str
    phone: Optional[str] = None
    address: Optional[str] = None
