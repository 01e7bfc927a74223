from typing import Optional

from hotel_booking.models.customers import Customer
from hotel_booking.repository.customer_repo import CustomerRepository


class CustomerService:
    def __init__(self, customer_repo: CustomerRepository):
        self.customer_repo = customer_repo

    def get_customer(self, customer_id: str) -> Optional[Customer]:
        return self.customer_repo.find_by_id(customer_id)

    def get_customer_by_email(self, email: str) -> Optional[Customer]:
        return self.customer_repo.find_by_email(email)
