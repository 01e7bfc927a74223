from typing import Optional

from hotel_booking.models.customers import Customer
from hotel_booking.repository.base_repo import TableRepository
from hotel_booking.storage.table_adapter import DynamoTableAdapter, Item
from hotel_booking.utils.constants import CUSTOMERS_TABLE


class CustomerRepository(TableRepository[Customer]):
    entity_name = "customer"

    def __init__(self, adapter: DynamoTableAdapter, table_name: str = CUSTOMERS_TABLE):
        super().__init__(adapter, table_name)

    def _identifier(self, customer: Customer) -> str:
        return customer.customer_id

    def _to_item(self, customer: Customer) -> Item:
        item = {
            "id": customer.customer_id,
            "firstName": customer.first_name,
            "lastName": customer.last_name,
            "email": customer.email,
            "phone": customer.phone,
            "address": customer.address,
        }
        return {k: v for k, v in item.items() if v is not None}

    def _to_domain(self, item: Item) -> Customer:
        return Customer(
            customer_id=item["id"],
            first_name=item["firstName"],
            last_name=item["lastName"],
            email=item["email"],
            phone=item.get("phone"),
            address=item.get("address"),
        )

    def find_by_email(self, email: str) -> Optional[Customer]:
        matches = self._filter(lambda c: c.email.lower() == email.lower())
        return matches[0] if matches else None
