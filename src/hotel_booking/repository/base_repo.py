import logging
from typing import Callable, Generic, List, Optional, TypeVar

from hotel_booking.storage.table_adapter import DynamoTableAdapter, Item

logger = logging.getLogger(__name__)

T = TypeVar("T")


class TableRepository(Generic[T]):
    """Single-table persistence keyed by ``id``.

    Secondary lookups are full scans filtered in memory; the tables carry no
    secondary indexes.
    """

    entity_name = "item"

    def __init__(self, adapter: DynamoTableAdapter, table_name: str):
        self.adapter = adapter
        self.table_name = table_name

    def _to_item(self, entity: T) -> Item:
        raise NotImplementedError

    def _to_domain(self, item: Item) -> T:
        raise NotImplementedError

    def _identifier(self, entity: T) -> str:
        raise NotImplementedError

    def save(self, entity: T) -> T:
        logger.info(f"Saving {self.entity_name}: {self._identifier(entity)}")
        self.adapter.put(self.table_name, self._to_item(entity))
        return entity

    def find_by_id(self, entity_id: str) -> Optional[T]:
        item = self.adapter.get(self.table_name, {"id": entity_id})
        if not item:
            return None
        return self._to_domain(item)

    def find_all(self) -> List[T]:
        return [self._to_domain(item) for item in self.adapter.scan(self.table_name)]

    def _filter(self, predicate: Callable[[T], bool]) -> List[T]:
        return [entity for entity in self.find_all() if predicate(entity)]

    def delete(self, entity_id: str):
        logger.info(f"Deleting {self.entity_name}: {entity_id}")
        self.adapter.delete(self.table_name, {"id": entity_id})

    def count(self) -> int:
        return len(self.find_all())
