import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, Dict, List, Optional

from botocore.exceptions import BotoCoreError, ClientError

from hotel_booking.utils.custom_exceptions import (
    ConditionalWriteFailed,
    StorageUnavailable,
)


if TYPE_CHECKING:
    from types_boto3_dynamodb.service_resource import DynamoDBServiceResource
    from types_boto3_dynamodb import DynamoDBClient
else:
    DynamoDBServiceResource = object
    DynamoDBClient = object


logger = logging.getLogger(__name__)

Item = Dict[str, Any]


class WriteAction(str, Enum):
    PUT = "Put"
    DELETE = "Delete"


@dataclass
class WriteOperation:
    """One member of an all-or-nothing write.

    ``require_absent`` names a key attribute that must not exist yet (puts).
    ``expected`` maps attributes to the value they must hold if the item
    exists; a missing item passes.
    """

    action: WriteAction
    table_name: str
    item: Optional[Item] = None
    key: Optional[Item] = None
    require_absent: Optional[str] = None
    expected: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def put(cls, table_name: str, item: Item, require_absent: Optional[str] = None):
        return cls(WriteAction.PUT, table_name, item=item, require_absent=require_absent)

    @classmethod
    def delete(cls, table_name: str, key: Item, expected: Optional[Dict[str, Any]] = None):
        return cls(WriteAction.DELETE, table_name, key=key, expected=expected or {})


def _error_code(err: ClientError) -> str:
    return err.response.get("Error", {}).get("Code", "")


class DynamoTableAdapter:
    """Key-value access to DynamoDB tables addressed by name."""

    def __init__(self, dynamodb: DynamoDBServiceResource, client: DynamoDBClient = None):
        self.dynamodb = dynamodb
        self.client = client if client else dynamodb.meta.client

    def _table(self, table_name: str):
        return self.dynamodb.Table(table_name)

    def get(self, table_name: str, key: Item) -> Optional[Item]:
        try:
            response = self._table(table_name).get_item(Key=key)
        except (ClientError, BotoCoreError) as err:
            logger.error(f"Error reading {key} from {table_name}: {err}")
            raise StorageUnavailable(f"{table_name} unavailable") from err
        return response.get("Item")

    def put(self, table_name: str, item: Item):
        try:
            self._table(table_name).put_item(Item=item)
        except (ClientError, BotoCoreError) as err:
            logger.error(f"Error writing item to {table_name}: {err}")
            raise StorageUnavailable(f"{table_name} unavailable") from err

    def delete(self, table_name: str, key: Item):
        try:
            self._table(table_name).delete_item(Key=key)
        except (ClientError, BotoCoreError) as err:
            logger.error(f"Error deleting {key} from {table_name}: {err}")
            raise StorageUnavailable(f"{table_name} unavailable") from err

    def scan(self, table_name: str) -> List[Item]:
        table = self._table(table_name)
        items: List[Item] = []
        try:
            resp = table.scan()
            items.extend(resp.get("Items", []))
            while "LastEvaluatedKey" in resp:
                resp = table.scan(ExclusiveStartKey=resp["LastEvaluatedKey"])
                items.extend(resp.get("Items", []))
        except ClientError as err:
            if _error_code(err) == "ResourceNotFoundException":
                logger.warning(f"Table {table_name} not found, returning no items")
                return []
            logger.error(f"Error scanning {table_name}: {err}")
            raise StorageUnavailable(f"{table_name} unavailable") from err
        except BotoCoreError as err:
            logger.error(f"Error scanning {table_name}: {err}")
            raise StorageUnavailable(f"{table_name} unavailable") from err
        return items

    def transact_write(self, operations: List[WriteOperation]):
        if not operations:
            return
        try:
            self.client.transact_write_items(
                TransactItems=[self._to_transact_item(op) for op in operations]
            )
        except ClientError as err:
            if _error_code(err) == "TransactionCanceledException":
                reasons = err.response.get("CancellationReasons", [])
                if any(r.get("Code") == "ConditionalCheckFailed" for r in reasons):
                    raise ConditionalWriteFailed("transaction condition failed") from err
            logger.error(f"Error writing transaction of {len(operations)} items: {err}")
            raise StorageUnavailable("transaction failed") from err
        except BotoCoreError as err:
            logger.error(f"Error writing transaction of {len(operations)} items: {err}")
            raise StorageUnavailable("transaction failed") from err

    @staticmethod
    def _to_transact_item(op: WriteOperation) -> dict:
        body = {"TableName": op.table_name}
        if op.action == WriteAction.PUT:
            body["Item"] = op.item
            if op.require_absent:
                body["ConditionExpression"] = f"attribute_not_exists({op.require_absent})"
        else:
            body["Key"] = op.key
            if op.expected:
                names = {}
                values = {}
                clauses = []
                for i, (attribute, value) in enumerate(op.expected.items()):
                    names[f"#a{i}"] = attribute
                    values[f":v{i}"] = value
                    clauses.append(f"(attribute_not_exists(#a{i}) OR #a{i} = :v{i})")
                body["ConditionExpression"] = " AND ".join(clauses)
                body["ExpressionAttributeNames"] = names
                body["ExpressionAttributeValues"] = values
        return {op.action.value: body}
