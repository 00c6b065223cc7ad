import functools
from typing import TypeVar, Any
from collections.abc import Callable

from botocore.exceptions import BotoCoreError, ClientError

from seoredirects.dao.exceptions import DataStoreError


__all__ = ['handle_dynamodb_client_error', 'to_item', 'from_item']

F = TypeVar('F', bound=Callable[..., Any])


def handle_dynamodb_client_error[F](method: F) -> F:
    """Wrap DynamoDB-interacting DAO methods to handle client errors

    Args:
        method (Callable[..., Any]):
            DAO method performing DynamoDB calls which may raise botocore ClientError or BotoCoreError.

    Returns:
        Callable[..., Any]:
            Wrapped method which raises DataStoreError on any DynamoDB failure.

    Example:
        >>> @handle_dynamodb_client_error
        ... def get(self, slug):
        ...     return self.client.get_item(TableName=self.table_name, Key={'slug': {'S': slug}})
    """

    @functools.wraps(method)
    def wrapper(self, *args, **kwargs):
        try:
            return method(self, *args, **kwargs)
        except ClientError as e:
            code = e.response.get('Error', {}).get('Code', 'Unknown')
            raise DataStoreError(f"DynamoDB request on table '{self.table_name}' failed ({code}).") from e
        except BotoCoreError as e:
            raise DataStoreError(f"Can't reach DynamoDB table '{self.table_name}'.") from e

    return wrapper


def to_item(slug: str, record: dict[str, str]) -> dict[str, dict[str, str]]:
    """Encode a redirect record as a DynamoDB item of string attributes"""
    return {'slug': {'S': slug}, **{name: {'S': value or ''} for name, value in record.items()}}


def from_item(item: dict[str, dict[str, Any]]) -> dict[str, str]:
    """Decode the string attributes of a DynamoDB item"""
    return {name: value['S'] for name, value in item.items() if 'S' in value}
