"""Data Access Object (DAO) implementation storing redirects in DynamoDB

Each redirect is one item of the `seo-redirects` table (partition key `slug`),
with every record field stored as a string attribute:

    {
        "slug":       {"S": "hello-world"},
        "title":      {"S": "Hello World"},
        "desc":       {"S": "Test **bold**"},
        "url":        {"S": "https://example.com"},
        "image":      {"S": ""},
        ...
    }

Classes:
    RedirectDynamoDBDAO:
        DAO for storing and retrieving RedirectModel in a DynamoDB table.

Example:
    >>> dao = RedirectDynamoDBDAO(table_name='seo-redirects', region_name='us-east-1')
    >>> dao.get('hello-world').title
    'Hello World'
"""

import logging

import boto3
from beartype import beartype
from botocore.client import BaseClient

from seoredirects.constants import Defaults
from seoredirects.models import RedirectModel
from seoredirects.dao.base import RedirectBaseDAO
from seoredirects.dao.helpers import degrade_on_error
from seoredirects.dao.dynamodb.helpers import handle_dynamodb_client_error, to_item, from_item


logger = logging.getLogger(__name__)


class RedirectDynamoDBDAO(RedirectBaseDAO):
    """DynamoDB-based Data Access Object (DAO) for redirects

    Attributes:
        client (botocore.client.BaseClient):
            Low-level DynamoDB client.
        table_name (str):
            Name of the redirects table.

    Methods:
        get(slug: str) -> RedirectModel | None:
            GetItem by slug. Degrades to None on DynamoDB failures.

        get_all() -> dict[str, RedirectModel]:
            Scan the whole table, following pagination. Degrades to {} on DynamoDB failures.

        save(slug: str, redirect: RedirectModel) -> RedirectDynamoDBDAO:
            PutItem (full replace). Raises DataStoreError on DynamoDB failures.

        delete(slug: str) -> bool:
            DeleteItem returning the old item to report whether it existed.
            Raises DataStoreError on DynamoDB failures.
    """

    def __init__(
        self,
        table_name: str = Defaults.DYNAMODB_TABLE,
        region_name: str | None = Defaults.AWS_REGION,
        endpoint_url: str | None = None,
        client: BaseClient | None = None,
    ):
        """Initialize a DynamoDB-based DAO

        Args:
            table_name (str):
                Name of the redirects table. Defaults to 'seo-redirects'.

            region_name (str | None):
                AWS region of the table. Defaults to 'us-east-1'.

            endpoint_url (str | None):
                Custom endpoint, e.g. LocalStack or DynamoDB Local.

            client (BaseClient | None):
                Pre-initialized DynamoDB client. If None, a new client is created.
        """
        if client is None:
            client_kwargs = {'region_name': region_name}
            if endpoint_url:
                client_kwargs['endpoint_url'] = endpoint_url
            client = boto3.client('dynamodb', **client_kwargs)

        self.client = client
        self.table_name = table_name

    @degrade_on_error(lambda: None)
    @handle_dynamodb_client_error
    @beartype
    def get(self, slug: str) -> RedirectModel | None:
        response = self.client.get_item(TableName=self.table_name, Key={'slug': {'S': slug}})
        item = response.get('Item')
        return RedirectModel.from_dict(from_item(item)) if item else None

    @degrade_on_error(dict)
    @handle_dynamodb_client_error
    @beartype
    def get_all(self) -> dict[str, RedirectModel]:
        redirects = {}
        paginator = self.client.get_paginator('scan')
        for page in paginator.paginate(TableName=self.table_name):
            for item in page.get('Items', []):
                record = from_item(item)
                slug = record.pop('slug', None)
                if slug is None:
                    logger.warning('Skipping DynamoDB item without a slug.', extra={'event': 'DYNAMODB_ITEM_WITHOUT_SLUG'})
                    continue
                redirects[slug] = RedirectModel.from_dict(record)
        return redirects

    @handle_dynamodb_client_error
    @beartype
    def save(self, slug: str, redirect: RedirectModel) -> 'RedirectDynamoDBDAO':
        self.client.put_item(TableName=self.table_name, Item=to_item(slug, redirect.to_dict()))
        return self

    @handle_dynamodb_client_error
    @beartype
    def delete(self, slug: str) -> bool:
        response = self.client.delete_item(
            TableName=self.table_name,
            Key={'slug': {'S': slug}},
            ReturnValues='ALL_OLD',
        )
        return bool(response.get('Attributes'))

    def __repr__(self) -> str:
        return f'<RedirectDynamoDBDAO table={self.table_name!r}>'
