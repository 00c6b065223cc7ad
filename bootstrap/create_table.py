#!/usr/bin/env python3
"""
Provision the DynamoDB table backing the `dynamodb` storage backend.

The table is keyed by the redirect slug (partition key `slug`, type `S`) and
billed on demand. Running the CLI against an existing table is a no-op.

CLI usage:
    $ python -m bootstrap.create_table --aws-profile personal-dev --region eu-west-1
    $ python -m bootstrap.create_table --table-name seo-redirects-dev --tags "Owner=ops,Env=dev"
    $ python -m bootstrap.create_table --endpoint-url http://localhost:4566 --dry-run

AWS credentials/region:
    - Use --aws-profile to select a profile from ~/.aws/{credentials,config}.
    - If omitted, boto3's default resolution applies (env vars, default profile, etc).
"""

from __future__ import annotations

import argparse
from typing import Any

from botocore.exceptions import ClientError

from bootstrap.helper import boto3_session, normalize_user_tags
from seoredirects.constants import Defaults
from seoredirects.exceptions import InfrastructureError


def table_definition(table_name: str, tags: list[dict[str, str]] | None = None) -> dict[str, Any]:
    definition: dict[str, Any] = {
        'TableName': table_name,
        'AttributeDefinitions': [{'AttributeName': 'slug', 'AttributeType': 'S'}],
        'KeySchema': [{'AttributeName': 'slug', 'KeyType': 'HASH'}],
        'BillingMode': 'PAY_PER_REQUEST',
    }
    if tags:
        definition['Tags'] = tags
    return definition


def create_table(dynamodb_client, table_name: str, tags: list[dict[str, str]] | None = None, dry_run: bool = False, wait: bool = True) -> bool:
    """Create the redirects table unless it already exists.

    Returns:
        bool: True if the table was created, False if it already existed (or dry run).

    Raises:
        InfrastructureError: If DynamoDB rejects the request.
    """
    definition = table_definition(table_name, tags)
    if dry_run:
        print(f'[dry-run] Would create table {table_name!r}: {definition}')
        return False

    try:
        dynamodb_client.create_table(**definition)
    except ClientError as e:
        if e.response.get('Error', {}).get('Code') == 'ResourceInUseException':
            print(f'Table {table_name!r} already exists. Nothing to do.')
            return False
        raise InfrastructureError(f'Failed to create table {table_name!r}') from e

    if wait:
        print(f'Waiting for table {table_name!r} to become active...')
        dynamodb_client.get_waiter('table_exists').wait(TableName=table_name)
    print(f'Created table {table_name!r}.')
    return True


def main(argv: list[str] | None = None) -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        prog='create_table.py',
        description='Create the DynamoDB table storing SEO redirects.',
    )
    parser.add_argument('--table-name', default=Defaults.DYNAMODB_TABLE, help=f'Table name (default: {Defaults.DYNAMODB_TABLE})')
    parser.add_argument('--aws-profile', default=None, help='AWS shared config/credentials profile name')
    parser.add_argument('--region', default=None, help='AWS region (default: boto3 resolution)')
    parser.add_argument('--endpoint-url', default=None, help='Custom DynamoDB endpoint, e.g. LocalStack')
    parser.add_argument('--tags', default='', help='Comma-separated Key=Value tags, e.g. "Owner=ops,Env=dev"')
    parser.add_argument('--dry-run', action='store_true', help='Preview without applying changes')
    parser.add_argument('--no-wait', action='store_true', help='Do not wait for the table to become active')

    args = parser.parse_args(argv)

    session = boto3_session(args.aws_profile, args.region)
    client_kwargs = {'endpoint_url': args.endpoint_url} if args.endpoint_url else {}
    dynamodb = session.client('dynamodb', **client_kwargs)

    create_table(
        dynamodb,
        table_name=args.table_name,
        tags=normalize_user_tags(args.tags),
        dry_run=args.dry_run,
        wait=not args.no_wait,
    )


if __name__ == '__main__':
    main()
