"""
Common helpers for the operator CLIs.

Exposed functions (signatures):
    normalize_user_tags(tag_str: str) -> list[dict[str, str]]
    boto3_session(profile: str | None, region: str | None) -> "boto3.Session"

Raises:
    ValueError: For malformed tag strings in `normalize_user_tags`.

Example:
    >>> session = boto3_session("personal-dev", "eu-west-1")  # doctest: +SKIP
    >>> dynamodb = session.client("dynamodb")                # doctest: +SKIP
"""

from __future__ import annotations

import boto3


def normalize_user_tags(tag_str: str) -> list[dict[str, str]]:
    """Normalize a comma-separated tag string into AWS tag dicts.

    Input format:
        "Key1=Val1,Key2=Val2"

    Raises:
        ValueError:
            If an entry is malformed (missing '=' or empty key).

    Example:
        >>> normalize_user_tags("Owner=ops,Service=seoredirects")
        [{'Key': 'Owner', 'Value': 'ops'}, {'Key': 'Service', 'Value': 'seoredirects'}]
    """
    tags: list[dict[str, str]] = []
    if not tag_str:
        return tags

    for raw in tag_str.split(","):
        item = raw.strip()
        if not item:
            # Trailing commas
            continue
        if "=" not in item:
            raise ValueError(f"Malformed tag (expected key=value): '{item}'")
        key, value = (part.strip() for part in item.split("=", 1))
        if not key:
            raise ValueError(f"Malformed tag (empty key): '{item}'")
        tags.append({"Key": key, "Value": value})
    return tags


def boto3_session(profile: str | None, region: str | None = None):
    """Return a boto3 Session honoring an optional profile and region."""
    kwargs = {}
    if profile:
        kwargs["profile_name"] = profile
    if region:
        kwargs["region_name"] = region
    return boto3.Session(**kwargs)
