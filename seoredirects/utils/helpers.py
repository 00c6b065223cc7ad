"""Small helpers shared by the lambda handlers and the redirect service.

Functions:
    base_url() -> str
        Resolve the public base URL (BASE_URL or API Gateway event)
    build_short_url() -> str
        Short URL (`<base>/<slug>`) of a redirect
    build_long_url() -> str
        Long URL (`<base>/u?<query>`) embedding all redirect fields
    utc_now() -> datetime
        Current moment in UTC
    iso_timestamp() -> str
        ISO-8601 timestamp with millisecond precision and `Z` suffix
    epoch_millis() -> int
        Milliseconds since the Unix epoch
    require_environment(*names: str) -> Callable
        Decorator: Ensure required environment variables are present
    guarantee_500_response(func) -> Callable
        Decorator: Convert unexpected handler errors into 500 responses

Example:
    >>> base_url({"requestContext": {"domainName": "links.example.com", "stage": "Prod"}})
    'https://links.example.com'

    >>> base_url({})
    'http://localhost:3000'
"""

import os
import functools
import logging
from datetime import datetime, UTC
from typing import Any
from urllib.parse import urlencode
from collections.abc import Callable

from seoredirects.constants import ENV, Defaults, UNKNOWN_INTERNAL_SERVER_ERROR
from seoredirects.exceptions import MissingEnvironmentVariableError
from seoredirects.models import RedirectModel
from seoredirects.utils.runtime import running_locally
from seoredirects.utils.responses import response_500


logger = logging.getLogger(__name__)

LOCAL_HOSTS = ('localhost', '127.0.0.1')


def base_url(event: dict[str, Any] | None = None) -> str:
    """Resolve the public base URL for the current invocation

    `BASE_URL` always wins when set. Otherwise the URL is derived from the
    API Gateway request context: custom domains omit the stage name, default
    execute-api domains include it. Local invocations fall back to
    'http://localhost:3000'.

    Args:
        event (dict): API Gateway event object passed to Lambda handler

    Returns:
        str: Base URL without a trailing slash, e.g.:
             - "https://links.example.com"
             - "https://a1b2c3.execute-api.eu-west-1.amazonaws.com/Prod"
    """
    configured = os.environ.get(ENV.App.BASE_URL)
    if configured:
        return configured.rstrip('/')

    request_context = (event or {}).get('requestContext', {})
    domain = request_context.get('domainName', '')
    stage = request_context.get('stage', '')

    if domain.startswith(LOCAL_HOSTS):
        return f'http://{domain}'
    elif domain and 'execute-api' not in domain:
        # Custom domains map the stage away
        return f'https://{domain}'
    elif domain:
        # execute-api domains need the stage in the path
        return f'https://{domain}/{stage}'
    else:
        # Direct invoke without a request context
        return Defaults.BASE_URL


def build_short_url(base: str, slug: str) -> str:
    return f'{base.rstrip("/")}/{slug}'


def build_long_url(base: str, redirect: RedirectModel) -> str:
    """Build the storage-independent long URL of a redirect

    Required fields and `type` are always present in the query string, optional
    fields only when non-empty. Spaces are form-encoded as '+'.

    Example:
        >>> build_long_url('https://x.io', RedirectModel(title='Hi there', desc='d', url='https://e.com'))
        'https://x.io/u?title=Hi+there&desc=d&url=https%3A%2F%2Fe.com&type=website'
    """
    params = {
        'title': redirect.title,
        'desc': redirect.desc,
        'url': redirect.url,
    }
    for name in ('image', 'video', 'keywords', 'site_name'):
        value = getattr(redirect, name)
        if value:
            params[name] = value
    params['type'] = redirect.type
    return f'{base.rstrip("/")}/u?{urlencode(params)}'


def utc_now() -> datetime:
    return datetime.now(UTC)


def iso_timestamp(moment: datetime) -> str:
    """Format a datetime like JavaScript's Date.toISOString()

    Example:
        >>> iso_timestamp(datetime(2025, 10, 15, 12, 30, tzinfo=UTC))
        '2025-10-15T12:30:00.000Z'
    """
    return moment.astimezone(UTC).isoformat(timespec='milliseconds').replace('+00:00', 'Z')


def epoch_millis(moment: datetime) -> int:
    return int(moment.timestamp() * 1000)


def require_environment(*names: str) -> Callable:
    """Decorator: fail fast with MissingEnvironmentVariableError when env vars are unset.

    Args:
        *names (str):
            Environment variables the wrapped function reads.

    Raises:
        MissingEnvironmentVariableError:
            Listing every variable that is unset or empty.

    Example:
        >>> @require_environment('APPCONFIG_APP_ID', 'APPCONFIG_ENV_ID')
        ... def my_function():
        ...     pass
        >>> my_function()
        MissingEnvironmentVariableError: Missing required environment variables: 'APPCONFIG_APP_ID', 'APPCONFIG_ENV_ID'
    """

    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            missing = [name for name in names if not os.environ.get(name)]
            if missing:
                missing_list = ', '.join(f"'{name}'" for name in missing)
                raise MissingEnvironmentVariableError(f'Missing required environment variables: {missing_list}')
            return func(*args, **kwargs)

        return wrapper

    return decorator


def guarantee_500_response(func: Callable) -> Callable:
    """Decorator: respond with 500 when a lambda handler raises unexpectedly.

    When running locally the exception is re-raised instead, so that stack
    traces surface in SAM.
    """

    @functools.wraps(func)
    def wrapper(event, context):
        try:
            return func(event, context)
        except Exception:
            if running_locally():
                raise
            logger.exception(
                'Unhandled exception in lambda handler. Responding with 500.',
                extra={'event': UNKNOWN_INTERNAL_SERVER_ERROR},
            )
            return response_500(error_code=UNKNOWN_INTERNAL_SERVER_ERROR)

    return wrapper
