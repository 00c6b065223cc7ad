"""Per-Lambda storage configuration.

Deployed functions read one JSON document from **AWS AppConfig**: the AppConfig
application is named by `APP_NAME`, and each `APP_ENV` is an AppConfig
environment with the document deployed under the `backend-config` profile.

    {
        "build": 7,
        "active_backend": "dynamodb",
        "configs": {
            "default": {
                "dynamodb": {"table_name": "seo-redirects", "region_name": "us-east-1"}
            },
            "sitemap": {
                "dynamodb": {"table_name": "seo-redirects", "region_name": "eu-west-1"}
            }
        }
    }

A Lambda gets the settings of the active backend from its own section,
or from `"default"` when it has none. Locally the document is looked up, in order, at
`<project root>/config/<APP_ENV>.yml`, then at a local AppConfig agent, then
at AWS AppConfig.

Example:
    >>> from seoredirects.utils.config import load_config
    >>> load_config('create_redirect')
    {'file': {'path': 'data/redirects.json'}}
"""

import os
import json
import functools
import urllib.parse
import urllib.request
import logging
from pathlib import Path
from collections.abc import Callable

import boto3
import yaml

from seoredirects.types import AppConfig, LambdaConfiguration
from seoredirects.constants import ENV
from seoredirects.utils.helpers import require_environment
from seoredirects.utils.runtime import running_locally
from seoredirects.exceptions import BadConfigurationError


logger = logging.getLogger(__name__)

DEFAULT_PROFILE_NAME = 'backend-config'

# The local AppConfig agent is only ever reached on these hosts/ports
AGENT_SCHEMES = frozenset({'http', 'https'})
AGENT_HOSTS = frozenset({'localhost', '127.0.0.1', 'host.docker.internal', 'appconfig-agent'})
AGENT_PORTS = frozenset({2772, None})


def app_env() -> str:
    return os.environ.get(ENV.App.APP_ENV, 'local').lower()


def app_name() -> str | None:
    return os.environ.get(ENV.App.APP_NAME)


def project_root() -> Path:
    return Path(os.environ.get(ENV.App.PROJECT_ROOT, Path(__file__).resolve().parents[2]))


def app_prefix() -> str | None:
    name = app_name()
    return f'{name}:{app_env()}' if name is not None else None


def select_backend_config(document: AppConfig, lambda_name: str) -> LambdaConfiguration:
    """Extract `{<active backend>: <settings>}` for a Lambda from a config document."""
    try:
        backend = document['active_backend']
        configs = document['configs']
        lambda_config = configs.get(lambda_name) or configs['default']
        return {backend: lambda_config[backend] or {}}
    except (KeyError, TypeError, AttributeError) as e:
        raise BadConfigurationError(f'Malformed configuration document for {lambda_name!r}') from e


def local_agent_url() -> str:
    """Return `APPCONFIG_AGENT_URL` if set, after checking it points at a local agent."""
    url = os.getenv(ENV.AppConfig.AGENT_URL)
    if not url:
        return ''

    parts = urllib.parse.urlparse(url)
    if parts.scheme not in AGENT_SCHEMES or parts.hostname not in AGENT_HOSTS or parts.port not in AGENT_PORTS:
        raise BadConfigurationError(f'Refusing to fetch configuration from non-local agent {url!r}')
    return url.rstrip('/')


def _from_local_yaml(func: Callable) -> Callable:
    """Decorator: read `config/<APP_ENV>.yml` instead when running locally and the file exists."""

    @functools.wraps(func)
    def wrapper(lambda_name: str) -> LambdaConfiguration:
        path = project_root() / 'config' / f'{app_env()}.yml'
        if not (running_locally() and path.is_file()):
            return func(lambda_name)

        logger.debug('Loading configuration from YAML file.', extra={'path': str(path), 'lambdaName': lambda_name})
        try:
            document = yaml.safe_load(path.read_text(encoding='utf-8')) or {}
        except yaml.YAMLError as e:
            raise BadConfigurationError(f'Invalid YAML in {path}') from e

        return select_backend_config(document, lambda_name)

    return wrapper


def _from_local_agent(func: Callable) -> Callable:  # pragma: no cover
    """Decorator: query a local AppConfig agent instead when running under SAM with `APPCONFIG_AGENT_URL` set."""

    @functools.wraps(func)
    def wrapper(lambda_name: str) -> LambdaConfiguration:
        agent_url = local_agent_url()
        if not (running_locally() and agent_url):
            return func(lambda_name)

        profile = os.getenv(ENV.AppConfig.PROFILE_NAME, DEFAULT_PROFILE_NAME)
        url = f'{agent_url}/applications/{app_name()}/environments/{app_env()}/configurations/{profile}'

        logger.debug('Loading configuration from local AppConfig agent.', extra={'agentUrl': url, 'lambdaName': lambda_name})
        with urllib.request.urlopen(url, timeout=5) as response:  # noqa: S310
            document = json.load(response)

        return select_backend_config(document, lambda_name)

    return wrapper


@_from_local_yaml
@_from_local_agent
@require_environment(ENV.AppConfig.APP_ID, ENV.AppConfig.ENV_ID, ENV.AppConfig.PROFILE_ID)
def load_config(lambda_name: str) -> LambdaConfiguration:
    """Return `{<active backend>: <settings>}` for `lambda_name` (e.g. 'create_redirect', 'sitemap')."""
    logger.debug('Loading configuration from AWS AppConfig.', extra={'lambdaName': lambda_name})

    client = boto3.client('appconfigdata')
    token = client.start_configuration_session(
        ApplicationIdentifier=os.environ[ENV.AppConfig.APP_ID],
        EnvironmentIdentifier=os.environ[ENV.AppConfig.ENV_ID],
        ConfigurationProfileIdentifier=os.environ[ENV.AppConfig.PROFILE_ID],
    )['InitialConfigurationToken']
    payload = client.get_latest_configuration(ConfigurationToken=token)['Configuration'].read()
    document = json.loads(payload.decode('utf-8'))

    logger.debug('Loaded configuration from AWS AppConfig.', extra={'lambdaName': lambda_name, 'build': document.get('build')})
    return select_backend_config(document, lambda_name)
