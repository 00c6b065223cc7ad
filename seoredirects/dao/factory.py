"""Build the configured redirect DAO from a Lambda's app config section.

Example:
    >>> redirect_dao({'file': {'path': 'data/redirects.json'}})
    <RedirectFileDAO path='data/redirects.json'>
    >>> redirect_dao({'dynamodb': {'table_name': 'seo-redirects', 'region_name': 'eu-west-1'}})
    <RedirectDynamoDBDAO table='seo-redirects'>
"""

import logging
from pathlib import Path

from botocore.exceptions import BotoCoreError, ClientError

from seoredirects.constants import Backend, Defaults
from seoredirects.types import LambdaConfiguration
from seoredirects.exceptions import BadConfigurationError, ConfigurationError
from seoredirects.dao.exceptions import DAOError
from seoredirects.dao.base import RedirectBaseDAO
from seoredirects.dao.file import RedirectFileDAO
from seoredirects.dao.dynamodb import RedirectDynamoDBDAO
from seoredirects.dao.redis import RedirectRedisDAO
from seoredirects.utils.config import app_prefix, project_root


logger = logging.getLogger(__name__)

# Failures that can occur while loading config and building a DAO
DAO_SETUP_ERRORS = (ConfigurationError, DAOError, BotoCoreError, ClientError)


def redirect_dao(app_config: LambdaConfiguration) -> RedirectBaseDAO:
    """Instantiate the DAO for the single backend named in `app_config`

    Args:
        app_config (dict):
            `{<backend>: <settings>}` as returned by `load_config()`.

    Raises:
        BadConfigurationError:
            If the section doesn't name exactly one known backend.
        DataStoreError:
            If the Redis backend can't be reached.
    """
    if not isinstance(app_config, dict) or len(app_config) != 1:
        raise BadConfigurationError(f'Expected exactly one backend section, got {app_config!r}')

    backend, settings = next(iter(app_config.items()))
    settings = settings or {}
    logger.debug('Building redirect DAO.', extra={'backend': backend})

    match backend:
        case Backend.FILE:
            path = Path(settings.get('path', Defaults.REDIRECTS_FILE))
            if not path.is_absolute():
                path = project_root() / path
            return RedirectFileDAO(path)
        case Backend.DYNAMODB:
            return RedirectDynamoDBDAO(
                table_name=settings.get('table_name', Defaults.DYNAMODB_TABLE),
                region_name=settings.get('region_name', Defaults.AWS_REGION),
                endpoint_url=settings.get('endpoint_url'),
            )
        case Backend.REDIS:
            return RedirectRedisDAO(
                redis_host=settings.get('host', 'localhost'),
                redis_port=int(settings.get('port', 6379)),
                redis_db=int(settings.get('db', 0)),
                redis_username=settings.get('username'),
                redis_password=settings.get('password'),
                prefix=app_prefix(),
            )
        case _:
            raise BadConfigurationError(f'Unknown storage backend {backend!r}')
