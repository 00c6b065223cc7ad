import functools
import logging
from typing import Any
from collections.abc import Callable

from seoredirects.dao.exceptions import DataStoreError


__all__ = ['degrade_on_error']

logger = logging.getLogger(__name__)


def degrade_on_error(default: Callable[[], Any]) -> Callable:
    """Decorator: turn a DataStoreError raised by a DAO read into a default value

    Args:
        default (Callable[[], Any]):
            Factory for the value returned when the read fails (e.g. `dict` or `lambda: None`).

    Example:
        >>> @degrade_on_error(dict)
        ... def get_all(self):
        ...     raise DataStoreError('table is gone')
        >>> get_all(dao)
        {}
    """

    def decorator(method: Callable) -> Callable:
        @functools.wraps(method)
        def wrapper(self, *args, **kwargs):
            try:
                return method(self, *args, **kwargs)
            except DataStoreError as e:
                logger.warning(
                    'Data store read failed. Degrading to default.',
                    extra={'event': 'DATA_STORE_READ_DEGRADED', 'dao': type(self).__name__, 'method': method.__name__, 'error': str(e)},
                )
                return default()

        return wrapper

    return decorator
