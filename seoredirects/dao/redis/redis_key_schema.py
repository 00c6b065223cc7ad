import functools
from collections.abc import Callable


__all__ = ['RedisKeySchema']  # hide internal decorator prefix_key from imports


def prefix_key(func: Callable) -> Callable:
    @functools.wraps(func)
    def wrapper(self, *args, **kwargs) -> str:
        key = func(self, *args, **kwargs)
        return f'{self.prefix}:{key}' if self.prefix is not None else key

    return wrapper


class RedisKeySchema:
    """Provide standardized Redis keys for storing redirects.

    An optional prefix can be provided to namespace all generated keys,
    e.g. "seoredirects:prod" or "seoredirects:dev".

    Example:
        >>> keys = RedisKeySchema(prefix='seoredirects:dev')
        >>> keys.redirect_key('hello-world')
        'seoredirects:dev:redirects:slug:hello-world'
        >>> keys.index_key()
        'seoredirects:dev:redirects:index'
    """

    def __init__(self, prefix: str | None = None):
        if prefix is not None and not isinstance(prefix, str):
            raise TypeError(f'Prefix must be of type string (given type: {type(prefix)}).')

        self.prefix = prefix

    @prefix_key
    def redirect_key(self, slug: str) -> str:
        return f'redirects:slug:{slug}'

    @prefix_key
    def index_key(self) -> str:
        return 'redirects:index'
