from seoredirects.dao.base import RedirectBaseDAO
from seoredirects.dao.file import RedirectFileDAO
from seoredirects.dao.dynamodb import RedirectDynamoDBDAO
from seoredirects.dao.redis import RedirectRedisDAO
from seoredirects.dao.factory import redirect_dao, DAO_SETUP_ERRORS


__all__ = [
    'RedirectBaseDAO',
    'RedirectFileDAO',
    'RedirectDynamoDBDAO',
    'RedirectRedisDAO',
    'redirect_dao',
    'DAO_SETUP_ERRORS',
]
