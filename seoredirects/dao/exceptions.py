from seoredirects.exceptions import SEORedirectsError


class DAOError(SEORedirectsError):
    """Generic base class for DAO-related exceptions."""

    error_code = 'dao:dao_error'


class RedirectNotFoundError(DAOError):
    """Raised when a redirect slug is not found in the data store."""

    error_code = 'dao:redirect_not_found_error'


class DataStoreError(DAOError):
    """Raised when the data store encounters an error.

    Examples include unwritable files, connection issues, throttling and
    missing tables.
    """

    error_code = 'dao:data_store_error'
