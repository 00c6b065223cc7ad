"""Abstract base class for redirect data access objects (DAOs).

This class establishes a consistent contract for all redirect DAO implementations,
regardless of the underlying storage mechanism (JSON file, DynamoDB, Redis).

Responsibilities:
    - Provide an interface for storing, retrieving and deleting RedirectModel objects keyed by slug.
    - Standardize error handling across data store implementations:
      reads degrade to "absent"/"empty", writes raise DataStoreError.
    - Enforce a consistent API for use by the RedirectService.

Example:
    Typical usage with a datastore-specific implementation:

        >>> from seoredirects.models import RedirectModel
        >>> from seoredirects.dao import RedirectFileDAO

        >>> dao = RedirectFileDAO('data/redirects.json')

        >>> redirect = RedirectModel(
        ...     title='Hello World',
        ...     desc='Test **bold**',
        ...     url='https://example.com',
        ... )
        >>> dao.save('hello-world', redirect)

        >>> dao.get('hello-world').url
        'https://example.com'

        >>> dao.delete('hello-world')
        True
        >>> dao.get('hello-world') is None
        True
"""

from abc import ABC, abstractmethod

from seoredirects.models import RedirectModel


class RedirectBaseDAO(ABC):
    """Interface for redirect data access objects (DAOs).

    Methods:
        get(slug: str) -> RedirectModel | None:
            Retrieve the redirect stored under a slug.
            Returns None if not found or if the data store can't be read.

        get_all() -> dict[str, RedirectModel]:
            Retrieve every stored redirect keyed by slug.
            Returns an empty mapping if the data store can't be read.

        save(slug: str, redirect: RedirectModel) -> RedirectBaseDAO:
            Insert or fully replace the redirect stored under a slug.
            Raises DataStoreError on write failure.

        delete(slug: str) -> bool:
            Remove the redirect stored under a slug.
            Returns False if the slug was not stored.
            Raises DataStoreError on write failure.

    Subclassing:
        Datastore-specific implementations (e.g., RedirectFileDAO or
        RedirectDynamoDBDAO) must extend this class and implement all
        abstract methods.

    NOTE:
        - There is no concurrency control. Concurrent writers race and the
          last writer wins.
    """

    @abstractmethod
    def get(self, slug: str) -> RedirectModel | None:
        """Retrieve a redirect from the data store by its slug.

        Args:
            slug (str):
                The slug of the redirect to be retrieved.

        Returns:
            RedirectModel | None: The stored redirect if found, otherwise None.
        """
        pass

    @abstractmethod
    def get_all(self) -> dict[str, RedirectModel]:
        """Retrieve all redirects from the data store.

        Returns:
            dict[str, RedirectModel]: Mapping of slug to redirect. Empty if nothing is stored.
        """
        pass

    @abstractmethod
    def save(self, slug: str, redirect: RedirectModel) -> 'RedirectBaseDAO':
        """Insert or replace a redirect in the data store.

        Args:
            slug (str):
                The slug under which the redirect is stored.

            redirect (RedirectModel):
                The full record to store. Existing records are overwritten.

        Returns:
            RedirectBaseDAO: self (for method chaining)

        Raises:
            DataStoreError:
                If the data store can't be written.
        """
        pass

    @abstractmethod
    def delete(self, slug: str) -> bool:
        """Delete a redirect from the data store.

        Args:
            slug (str):
                The slug of the redirect to be deleted.

        Returns:
            bool: True if the redirect existed and was removed, False otherwise.

        Raises:
            DataStoreError:
                If the data store can't be written.
        """
        pass
