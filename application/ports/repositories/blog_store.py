"""Store interface (port) for blog persistence."""

from abc import ABC, abstractmethod
from typing import Any

from domain.entities.blog import Blog, BlogDraft


class BlogStore(ABC):
    """Interface for blog persistence.

    Every write is atomic for a single blog: readers never observe a
    half-applied insert, update or delete.

    Implementations raise domain exceptions so that callers can tell the
    failure kinds apart:
    - MalformedIdentifierError: When an id does not fit the store's key space
    - StoreError: When infrastructure operations fail (DB, network, etc.)
    """

    @abstractmethod
    def list_all(self) -> list[Blog]:
        """Return every stored blog in insertion order.

        Raises:
            StoreError: If the read fails.

        """

    @abstractmethod
    def find_by_id(self, blog_id: str) -> Blog | None:
        """Return the blog with the given id, or None if there is none.

        Raises:
            MalformedIdentifierError: If the id is not a valid key.
            StoreError: If the read fails.

        """

    @abstractmethod
    def insert(self, draft: BlogDraft) -> Blog:
        """Persist a new blog under a freshly assigned id and return it.

        Raises:
            StoreError: If the write fails.

        """

    @abstractmethod
    def delete_by_id(self, blog_id: str) -> bool:
        """Remove the blog if present. Returns whether a record was removed.

        Raises:
            MalformedIdentifierError: If the id is not a valid key.
            StoreError: If the write fails.

        """

    @abstractmethod
    def update_by_id(self, blog_id: str, fields: dict[str, Any]) -> Blog | None:
        """Apply a partial update and return the updated blog, or None if absent.

        Raises:
            MalformedIdentifierError: If the id is not a valid key.
            StoreError: If the write fails.

        """
