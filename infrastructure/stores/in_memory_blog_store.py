import re
import threading
from typing import Any
from uuid import uuid4

from application.ports.repositories.blog_store import BlogStore
from domain.entities.blog import Blog, BlogDraft
from domain.exceptions import MalformedIdentifierError

_ID_PATTERN = re.compile(r"^[0-9a-f]{32}$")


class InMemoryBlogStore(BlogStore):
    """Process-local store backed by an insertion-ordered dict.

    Ids are ``uuid4().hex`` strings, so a deleted id is never handed out again.
    A single lock serializes all access.
    """

    def __init__(self) -> None:
        self._blogs: dict[str, Blog] = {}
        self._lock = threading.Lock()

    @staticmethod
    def _check_id(blog_id: str) -> None:
        if not isinstance(blog_id, str) or not _ID_PATTERN.match(blog_id):
            msg = f"{blog_id!r} is not a valid blog id"
            raise MalformedIdentifierError(msg)

    def list_all(self) -> list[Blog]:
        with self._lock:
            return list(self._blogs.values())

    def find_by_id(self, blog_id: str) -> Blog | None:
        self._check_id(blog_id)
        with self._lock:
            return self._blogs.get(blog_id)

    def insert(self, draft: BlogDraft) -> Blog:
        blog = Blog(id=uuid4().hex, **draft.model_dump())
        with self._lock:
            self._blogs[blog.id] = blog
        return blog

    def delete_by_id(self, blog_id: str) -> bool:
        self._check_id(blog_id)
        with self._lock:
            return self._blogs.pop(blog_id, None) is not None

    def update_by_id(self, blog_id: str, fields: dict[str, Any]) -> Blog | None:
        self._check_id(blog_id)
        with self._lock:
            current = self._blogs.get(blog_id)
            if current is None:
                return None
            # Blog is frozen; swap in a new instance so readers see old or new, never both
            updated = current.model_copy(update={k: v for k, v in fields.items() if k != "id"})
            self._blogs[blog_id] = updated
            return updated
