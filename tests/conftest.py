"""Shared test fixtures and configuration."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from domain.entities.blog import Blog, BlogDraft
from infrastructure.stores.in_memory_blog_store import InMemoryBlogStore

INITIAL_BLOGS = [
    BlogDraft(
        title="React patterns",
        author="Michael Chan",
        url="https://reactpatterns.com/",
        likes=7,
    ),
    BlogDraft(
        title="Go To Statement Considered Harmful",
        author="Edsger W. Dijkstra",
        url="http://www.u.arizona.edu/~rubinson/copyright_violations/Go_To_Considered_Harmful.html",
        likes=5,
    ),
    BlogDraft(
        title="Canonical string reduction",
        author="Edsger W. Dijkstra",
        url="http://www.cs.utexas.edu/~EWD/transcriptions/EWD08xx/EWD808.html",
        likes=12,
    ),
]


@pytest.fixture
def blog_store() -> InMemoryBlogStore:
    """Return an empty in-memory store."""
    return InMemoryBlogStore()


@pytest.fixture
def seeded_store() -> InMemoryBlogStore:
    """Return an in-memory store holding the initial blogs."""
    store = InMemoryBlogStore()
    for draft in INITIAL_BLOGS:
        store.insert(draft)
    return store


@pytest.fixture
def sample_blog() -> Blog:
    """Create a sample stored Blog."""
    return Blog(
        id="65f1c0ffee0000000000abcd",
        title="First class tests",
        author="Robert C. Martin",
        url="http://blog.cleancoder.com/uncle-bob/2017/05/05/TestDefinitions.html",
        likes=10,
    )


@pytest.fixture
def make_blog() -> Callable[..., Blog]:
    """Return a factory for stored blogs with predictable ids and urls."""

    def _make_blog(title: str, likes: int, author: str | None = None) -> Blog:
        return Blog(
            id=f"{title}-id",
            title=title,
            author=author,
            url=f"https://example.com/{title}",
            likes=likes,
        )

    return _make_blog
