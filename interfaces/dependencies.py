"""Lagom container as a FastAPI dependency for the blog routes."""

from functools import lru_cache

from lagom import Container

from infrastructure.di.container import create_container


@lru_cache
def get_container() -> Container:
    """Get the container holding the blog store, service and statistics query.

    Cached so every request shares one store (and, for the in-memory backend,
    one set of blogs). Tests replace it through ``app.dependency_overrides``.
    """
    return create_container()
