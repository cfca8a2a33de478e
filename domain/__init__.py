"""Domain layer exports."""

from domain.entities import Blog, BlogDraft
from domain.exceptions import (
    DomainError,
    MalformedIdentifierError,
    NotFoundError,
    StoreError,
    ValidationError,
)
from domain.value_objects import FavoriteBlog

__all__ = [
    "Blog",
    "BlogDraft",
    "DomainError",
    "FavoriteBlog",
    "MalformedIdentifierError",
    "NotFoundError",
    "StoreError",
    "ValidationError",
]
