from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from domain.entities.blog import Blog


class FavoriteBlog(BaseModel):
    """The most liked post, reduced to the fields worth showing.

    Build it with :meth:`from_blog`; the identifier and url are never copied.
    """

    model_config = ConfigDict(frozen=True)

    title: str
    author: str | None = None
    likes: int

    @classmethod
    def from_blog(cls, blog: Blog) -> FavoriteBlog:
        return cls(title=blog.title, author=blog.author, likes=blog.likes)
