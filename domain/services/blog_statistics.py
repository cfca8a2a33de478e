"""Pure aggregations over an in-memory sequence of blogs."""

from collections.abc import Sequence

from domain.entities.blog import Blog
from domain.value_objects.favorite_blog import FavoriteBlog


def total_likes(blogs: Sequence[Blog]) -> int:
    """Sum the likes of every blog. An empty sequence sums to 0."""
    return sum(blog.likes for blog in blogs)


def favorite_blog(blogs: Sequence[Blog]) -> FavoriteBlog | None:
    """Return the most liked blog as a :class:`FavoriteBlog`.

    Ties go to the last of the tied blogs in input order. Returns ``None``
    for an empty sequence.
    """
    if not blogs:
        return None

    favorite = blogs[0]
    for blog in blogs[1:]:
        # >= so that the later blog wins a tie
        if blog.likes >= favorite.likes:
            favorite = blog

    return FavoriteBlog.from_blog(favorite)
