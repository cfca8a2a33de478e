from .favorite_blog import FavoriteBlog

__all__ = ["FavoriteBlog"]
