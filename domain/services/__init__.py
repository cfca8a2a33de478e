from .blog_statistics import favorite_blog, total_likes

__all__ = ["favorite_blog", "total_likes"]
