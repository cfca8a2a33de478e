from .blog_service import BlogService

__all__ = ["BlogService"]
