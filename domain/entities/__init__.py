from .blog import Blog, BlogDraft

__all__ = ["Blog", "BlogDraft"]
