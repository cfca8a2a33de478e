from .in_memory_blog_store import InMemoryBlogStore
from .mongo_blog_store import MongoBlogStore

__all__ = ["InMemoryBlogStore", "MongoBlogStore"]
