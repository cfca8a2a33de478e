from lagom import Container

from application.ports.repositories.blog_store import BlogStore
from application.queries.blog_queries import GetBlogStatisticsQuery
from application.services.blog_service import BlogService
from infrastructure.config import Settings, settings
from infrastructure.stores.in_memory_blog_store import InMemoryBlogStore
from infrastructure.stores.mongo_blog_store import MongoBlogStore


def _create_blog_store(config: Settings) -> BlogStore:
    if config.store_backend == "memory":
        return InMemoryBlogStore()
    return MongoBlogStore.from_settings(config)


def create_container(config: Settings = settings) -> Container:
    container = Container()

    # Register Store
    # One instance per container; the in-memory backend keeps its data there
    container[BlogStore] = _create_blog_store(config)

    # Register Service and Queries
    container[BlogService] = lambda c: BlogService(blog_store=c[BlogStore])
    container[GetBlogStatisticsQuery] = lambda c: GetBlogStatisticsQuery(
        blog_store=c[BlogStore],
    )

    return container
