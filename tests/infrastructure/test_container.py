"""Tests for configuration and dependency wiring."""

from __future__ import annotations

from application.ports.repositories.blog_store import BlogStore
from application.queries.blog_queries import GetBlogStatisticsQuery
from application.services.blog_service import BlogService
from infrastructure.config import Settings
from infrastructure.di.container import create_container
from infrastructure.stores.in_memory_blog_store import InMemoryBlogStore
from infrastructure.stores.mongo_blog_store import MongoBlogStore


class TestSettings:
    def test_reads_environment(self, monkeypatch) -> None:
        monkeypatch.setenv("STORE_BACKEND", "memory")
        monkeypatch.setenv("MONGO_DB", "bloglist_test")

        config = Settings()

        assert config.store_backend == "memory"
        assert config.mongo_db == "bloglist_test"


class TestContainer:
    def test_memory_backend_wiring(self) -> None:
        container = create_container(Settings(STORE_BACKEND="memory"))

        store = container[BlogStore]
        assert isinstance(store, InMemoryBlogStore)
        assert isinstance(container[BlogService], BlogService)
        assert isinstance(container[GetBlogStatisticsQuery], GetBlogStatisticsQuery)

    def test_services_share_one_store(self) -> None:
        container = create_container(Settings(STORE_BACKEND="memory"))

        assert container[BlogService].blog_store is container[BlogStore]
        assert container[GetBlogStatisticsQuery].blog_store is container[BlogStore]

    def test_mongo_backend_wiring(self) -> None:
        config = Settings(STORE_BACKEND="mongo", MONGO_BLOGS_COLLECTION="posts")

        store = create_container(config)[BlogStore]

        assert isinstance(store, MongoBlogStore)
        assert store.blogs.name == "posts"
