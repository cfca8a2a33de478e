"""MongoDB-backed blog store."""

from __future__ import annotations

from typing import Any

import structlog
from bson import ObjectId
from pymongo import ASCENDING, MongoClient, ReturnDocument
from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from application.ports.repositories.blog_store import BlogStore
from domain.entities.blog import Blog, BlogDraft
from domain.exceptions import MalformedIdentifierError, StoreError
from infrastructure.config import Settings

logger = structlog.get_logger()


def _to_object_id(blog_id: str) -> ObjectId:
    if not isinstance(blog_id, str) or not ObjectId.is_valid(blog_id):
        msg = f"{blog_id!r} is not a valid blog id"
        raise MalformedIdentifierError(msg)
    return ObjectId(blog_id)


def _to_blog(doc: dict[str, Any]) -> Blog:
    """Map a stored document to a Blog, renaming ``_id`` to ``id``."""
    return Blog(
        id=str(doc["_id"]),
        title=doc["title"],
        author=doc.get("author"),
        url=doc["url"],
        likes=doc.get("likes", 0),
    )


class MongoBlogStore(BlogStore):
    """Blogs stored as documents in a single MongoDB collection.

    Ids are ObjectId hex strings. Each write touches one document, which
    MongoDB applies atomically. Driver failures are re-raised as StoreError.
    """

    def __init__(self, collection: Collection) -> None:
        self.blogs = collection

    @classmethod
    def from_settings(cls, settings: Settings) -> MongoBlogStore:
        client: MongoClient = MongoClient(
            settings.mongo_uri,
            tz_aware=True,
            serverSelectionTimeoutMS=settings.mongo_timeout_ms,
        )
        return cls(client[settings.mongo_db][settings.mongo_blogs_collection])

    def list_all(self) -> list[Blog]:
        try:
            # ObjectIds grow with insertion time
            return [_to_blog(doc) for doc in self.blogs.find().sort("_id", ASCENDING)]
        except PyMongoError as e:
            logger.exception("mongo_list_failed", error=str(e))
            msg = "Failed to list blogs"
            raise StoreError(msg) from e

    def find_by_id(self, blog_id: str) -> Blog | None:
        object_id = _to_object_id(blog_id)
        try:
            doc = self.blogs.find_one({"_id": object_id})
        except PyMongoError as e:
            logger.exception("mongo_find_failed", blog_id=blog_id, error=str(e))
            msg = f"Failed to read blog {blog_id}"
            raise StoreError(msg) from e
        return _to_blog(doc) if doc else None

    def insert(self, draft: BlogDraft) -> Blog:
        doc = draft.model_dump()
        try:
            result = self.blogs.insert_one(doc)
        except PyMongoError as e:
            logger.exception("mongo_insert_failed", error=str(e))
            msg = "Failed to insert blog"
            raise StoreError(msg) from e
        return _to_blog({**doc, "_id": result.inserted_id})

    def delete_by_id(self, blog_id: str) -> bool:
        object_id = _to_object_id(blog_id)
        try:
            result = self.blogs.delete_one({"_id": object_id})
        except PyMongoError as e:
            logger.exception("mongo_delete_failed", blog_id=blog_id, error=str(e))
            msg = f"Failed to delete blog {blog_id}"
            raise StoreError(msg) from e
        return result.deleted_count == 1

    def update_by_id(self, blog_id: str, fields: dict[str, Any]) -> Blog | None:
        object_id = _to_object_id(blog_id)
        changes = {k: v for k, v in fields.items() if k not in ("id", "_id")}
        try:
            doc = self.blogs.find_one_and_update(
                {"_id": object_id},
                {"$set": changes},
                return_document=ReturnDocument.AFTER,
            )
        except PyMongoError as e:
            logger.exception("mongo_update_failed", blog_id=blog_id, error=str(e))
            msg = f"Failed to update blog {blog_id}"
            raise StoreError(msg) from e
        return _to_blog(doc) if doc else None

    def ping(self) -> bool:
        try:
            self.blogs.database.command("ping")
        except PyMongoError as e:
            logger.warning("mongo_ping_failed", error=str(e))
            return False
        return True
