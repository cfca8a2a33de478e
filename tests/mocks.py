"""Mock implementations for testing."""

from __future__ import annotations

from typing import Any, NoReturn

import bson
from bson import ObjectId
from pymongo.errors import PyMongoError

from application.ports.repositories.blog_store import BlogStore
from domain.entities.blog import Blog, BlogDraft
from domain.exceptions import StoreError

# ---------------------------------------------------------------------------
# Store mocks
# ---------------------------------------------------------------------------


class RecordingBlogStore(BlogStore):
    """Wraps a real store and records which methods were called."""

    def __init__(self, inner: BlogStore) -> None:
        self.inner = inner
        self.calls: list[str] = []

    def list_all(self) -> list[Blog]:
        self.calls.append("list_all")
        return self.inner.list_all()

    def find_by_id(self, blog_id: str) -> Blog | None:
        self.calls.append("find_by_id")
        return self.inner.find_by_id(blog_id)

    def insert(self, draft: BlogDraft) -> Blog:
        self.calls.append("insert")
        return self.inner.insert(draft)

    def delete_by_id(self, blog_id: str) -> bool:
        self.calls.append("delete_by_id")
        return self.inner.delete_by_id(blog_id)

    def update_by_id(self, blog_id: str, fields: dict[str, Any]) -> Blog | None:
        self.calls.append("update_by_id")
        return self.inner.update_by_id(blog_id, fields)


class UnavailableBlogStore(BlogStore):
    """A store whose backend is down; every call raises StoreError."""

    def _fail(self) -> NoReturn:
        msg = "backend unavailable"
        raise StoreError(msg)

    def list_all(self) -> list[Blog]:
        self._fail()

    def find_by_id(self, blog_id: str) -> Blog | None:
        self._fail()

    def insert(self, draft: BlogDraft) -> Blog:
        self._fail()

    def delete_by_id(self, blog_id: str) -> bool:
        self._fail()

    def update_by_id(self, blog_id: str, fields: dict[str, Any]) -> Blog | None:
        self._fail()


# ---------------------------------------------------------------------------
# pymongo collection double
# ---------------------------------------------------------------------------


class _FakeCursor:
    def __init__(self, docs: list[dict[str, Any]]) -> None:
        self._docs = docs

    def sort(self, key: str, direction: int) -> _FakeCursor:
        return _FakeCursor(sorted(self._docs, key=lambda d: d[key], reverse=direction < 0))

    def __iter__(self):  # type: ignore[no-untyped-def]
        return iter([dict(d) for d in self._docs])


class _InsertOneResult:
    def __init__(self, inserted_id: Any) -> None:
        self.inserted_id = inserted_id


class _DeleteResult:
    def __init__(self, deleted_count: int) -> None:
        self.deleted_count = deleted_count


class _FakeDatabase:
    def __init__(self, collection: FakeMongoCollection) -> None:
        self._collection = collection
        self.commands: list[str] = []

    def command(self, name: str) -> dict[str, Any]:
        self.commands.append(name)
        self._collection._check()  # noqa: SLF001
        return {"ok": 1.0}


class FakeMongoCollection:
    """Just enough of pymongo's Collection for MongoBlogStore.

    Writes go through ``bson.encode`` so values MongoDB cannot store fail
    the same way they would against a server.
    """

    def __init__(self, fail: bool = False) -> None:
        self.docs: list[dict[str, Any]] = []
        self.fail = fail
        self.database = _FakeDatabase(self)

    def _check(self) -> None:
        if self.fail:
            msg = "connection refused"
            raise PyMongoError(msg)

    def find(self) -> _FakeCursor:
        self._check()
        return _FakeCursor(self.docs)

    def find_one(self, query: dict[str, Any]) -> dict[str, Any] | None:
        self._check()
        for doc in self.docs:
            if doc["_id"] == query["_id"]:
                return dict(doc)
        return None

    def insert_one(self, doc: dict[str, Any]) -> _InsertOneResult:
        self._check()
        bson.encode(doc)
        doc["_id"] = ObjectId()
        self.docs.append(dict(doc))
        return _InsertOneResult(doc["_id"])

    def delete_one(self, query: dict[str, Any]) -> _DeleteResult:
        self._check()
        before = len(self.docs)
        self.docs = [d for d in self.docs if d["_id"] != query["_id"]]
        return _DeleteResult(before - len(self.docs))

    def find_one_and_update(
        self,
        query: dict[str, Any],
        update: dict[str, Any],
        return_document: Any,  # noqa: ARG002
    ) -> dict[str, Any] | None:
        self._check()
        bson.encode(update["$set"])
        for doc in self.docs:
            if doc["_id"] == query["_id"]:
                doc.update(update["$set"])
                return dict(doc)
        return None
