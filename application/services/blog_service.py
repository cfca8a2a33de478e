from typing import Any

import structlog
from returns.result import Failure, Result, Success

from application.dtos.blog_dtos import BlogResponse, CreateBlogRequest
from application.dtos.errors import AppError
from application.mappers.blog_mappers import BlogMapper
from application.ports.repositories.blog_store import BlogStore
from domain.entities.blog import BlogDraft
from domain.exceptions import MalformedIdentifierError, ValidationError

logger = structlog.get_logger()

# BSON stores integers as signed 64-bit
MAX_LIKES = 2**63 - 1

BlogResponses = list[BlogResponse]


def _require_text(value: Any, field: str) -> str:
    if not isinstance(value, str) or not value.strip():
        msg = f"{field} must be provided"
        raise ValidationError(msg)
    return value


def _require_likes(value: Any) -> int:
    # bool is an int subclass; floats such as 5.0 are rejected as well
    if isinstance(value, bool) or not isinstance(value, int):
        msg = "likes must be an integer"
        raise ValidationError(msg)
    if value < 0:
        msg = "likes must be non-negative"
        raise ValidationError(msg)
    if value > MAX_LIKES:
        msg = "likes is too large"
        raise ValidationError(msg)
    return value


def _build_draft(request: CreateBlogRequest) -> BlogDraft:
    title = _require_text(request.title, "title")
    url = _require_text(request.url, "url")
    if request.author is not None and not isinstance(request.author, str):
        msg = "author must be a string"
        raise ValidationError(msg)
    likes = 0 if request.likes is None else _require_likes(request.likes)
    return BlogDraft(title=title, author=request.author, url=url, likes=likes)


class BlogService:
    """Validated CRUD operations over a :class:`BlogStore`.

    Every input check runs before the store is touched, so a rejected request
    never leaves a partial write behind. ``StoreError`` is not caught here; it
    reaches the caller unchanged.
    """

    def __init__(self, blog_store: BlogStore) -> None:
        self.blog_store = blog_store

    async def create(self, request: CreateBlogRequest) -> Result[BlogResponse, AppError]:
        try:
            draft = _build_draft(request)
        except ValidationError as e:
            logger.warning("create_blog_validation_error", error=str(e))
            return Failure(AppError("validation", f"Validation error: {e!s}"))

        blog = self.blog_store.insert(draft)
        logger.info("create_blog_success", blog_id=blog.id)
        return Success(BlogMapper.to_blog_response(blog))

    async def list(self) -> Result[BlogResponses, AppError]:
        blogs = self.blog_store.list_all()
        return Success([BlogMapper.to_blog_response(blog) for blog in blogs])

    async def get(self, blog_id: str) -> Result[BlogResponse, AppError]:
        try:
            blog = self.blog_store.find_by_id(blog_id)
        except MalformedIdentifierError as e:
            logger.warning("malformed_blog_id", blog_id=blog_id, error=str(e))
            return Failure(AppError("malformed_id", f"Malformed id: {e!s}"))

        if blog is None:
            return Failure(AppError("not_found", f"Blog not found: {blog_id}"))
        return Success(BlogMapper.to_blog_response(blog))

    async def remove(self, blog_id: str) -> Result[None, AppError]:
        try:
            logger.info("remove_blog_start", blog_id=blog_id)
            removed = self.blog_store.delete_by_id(blog_id)
        except MalformedIdentifierError as e:
            logger.warning("malformed_blog_id", blog_id=blog_id, error=str(e))
            return Failure(AppError("malformed_id", f"Malformed id: {e!s}"))

        if not removed:
            logger.warning("blog_not_found", blog_id=blog_id)
            return Failure(AppError("not_found", f"Blog not found: {blog_id}"))

        logger.info("remove_blog_success", blog_id=blog_id)
        return Success(None)

    async def update_likes(self, blog_id: str, likes: Any) -> Result[BlogResponse, AppError]:
        try:
            likes = _require_likes(likes)
        except ValidationError as e:
            logger.warning("update_likes_validation_error", blog_id=blog_id, error=str(e))
            return Failure(AppError("validation", f"Validation error: {e!s}"))

        try:
            blog = self.blog_store.update_by_id(blog_id, {"likes": likes})
        except MalformedIdentifierError as e:
            logger.warning("malformed_blog_id", blog_id=blog_id, error=str(e))
            return Failure(AppError("malformed_id", f"Malformed id: {e!s}"))

        if blog is None:
            logger.warning("blog_not_found", blog_id=blog_id)
            return Failure(AppError("not_found", f"Blog not found: {blog_id}"))

        logger.info("update_likes_success", blog_id=blog_id, likes=likes)
        return Success(BlogMapper.to_blog_response(blog))
