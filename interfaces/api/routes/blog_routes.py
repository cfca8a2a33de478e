from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends, status
from lagom import Container

from application.dtos.blog_dtos import (
    BlogResponse,
    BlogStatisticsResponse,
    CreateBlogRequest,
    UpdateLikesRequest,
)
from application.queries.blog_queries import GetBlogStatisticsQuery
from application.services.blog_service import BlogService
from interfaces.api.middleware import handle_service_errors
from interfaces.dependencies import get_container

router = APIRouter(prefix="/api/blogs", tags=["blogs"])


@router.get("", status_code=status.HTTP_200_OK)
@handle_service_errors
async def list_blogs(
    container: Annotated[Container, Depends(get_container)],
) -> list[BlogResponse]:
    """List every stored blog."""
    service = container[BlogService]
    return await service.list()


@router.post("", status_code=status.HTTP_201_CREATED)
@handle_service_errors
async def create_blog(
    container: Annotated[Container, Depends(get_container)],
    body: Annotated[Any, Body()] = None,
) -> BlogResponse:
    """Create a new blog.

    Returns:
        201 Created: Blog successfully created
        400 Bad Request: Missing title or url (including a missing or non-object
            body), or invalid likes
        500 Internal Server Error: Store failure (DB unavailable, etc.)

    """
    service = container[BlogService]
    return await service.create(CreateBlogRequest.from_body(body))


@router.get("/stats", status_code=status.HTTP_200_OK)
@handle_service_errors
async def get_blog_statistics(
    container: Annotated[Container, Depends(get_container)],
) -> BlogStatisticsResponse:
    """Total likes and the most liked blog across the whole store."""
    query = container[GetBlogStatisticsQuery]
    return await query.execute()


@router.get("/{blog_id}", status_code=status.HTTP_200_OK)
@handle_service_errors
async def get_blog(
    blog_id: str,
    container: Annotated[Container, Depends(get_container)],
) -> BlogResponse:
    """Retrieve a blog by ID."""
    service = container[BlogService]
    return await service.get(blog_id)


@router.delete("/{blog_id}", status_code=status.HTTP_204_NO_CONTENT)
@handle_service_errors
async def delete_blog(
    blog_id: str,
    container: Annotated[Container, Depends(get_container)],
) -> None:
    """Delete a blog.

    Returns:
        204 No Content: Blog removed
        404 Not Found: No blog with this id

    """
    service = container[BlogService]
    return await service.remove(blog_id)


@router.put("/{blog_id}", status_code=status.HTTP_200_OK)
@handle_service_errors
async def update_blog_likes(
    blog_id: str,
    container: Annotated[Container, Depends(get_container)],
    body: Annotated[Any, Body()] = None,
) -> BlogResponse:
    """Replace the like count of a blog.

    Returns:
        200 OK: Updated blog
        400 Bad Request: likes is not a non-negative integer
        404 Not Found: No blog with this id

    """
    service = container[BlogService]
    request = UpdateLikesRequest.from_body(body)
    return await service.update_likes(blog_id, request.likes)
