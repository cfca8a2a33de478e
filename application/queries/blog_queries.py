from returns.result import Result, Success

from application.dtos.blog_dtos import BlogStatisticsResponse
from application.dtos.errors import AppError
from application.mappers.blog_mappers import BlogMapper
from application.ports.repositories.blog_store import BlogStore
from domain.services.blog_statistics import favorite_blog, total_likes


class GetBlogStatisticsQuery:
    def __init__(self, blog_store: BlogStore) -> None:
        self.blog_store = blog_store

    async def execute(self) -> Result[BlogStatisticsResponse, AppError]:
        blogs = self.blog_store.list_all()
        favorite = favorite_blog(blogs)
        return Success(
            BlogStatisticsResponse(
                blog_count=len(blogs),
                total_likes=total_likes(blogs),
                favorite=BlogMapper.to_favorite_blog_response(favorite) if favorite else {},
            ),
        )
