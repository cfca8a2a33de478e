from application.dtos.blog_dtos import BlogResponse, FavoriteBlogResponse
from domain.entities.blog import Blog
from domain.value_objects.favorite_blog import FavoriteBlog


class BlogMapper:
    @staticmethod
    def to_blog_response(blog: Blog) -> BlogResponse:
        """Map a Blog entity to a BlogResponse DTO.

        Args:
            blog: The Blog entity to map

        Returns:
            BlogResponse: The mapped response DTO, identifier exposed as ``id``

        """
        return BlogResponse(
            id=blog.id,
            title=blog.title,
            author=blog.author,
            url=blog.url,
            likes=blog.likes,
        )

    @staticmethod
    def to_favorite_blog_response(favorite: FavoriteBlog) -> FavoriteBlogResponse:
        return FavoriteBlogResponse(
            title=favorite.title,
            author=favorite.author,
            likes=favorite.likes,
        )
