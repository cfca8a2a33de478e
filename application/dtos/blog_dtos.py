from typing import Any

from pydantic import BaseModel, Field


class CreateBlogRequest(BaseModel):
    """Request DTO for creating a blog.

    Fields are loosely typed on purpose: required-field, type and range checks
    belong to ``BlogService`` so that they surface as validation errors.
    """

    title: Any = Field(None, description="Title of the post (required)")
    author: Any = Field(None, description="Author of the post")
    url: Any = Field(None, description="Location of the post (required)")
    likes: Any = Field(None, description="Initial number of likes, defaults to 0")

    @classmethod
    def from_body(cls, body: Any) -> "CreateBlogRequest":
        """Build a request from a decoded JSON body of any shape.

        A missing or non-object body yields a request with every field unset.
        """
        return cls.model_validate(body if isinstance(body, dict) else {})


class UpdateLikesRequest(BaseModel):
    """Request DTO for replacing the like count of a blog."""

    likes: Any = Field(None, description="New number of likes (non-negative integer)")

    @classmethod
    def from_body(cls, body: Any) -> "UpdateLikesRequest":
        return cls.model_validate(body if isinstance(body, dict) else {})


class BlogResponse(BaseModel):
    """Response DTO representing a blog."""

    id: str = Field(..., description="Unique identifier of the blog")
    title: str = Field(..., description="Title of the post")
    author: str | None = Field(None, description="Author of the post")
    url: str = Field(..., description="Location of the post")
    likes: int = Field(..., description="Number of likes")


class FavoriteBlogResponse(BaseModel):
    """Response DTO for the most liked blog."""

    title: str
    author: str | None = None
    likes: int


class BlogStatisticsResponse(BaseModel):
    """Aggregate figures over every stored blog."""

    blog_count: int = Field(..., description="Number of stored blogs")
    total_likes: int = Field(..., description="Sum of likes across all blogs")
    favorite: FavoriteBlogResponse | dict[str, Any] = Field(
        default_factory=dict,
        description="Most liked blog, or an empty object when there are no blogs",
    )
