from pydantic import BaseModel, ConfigDict, Field


class BlogDraft(BaseModel):
    """A validated blog post that has not been stored yet.

    Drafts carry no identifier; the store assigns one on insert.
    """

    model_config = ConfigDict(frozen=True)

    title: str = Field(..., description="Title of the post")
    author: str | None = Field(None, description="Author of the post, if known")
    url: str = Field(..., description="Location of the post")
    likes: int = Field(0, description="Number of likes")


class Blog(BlogDraft):
    """A stored blog post.

    ``id`` is opaque to everything above the store and never changes once assigned.
    """

    id: str = Field(..., description="Store-assigned identifier")
