from datetime import datetime
from typing import Dict, Optional

from pydantic import Field, field_validator

from app.schemas.common.camel_model import CamelModel
from app.services.choices import PostStatus


class PostBase(CamelModel):
    title: str = Field(..., max_length=200)
    content: str = Field(..., max_length=50000)
    summary: Optional[str] = Field(None, max_length=500)
    cover_image: Optional[str] = Field(None, max_length=200)
    status: Optional[PostStatus] = None
    allow_comments: Optional[bool] = None
    featured: Optional[bool] = None
    tags: Optional[str] = Field(None, max_length=500)

    @field_validator("title", "content")
    @classmethod
    def not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value


class PostCreate(PostBase):
    pass


class PostUpdate(PostBase):
    # full replacement: the status is overwritten too
    status: PostStatus


class PostOut(CamelModel):
    id: int
    title: str
    content: str
    summary: Optional[str] = None
    cover_image: Optional[str] = None
    status: PostStatus
    allow_comments: Optional[bool] = None
    featured: Optional[bool] = None
    tags: Optional[str] = None
    author_id: Optional[int] = None
    author_name: Optional[str] = None
    author_avatar: Optional[str] = None
    view_count: int = 0
    like_count: int = 0
    comment_count: int = 0
    display_order: Optional[int] = None
    published_at: Optional[datetime] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class PostStatistics(CamelModel):
    total_posts: int
    status_counts: Dict[str, int]
    total_views: int
    total_likes: int
    total_comments: int
