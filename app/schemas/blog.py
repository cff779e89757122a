from datetime import datetime
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field

from app.utils import calculate_reading_time

PostStatus = Literal["draft", "scheduled", "published"]
CommentStatus = Literal["pending", "approved", "rejected", "spam"]


class PostCreate(BaseModel):
    title: str = Field(..., min_length=1)
    slug: Optional[str] = None
    excerpt: Optional[str] = None
    content: str = ""
    content_html: Optional[str] = None
    author: Optional[str] = None
    category: Optional[str] = None
    tags: List[str] = Field(default_factory=list)
    featured_image: Optional[str] = None
    status: PostStatus = "draft"
    scheduled_at: Optional[datetime] = None
    meta_title: Optional[str] = None
    meta_description: Optional[str] = None
    focus_keyword: Optional[str] = None
    allow_comments: bool = True
    is_featured: bool = False
    is_sticky: bool = False


class PostUpdate(BaseModel):
    """Partial update: only fields the client sent are applied."""

    title: Optional[str] = Field(default=None, min_length=1)
    slug: Optional[str] = None
    excerpt: Optional[str] = None
    content: Optional[str] = None
    content_html: Optional[str] = None
    author: Optional[str] = None
    category: Optional[str] = None
    tags: Optional[List[str]] = None
    featured_image: Optional[str] = None
    status: Optional[PostStatus] = None
    scheduled_at: Optional[datetime] = None
    meta_title: Optional[str] = None
    meta_description: Optional[str] = None
    focus_keyword: Optional[str] = None
    allow_comments: Optional[bool] = None
    is_featured: Optional[bool] = None
    is_sticky: Optional[bool] = None
    change_summary: Optional[str] = None

    def changes(self) -> dict:
        return self.model_dump(exclude_unset=True)


class PostOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    slug: str
    excerpt: Optional[str] = None
    content: str
    content_html: Optional[str] = None
    author: str
    category: Optional[str] = None
    tags: List[str] = Field(default_factory=list)
    featured_image: Optional[str] = None
    status: str
    scheduled_at: Optional[datetime] = None
    published_at: Optional[datetime] = None
    meta_title: Optional[str] = None
    meta_description: Optional[str] = None
    focus_keyword: Optional[str] = None
    views_count: int = 0
    allow_comments: bool = True
    is_featured: bool = False
    is_sticky: bool = False
    revision_number: int = 0
    created_by: Optional[str] = None
    created_at: datetime
    updated_at: Optional[datetime] = None

    @computed_field
    @property
    def reading_time(self) -> str:
        return calculate_reading_time(self.content)


class RevisionOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    post_id: int
    revision_number: int
    title: str
    content: str
    content_html: Optional[str] = None
    changed_by: Optional[str] = None
    change_summary: Optional[str] = None
    created_at: datetime


class TopPost(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    slug: str
    views_count: int


class Analytics(BaseModel):
    totalPosts: int
    publishedPosts: int
    draftPosts: int
    totalViews: int
    topPosts: List[TopPost] = Field(default_factory=list)


class CategoryOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    slug: str
    description: Optional[str] = None
    created_at: datetime


class TagOut(CategoryOut):
    pass


class MediaCreate(BaseModel):
    filename: str = Field(..., min_length=1)
    originalName: Optional[str] = None
    mimeType: str
    size: int = Field(default=0, ge=0)
    url: str


class MediaOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    filename: str
    original_name: Optional[str] = None
    mime_type: str
    size: int
    url: str
    uploaded_by: Optional[str] = None
    created_at: datetime


class CommentCreate(BaseModel):
    author_name: str = Field(..., min_length=1)
    author_email: Optional[str] = None
    content: str = Field(..., min_length=1)


class CommentStatusUpdate(BaseModel):
    status: CommentStatus


class CommentOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    post_id: int
    author_name: str
    author_email: Optional[str] = None
    content: str
    status: str
    created_at: datetime
    updated_at: Optional[datetime] = None
