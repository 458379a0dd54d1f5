from pydantic import BaseModel, field_validator
from typing import Optional
from datetime import datetime, timezone
from schemas.shared import DEFAULT_POST_TAG, allowed_post_tags

def as_utc(v: datetime) -> datetime:
    """SQLite CURRENT_TIMESTAMP text is UTC without an offset."""
    if v.tzinfo is None:
        return v.replace(tzinfo=timezone.utc)
    return v

class Post(BaseModel):
    id: int
    user_id: Optional[int] = None
    title: str
    content: str
    tag: str = DEFAULT_POST_TAG
    created_at: datetime

    @field_validator('created_at')
    @classmethod
    def validate_created_at(cls, v):
        return as_utc(v)

class PostWithStats(Post):
    like_count: int = 0
    comment_count: int = 0
    liked_by_user: bool = False

class Comment(BaseModel):
    id: int
    post_id: int
    user_id: Optional[int] = None
    content: str
    created_at: datetime

    @field_validator('created_at')
    @classmethod
    def validate_created_at(cls, v):
        return as_utc(v)

class CommentWithStats(Comment):
    like_count: int = 0
    liked_by_user: bool = False

class PostDraft(BaseModel):
    """Compose/edit screen input. Storage itself accepts any tag string."""
    title: str
    content: str
    tag: str = DEFAULT_POST_TAG

    @field_validator('title')
    @classmethod
    def validate_title(cls, v):
        if not v or not v.strip():
            raise ValueError('Title cannot be empty')
        return v

    @field_validator('content')
    @classmethod
    def validate_content(cls, v):
        if not v or not v.strip():
            raise ValueError('Content cannot be empty')
        return v

    @field_validator('tag')
    @classmethod
    def validate_tag(cls, v):
        allowed_tags = allowed_post_tags()
        if v not in allowed_tags:
            raise ValueError(f'Tag must be one of: {allowed_tags}')
        return v

class CommentDraft(BaseModel):
    content: str

    @field_validator('content')
    @classmethod
    def validate_content(cls, v):
        if not v or not v.strip():
            raise ValueError('Content cannot be empty')
        return v
