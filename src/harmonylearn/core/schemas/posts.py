"""
Community Post Schemas
"""

from datetime import datetime
from typing import Literal

from pydantic import Field

from .common import CamelModel, PartialUpdate, UserAvatarSummary, UserSummary

PostType = Literal["text", "audio"]


class PostCreate(CamelModel):
    user_id: int
    title: str | None = Field(None, max_length=200)
    content: str = Field(..., min_length=1)
    type: PostType = "text"
    audio_file: str | None = Field(None, max_length=500)
    tags: list[str] = Field(default_factory=list)


class PostUpdate(PartialUpdate):
    nullable_fields = frozenset({"title", "audio_file"})

    title: str | None = Field(None, max_length=200)
    content: str | None = Field(None, min_length=1)
    type: PostType | None = None
    audio_file: str | None = None
    tags: list[str] | None = None
    likes: int | None = Field(None, ge=0)
    shares: int | None = Field(None, ge=0)


class CommentCreate(CamelModel):
    user_id: int
    content: str = Field(..., min_length=1)


class CommentSchema(CamelModel):
    id: int
    post_id: int
    user_id: int
    content: str
    created_at: datetime
    user: UserSummary


class PostSchema(CamelModel):
    id: int
    user_id: int
    title: str | None = None
    content: str
    type: str
    audio_file: str | None = None
    tags: list[str] = Field(default_factory=list)
    likes: int
    comments: int
    shares: int
    created_at: datetime
    updated_at: datetime
    user: UserAvatarSummary
    post_comments: list[CommentSchema] = Field(default_factory=list)
