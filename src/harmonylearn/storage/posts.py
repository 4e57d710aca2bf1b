"""
Community Feed Storage
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from harmonylearn.core.models import Post, PostComment
from harmonylearn.core.schemas import CommentCreate, PostCreate, PostUpdate
from harmonylearn.core.validation import validate_payload

from .base import apply_changes, changed_fields, commit, delete_row, fetch_all, fetch_one, require

POST_OPTIONS = (
    selectinload(Post.user),
    selectinload(Post.post_comments).selectinload(PostComment.user),
)


async def list_posts(session: AsyncSession) -> list[Post]:
    """Feed, newest first, with author and comment thread."""
    return await fetch_all(
        session, select(Post).options(*POST_OPTIONS).order_by(Post.created_at.desc(), Post.id.desc())
    )


async def get_post_by_id(session: AsyncSession, post_id: int) -> Post | None:
    return await fetch_one(session, select(Post).where(Post.id == post_id).options(*POST_OPTIONS))


async def create_post(session: AsyncSession, data: PostCreate | Mapping[str, Any]) -> Post:
    post_data = validate_payload(PostCreate, data)
    post = Post(**post_data.model_dump(), likes=0, comments=0, shares=0)
    session.add(post)
    await commit(session, "Post")

    return require(await get_post_by_id(session, post.id), "Post", post.id)


async def update_post(
    session: AsyncSession, post_id: int, changes: PostUpdate | Mapping[str, Any]
) -> Post:
    values = changed_fields(validate_payload(PostUpdate, changes))
    post = require(await session.get(Post, post_id), "Post", post_id)
    apply_changes(post, values)
    await commit(session, "Post")

    return require(await get_post_by_id(session, post_id), "Post", post_id)


async def delete_post(session: AsyncSession, post_id: int) -> None:
    await delete_row(session, Post, post_id, "Post")


async def create_post_comment(
    session: AsyncSession, post_id: int, data: CommentCreate | Mapping[str, Any]
) -> PostComment:
    """Add a comment and bump the post's comment counter."""
    comment_data = validate_payload(CommentCreate, data)
    post = require(await session.get(Post, post_id), "Post", post_id)

    comment = PostComment(post_id=post_id, **comment_data.model_dump())
    session.add(comment)
    post.comments = (post.comments or 0) + 1
    await commit(session, "Comment")

    return require(
        await fetch_one(
            session,
            select(PostComment)
            .where(PostComment.id == comment.id)
            .options(selectinload(PostComment.user)),
        ),
        "Comment",
        comment.id,
    )
