"""
Community Post API Endpoints
"""
# ruff: noqa: B008 - FastAPI Depends in function defaults is standard pattern

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from harmonylearn import storage
from harmonylearn.core.database import get_db
from harmonylearn.core.errors import NotFoundError
from harmonylearn.core.models import Post, PostComment
from harmonylearn.core.schemas import (
    CommentCreate,
    CommentSchema,
    MessageResponse,
    PostCreate,
    PostSchema,
    PostUpdate,
)

router = APIRouter()


@router.get("", response_model=list[PostSchema])
async def list_posts(db: AsyncSession = Depends(get_db)) -> list[Post]:
    """Community feed, newest first."""
    return await storage.list_posts(db)


@router.get("/{post_id}", response_model=PostSchema)
async def get_post(post_id: int, db: AsyncSession = Depends(get_db)) -> Post:
    post = await storage.get_post_by_id(db, post_id)
    if not post:
        raise NotFoundError("Post", post_id)
    return post


@router.post("", response_model=PostSchema, status_code=status.HTTP_201_CREATED)
async def create_post(post_data: PostCreate, db: AsyncSession = Depends(get_db)) -> Post:
    return await storage.create_post(db, post_data)


@router.patch("/{post_id}", response_model=PostSchema)
async def update_post(
    post_id: int, post_data: PostUpdate, db: AsyncSession = Depends(get_db)
) -> Post:
    return await storage.update_post(db, post_id, post_data)


@router.delete("/{post_id}", response_model=MessageResponse)
async def delete_post(post_id: int, db: AsyncSession = Depends(get_db)) -> MessageResponse:
    await storage.delete_post(db, post_id)
    return MessageResponse(message="Post deleted successfully")


@router.post(
    "/{post_id}/comments", response_model=CommentSchema, status_code=status.HTTP_201_CREATED
)
async def create_comment(
    post_id: int, comment_data: CommentCreate, db: AsyncSession = Depends(get_db)
) -> PostComment:
    return await storage.create_post_comment(db, post_id, comment_data)
