"""
User API Endpoints
"""
# ruff: noqa: B008 - FastAPI Depends in function defaults is standard pattern

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from harmonylearn import storage
from harmonylearn.core.database import get_db
from harmonylearn.core.errors import NotFoundError
from harmonylearn.core.models import User
from harmonylearn.core.schemas import (
    MessageResponse,
    UserCreate,
    UserDetail,
    UserSchema,
    UserUpdate,
)

router = APIRouter()


@router.get("", response_model=list[UserSchema])
async def list_users(db: AsyncSession = Depends(get_db)) -> list[User]:
    """List all users, newest first."""
    return await storage.list_users(db)


@router.get("/{user_id}", response_model=UserDetail)
async def get_user(user_id: int, db: AsyncSession = Depends(get_db)) -> User:
    """Get a user with mentor profiles, courses and enrollments."""
    user = await storage.get_user_by_id(db, user_id)
    if not user:
        raise NotFoundError("User", user_id)
    return user


@router.post("", response_model=UserSchema, status_code=status.HTTP_201_CREATED)
async def create_user(user_data: UserCreate, db: AsyncSession = Depends(get_db)) -> User:
    """Create a user. The password is hashed before storage."""
    return await storage.create_user(db, user_data)


@router.patch("/{user_id}", response_model=UserSchema)
async def update_user(
    user_id: int, user_data: UserUpdate, db: AsyncSession = Depends(get_db)
) -> User:
    return await storage.update_user(db, user_id, user_data)


@router.delete("/{user_id}", response_model=MessageResponse)
async def delete_user(user_id: int, db: AsyncSession = Depends(get_db)) -> MessageResponse:
    await storage.delete_user(db, user_id)
    return MessageResponse(message="User deleted successfully")
