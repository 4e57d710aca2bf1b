"""
Live Session API Endpoints
"""
# ruff: noqa: B008 - FastAPI Depends in function defaults is standard pattern

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from harmonylearn import storage
from harmonylearn.core.database import get_db
from harmonylearn.core.errors import NotFoundError
from harmonylearn.core.models import LiveSession
from harmonylearn.core.schemas import (
    LiveSessionCreate,
    LiveSessionSchema,
    LiveSessionUpdate,
    MessageResponse,
)

router = APIRouter()


@router.get("", response_model=list[LiveSessionSchema])
async def list_live_sessions(
    classroom_id: int | None = Query(None, alias="classroomId"),
    mentor_id: int | None = Query(None, alias="mentorId"),
    db: AsyncSession = Depends(get_db),
) -> list[LiveSession]:
    return await storage.list_live_sessions(db, classroom_id=classroom_id, mentor_id=mentor_id)


@router.get("/{session_id}", response_model=LiveSessionSchema)
async def get_live_session(session_id: int, db: AsyncSession = Depends(get_db)) -> LiveSession:
    live_session = await storage.get_live_session_by_id(db, session_id)
    if not live_session:
        raise NotFoundError("Live session", session_id)
    return live_session


@router.post("", response_model=LiveSessionSchema, status_code=status.HTTP_201_CREATED)
async def create_live_session(
    session_data: LiveSessionCreate, db: AsyncSession = Depends(get_db)
) -> LiveSession:
    return await storage.create_live_session(db, session_data)


@router.patch("/{session_id}", response_model=LiveSessionSchema)
async def update_live_session(
    session_id: int, session_data: LiveSessionUpdate, db: AsyncSession = Depends(get_db)
) -> LiveSession:
    """Update status, attendance or recording details."""
    return await storage.update_live_session(db, session_id, session_data)


@router.delete("/{session_id}", response_model=MessageResponse)
async def delete_live_session(
    session_id: int, db: AsyncSession = Depends(get_db)
) -> MessageResponse:
    await storage.delete_live_session(db, session_id)
    return MessageResponse(message="Live session deleted successfully")
