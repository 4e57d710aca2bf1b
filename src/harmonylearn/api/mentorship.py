"""
Mentorship API Endpoints

One-to-one mentorship: requests from students, the message thread on each
request, and booked sessions.
"""
# ruff: noqa: B008 - FastAPI Depends in function defaults is standard pattern

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from harmonylearn import storage
from harmonylearn.core.database import get_db
from harmonylearn.core.errors import NotFoundError
from harmonylearn.core.models import MentorConversation, MentorshipRequest, MentorshipSession
from harmonylearn.core.schemas import (
    ConversationCreate,
    ConversationSchema,
    MentorshipRequestCreate,
    MentorshipRequestDetail,
    MentorshipRequestSchema,
    MentorshipRequestUpdate,
    MentorshipSessionCreate,
    MentorshipSessionSchema,
    MentorshipSessionUpdate,
    MessageResponse,
)

requests_router = APIRouter()
sessions_router = APIRouter()
conversations_router = APIRouter()


# ============================================================================
# Mentorship Requests
# ============================================================================


@requests_router.get("", response_model=list[MentorshipRequestSchema])
async def list_mentorship_requests(
    student_id: int | None = Query(None, alias="studentId"),
    mentor_id: int | None = Query(None, alias="mentorId"),
    request_status: str | None = Query(None, alias="status"),
    db: AsyncSession = Depends(get_db),
) -> list[MentorshipRequest]:
    return await storage.list_mentorship_requests(
        db, student_id=student_id, mentor_id=mentor_id, status=request_status
    )


@requests_router.get("/{request_id}", response_model=MentorshipRequestDetail)
async def get_mentorship_request(
    request_id: int, db: AsyncSession = Depends(get_db)
) -> MentorshipRequest:
    """Request with its conversation thread and sessions."""
    request = await storage.get_mentorship_request_by_id(db, request_id)
    if not request:
        raise NotFoundError("Mentorship request", request_id)
    return request


@requests_router.post(
    "", response_model=MentorshipRequestDetail, status_code=status.HTTP_201_CREATED
)
async def create_mentorship_request(
    request_data: MentorshipRequestCreate, db: AsyncSession = Depends(get_db)
) -> MentorshipRequest:
    return await storage.create_mentorship_request(db, request_data)


@requests_router.patch("/{request_id}", response_model=MentorshipRequestDetail)
async def update_mentorship_request(
    request_id: int, request_data: MentorshipRequestUpdate, db: AsyncSession = Depends(get_db)
) -> MentorshipRequest:
    """Mentor's answer; a status change stamps respondedAt."""
    return await storage.update_mentorship_request(db, request_id, request_data)


@requests_router.delete("/{request_id}", response_model=MessageResponse)
async def delete_mentorship_request(
    request_id: int, db: AsyncSession = Depends(get_db)
) -> MessageResponse:
    await storage.delete_mentorship_request(db, request_id)
    return MessageResponse(message="Mentorship request deleted successfully")


# ============================================================================
# Mentorship Sessions
# ============================================================================


@sessions_router.get("", response_model=list[MentorshipSessionSchema])
async def list_mentorship_sessions(
    mentor_id: int | None = Query(None, alias="mentorId"),
    student_id: int | None = Query(None, alias="studentId"),
    session_status: str | None = Query(None, alias="status"),
    db: AsyncSession = Depends(get_db),
) -> list[MentorshipSession]:
    return await storage.list_mentorship_sessions(
        db, mentor_id=mentor_id, student_id=student_id, status=session_status
    )


@sessions_router.get("/{session_id}", response_model=MentorshipSessionSchema)
async def get_mentorship_session(
    session_id: int, db: AsyncSession = Depends(get_db)
) -> MentorshipSession:
    mentorship_session = await storage.get_mentorship_session_by_id(db, session_id)
    if not mentorship_session:
        raise NotFoundError("Mentorship session", session_id)
    return mentorship_session


@sessions_router.post(
    "", response_model=MentorshipSessionSchema, status_code=status.HTTP_201_CREATED
)
async def create_mentorship_session(
    session_data: MentorshipSessionCreate, db: AsyncSession = Depends(get_db)
) -> MentorshipSession:
    return await storage.create_mentorship_session(db, session_data)


@sessions_router.patch("/{session_id}", response_model=MentorshipSessionSchema)
async def update_mentorship_session(
    session_id: int, session_data: MentorshipSessionUpdate, db: AsyncSession = Depends(get_db)
) -> MentorshipSession:
    return await storage.update_mentorship_session(db, session_id, session_data)


# ============================================================================
# Conversations
# ============================================================================


@conversations_router.get("/{request_id}", response_model=list[ConversationSchema])
async def list_conversation(
    request_id: int, db: AsyncSession = Depends(get_db)
) -> list[MentorConversation]:
    """Messages of one mentorship request, oldest first."""
    return await storage.list_mentor_conversations(db, request_id)


@conversations_router.post("", response_model=ConversationSchema, status_code=status.HTTP_201_CREATED)
async def send_message(
    message_data: ConversationCreate, db: AsyncSession = Depends(get_db)
) -> MentorConversation:
    return await storage.create_mentor_conversation(db, message_data)


@conversations_router.patch("/{message_id}/read", response_model=ConversationSchema)
async def mark_read(message_id: int, db: AsyncSession = Depends(get_db)) -> MentorConversation:
    return await storage.mark_conversation_read(db, message_id)
