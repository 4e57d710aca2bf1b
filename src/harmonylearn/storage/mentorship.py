"""
Mentorship Conversation and Session Storage
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from harmonylearn.core.models import MentorConversation, MentorshipRequest, MentorshipSession
from harmonylearn.core.schemas import (
    ConversationCreate,
    MentorshipSessionCreate,
    MentorshipSessionUpdate,
)
from harmonylearn.core.validation import validate_payload

from .base import apply_changes, changed_fields, commit, fetch_all, fetch_one, require

logger = logging.getLogger(__name__)

SESSION_OPTIONS = (selectinload(MentorshipSession.mentor), selectinload(MentorshipSession.student))


# ============================================================================
# Conversations
# ============================================================================


async def _get_conversation(session: AsyncSession, message_id: int) -> MentorConversation | None:
    return await fetch_one(
        session,
        select(MentorConversation)
        .where(MentorConversation.id == message_id)
        .options(selectinload(MentorConversation.sender)),
    )


async def list_mentor_conversations(
    session: AsyncSession, request_id: int
) -> list[MentorConversation]:
    """Messages on a mentorship request, oldest first."""
    return await fetch_all(
        session,
        select(MentorConversation)
        .where(MentorConversation.mentorship_request_id == request_id)
        .options(selectinload(MentorConversation.sender))
        .order_by(MentorConversation.created_at, MentorConversation.id),
    )


async def create_mentor_conversation(
    session: AsyncSession, data: ConversationCreate | Mapping[str, Any]
) -> MentorConversation:
    message_data = validate_payload(ConversationCreate, data)
    require(
        await session.get(MentorshipRequest, message_data.mentorship_request_id),
        "Mentorship request",
        message_data.mentorship_request_id,
    )

    message = MentorConversation(**message_data.model_dump(), is_read=False)
    session.add(message)
    await commit(session, "Message")

    return require(await _get_conversation(session, message.id), "Message", message.id)


async def mark_conversation_read(session: AsyncSession, message_id: int) -> MentorConversation:
    message = require(await session.get(MentorConversation, message_id), "Message", message_id)
    message.is_read = True
    await commit(session, "Message")

    return require(await _get_conversation(session, message_id), "Message", message_id)


# ============================================================================
# Sessions
# ============================================================================


async def list_mentorship_sessions(
    session: AsyncSession,
    mentor_id: int | None = None,
    student_id: int | None = None,
    status: str | None = None,
) -> list[MentorshipSession]:
    """Sessions, latest scheduled first."""
    stmt = select(MentorshipSession).options(*SESSION_OPTIONS)
    if mentor_id is not None:
        stmt = stmt.where(MentorshipSession.mentor_id == mentor_id)
    if student_id is not None:
        stmt = stmt.where(MentorshipSession.student_id == student_id)
    if status:
        stmt = stmt.where(MentorshipSession.status == status)

    return await fetch_all(
        session,
        stmt.order_by(MentorshipSession.scheduled_at.desc(), MentorshipSession.id.desc()),
    )


async def get_mentorship_session_by_id(
    session: AsyncSession, session_id: int
) -> MentorshipSession | None:
    return await fetch_one(
        session,
        select(MentorshipSession)
        .where(MentorshipSession.id == session_id)
        .options(*SESSION_OPTIONS),
    )


async def create_mentorship_session(
    session: AsyncSession, data: MentorshipSessionCreate | Mapping[str, Any]
) -> MentorshipSession:
    session_data = validate_payload(MentorshipSessionCreate, data)
    mentorship_session = MentorshipSession(**session_data.model_dump())
    session.add(mentorship_session)
    await commit(session, "Mentorship session")

    logger.info(
        f"Booked mentorship session {mentorship_session.id} for request "
        f"{mentorship_session.mentorship_request_id}"
    )
    return require(
        await get_mentorship_session_by_id(session, mentorship_session.id),
        "Mentorship session",
        mentorship_session.id,
    )


async def update_mentorship_session(
    session: AsyncSession,
    session_id: int,
    changes: MentorshipSessionUpdate | Mapping[str, Any],
) -> MentorshipSession:
    values = changed_fields(validate_payload(MentorshipSessionUpdate, changes))
    mentorship_session = require(
        await session.get(MentorshipSession, session_id), "Mentorship session", session_id
    )
    apply_changes(mentorship_session, values)
    await commit(session, "Mentorship session")

    return require(
        await get_mentorship_session_by_id(session, session_id), "Mentorship session", session_id
    )
