"""
Weekly Timetable Storage
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from harmonylearn.core.errors import ValidationFailedError
from harmonylearn.core.models import Schedule, ScheduleEnrollment
from harmonylearn.core.schemas import ScheduleCreate, ScheduleUpdate
from harmonylearn.core.validation import validate_payload

from .base import apply_changes, changed_fields, commit, delete_row, fetch_all, fetch_one, require

SCHEDULE_OPTIONS = (
    selectinload(Schedule.classroom),
    selectinload(Schedule.instructor),
    selectinload(Schedule.enrollments).selectinload(ScheduleEnrollment.student),
)


async def list_schedules(
    session: AsyncSession, classroom_id: int | None = None, instructor_id: int | None = None
) -> list[Schedule]:
    """Timetable slots ordered by weekday, then start time."""
    stmt = select(Schedule).options(*SCHEDULE_OPTIONS)
    if classroom_id is not None:
        stmt = stmt.where(Schedule.classroom_id == classroom_id)
    if instructor_id is not None:
        stmt = stmt.where(Schedule.instructor_id == instructor_id)

    return await fetch_all(
        session, stmt.order_by(Schedule.day_of_week, Schedule.start_time, Schedule.id)
    )


async def get_schedule_by_id(session: AsyncSession, schedule_id: int) -> Schedule | None:
    return await fetch_one(
        session, select(Schedule).where(Schedule.id == schedule_id).options(*SCHEDULE_OPTIONS)
    )


async def create_schedule(
    session: AsyncSession, data: ScheduleCreate | Mapping[str, Any]
) -> Schedule:
    schedule_data = validate_payload(ScheduleCreate, data)
    schedule = Schedule(**schedule_data.model_dump())
    session.add(schedule)
    await commit(session, "Schedule")

    return require(await get_schedule_by_id(session, schedule.id), "Schedule", schedule.id)


async def update_schedule(
    session: AsyncSession, schedule_id: int, changes: ScheduleUpdate | Mapping[str, Any]
) -> Schedule:
    """Partial update. The resulting slot must still end after it starts."""
    values = changed_fields(validate_payload(ScheduleUpdate, changes))
    schedule = require(await session.get(Schedule, schedule_id), "Schedule", schedule_id)

    start_time = values.get("start_time") or schedule.start_time
    end_time = values.get("end_time") or schedule.end_time
    if end_time <= start_time:
        raise ValidationFailedError(
            "Invalid ScheduleUpdate data",
            details=[
                {
                    "field": "endTime",
                    "message": "End time must be after start time",
                    "type": "value_error",
                }
            ],
        )

    apply_changes(schedule, values)
    await commit(session, "Schedule")

    return require(await get_schedule_by_id(session, schedule_id), "Schedule", schedule_id)


async def delete_schedule(session: AsyncSession, schedule_id: int) -> None:
    await delete_row(session, Schedule, schedule_id, "Schedule")
