"""
Schedule API Endpoints

Weekly recurring timetable slots of a classroom.
"""
# ruff: noqa: B008 - FastAPI Depends in function defaults is standard pattern

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from harmonylearn import storage
from harmonylearn.core.database import get_db
from harmonylearn.core.errors import NotFoundError
from harmonylearn.core.models import Schedule
from harmonylearn.core.schemas import (
    MessageResponse,
    ScheduleCreate,
    ScheduleSchema,
    ScheduleUpdate,
)

router = APIRouter()


@router.get("", response_model=list[ScheduleSchema])
async def list_schedules(
    classroom_id: int | None = Query(None, alias="classroomId"),
    instructor_id: int | None = Query(None, alias="instructorId"),
    db: AsyncSession = Depends(get_db),
) -> list[Schedule]:
    """Slots ordered by weekday, then start time."""
    return await storage.list_schedules(
        db, classroom_id=classroom_id, instructor_id=instructor_id
    )


@router.get("/{schedule_id}", response_model=ScheduleSchema)
async def get_schedule(schedule_id: int, db: AsyncSession = Depends(get_db)) -> Schedule:
    schedule = await storage.get_schedule_by_id(db, schedule_id)
    if not schedule:
        raise NotFoundError("Schedule", schedule_id)
    return schedule


@router.post("", response_model=ScheduleSchema, status_code=status.HTTP_201_CREATED)
async def create_schedule(
    schedule_data: ScheduleCreate, db: AsyncSession = Depends(get_db)
) -> Schedule:
    return await storage.create_schedule(db, schedule_data)


@router.patch("/{schedule_id}", response_model=ScheduleSchema)
async def update_schedule(
    schedule_id: int, schedule_data: ScheduleUpdate, db: AsyncSession = Depends(get_db)
) -> Schedule:
    return await storage.update_schedule(db, schedule_id, schedule_data)


@router.delete("/{schedule_id}", response_model=MessageResponse)
async def delete_schedule(schedule_id: int, db: AsyncSession = Depends(get_db)) -> MessageResponse:
    await storage.delete_schedule(db, schedule_id)
    return MessageResponse(message="Schedule deleted successfully")
