"""
Workflow Request API Endpoints

Staff, master-role and resignation requests. Each is created pending and
reviewed through its ``/status`` endpoint; approvals take effect on
memberships and roles immediately.
"""
# ruff: noqa: B008 - FastAPI Depends in function defaults is standard pattern

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from harmonylearn import storage
from harmonylearn.core.database import get_db
from harmonylearn.core.errors import NotFoundError
from harmonylearn.core.models import MasterRoleRequest, ResignationRequest, StaffRequest
from harmonylearn.core.schemas import (
    MasterRoleRequestCreate,
    MasterRoleRequestSchema,
    MasterRoleRequestStatusUpdate,
    MessageResponse,
    ResignationRequestCreate,
    ResignationRequestSchema,
    ResignationRequestStatusUpdate,
    StaffRequestCreate,
    StaffRequestSchema,
    StaffRequestStatusUpdate,
)

staff_router = APIRouter()
master_role_router = APIRouter()
resignation_router = APIRouter()


# ============================================================================
# Staff Requests
# ============================================================================


@staff_router.get("", response_model=list[StaffRequestSchema])
async def list_staff_requests(
    classroom_id: int | None = Query(None, alias="classroomId"),
    request_status: str | None = Query(None, alias="status"),
    db: AsyncSession = Depends(get_db),
) -> list[StaffRequest]:
    return await storage.list_staff_requests(db, classroom_id=classroom_id, status=request_status)


@staff_router.get("/{request_id}", response_model=StaffRequestSchema)
async def get_staff_request(request_id: int, db: AsyncSession = Depends(get_db)) -> StaffRequest:
    request = await storage.get_staff_request_by_id(db, request_id)
    if not request:
        raise NotFoundError("Staff request", request_id)
    return request


@staff_router.post("", response_model=StaffRequestSchema, status_code=status.HTTP_201_CREATED)
async def create_staff_request(
    request_data: StaffRequestCreate, db: AsyncSession = Depends(get_db)
) -> StaffRequest:
    """A mentor asks to join a classroom's staff."""
    return await storage.create_staff_request(db, request_data)


@staff_router.patch("/{request_id}/status", response_model=StaffRequestSchema)
async def review_staff_request(
    request_id: int, review: StaffRequestStatusUpdate, db: AsyncSession = Depends(get_db)
) -> StaffRequest:
    """Approve or reject. Approval makes the mentor active staff."""
    return await storage.update_staff_request(db, request_id, review)


@staff_router.delete("/{request_id}", response_model=MessageResponse)
async def delete_staff_request(
    request_id: int, db: AsyncSession = Depends(get_db)
) -> MessageResponse:
    await storage.delete_staff_request(db, request_id)
    return MessageResponse(message="Staff request deleted successfully")


# ============================================================================
# Master Role Requests
# ============================================================================


@master_role_router.get("", response_model=list[MasterRoleRequestSchema])
async def list_master_role_requests(
    request_status: str | None = Query(None, alias="status"),
    db: AsyncSession = Depends(get_db),
) -> list[MasterRoleRequest]:
    return await storage.list_master_role_requests(db, status=request_status)


@master_role_router.get("/{request_id}", response_model=MasterRoleRequestSchema)
async def get_master_role_request(
    request_id: int, db: AsyncSession = Depends(get_db)
) -> MasterRoleRequest:
    request = await storage.get_master_role_request_by_id(db, request_id)
    if not request:
        raise NotFoundError("Master role request", request_id)
    return request


@master_role_router.post(
    "", response_model=MasterRoleRequestSchema, status_code=status.HTTP_201_CREATED
)
async def create_master_role_request(
    request_data: MasterRoleRequestCreate, db: AsyncSession = Depends(get_db)
) -> MasterRoleRequest:
    return await storage.create_master_role_request(db, request_data)


@master_role_router.patch("/{request_id}/status", response_model=MasterRoleRequestSchema)
async def review_master_role_request(
    request_id: int, review: MasterRoleRequestStatusUpdate, db: AsyncSession = Depends(get_db)
) -> MasterRoleRequest:
    """Approve or reject. Approval promotes the mentor to master."""
    return await storage.update_master_role_request(db, request_id, review)


@master_role_router.delete("/{request_id}", response_model=MessageResponse)
async def delete_master_role_request(
    request_id: int, db: AsyncSession = Depends(get_db)
) -> MessageResponse:
    await storage.delete_master_role_request(db, request_id)
    return MessageResponse(message="Master role request deleted successfully")


# ============================================================================
# Resignation Requests
# ============================================================================


@resignation_router.get("", response_model=list[ResignationRequestSchema])
async def list_resignation_requests(
    classroom_id: int | None = Query(None, alias="classroomId"),
    mentor_id: int | None = Query(None, alias="mentorId"),
    request_status: str | None = Query(None, alias="status"),
    db: AsyncSession = Depends(get_db),
) -> list[ResignationRequest]:
    return await storage.list_resignation_requests(
        db, classroom_id=classroom_id, mentor_id=mentor_id, status=request_status
    )


@resignation_router.get("/{request_id}", response_model=ResignationRequestSchema)
async def get_resignation_request(
    request_id: int, db: AsyncSession = Depends(get_db)
) -> ResignationRequest:
    request = await storage.get_resignation_request_by_id(db, request_id)
    if not request:
        raise NotFoundError("Resignation request", request_id)
    return request


@resignation_router.post(
    "", response_model=ResignationRequestSchema, status_code=status.HTTP_201_CREATED
)
async def create_resignation_request(
    request_data: ResignationRequestCreate, db: AsyncSession = Depends(get_db)
) -> ResignationRequest:
    return await storage.create_resignation_request(db, request_data)


@resignation_router.patch("/{request_id}/status", response_model=ResignationRequestSchema)
async def review_resignation_request(
    request_id: int, review: ResignationRequestStatusUpdate, db: AsyncSession = Depends(get_db)
) -> ResignationRequest:
    """Approve or reject. Approval deactivates the staff membership."""
    return await storage.update_resignation_request(db, request_id, review)
