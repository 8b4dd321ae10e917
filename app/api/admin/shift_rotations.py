"""관리자 반복 근무 라우터: Shift Rotation 엔드포인트.

Admin Shift Rotation Router: Apply or preview an N-week rotation for an
employee, and list the employee's concrete shifts.
"""

from datetime import date
from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import require_manager, require_supervisor
from app.database import get_db
from app.models.user import User
from app.schemas.shift_rotation import ShiftResponse, ShiftRotationRequest, ShiftRotationResponse
from app.services.shift_rotation_service import shift_rotation_service

router: APIRouter = APIRouter()


@router.post("/employees/{employee_id}/shift-rotation", response_model=ShiftRotationResponse, status_code=201)
async def apply_shift_rotation(
    employee_id: UUID,
    data: ShiftRotationRequest,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[User, Depends(require_manager)],
) -> ShiftRotationResponse:
    """반복 근무 패턴 적용: 범위 내 기존 시프트를 교체합니다.

    Replace the employee's shifts over the covered range with the expanded template.
    """
    result = await shift_rotation_service.apply_rotation(db, employee_id, current_user.organization_id, data)
    await db.commit()
    return result


@router.post("/employees/{employee_id}/shift-rotation/preview", response_model=ShiftRotationResponse)
async def preview_shift_rotation(
    employee_id: UUID,
    data: ShiftRotationRequest,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[User, Depends(require_supervisor)],
) -> ShiftRotationResponse:
    return await shift_rotation_service.preview_rotation(db, employee_id, current_user.organization_id, data)


@router.get("/employees/{employee_id}/shifts", response_model=list[ShiftResponse])
async def list_employee_shifts(
    employee_id: UUID,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[User, Depends(require_supervisor)],
    date_from: Annotated[date | None, Query()] = None,
    date_to: Annotated[date | None, Query()] = None,
) -> list[ShiftResponse]:
    return await shift_rotation_service.list_shifts(
        db, employee_id, current_user.organization_id, date_from, date_to
    )
