"""관리자 지점/직원 라우터: Location & Employee 엔드포인트.

Admin Location Router: Locations of the caller's organization and the
employees working at each location.
"""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import require_manager, require_owner, require_supervisor
from app.database import get_db
from app.models.user import User
from app.schemas.location import (
    EmployeeCreate,
    EmployeeResponse,
    EmployeeUpdate,
    LocationCreate,
    LocationResponse,
)
from app.services.location_service import location_service

router: APIRouter = APIRouter()


@router.get("/locations", response_model=list[LocationResponse])
async def list_locations(
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[User, Depends(require_supervisor)],
) -> list[LocationResponse]:
    return await location_service.list_locations(db, current_user.organization_id)


@router.post("/locations", response_model=LocationResponse, status_code=201)
async def create_location(
    data: LocationCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[User, Depends(require_owner)],
) -> LocationResponse:
    result = await location_service.create_location(db, current_user.organization_id, data)
    await db.commit()
    return result


@router.get("/locations/{location_id}/employees", response_model=list[EmployeeResponse])
async def list_employees(
    location_id: UUID,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[User, Depends(require_supervisor)],
    include_inactive: Annotated[bool, Query()] = False,
) -> list[EmployeeResponse]:
    return await location_service.list_employees(
        db, location_id, current_user.organization_id, include_inactive
    )


@router.post("/locations/{location_id}/employees", response_model=EmployeeResponse, status_code=201)
async def create_employee(
    location_id: UUID,
    data: EmployeeCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[User, Depends(require_manager)],
) -> EmployeeResponse:
    result = await location_service.create_employee(db, location_id, current_user.organization_id, data)
    await db.commit()
    return result


@router.get("/employees/{employee_id}", response_model=EmployeeResponse)
async def get_employee(
    employee_id: UUID,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[User, Depends(require_supervisor)],
) -> EmployeeResponse:
    return await location_service.employee_detail(db, employee_id, current_user.organization_id)


@router.put("/employees/{employee_id}", response_model=EmployeeResponse)
async def update_employee(
    employee_id: UUID,
    data: EmployeeUpdate,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[User, Depends(require_manager)],
) -> EmployeeResponse:
    result = await location_service.update_employee(db, employee_id, current_user.organization_id, data)
    await db.commit()
    return result


@router.delete("/employees/{employee_id}", status_code=204)
async def delete_employee(
    employee_id: UUID,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[User, Depends(require_manager)],
) -> None:
    await location_service.delete_employee(db, employee_id, current_user.organization_id)
    await db.commit()
