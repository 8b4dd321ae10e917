"""지점/직원 서비스: Location & Employee CRUD 비즈니스 로직.

Location & Employee Service: Business logic for locations and their staff.
All lookups are scoped to the caller's organization.
"""

from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.employee import Employee
from app.models.organization import Location
from app.repositories.employee_repository import employee_repository
from app.repositories.location_repository import location_repository
from app.schemas.location import (
    EmployeeCreate,
    EmployeeResponse,
    EmployeeUpdate,
    LocationCreate,
    LocationResponse,
)
from app.utils.exceptions import NotFoundError


class LocationService:

    def _to_location_response(self, location: Location) -> LocationResponse:
        return LocationResponse(
            id=str(location.id),
            name=location.name,
            address=location.address,
            phone=location.phone,
            is_active=location.is_active,
            created_at=location.created_at,
        )

    def _to_employee_response(self, employee: Employee) -> EmployeeResponse:
        return EmployeeResponse(
            id=str(employee.id),
            location_id=str(employee.location_id),
            name=employee.name,
            phone=employee.phone,
            email=employee.email,
            employment_type=employee.employment_type,
            is_active=employee.is_active,
            created_at=employee.created_at,
        )

    async def get_location(
        self, db: AsyncSession, location_id: UUID, organization_id: UUID
    ) -> Location:
        """조직 범위로 지점을 조회합니다.

        Raises:
            NotFoundError: 지점이 없거나 다른 조직 소속일 때 (Missing or foreign location)
        """
        location = await location_repository.get_by_id(db, location_id, organization_id)
        if location is None:
            raise NotFoundError("Location not found")
        return location

    async def list_locations(
        self, db: AsyncSession, organization_id: UUID
    ) -> list[LocationResponse]:
        locations = await location_repository.get_by_org(db, organization_id)
        return [self._to_location_response(loc) for loc in locations]

    async def create_location(
        self, db: AsyncSession, organization_id: UUID, data: LocationCreate
    ) -> LocationResponse:
        location = await location_repository.create(db, {
            "organization_id": organization_id,
            **data.model_dump(),
        })
        return self._to_location_response(location)

    async def get_employee(
        self, db: AsyncSession, employee_id: UUID, organization_id: UUID
    ) -> Employee:
        """조직 범위로 직원을 조회합니다.

        Raises:
            NotFoundError: 직원이 없거나 다른 조직 소속일 때 (Missing or foreign employee)
        """
        employee = await employee_repository.get_in_org(db, employee_id, organization_id)
        if employee is None:
            raise NotFoundError("Employee not found")
        return employee

    async def list_employees(
        self, db: AsyncSession, location_id: UUID, organization_id: UUID, include_inactive: bool = False
    ) -> list[EmployeeResponse]:
        await self.get_location(db, location_id, organization_id)
        employees = await employee_repository.get_by_location(db, location_id, include_inactive)
        return [self._to_employee_response(e) for e in employees]

    async def create_employee(
        self, db: AsyncSession, location_id: UUID, organization_id: UUID, data: EmployeeCreate
    ) -> EmployeeResponse:
        await self.get_location(db, location_id, organization_id)
        employee = await employee_repository.create(db, {
            "location_id": location_id,
            **data.model_dump(),
        })
        return self._to_employee_response(employee)

    async def employee_detail(
        self, db: AsyncSession, employee_id: UUID, organization_id: UUID
    ) -> EmployeeResponse:
        return self._to_employee_response(await self.get_employee(db, employee_id, organization_id))

    async def update_employee(
        self, db: AsyncSession, employee_id: UUID, organization_id: UUID, data: EmployeeUpdate
    ) -> EmployeeResponse:
        await self.get_employee(db, employee_id, organization_id)
        updated = await employee_repository.update(db, employee_id, data.model_dump(exclude_unset=True))
        if updated is None:
            raise NotFoundError("Employee not found")
        return self._to_employee_response(updated)

    async def delete_employee(
        self, db: AsyncSession, employee_id: UUID, organization_id: UUID
    ) -> None:
        await self.get_employee(db, employee_id, organization_id)
        await employee_repository.delete(db, employee_id)


location_service: LocationService = LocationService()
