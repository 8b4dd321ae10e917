"""직원 레포지토리: Employee CRUD.

Employee Repository: CRUD queries for the employees table.
Employees carry no organization_id; organization scoping goes through
their location.
"""

from uuid import UUID

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.employee import Employee
from app.models.organization import Location
from app.repositories.base import BaseRepository


class EmployeeRepository(BaseRepository[Employee]):

    def __init__(self) -> None:
        super().__init__(Employee)

    async def get_by_location(
        self, db: AsyncSession, location_id: UUID, include_inactive: bool = False
    ) -> list[Employee]:
        query: Select = select(Employee).where(Employee.location_id == location_id)
        if not include_inactive:
            query = query.where(Employee.is_active.is_(True))
        result = await db.execute(query.order_by(Employee.name))
        return list(result.scalars().all())

    async def get_in_org(
        self, db: AsyncSession, employee_id: UUID, organization_id: UUID
    ) -> Employee | None:
        """조직 범위로 직원을 조회합니다: 다른 조직 직원이면 None.

        Fetch an employee only if its location belongs to the organization.
        """
        query: Select = (
            select(Employee)
            .join(Location, Location.id == Employee.location_id)
            .where(
                Employee.id == employee_id,
                Location.organization_id == organization_id,
            )
        )
        result = await db.execute(query)
        return result.scalar_one_or_none()


employee_repository: EmployeeRepository = EmployeeRepository()
