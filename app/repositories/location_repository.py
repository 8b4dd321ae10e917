"""지점 레포지토리: 지점 CRUD 및 관련 쿼리.

Location Repository: CRUD and related queries for salon locations.
"""

from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.organization import Location
from app.repositories.base import BaseRepository


class LocationRepository(BaseRepository[Location]):
    """지점 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리."""

    def __init__(self) -> None:
        super().__init__(Location)

    async def get_by_org(
        self,
        db: AsyncSession,
        organization_id: UUID,
    ) -> list[Location]:
        """조직에 속한 모든 지점을 생성순으로 조회합니다.

        Retrieve all locations of an organization, oldest first.
        """
        return list(await self.get_all(db, organization_id, order_by=Location.created_at))


location_repository: LocationRepository = LocationRepository()
