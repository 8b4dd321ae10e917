"""리워드 사용 설정 레포지토리: Reward Usage Config CRUD.

Reward Usage Config Repository: Queries for discount_reward_usage_config.
"""

from uuid import UUID

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.reward import RewardUsageConfig
from app.repositories.base import BaseRepository


class RewardUsageRepository(BaseRepository[RewardUsageConfig]):

    def __init__(self) -> None:
        super().__init__(RewardUsageConfig)

    async def get_by_location(
        self, db: AsyncSession, location_id: UUID
    ) -> RewardUsageConfig | None:
        query: Select = select(RewardUsageConfig).where(RewardUsageConfig.location_id == location_id)
        result = await db.execute(query)
        return result.scalar_one_or_none()


reward_usage_repository: RewardUsageRepository = RewardUsageRepository()
