"""사용자 레포지토리: 관리자 계정 조회.

User Repository: Lookups for back-office accounts used by login.
"""

from uuid import UUID

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.models.user import User
from app.repositories.base import BaseRepository


class UserRepository(BaseRepository[User]):
    """사용자 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리."""

    def __init__(self) -> None:
        super().__init__(User)

    async def get_by_username(
        self,
        db: AsyncSession,
        username: str,
        organization_id: UUID | None = None,
    ) -> list[User]:
        """사용자명으로 계정을 조회합니다 (역할 포함).

        Find accounts by username with their role eagerly loaded.
        Usernames are unique per organization only, so several rows may
        match when no organization is given.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            username: 로그인 아이디 (Login username)
            organization_id: 조직 범위 필터, 선택 (Optional organization scope)

        Returns:
            list[User]: 일치하는 사용자 목록 (Matching users)
        """
        query: Select = (
            select(User)
            .options(selectinload(User.role))
            .where(User.username == username)
        )
        if organization_id is not None:
            query = query.where(User.organization_id == organization_id)
        result = await db.execute(query)
        return list(result.scalars().all())


user_repository: UserRepository = UserRepository()
