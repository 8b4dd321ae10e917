"""시프트 레포지토리: 직원 근무 시프트 쿼리.

Shift Repository: Queries for the shifts table.
Provides the range primitives used by rotation generation
(delete a range, insert many) and the combined replace_range which
performs both inside the caller's transaction.
"""

from datetime import datetime
from typing import Sequence
from uuid import UUID

from sqlalchemy import Delete, Select, delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.shift import StaffShift
from app.repositories.base import BaseRepository


class ShiftRepository(BaseRepository[StaffShift]):
    """시프트 레포지토리.

    Shift repository with employee/time-range queries.

    Extends:
        BaseRepository[StaffShift]
    """

    def __init__(self) -> None:
        super().__init__(StaffShift)

    async def get_by_employee_range(
        self,
        db: AsyncSession,
        employee_id: UUID,
        range_start: datetime | None = None,
        range_end: datetime | None = None,
    ) -> list[StaffShift]:
        """직원의 시프트를 시작 시각 기준 [시작, 끝) 범위로 조회합니다.

        Retrieve an employee's shifts whose start falls in [range_start, range_end),
        ordered by start time. Either bound may be omitted.
        """
        query: Select = select(StaffShift).where(StaffShift.employee_id == employee_id)
        if range_start is not None:
            query = query.where(StaffShift.start_time >= range_start)
        if range_end is not None:
            query = query.where(StaffShift.start_time < range_end)
        result = await db.execute(query.order_by(StaffShift.start_time))
        return list(result.scalars().all())

    async def delete_range(
        self,
        db: AsyncSession,
        employee_id: UUID,
        range_start: datetime,
        range_end: datetime,
    ) -> int:
        """직원의 [시작, 끝) 범위 시프트를 삭제합니다.

        Delete an employee's shifts whose start falls in [range_start, range_end).

        Returns:
            int: 삭제된 행 수 (Number of deleted rows)
        """
        stmt: Delete = delete(StaffShift).where(
            StaffShift.employee_id == employee_id,
            StaffShift.start_time >= range_start,
            StaffShift.start_time < range_end,
        ).returning(StaffShift.id).execution_options(synchronize_session="fetch")
        result = await db.execute(stmt)
        return len(result.all())

    async def insert_many(
        self,
        db: AsyncSession,
        rows: Sequence[dict],
    ) -> list[StaffShift]:
        """시프트 여러 건을 입력 순서대로 생성합니다."""
        if not rows:
            return []
        return await self.create_many(db, rows)

    async def replace_range(
        self,
        db: AsyncSession,
        employee_id: UUID,
        range_start: datetime,
        range_end: datetime,
        rows: Sequence[dict],
        generation_id: UUID,
    ) -> tuple[int, list[StaffShift]]:
        """범위 내 기존 시프트를 삭제하고 새 시프트로 교체합니다.

        Replace an employee's shifts in [range_start, range_end) with `rows`.
        Delete and insert run in the same transaction; nothing is committed
        here, so a failure in either step rolls back both when the session
        is discarded. Every inserted row is stamped with `generation_id`.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            employee_id: 직원 UUID (Employee UUID)
            range_start: 범위 시작, 포함 (Inclusive start)
            range_end: 범위 끝, 미포함 (Exclusive end)
            rows: 생성할 시프트 데이터 (Shift rows to insert)
            generation_id: 이번 전개 ID (Identifier of this rotation run)

        Returns:
            tuple[int, list[StaffShift]]: (삭제된 행 수, 생성된 시프트)
                                          (Deleted count, created shifts)
        """
        removed: int = await self.delete_range(db, employee_id, range_start, range_end)
        created: list[StaffShift] = await self.insert_many(
            db, [{**row, "generation_id": generation_id} for row in rows]
        )
        return removed, created


shift_repository: ShiftRepository = ShiftRepository()
