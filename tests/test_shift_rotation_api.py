"""반복 근무 패턴 API 테스트: 적용, 재적용(교체), 미리보기, 시프트 조회.

Shift rotation API tests: apply, re-apply (replace), preview and listing.
"""

import uuid
from datetime import datetime, timezone

from httpx import AsyncClient
from sqlalchemy import func, select

from app.models.shift import StaffShift
from tests.conftest import auth_header

PREFIX = "/api/v1/admin/employees"

# 2024-01-07은 일요일: 2024-01-07 is a Sunday
ANCHOR = "2024-01-10"

MORNING = {"start_time": "09:00", "end_time": "13:00"}
EVENING = {"start_time": "14:00", "end_time": "18:00"}

TWO_WEEK_ROTATION = {
    "weeks": [
        {"1": {"enabled": True, "shifts": [MORNING]}, "3": {"enabled": True, "shifts": [MORNING, EVENING]}},
        {"5": {"enabled": True, "shifts": [EVENING]}, "6": {"enabled": False, "shifts": [MORNING]}},
    ],
    "horizon_weeks": 4,
    "anchor_date": ANCHOR,
}


def _naive(value: str) -> datetime:
    # SQLite는 시간대 정보를 보존하지 않음: compare wall-clock values only
    return datetime.fromisoformat(value).replace(tzinfo=None)


async def _count_shifts(db, employee_id) -> int:
    result = await db.execute(
        select(func.count()).select_from(StaffShift).where(StaffShift.employee_id == employee_id)
    )
    return result.scalar_one()


class TestApplyRotation:

    async def test_apply_creates_shifts(self, client: AsyncClient, db, manager_token, employee):
        res = await client.post(
            f"{PREFIX}/{employee.id}/shift-rotation",
            json=TWO_WEEK_ROTATION,
            headers=auth_header(manager_token),
        )
        assert res.status_code == 201
        data = res.json()
        # 2주 × 2사이클: (1 + 2) + 1 = 4 per cycle
        assert data["created_count"] == 8
        assert data["removed_count"] == 0
        assert data["range_start"] == "2024-01-07"
        assert data["range_end"] == "2024-02-04"
        assert data["warnings"] == []
        assert all(s["generation_id"] == data["generation_id"] for s in data["shifts"])
        assert all(s["status"] == "pending" for s in data["shifts"])
        assert _naive(data["shifts"][0]["start_time"]) == datetime(2024, 1, 8, 9, 0)
        assert await _count_shifts(db, employee.id) == 8

    async def test_reapply_replaces_instead_of_duplicating(
        self, client: AsyncClient, db, manager_token, employee
    ):
        first = await client.post(
            f"{PREFIX}/{employee.id}/shift-rotation",
            json=TWO_WEEK_ROTATION,
            headers=auth_header(manager_token),
        )
        second = await client.post(
            f"{PREFIX}/{employee.id}/shift-rotation",
            json=TWO_WEEK_ROTATION,
            headers=auth_header(manager_token),
        )
        assert second.status_code == 201
        assert second.json()["removed_count"] == 8
        assert second.json()["generation_id"] != first.json()["generation_id"]
        assert await _count_shifts(db, employee.id) == 8

    async def test_reapply_with_partial_rotation_horizon(
        self, client: AsyncClient, db, manager_token, employee
    ):
        # 3주 구간, 2주 패턴: 마지막 사이클까지 채워 4주를 교체
        body = {**TWO_WEEK_ROTATION, "horizon_weeks": 3}
        url = f"{PREFIX}/{employee.id}/shift-rotation"

        first = await client.post(url, json=body, headers=auth_header(manager_token))
        assert first.status_code == 201
        assert first.json()["range_start"] == "2024-01-07"
        assert first.json()["range_end"] == "2024-02-04"
        assert first.json()["created_count"] == 8

        second = await client.post(url, json=body, headers=auth_header(manager_token))
        assert second.json()["range_end"] == "2024-02-04"
        assert second.json()["removed_count"] == 8
        assert second.json()["created_count"] == 8
        assert await _count_shifts(db, employee.id) == 8

    async def test_shifts_outside_range_are_kept(
        self, client: AsyncClient, db, manager_token, employee
    ):
        outside = StaffShift(
            employee_id=employee.id,
            location_id=employee.location_id,
            start_time=datetime(2024, 3, 1, 10, 0, tzinfo=timezone.utc),
            end_time=datetime(2024, 3, 1, 16, 0, tzinfo=timezone.utc),
            status="confirmed",
        )
        db.add(outside)
        await db.flush()

        res = await client.post(
            f"{PREFIX}/{employee.id}/shift-rotation",
            json=TWO_WEEK_ROTATION,
            headers=auth_header(manager_token),
        )
        assert res.json()["removed_count"] == 0
        assert await _count_shifts(db, employee.id) == 9

    async def test_inverted_slot_warned_and_kept(self, client: AsyncClient, manager_token, employee):
        body = {
            "weeks": [{"5": {"enabled": True, "shifts": [{"start_time": "22:00", "end_time": "06:00"}]}}],
            "horizon_weeks": 1,
            "anchor_date": ANCHOR,
        }
        res = await client.post(
            f"{PREFIX}/{employee.id}/shift-rotation", json=body, headers=auth_header(manager_token)
        )
        assert res.status_code == 201
        data = res.json()
        assert data["created_count"] == 1
        assert len(data["warnings"]) == 1
        assert "Friday" in data["warnings"][0]

    async def test_invalid_day_key_rejected(self, client: AsyncClient, manager_token, employee):
        body = {"weeks": [{"7": {"enabled": True, "shifts": [MORNING]}}], "anchor_date": ANCHOR}
        res = await client.post(
            f"{PREFIX}/{employee.id}/shift-rotation", json=body, headers=auth_header(manager_token)
        )
        assert res.status_code == 422

    async def test_invalid_time_rejected(self, client: AsyncClient, manager_token, employee):
        body = {
            "weeks": [{"1": {"enabled": True, "shifts": [{"start_time": "25:00", "end_time": "26:00"}]}}],
            "anchor_date": ANCHOR,
        }
        res = await client.post(
            f"{PREFIX}/{employee.id}/shift-rotation", json=body, headers=auth_header(manager_token)
        )
        assert res.status_code == 422

    async def test_empty_weeks_rejected(self, client: AsyncClient, manager_token, employee):
        res = await client.post(
            f"{PREFIX}/{employee.id}/shift-rotation",
            json={"weeks": [], "anchor_date": ANCHOR},
            headers=auth_header(manager_token),
        )
        assert res.status_code == 422

    async def test_supervisor_cannot_apply(self, client: AsyncClient, supervisor_token, employee):
        res = await client.post(
            f"{PREFIX}/{employee.id}/shift-rotation",
            json=TWO_WEEK_ROTATION,
            headers=auth_header(supervisor_token),
        )
        assert res.status_code == 403

    async def test_foreign_employee_not_found(self, client: AsyncClient, manager_token, foreign_employee):
        res = await client.post(
            f"{PREFIX}/{foreign_employee.id}/shift-rotation",
            json=TWO_WEEK_ROTATION,
            headers=auth_header(manager_token),
        )
        assert res.status_code == 404


class TestPreviewRotation:

    async def test_preview_does_not_persist(self, client: AsyncClient, db, supervisor_token, employee):
        res = await client.post(
            f"{PREFIX}/{employee.id}/shift-rotation/preview",
            json=TWO_WEEK_ROTATION,
            headers=auth_header(supervisor_token),
        )
        assert res.status_code == 200
        data = res.json()
        assert data["created_count"] == 8
        assert data["generation_id"] is None
        assert all(s["id"] is None for s in data["shifts"])
        assert await _count_shifts(db, employee.id) == 0


class TestListShifts:

    async def test_list_with_inclusive_range(self, client: AsyncClient, manager_token, employee):
        await client.post(
            f"{PREFIX}/{employee.id}/shift-rotation",
            json=TWO_WEEK_ROTATION,
            headers=auth_header(manager_token),
        )
        res = await client.get(
            f"{PREFIX}/{employee.id}/shifts",
            params={"date_from": "2024-01-08", "date_to": "2024-01-10"},
            headers=auth_header(manager_token),
        )
        assert res.status_code == 200
        starts = [_naive(s["start_time"]) for s in res.json()]
        assert starts == [
            datetime(2024, 1, 8, 9, 0),
            datetime(2024, 1, 10, 9, 0),
            datetime(2024, 1, 10, 14, 0),
        ]

    async def test_list_all(self, client: AsyncClient, manager_token, employee):
        await client.post(
            f"{PREFIX}/{employee.id}/shift-rotation",
            json=TWO_WEEK_ROTATION,
            headers=auth_header(manager_token),
        )
        res = await client.get(f"{PREFIX}/{employee.id}/shifts", headers=auth_header(manager_token))
        assert len(res.json()) == 8

    async def test_unknown_employee(self, client: AsyncClient, manager_token):
        res = await client.get(f"{PREFIX}/{uuid.uuid4()}/shifts", headers=auth_header(manager_token))
        assert res.status_code == 404
