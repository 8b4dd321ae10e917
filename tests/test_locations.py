"""지점/직원 API 테스트: 목록, 생성, 수정, 삭제 및 조직 격리.

Location and employee API tests, including organization isolation.
"""

import uuid
from datetime import datetime, timezone

from httpx import AsyncClient
from sqlalchemy import func, select

from app.models.shift import StaffShift
from tests.conftest import auth_header

ADMIN = "/api/v1/admin"


class TestLocations:

    async def test_list_only_own_organization(
        self, client: AsyncClient, admin_token, location, foreign_location
    ):
        res = await client.get(f"{ADMIN}/locations", headers=auth_header(admin_token))
        assert res.status_code == 200
        ids = [loc["id"] for loc in res.json()]
        assert ids == [str(location.id)]

    async def test_owner_creates_location(self, client: AsyncClient, admin_token):
        res = await client.post(
            f"{ADMIN}/locations",
            json={"name": "Uptown Spa", "phone": "555-0100"},
            headers=auth_header(admin_token),
        )
        assert res.status_code == 201
        assert res.json()["name"] == "Uptown Spa"
        assert res.json()["is_active"] is True

    async def test_manager_cannot_create_location(self, client: AsyncClient, manager_token):
        res = await client.post(
            f"{ADMIN}/locations", json={"name": "Nope"}, headers=auth_header(manager_token)
        )
        assert res.status_code == 403

    async def test_empty_name_rejected(self, client: AsyncClient, admin_token):
        res = await client.post(f"{ADMIN}/locations", json={"name": ""}, headers=auth_header(admin_token))
        assert res.status_code == 422


class TestEmployees:

    async def test_create_and_list(self, client: AsyncClient, manager_token, location):
        res = await client.post(
            f"{ADMIN}/locations/{location.id}/employees",
            json={"name": "Riley Colorist", "employment_type": "colorist"},
            headers=auth_header(manager_token),
        )
        assert res.status_code == 201
        created = res.json()
        assert created["location_id"] == str(location.id)

        res = await client.get(
            f"{ADMIN}/locations/{location.id}/employees", headers=auth_header(manager_token)
        )
        assert [e["id"] for e in res.json()] == [created["id"]]

    async def test_inactive_hidden_by_default(self, client: AsyncClient, db, manager_token, employee):
        employee.is_active = False
        await db.flush()

        url = f"{ADMIN}/locations/{employee.location_id}/employees"
        res = await client.get(url, headers=auth_header(manager_token))
        assert res.json() == []

        res = await client.get(url, params={"include_inactive": True}, headers=auth_header(manager_token))
        assert len(res.json()) == 1

    async def test_create_in_foreign_location(self, client: AsyncClient, manager_token, foreign_location):
        res = await client.post(
            f"{ADMIN}/locations/{foreign_location.id}/employees",
            json={"name": "Sneaky"},
            headers=auth_header(manager_token),
        )
        assert res.status_code == 404

    async def test_get_employee(self, client: AsyncClient, supervisor_token, employee):
        res = await client.get(f"{ADMIN}/employees/{employee.id}", headers=auth_header(supervisor_token))
        assert res.status_code == 200
        assert res.json()["name"] == "Jamie Stylist"

    async def test_get_foreign_employee(self, client: AsyncClient, admin_token, foreign_employee):
        res = await client.get(f"{ADMIN}/employees/{foreign_employee.id}", headers=auth_header(admin_token))
        assert res.status_code == 404

    async def test_partial_update(self, client: AsyncClient, manager_token, employee):
        res = await client.put(
            f"{ADMIN}/employees/{employee.id}",
            json={"phone": "555-0199"},
            headers=auth_header(manager_token),
        )
        assert res.status_code == 200
        data = res.json()
        assert data["phone"] == "555-0199"
        assert data["name"] == "Jamie Stylist"

    async def test_supervisor_cannot_update(self, client: AsyncClient, supervisor_token, employee):
        res = await client.put(
            f"{ADMIN}/employees/{employee.id}",
            json={"phone": "555-0199"},
            headers=auth_header(supervisor_token),
        )
        assert res.status_code == 403

    async def test_delete_removes_shifts(self, client: AsyncClient, db, manager_token, employee):
        db.add(StaffShift(
            employee_id=employee.id,
            location_id=employee.location_id,
            start_time=datetime(2024, 1, 8, 9, 0, tzinfo=timezone.utc),
            end_time=datetime(2024, 1, 8, 13, 0, tzinfo=timezone.utc),
        ))
        await db.flush()

        res = await client.delete(f"{ADMIN}/employees/{employee.id}", headers=auth_header(manager_token))
        assert res.status_code == 204

        res = await client.get(f"{ADMIN}/employees/{employee.id}", headers=auth_header(manager_token))
        assert res.status_code == 404
        count = await db.execute(select(func.count()).select_from(StaffShift))
        assert count.scalar_one() == 0

    async def test_delete_unknown(self, client: AsyncClient, manager_token):
        res = await client.delete(f"{ADMIN}/employees/{uuid.uuid4()}", headers=auth_header(manager_token))
        assert res.status_code == 404
