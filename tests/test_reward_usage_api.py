"""리워드 사용 설정 API 테스트: 조회(기본값 생성), 저장, 체크아웃 판단.

Reward usage API tests: default creation on first read, full replacement,
write-time validation and the checkout check endpoint.
"""

import uuid

import pytest
from httpx import AsyncClient

from tests.conftest import auth_header

PREFIX = "/api/v1/admin/locations"


def url(location_id, suffix: str = "") -> str:
    return f"{PREFIX}/{location_id}/reward-usage{suffix}"


COMBO_CONFIG = {
    "reward_strategy": "combinations_only",
    "max_rewards_per_booking": 2,
    "reward_combinations": [["coupon", "loyalty_points"]],
    "discount_enabled": True,
    "coupon_enabled": True,
    "membership_enabled": True,
    "loyalty_points_enabled": True,
    "referral_enabled": False,
}


class TestGetRewardUsage:

    async def test_first_read_creates_default(self, client: AsyncClient, admin_token, location):
        res = await client.get(url(location.id), headers=auth_header(admin_token))
        assert res.status_code == 200
        data = res.json()
        assert data["location_id"] == str(location.id)
        assert data["reward_strategy"] == "single_only"
        assert data["max_rewards_per_booking"] == 1
        assert data["reward_combinations"] == []
        assert all(data[f"{k}_enabled"] for k in ("discount", "coupon", "membership", "loyalty_points", "referral"))

    async def test_second_read_returns_same_row(self, client: AsyncClient, admin_token, location):
        first = await client.get(url(location.id), headers=auth_header(admin_token))
        second = await client.get(url(location.id), headers=auth_header(admin_token))
        assert first.json()["id"] == second.json()["id"]

    async def test_supervisor_can_read(self, client: AsyncClient, supervisor_token, location):
        res = await client.get(url(location.id), headers=auth_header(supervisor_token))
        assert res.status_code == 200

    async def test_staff_forbidden(self, client: AsyncClient, staff_token, location):
        res = await client.get(url(location.id), headers=auth_header(staff_token))
        assert res.status_code == 403

    async def test_no_token(self, client: AsyncClient, location):
        res = await client.get(url(location.id))
        assert res.status_code in (401, 403)

    async def test_foreign_location_not_found(self, client: AsyncClient, admin_token, foreign_location):
        res = await client.get(url(foreign_location.id), headers=auth_header(admin_token))
        assert res.status_code == 404

    async def test_unknown_location_not_found(self, client: AsyncClient, admin_token):
        res = await client.get(url(uuid.uuid4()), headers=auth_header(admin_token))
        assert res.status_code == 404


class TestUpsertRewardUsage:

    async def test_save_replaces_config(self, client: AsyncClient, manager_token, location):
        res = await client.put(url(location.id), json=COMBO_CONFIG, headers=auth_header(manager_token))
        assert res.status_code == 200
        data = res.json()
        assert data["reward_strategy"] == "combinations_only"
        assert data["max_rewards_per_booking"] == 2
        assert data["reward_combinations"] == [["coupon", "loyalty_points"]]
        assert data["referral_enabled"] is False

        again = await client.get(url(location.id), headers=auth_header(manager_token))
        assert again.json()["id"] == data["id"]
        assert again.json()["reward_strategy"] == "combinations_only"

    async def test_last_write_wins(self, client: AsyncClient, manager_token, location):
        await client.put(url(location.id), json=COMBO_CONFIG, headers=auth_header(manager_token))
        res = await client.put(
            url(location.id),
            json={"reward_strategy": "single_only", "max_rewards_per_booking": 1},
            headers=auth_header(manager_token),
        )
        assert res.status_code == 200
        data = res.json()
        assert data["reward_strategy"] == "single_only"
        assert data["reward_combinations"] == []
        assert data["referral_enabled"] is True

    @pytest.mark.parametrize("combinations", [
        [["coupon"]],
        [["coupon", "loyalty_points"], ["loyalty_points", "coupon"]],
        [["coupon", "referral"]],
    ])
    async def test_invalid_combinations_rejected(
        self, client: AsyncClient, manager_token, location, combinations
    ):
        res = await client.put(
            url(location.id),
            json={**COMBO_CONFIG, "reward_combinations": combinations},
            headers=auth_header(manager_token),
        )
        assert res.status_code == 400

    async def test_unknown_kind_rejected(self, client: AsyncClient, manager_token, location):
        res = await client.put(
            url(location.id),
            json={**COMBO_CONFIG, "reward_combinations": [["coupon", "gift_card"]]},
            headers=auth_header(manager_token),
        )
        assert res.status_code == 422

    async def test_non_positive_max_rejected(self, client: AsyncClient, manager_token, location):
        res = await client.put(
            url(location.id),
            json={**COMBO_CONFIG, "max_rewards_per_booking": 0},
            headers=auth_header(manager_token),
        )
        assert res.status_code == 422

    async def test_supervisor_cannot_save(self, client: AsyncClient, supervisor_token, location):
        res = await client.put(url(location.id), json=COMBO_CONFIG, headers=auth_header(supervisor_token))
        assert res.status_code == 403


class TestRewardCheck:

    async def test_default_allows_first_reward(self, client: AsyncClient, supervisor_token, location):
        res = await client.post(
            url(location.id, "/check"),
            json={"active_kinds": [], "candidate_kind": "coupon"},
            headers=auth_header(supervisor_token),
        )
        assert res.status_code == 200
        assert res.json() == {"allowed": True, "reason": None, "message": None}

    async def test_default_refuses_second_reward(self, client: AsyncClient, supervisor_token, location):
        res = await client.post(
            url(location.id, "/check"),
            json={"active_kinds": ["membership"], "candidate_kind": "coupon"},
            headers=auth_header(supervisor_token),
        )
        assert res.json()["allowed"] is False

    async def test_combination_rules_applied(
        self, client: AsyncClient, manager_token, location
    ):
        await client.put(url(location.id), json=COMBO_CONFIG, headers=auth_header(manager_token))

        ok = await client.post(
            url(location.id, "/check"),
            json={"active_kinds": ["coupon"], "candidate_kind": "loyalty_points"},
            headers=auth_header(manager_token),
        )
        assert ok.json()["allowed"] is True

        refused = await client.post(
            url(location.id, "/check"),
            json={"active_kinds": ["coupon"], "candidate_kind": "membership"},
            headers=auth_header(manager_token),
        )
        assert refused.json()["allowed"] is False
        assert refused.json()["reason"] == "combination_not_allowed"

    async def test_disabled_kind_reported(self, client: AsyncClient, manager_token, location):
        await client.put(url(location.id), json=COMBO_CONFIG, headers=auth_header(manager_token))
        res = await client.post(
            url(location.id, "/check"),
            json={"active_kinds": [], "candidate_kind": "referral"},
            headers=auth_header(manager_token),
        )
        assert res.json()["reason"] == "kind_disabled"
