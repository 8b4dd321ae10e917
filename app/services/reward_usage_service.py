"""리워드 사용 설정 서비스: 지점별 할인 중복 규칙 관리.

Reward Usage Service: Business logic for per-location discount stacking rules.
Read pattern: the first read of a location creates its default row.
Write pattern: full replacement, validated before saving, last write wins.
The stored row is converted into an explicit RewardUsageRules value for
every decision; nothing is cached between requests.
"""

import logging
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.reward import RewardUsageConfig
from app.repositories.reward_usage_repository import reward_usage_repository
from app.schemas.reward_usage import (
    RewardCheckRequest,
    RewardCheckResponse,
    RewardUsageConfigResponse,
    RewardUsageConfigUpdate,
)
from app.services.reward_rules import (
    DiscountKind,
    RewardStrategy,
    RewardUsageRules,
    explain,
    validate_combinations,
)
from app.utils.exceptions import BadRequestError

logger = logging.getLogger(__name__)

# 종류별 사용 여부 컬럼: Enable-flag column per discount kind
_ENABLE_FLAGS: dict[DiscountKind, str] = {
    DiscountKind.DISCOUNT: "discount_enabled",
    DiscountKind.COUPON: "coupon_enabled",
    DiscountKind.MEMBERSHIP: "membership_enabled",
    DiscountKind.LOYALTY_POINTS: "loyalty_points_enabled",
    DiscountKind.REFERRAL: "referral_enabled",
}

# 신규 지점 기본값: Defaults for a location without a stored row
_DEFAULT_CONFIG: dict = {
    "reward_strategy": RewardStrategy.SINGLE_ONLY.value,
    "max_rewards_per_booking": 1,
    "reward_combinations": [],
    **{flag: True for flag in _ENABLE_FLAGS.values()},
}


def to_rules(config: RewardUsageConfig | RewardUsageConfigUpdate) -> RewardUsageRules:
    """저장된 설정(또는 저장 요청)을 규칙 값 객체로 변환합니다.

    Convert a stored row or an incoming update into RewardUsageRules.
    """
    enabled = [kind for kind, flag in _ENABLE_FLAGS.items() if getattr(config, flag)]
    return RewardUsageRules.build(
        strategy=config.reward_strategy,
        allowed_combinations=config.reward_combinations or [],
        max_kinds_per_booking=config.max_rewards_per_booking,
        enabled_kinds=enabled,
    )


class RewardUsageService:

    def _to_response(self, config: RewardUsageConfig) -> RewardUsageConfigResponse:
        return RewardUsageConfigResponse(
            id=str(config.id),
            location_id=str(config.location_id),
            reward_strategy=config.reward_strategy,
            max_rewards_per_booking=config.max_rewards_per_booking,
            reward_combinations=config.reward_combinations or [],
            discount_enabled=config.discount_enabled,
            coupon_enabled=config.coupon_enabled,
            membership_enabled=config.membership_enabled,
            loyalty_points_enabled=config.loyalty_points_enabled,
            referral_enabled=config.referral_enabled,
            updated_at=config.updated_at,
        )

    async def _get_or_create(self, db: AsyncSession, location_id: UUID) -> RewardUsageConfig:
        config = await reward_usage_repository.get_by_location(db, location_id)
        if config is None:
            config = await reward_usage_repository.create(db, {"location_id": location_id, **_DEFAULT_CONFIG})
            logger.info("Created default reward usage config for location %s", location_id)
        return config

    async def get_config(
        self, db: AsyncSession, location_id: UUID
    ) -> RewardUsageConfigResponse:
        """지점 설정을 조회합니다. 없으면 기본값으로 생성합니다.

        Return the location's configuration, creating the default row on first read.
        """
        config = await self._get_or_create(db, location_id)
        return self._to_response(config)

    async def get_rules(self, db: AsyncSession, location_id: UUID) -> RewardUsageRules:
        """체크아웃 판단용 규칙 값 객체를 반환합니다."""
        return to_rules(await self._get_or_create(db, location_id))

    async def upsert_config(
        self, db: AsyncSession, location_id: UUID, data: RewardUsageConfigUpdate
    ) -> RewardUsageConfigResponse:
        """지점 설정을 저장합니다 (전체 덮어쓰기).

        Save the location's configuration. Combinations with fewer than two
        kinds, duplicate combinations and combinations that use disabled
        kinds are rejected.

        Raises:
            BadRequestError: 허용 조합 구성이 잘못되었을 때 (Invalid combinations)
        """
        problems: list[str] = validate_combinations(to_rules(data))
        if problems:
            raise BadRequestError("; ".join(problems))

        values: dict = data.model_dump(mode="json")
        existing = await reward_usage_repository.get_by_location(db, location_id)
        if existing is not None:
            for field, value in values.items():
                setattr(existing, field, value)
            await db.flush()
            await db.refresh(existing)
            config = existing
        else:
            config = await reward_usage_repository.create(db, {"location_id": location_id, **values})

        logger.info(
            "Reward usage config saved for location %s: strategy=%s max=%d combinations=%d",
            location_id,
            config.reward_strategy,
            config.max_rewards_per_booking,
            len(config.reward_combinations or []),
        )
        return self._to_response(config)

    async def check_candidate(
        self, db: AsyncSession, location_id: UUID, data: RewardCheckRequest
    ) -> RewardCheckResponse:
        """할인 종류 하나를 더 적용할 수 있는지 판단합니다.

        Decide whether the candidate kind may join the active kinds at checkout.
        """
        rules = await self.get_rules(db, location_id)
        decision = explain(rules, data.active_kinds, data.candidate_kind)
        return RewardCheckResponse(
            allowed=decision.allowed,
            reason=decision.reason,
            message=decision.message,
        )


reward_usage_service: RewardUsageService = RewardUsageService()
