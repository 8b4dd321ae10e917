"""리워드 사용 설정 Pydantic 스키마.

Reward usage configuration request/response schemas.
"""

from datetime import datetime
from pydantic import BaseModel, Field

from app.services.reward_rules import DiscountKind, RewardStrategy


class RewardUsageConfigUpdate(BaseModel):
    """리워드 사용 설정 저장 요청 스키마 (전체 덮어쓰기).

    Full replacement of a location's reward usage configuration.

    Attributes:
        reward_strategy: 중복 전략 (Stacking strategy)
        max_rewards_per_booking: 예약당 최대 할인 종류 수, 1 이상 (Positive maximum)
        reward_combinations: 허용 조합 목록 (Allowed combinations)
        discount_enabled ~ referral_enabled: 종류별 사용 여부 (Per-kind enable flags)
    """

    reward_strategy: RewardStrategy = RewardStrategy.SINGLE_ONLY
    max_rewards_per_booking: int = Field(default=1, ge=1)
    reward_combinations: list[list[DiscountKind]] = Field(default_factory=list)
    discount_enabled: bool = True
    coupon_enabled: bool = True
    membership_enabled: bool = True
    loyalty_points_enabled: bool = True
    referral_enabled: bool = True


class RewardUsageConfigResponse(BaseModel):
    id: str
    location_id: str
    reward_strategy: RewardStrategy
    max_rewards_per_booking: int
    reward_combinations: list[list[DiscountKind]]
    discount_enabled: bool
    coupon_enabled: bool
    membership_enabled: bool
    loyalty_points_enabled: bool
    referral_enabled: bool
    updated_at: datetime


class RewardCheckRequest(BaseModel):
    """체크아웃 시 할인 추가 가능 여부 확인 요청.

    Attributes:
        active_kinds: 이미 적용된 할인 종류 (Kinds already applied to the booking)
        candidate_kind: 추가하려는 할인 종류 (Kind being added)
    """

    active_kinds: list[DiscountKind] = Field(default_factory=list)
    candidate_kind: DiscountKind


class RewardCheckResponse(BaseModel):
    allowed: bool
    reason: str | None = None  # 거절 사유 코드 (Refusal reason code)
    message: str | None = None  # 안내 메시지 (Display message)
