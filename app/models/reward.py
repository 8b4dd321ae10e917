"""할인/리워드 사용 설정 SQLAlchemy ORM 모델 정의.

Discount/reward usage configuration SQLAlchemy ORM model definition.
One row per location; read at checkout time, edited from the admin
settings page. Last write wins.

Tables:
    - discount_reward_usage_config: 지점별 리워드 중복 규칙
      (Per-location reward stacking rules)
"""

import uuid
from datetime import datetime, timezone
from sqlalchemy import JSON, String, Boolean, DateTime, Integer, ForeignKey, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base


class RewardUsageConfig(Base):
    """지점별 리워드 사용 설정 모델.

    Per-location reward usage configuration.

    Attributes:
        id: 고유 식별자 UUID (Unique identifier)
        location_id: 지점 FK, 지점당 1행 (Location, one row per location)
        reward_strategy: 중복 전략: "single_only" / "combinations_only"
        max_rewards_per_booking: 예약당 최대 할인 종류 수 (Max kinds per booking)
        reward_combinations: 허용 조합: [["coupon", "loyalty_points"], ...]
        discount_enabled ~ referral_enabled: 할인 종류별 사용 여부 (Per-kind enable flags)
    """

    __tablename__ = "discount_reward_usage_config"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    # 지점 FK: Location (unique: 지점당 설정 1개)
    location_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("locations.id", ondelete="CASCADE"), nullable=False, unique=True)
    reward_strategy: Mapped[str] = mapped_column(String(30), nullable=False, default="single_only")
    max_rewards_per_booking: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
    # 허용 조합: List of kind lists, order preserved
    reward_combinations: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    discount_enabled: Mapped[bool] = mapped_column(Boolean, default=True)
    coupon_enabled: Mapped[bool] = mapped_column(Boolean, default=True)
    membership_enabled: Mapped[bool] = mapped_column(Boolean, default=True)
    loyalty_points_enabled: Mapped[bool] = mapped_column(Boolean, default=True)
    referral_enabled: Mapped[bool] = mapped_column(Boolean, default=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))
