"""관리자 리워드 사용 설정 라우터: Discount/Reward Usage 엔드포인트.

Admin Reward Usage Router: Per-location discount stacking settings and
the checkout-time "may this reward be added?" check.
Nested under locations: /locations/{location_id}/reward-usage
"""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import check_location_access, require_manager, require_supervisor
from app.database import get_db
from app.models.user import User
from app.schemas.reward_usage import (
    RewardCheckRequest,
    RewardCheckResponse,
    RewardUsageConfigResponse,
    RewardUsageConfigUpdate,
)
from app.services.reward_usage_service import reward_usage_service

router: APIRouter = APIRouter()


@router.get("/locations/{location_id}/reward-usage", response_model=RewardUsageConfigResponse)
async def get_reward_usage(
    location_id: UUID,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[User, Depends(require_supervisor)],
) -> RewardUsageConfigResponse:
    await check_location_access(db, current_user, location_id)
    result = await reward_usage_service.get_config(db, location_id)
    # 첫 조회 시 기본 설정이 생성될 수 있음: first read may create the default row
    await db.commit()
    return result


@router.put("/locations/{location_id}/reward-usage", response_model=RewardUsageConfigResponse)
async def upsert_reward_usage(
    location_id: UUID,
    data: RewardUsageConfigUpdate,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[User, Depends(require_manager)],
) -> RewardUsageConfigResponse:
    await check_location_access(db, current_user, location_id)
    result = await reward_usage_service.upsert_config(db, location_id, data)
    await db.commit()
    return result


@router.post("/locations/{location_id}/reward-usage/check", response_model=RewardCheckResponse)
async def check_reward(
    location_id: UUID,
    data: RewardCheckRequest,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[User, Depends(require_supervisor)],
) -> RewardCheckResponse:
    await check_location_access(db, current_user, location_id)
    result = await reward_usage_service.check_candidate(db, location_id, data)
    await db.commit()
    return result
