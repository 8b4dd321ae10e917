"""관리자 API 라우터 패키지: 모든 관리자 엔드포인트 통합.

Admin API Router package: Aggregates all admin-facing endpoints
into a single router for inclusion in the FastAPI application.

Included routers:
    - auth: 관리자 인증 (Admin login)
    - locations: 지점 및 직원 관리 (Locations and employees)
    - reward_usage: 할인/리워드 중복 규칙 (Discount/reward stacking rules)
    - shift_rotations: 반복 근무 패턴 및 시프트 조회 (Shift rotations and shifts)
"""

from fastapi import APIRouter

from app.api.admin.auth import router as auth_router
from app.api.admin.locations import router as locations_router
from app.api.admin.reward_usage import router as reward_usage_router
from app.api.admin.shift_rotations import router as shift_rotations_router

admin_router: APIRouter = APIRouter()

admin_router.include_router(auth_router, prefix="/auth", tags=["Admin Auth"])
# 지점/직원: /locations, /locations/{location_id}/employees, /employees/{employee_id}
admin_router.include_router(locations_router, tags=["Locations"])
# 리워드 사용 설정: /locations/{location_id}/reward-usage (nested under locations)
admin_router.include_router(reward_usage_router, tags=["Reward Usage"])
# 반복 근무: /employees/{employee_id}/shift-rotation, /employees/{employee_id}/shifts
admin_router.include_router(shift_rotations_router, tags=["Shift Rotations"])
