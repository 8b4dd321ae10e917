"""SQLAlchemy ORM 모델 패키지: 모든 도메인 모델의 중앙 임포트 지점.

SQLAlchemy ORM models package: Central import point for all domain models.
Importing from this package ensures all models are registered with the
SQLAlchemy metadata, which is required for Alembic migrations and
relationship resolution.

Modules:
    organization: 조직, 지점 (Organization, Location)
    user: 역할 및 관리자 계정 (Role and User)
    employee: 직원 (Salon employees)
    shift: 근무 시프트 (Concrete staff shifts)
    reward: 리워드 사용 설정 (Reward usage configuration)
"""

from app.models.organization import Organization, Location
from app.models.user import Role, User
from app.models.employee import Employee
from app.models.shift import StaffShift
from app.models.reward import RewardUsageConfig

__all__ = [
    "Organization", "Location",
    "Role", "User",
    "Employee",
    "StaffShift",
    "RewardUsageConfig",
]
