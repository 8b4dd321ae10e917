"""초기 데이터 시드 스크립트: 조직, 역할, 관리자 계정, 첫 지점 생성.

Seed script: Creates the initial salon organization, roles, owner account,
a first location and its default reward usage configuration.

Usage:
    python -m app.seed

Creates:
    - 1개 조직 (1 organization)
    - 4개 역할: owner(1), manager(2), supervisor(3), staff(4) (4 roles)
    - 1개 관리자 계정: admin / admin123 (1 owner user)
    - 1개 지점 + 기본 리워드 설정 (1 location with default reward rules)
"""

import asyncio

from sqlalchemy import select

from app.database import async_session, engine, Base
from app.models import Location, Organization, Role, User
from app.services.reward_usage_service import reward_usage_service
from app.utils.password import hash_password

# 역할 계층: Role hierarchy (level 1 = highest)
ROLES: list[tuple[str, int]] = [
    ("owner", 1),
    ("manager", 2),
    ("supervisor", 3),
    ("staff", 4),
]


async def seed() -> None:
    """데이터베이스를 초기 데이터로 시드합니다.

    Idempotent: 이미 시드된 경우 건너뜁니다 (Skips if already seeded).
    """
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with async_session() as db:
        result = await db.execute(select(Organization).limit(1))
        if result.scalar_one_or_none():
            print("Already seeded. Skipping.")
            return

        org: Organization = Organization(name="Demo Salon & Spa")
        db.add(org)
        await db.flush()

        roles: dict[str, Role] = {}
        for name, level in ROLES:
            role: Role = Role(organization_id=org.id, name=name, level=level)
            db.add(role)
            roles[name] = role
        await db.flush()

        admin: User = User(
            organization_id=org.id,
            role_id=roles["owner"].id,
            username="admin",
            full_name="Salon Owner",
            password_hash=hash_password("admin123"),
        )
        db.add(admin)

        location: Location = Location(organization_id=org.id, name="Main Studio")
        db.add(location)
        await db.flush()

        # 기본 리워드 설정 생성: single_only, 1 per booking, every kind enabled
        await reward_usage_service.get_config(db, location.id)

        await db.commit()
        print(f"Seeded: org={org.id}, location={location.id}, admin user=admin/admin123")


if __name__ == "__main__":
    asyncio.run(seed())
