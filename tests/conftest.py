"""테스트 인프라: 테스트 DB, 세션, httpx 클라이언트 픽스처.

Test infrastructure: Test database, session, and httpx client fixtures.
Defaults to a throwaway SQLite file through aiosqlite; set TEST_DATABASE_URL
to run the same suite against PostgreSQL (asyncpg).
Schema is applied once per session, data is wiped after each test.
"""

import os
import tempfile
from collections.abc import AsyncGenerator
from pathlib import Path

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event, text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from app.database import Base, get_db
from app.main import app
from app.models import *  # noqa: F401,F403  (register all models with metadata)
from app.utils.jwt import create_access_token
from app.utils.password import hash_password

# ---------------------------------------------------------------------------
# 테스트 DB 설정
# ---------------------------------------------------------------------------
_SQLITE_PATH: Path = Path(tempfile.gettempdir()) / f"test_salon_admin_{os.getpid()}.db"
TEST_DATABASE_URL: str = os.environ.get(
    "TEST_DATABASE_URL", f"sqlite+aiosqlite:///{_SQLITE_PATH}"
)
_IS_SQLITE: bool = TEST_DATABASE_URL.startswith("sqlite")

_schema_created = False


@pytest.fixture(scope="session", autouse=True)
def test_database_file():
    """세션 종료 시 SQLite 테스트 파일을 삭제합니다."""
    _SQLITE_PATH.unlink(missing_ok=True)
    yield
    _SQLITE_PATH.unlink(missing_ok=True)


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    # SQLite는 기본적으로 FK/ON DELETE CASCADE를 강제하지 않음
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


# ---------------------------------------------------------------------------
# Function-scoped: 엔진, 세션, 클라이언트
# ---------------------------------------------------------------------------
@pytest_asyncio.fixture
async def engine(test_database_file) -> AsyncGenerator[AsyncEngine, None]:
    """테스트용 async 엔진. 첫 호출 시 스키마를 생성합니다."""
    global _schema_created
    eng = create_async_engine(TEST_DATABASE_URL, echo=False)
    if _IS_SQLITE:
        event.listen(eng.sync_engine, "connect", _enable_sqlite_foreign_keys)

    if not _schema_created:
        async with eng.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)
            await conn.run_sync(Base.metadata.create_all)
        _schema_created = True

    yield eng
    await eng.dispose()


@pytest_asyncio.fixture
async def db(engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """각 테스트에 격리된 DB 세션을 제공합니다."""
    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    async with factory() as session:
        yield session
        # 커밋되지 않은 변경 처리
        try:
            await session.commit()
        except Exception:
            await session.rollback()

    # 테스트 후 모든 데이터 정리 (SQLite에는 TRUNCATE가 없음)
    async with factory() as cleanup:
        tables = [t.name for t in reversed(Base.metadata.sorted_tables)]
        if _IS_SQLITE:
            for table in tables:
                await cleanup.execute(text(f"DELETE FROM {table}"))
        else:
            await cleanup.execute(text(f"TRUNCATE {', '.join(tables)} CASCADE"))
        await cleanup.commit()


@pytest_asyncio.fixture
async def client(db: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """FastAPI 테스트 클라이언트: DB 세션을 오버라이드합니다."""
    async def _override_get_db() -> AsyncGenerator[AsyncSession, None]:
        yield db

    app.dependency_overrides[get_db] = _override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# 헬퍼 픽스처: 테스트용 데이터 생성
# ---------------------------------------------------------------------------
@pytest_asyncio.fixture
async def org(db: AsyncSession):
    """테스트 조직을 생성합니다."""
    from app.models.organization import Organization
    o = Organization(name="Test Salon")
    db.add(o)
    await db.flush()
    await db.refresh(o)
    return o


@pytest_asyncio.fixture
async def other_org(db: AsyncSession):
    """조직 격리 확인용 다른 조직."""
    from app.models.organization import Organization
    o = Organization(name="Other Salon")
    db.add(o)
    await db.flush()
    await db.refresh(o)
    return o


@pytest_asyncio.fixture
async def roles(db: AsyncSession, org):
    """기본 4개 역할을 생성합니다."""
    from app.models.user import Role
    result = {}
    for name, level in [("owner", 1), ("manager", 2), ("supervisor", 3), ("staff", 4)]:
        role = Role(organization_id=org.id, name=name, level=level)
        db.add(role)
        await db.flush()
        await db.refresh(role)
        result[name] = role
    return result


async def _make_user(db: AsyncSession, org, role, username: str, password: str):
    from app.models.user import User
    user = User(
        organization_id=org.id,
        role_id=role.id,
        username=username,
        full_name=f"Test {username.title()}",
        password_hash=hash_password(password),
    )
    db.add(user)
    await db.flush()
    await db.refresh(user)
    return user


@pytest_asyncio.fixture
async def admin_user(db: AsyncSession, org, roles):
    """오너(관리자) 사용자를 생성합니다."""
    return await _make_user(db, org, roles["owner"], "admin", "admin123!")


@pytest_asyncio.fixture
async def manager_user(db: AsyncSession, org, roles):
    """매니저 사용자를 생성합니다."""
    return await _make_user(db, org, roles["manager"], "manager", "manager123!")


@pytest_asyncio.fixture
async def supervisor_user(db: AsyncSession, org, roles):
    """프론트 데스크(수퍼바이저) 사용자를 생성합니다."""
    return await _make_user(db, org, roles["supervisor"], "frontdesk", "desk123!")


@pytest_asyncio.fixture
async def staff_user(db: AsyncSession, org, roles):
    """스태프 사용자를 생성합니다."""
    return await _make_user(db, org, roles["staff"], "staff", "staff123!")


@pytest_asyncio.fixture
async def location(db: AsyncSession, org):
    """테스트 지점을 생성합니다."""
    from app.models.organization import Location
    loc = Location(organization_id=org.id, name="Downtown Studio", address="1 Main St")
    db.add(loc)
    await db.flush()
    await db.refresh(loc)
    return loc


@pytest_asyncio.fixture
async def foreign_location(db: AsyncSession, other_org):
    """다른 조직의 지점."""
    from app.models.organization import Location
    loc = Location(organization_id=other_org.id, name="Elsewhere Spa")
    db.add(loc)
    await db.flush()
    await db.refresh(loc)
    return loc


@pytest_asyncio.fixture
async def employee(db: AsyncSession, location):
    """테스트 직원을 생성합니다."""
    from app.models.employee import Employee
    e = Employee(location_id=location.id, name="Jamie Stylist", employment_type="stylist")
    db.add(e)
    await db.flush()
    await db.refresh(e)
    return e


@pytest_asyncio.fixture
async def foreign_employee(db: AsyncSession, foreign_location):
    """다른 조직 지점의 직원."""
    from app.models.employee import Employee
    e = Employee(location_id=foreign_location.id, name="Alex Therapist")
    db.add(e)
    await db.flush()
    await db.refresh(e)
    return e


def make_token(user, role_name: str, role_level: int) -> str:
    """테스트용 JWT 액세스 토큰을 생성합니다."""
    return create_access_token({
        "sub": str(user.id),
        "org": str(user.organization_id),
        "role": role_name,
        "level": role_level,
    })


@pytest.fixture
def admin_token(admin_user, roles) -> str:
    return make_token(admin_user, "owner", 1)


@pytest.fixture
def manager_token(manager_user, roles) -> str:
    return make_token(manager_user, "manager", 2)


@pytest.fixture
def supervisor_token(supervisor_user, roles) -> str:
    return make_token(supervisor_user, "supervisor", 3)


@pytest.fixture
def staff_token(staff_user, roles) -> str:
    return make_token(staff_user, "staff", 4)


def auth_header(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}
