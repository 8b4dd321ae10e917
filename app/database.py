"""데이터베이스 엔진 및 세션 설정 모듈.

Database engine and session setup for the salon admin API.
PostgreSQL via asyncpg in deployments; any SQLAlchemy async URL
(e.g. sqlite+aiosqlite in tests) works with the same session factory.
"""

from collections.abc import AsyncGenerator
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession, AsyncEngine, create_async_engine, async_sessionmaker
from sqlalchemy.orm import DeclarativeBase

from app.config import settings


def _engine_options(url: str) -> dict[str, Any]:
    """드라이버별 엔진 옵션.

    Pool sizing and the prepared statement cache only apply to asyncpg.
    """
    options: dict[str, Any] = {"echo": settings.DEBUG, "pool_pre_ping": True}
    if url.startswith("postgresql+asyncpg"):
        options.update(
            pool_size=5,
            max_overflow=10,
            # Supavisor(트랜잭션 모드 풀러)는 prepared statement를 지원하지 않음
            connect_args={"statement_cache_size": 0},
        )
    return options


# 비동기 데이터베이스 엔진: Async database engine
engine: AsyncEngine = create_async_engine(settings.DATABASE_URL, **_engine_options(settings.DATABASE_URL))

# 비동기 세션 팩토리 (expire_on_commit=False: 커밋 후에도 응답 변환에 객체 사용)
async_session: async_sessionmaker[AsyncSession] = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


class Base(DeclarativeBase):
    """ORM 모델 베이스: Declarative base for organizations, staff, shifts and reward settings."""


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """요청 단위 DB 세션 의존성.

    Yields one session per request. Repositories only flush; routers commit.
    Anything left uncommitted is rolled back when the session closes.
    """
    async with async_session() as session:
        try:
            yield session
        finally:
            await session.close()
