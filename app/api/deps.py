"""FastAPI 의존성 주입 모듈: 인증 및 권한 검사.

FastAPI dependency injection module: Authentication and authorization.
Provides reusable dependencies for extracting the current user from JWT
and enforcing level-based access control on admin endpoints.

Authentication Flow:
    1. 클라이언트가 Authorization: Bearer <token> 헤더를 전송
       (Client sends Authorization: Bearer <token> header)
    2. decode_access_token()이 JWT와 토큰 유형을 검증
       (decode_access_token verifies the signature, expiry and token type)
    3. 페이로드의 "sub" 필드로 DB에서 사용자를 조회하고 활성 상태를 확인
       (User is fetched by "sub" and its active status is verified)

Authorization Flow (require_level):
    역할 레벨이 max_level보다 크면(권한이 낮으면) 403 Forbidden 반환
    (Returns 403 if the role level exceeds max_level)
"""

from typing import Annotated, Callable, Awaitable
from uuid import UUID

import jwt
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.database import get_db
from app.models.organization import Location
from app.models.user import User
from app.services.location_service import location_service
from app.utils.jwt import decode_access_token

# HTTP Bearer 토큰 추출기: Extracts JWT token from Authorization: Bearer <token>
security: HTTPBearer = HTTPBearer()


async def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials, Depends(security)],
    db: Annotated[AsyncSession, Depends(get_db)],
) -> User:
    """JWT 토큰에서 현재 인증된 사용자를 추출합니다.

    Decode JWT from the Authorization header and return the authenticated user.

    Raises:
        HTTPException(401): 토큰이 유효하지 않거나 만료됨 (Invalid or expired token)
        HTTPException(401): 사용자를 찾을 수 없거나 비활성 (User not found or inactive)
    """
    try:
        payload: dict = decode_access_token(credentials.credentials)
        user_uuid = UUID(str(payload["sub"]))
    except (jwt.InvalidTokenError, KeyError, ValueError):
        # ExpiredSignatureError는 InvalidTokenError의 하위 클래스
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid or expired token")

    result = await db.execute(
        select(User).options(selectinload(User.role)).where(User.id == user_uuid)
    )
    user: User | None = result.scalar_one_or_none()

    if user is None or not user.is_active:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="User not found or inactive")

    return user


def require_level(max_level: int) -> Callable[..., Awaitable[User]]:
    """역할 레벨 기반 권한 검사 의존성 팩토리.

    Dependency factory enforcing a maximum role level. Lower level = higher authority.

    Level hierarchy:
        1 = owner, 2 = manager, 3 = supervisor (front desk), 4 = staff
    """
    async def _check(
        current_user: Annotated[User, Depends(get_current_user)],
    ) -> User:
        # role은 get_current_user에서 selectinload로 이미 로드됨
        role = current_user.role
        if role is None or role.level > max_level:
            raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Insufficient permissions")
        return current_user
    return _check


# 편의 의존성: Pre-configured level dependencies
require_owner = require_level(1)       # Owner만 허용 (Owner only)
require_manager = require_level(2)     # Owner + Manager 허용 (Level <= 2)
require_supervisor = require_level(3)  # Owner + Manager + Supervisor 허용 (Level <= 3)


async def check_location_access(
    db: AsyncSession, user: User, location_id: UUID
) -> Location:
    """지점이 사용자 조직에 속하는지 확인합니다.

    Verify the location belongs to the caller's organization.
    Foreign locations are reported as missing rather than forbidden.

    Raises:
        NotFoundError: 지점이 없거나 다른 조직 소속 (Missing or foreign location)
    """
    return await location_service.get_location(db, location_id, user.organization_id)
