"""관리자 세션 JWT 유틸리티.

Back-office session tokens. Only short-lived access tokens are issued;
an expired token means logging in again.

Claims:
    sub    관리자 계정 UUID (back-office user id)
    org    조직 UUID (organization id)
    role   역할 이름, 표시용 (role name, informational)
    level  역할 레벨, 표시용 (role level, informational; permissions are read from the DB)
    exp    만료 시각 (expiry)
    type   항상 "access" (always "access")
"""

from datetime import datetime, timedelta, timezone
from typing import Any

import jwt

from app.config import settings

ACCESS_TOKEN_TYPE: str = "access"


def create_access_token(claims: dict[str, Any]) -> str:
    """액세스 토큰을 발급합니다.

    Sign `claims` with an expiry JWT_ACCESS_TOKEN_EXPIRE_MINUTES from now.
    """
    expires_at: datetime = datetime.now(timezone.utc) + timedelta(
        minutes=settings.JWT_ACCESS_TOKEN_EXPIRE_MINUTES
    )
    payload: dict[str, Any] = {**claims, "exp": expires_at, "type": ACCESS_TOKEN_TYPE}
    return jwt.encode(payload, settings.JWT_SECRET_KEY, algorithm=settings.JWT_ALGORITHM)


def decode_access_token(token: str) -> dict[str, Any]:
    """액세스 토큰을 검증하고 클레임을 반환합니다.

    Raises:
        jwt.ExpiredSignatureError: 만료된 토큰 (Expired token)
        jwt.InvalidTokenError: 서명 오류, 형식 오류, 또는 access 토큰이 아님
                               (Bad signature, malformed, or not an access token)
    """
    payload: dict[str, Any] = jwt.decode(
        token,
        settings.JWT_SECRET_KEY,
        algorithms=[settings.JWT_ALGORITHM],
        options={"require": ["exp", "sub"]},
    )
    if payload.get("type") != ACCESS_TOKEN_TYPE:
        raise jwt.InvalidTokenError("Not an access token")
    return payload
