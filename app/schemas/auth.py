"""인증 관련 Pydantic 요청/응답 스키마 정의.

Authentication-related Pydantic request/response schema definitions.
"""

from pydantic import BaseModel


class LoginRequest(BaseModel):
    """관리자 로그인 요청 스키마.

    Admin login request schema. Staff accounts (level >= 4) are rejected.

    Attributes:
        username: 사용자 로그인 아이디 (User login identifier)
        password: 비밀번호 (Plain text password, verified against bcrypt hash)
        organization_id: 조직 UUID, 선택: 동명이인 계정 구분용
                         (Optional organization to disambiguate usernames)
    """

    username: str
    password: str  # 평문, 서버에서 bcrypt 해시와 비교 (Plain text, compared to bcrypt hash)
    organization_id: str | None = None


class TokenResponse(BaseModel):
    """JWT 토큰 발급 응답 스키마.

    Attributes:
        access_token: JWT 액세스 토큰 (Short-lived access token)
        token_type: 토큰 유형 (Always "bearer" for Authorization header)
    """

    access_token: str
    token_type: str = "bearer"
