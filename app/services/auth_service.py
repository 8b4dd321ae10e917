"""인증 서비스: 관리자 로그인 비즈니스 로직.

Auth Service: Business logic for back-office login and JWT issuance.
"""

from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.user import Role, User
from app.repositories.user_repository import user_repository
from app.schemas.auth import LoginRequest, TokenResponse
from app.utils.exceptions import BadRequestError, ForbiddenError, UnauthorizedError
from app.utils.jwt import create_access_token
from app.utils.password import verify_password

# 관리자 화면 접근 가능 최대 레벨: Highest level allowed into the back-office
ADMIN_MAX_LEVEL: int = 3


class AuthService:
    """인증 관련 비즈니스 로직을 처리하는 서비스."""

    def _build_jwt_payload(self, user: User, role: Role) -> dict[str, str | int]:
        """JWT 토큰 페이로드를 생성합니다.

        Build the JWT token payload from user and role data.
        """
        return {
            "sub": str(user.id),
            "org": str(user.organization_id),
            "role": role.name,
            "level": role.level,
        }

    async def admin_login(self, db: AsyncSession, data: LoginRequest) -> TokenResponse:
        """관리자 로그인: 스태프 계정은 거부합니다.

        Authenticate a back-office account and issue an access token.

        Raises:
            BadRequestError: organization_id 형식 오류 (Malformed organization id)
            UnauthorizedError: 계정 없음/비밀번호 불일치/비활성 (Bad credentials or inactive)
            ForbiddenError: 스태프 레벨 계정 (Staff-level account)
        """
        organization_id: UUID | None = None
        if data.organization_id:
            try:
                organization_id = UUID(data.organization_id)
            except ValueError:
                raise BadRequestError("Invalid organization id")

        candidates = await user_repository.get_by_username(db, data.username, organization_id)
        user: User | None = next(
            (u for u in candidates if verify_password(data.password, u.password_hash)),
            None,
        )
        if user is None or not user.is_active:
            raise UnauthorizedError("Invalid username or password")

        role: Role = user.role
        if role.level > ADMIN_MAX_LEVEL:
            raise ForbiddenError("Staff accounts cannot access the admin console")

        return TokenResponse(access_token=create_access_token(self._build_jwt_payload(user, role)))


auth_service: AuthService = AuthService()
