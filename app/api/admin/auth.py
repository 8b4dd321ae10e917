"""관리자 인증 라우터: 관리자 로그인.

Admin Auth Router: Back-office login endpoint.
Staff-level accounts (role level >= 4) are rejected.
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.schemas.auth import LoginRequest, TokenResponse
from app.services.auth_service import auth_service

router: APIRouter = APIRouter()


@router.post("/login", response_model=TokenResponse)
async def admin_login(
    data: LoginRequest,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> TokenResponse:
    """관리자 로그인: 스태프 계정 접근 불가.

    Admin login endpoint. Rejects staff-level accounts (level >= 4).
    """
    return await auth_service.admin_login(db, data)
