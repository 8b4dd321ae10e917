"""관리자 계정 및 역할 SQLAlchemy ORM 모델 정의.

Back-office account and role SQLAlchemy ORM model definitions.
Implements level-based access control within each organization.

Tables:
    - roles: 조직 내 역할 (Roles within an organization, level-based hierarchy)
    - users: 관리자 계정 (Back-office accounts with org/role scoping)
"""

import uuid
from datetime import datetime, timezone
from sqlalchemy import String, Boolean, DateTime, Integer, ForeignKey, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base


class Role(Base):
    """역할 모델: 조직 내 권한 수준을 정의.

    Role model: Defines permission levels within an organization.
    Lower level numbers indicate higher authority:
        1 = owner, 2 = manager, 3 = supervisor, 4 = staff

    Constraints:
        uq_role_org_name: 조직 내 역할 이름 고유 (Unique role name per org)
        uq_role_org_level: 조직 내 레벨 고유 (Unique level per org)
    """

    __tablename__ = "roles"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    # 소속 조직 FK: Parent organization
    organization_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("organizations.id", ondelete="CASCADE"), nullable=False)
    # 역할 이름: Role name ("owner", "manager", "supervisor", "staff")
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    # 권한 레벨: Permission level (1 = highest)
    level: Mapped[int] = mapped_column(Integer, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))

    __table_args__ = (
        UniqueConstraint("organization_id", "name", name="uq_role_org_name"),
        UniqueConstraint("organization_id", "level", name="uq_role_org_level"),
    )

    # 관계: Relationships
    organization = relationship("Organization", back_populates="roles")
    users = relationship("User", back_populates="role")


class User(Base):
    """관리자 계정 모델.

    Back-office user account. Each user belongs to exactly one organization
    and has one role. Username is unique within an organization.

    Attributes:
        id: 고유 식별자 UUID (Unique identifier)
        organization_id: 소속 조직 FK (Parent organization foreign key)
        role_id: 역할 FK (Assigned role foreign key)
        username: 로그인 아이디 (Login username, unique per org)
        email: 이메일 (Email address, optional)
        full_name: 실명 (Full display name)
        password_hash: bcrypt 해시된 비밀번호 (bcrypt-hashed password)
        is_active: 활성 상태 (Active status, soft-delete pattern)

    Constraints:
        uq_user_org_username: 조직 내 사용자명 고유 (Unique username per org)
    """

    __tablename__ = "users"

    # 사용자 고유 식별자: User unique identifier (UUID v4, auto-generated)
    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    # 소속 조직 FK: Parent organization (CASCADE: 조직 삭제 시 사용자도 삭제)
    organization_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("organizations.id", ondelete="CASCADE"), nullable=False)
    # 역할 FK: Assigned role (역할 삭제 시 제한됨, role deletion is restricted)
    role_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("roles.id"), nullable=False)
    # 로그인 아이디: Login username (조직 내 고유, unique within org)
    username: Mapped[str] = mapped_column(String(100), nullable=False)
    # 이메일: Email address (optional)
    email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    # 실명: User's full display name
    full_name: Mapped[str] = mapped_column(String(255), nullable=False)
    # 비밀번호 해시: bcrypt hashed password (평문 저장 금지, never store plaintext)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    # 활성 상태: Whether the user account is active
    is_active: Mapped[bool] = mapped_column(Boolean, default=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))

    __table_args__ = (
        UniqueConstraint("organization_id", "username", name="uq_user_org_username"),
    )

    # 관계: Relationships
    organization = relationship("Organization", back_populates="users")
    role = relationship("Role", back_populates="users")
