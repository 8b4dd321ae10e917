"""조직 및 매장(지점) 관련 SQLAlchemy ORM 모델 정의.

Organization and salon location SQLAlchemy ORM model definitions.
A salon business (organization) owns one or more locations; staff,
shifts and reward usage settings are scoped to a location.

Tables:
    - organizations: 최상위 테넌트 (Top-level tenant)
    - locations: 조직 하위 지점 (Salon location under an organization)
"""

import uuid
from datetime import datetime, timezone
from sqlalchemy import String, Boolean, DateTime, ForeignKey, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base


class Organization(Base):
    """조직(테넌트) 모델: 시스템의 최상위 엔티티.

    Organization (tenant) model: Top-level entity in the system.
    All data is scoped under an organization for multi-tenant isolation.

    Attributes:
        id: 고유 식별자 UUID (Unique identifier)
        name: 조직 이름 (Organization name)
        is_active: 활성 상태 (Active status flag)
        created_at: 생성 일시 UTC (Creation timestamp in UTC)
        updated_at: 수정 일시 UTC (Last update timestamp in UTC)

    Relationships:
        locations: 소속 지점 목록 (Child locations, cascade delete)
        roles: 조직 내 역할 목록 (Roles in this org, cascade delete)
        users: 조직 내 사용자 목록 (Users in this org, cascade delete)
    """

    __tablename__ = "organizations"

    # 조직 고유 식별자: Organization unique identifier (UUID v4, auto-generated)
    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    # 조직 이름: Organization display name (max 255 chars, required)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    # 활성 상태: Whether the organization is active (soft-delete pattern)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True)
    # 생성 일시: Record creation timestamp (UTC)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    # 수정 일시: Last modification timestamp (UTC, auto-updated)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))

    # 관계: Relationships (cascade: 조직 삭제 시 하위 데이터 일괄 삭제)
    locations = relationship("Location", back_populates="organization", cascade="all, delete-orphan")
    roles = relationship("Role", back_populates="organization", cascade="all, delete-orphan")
    users = relationship("User", back_populates="organization", cascade="all, delete-orphan")


class Location(Base):
    """지점 모델: 조직 하위의 살롱/스파 지점.

    Location model: A physical salon/spa branch under an Organization.
    Employees, shifts and the reward usage configuration are scoped here.

    Attributes:
        id: 고유 식별자 UUID (Unique identifier)
        organization_id: 소속 조직 FK (Parent organization)
        name: 지점 이름 (Location name)
        address: 주소, 선택 (Street address, optional)
        phone: 대표 전화번호, 선택 (Contact phone, optional)
        is_active: 활성 상태 (Active status flag)
        created_at: 생성 일시 UTC (Creation timestamp)
        updated_at: 수정 일시 UTC (Last update timestamp)
    """

    __tablename__ = "locations"

    # 지점 고유 식별자: Location unique identifier
    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    # 소속 조직 FK: Parent organization (CASCADE)
    organization_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("organizations.id", ondelete="CASCADE"), nullable=False)
    # 지점 이름: Location display name
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    # 주소: Street address
    address: Mapped[str | None] = mapped_column(String(500), nullable=True)
    # 대표 전화번호: Contact phone
    phone: Mapped[str | None] = mapped_column(String(30), nullable=True)
    # 활성 상태: Active flag
    is_active: Mapped[bool] = mapped_column(Boolean, default=True)
    # 생성 일시: Record creation timestamp (UTC)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    # 수정 일시: Last modification timestamp (UTC, auto-updated)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))

    # 관계: Relationships
    organization = relationship("Organization", back_populates="locations")
    employees = relationship("Employee", back_populates="location", cascade="all, delete-orphan")
