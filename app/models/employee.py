"""직원(시술자) SQLAlchemy ORM 모델 정의.

Salon employee SQLAlchemy ORM model definition.
Employees are the staff members who take bookings and work shifts.
They are separate from back-office login accounts (users).

Tables:
    - employees: 지점 소속 직원 (Staff members scoped to a location)
"""

import uuid
from datetime import datetime, timezone
from sqlalchemy import String, Boolean, DateTime, ForeignKey, Index, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base


class Employee(Base):
    """직원 모델: 근무 스케줄의 대상.

    Employee model: Target of shift scheduling.

    Attributes:
        id: 고유 식별자 UUID (Unique identifier)
        location_id: 소속 지점 FK (Home location)
        name: 이름 (Display name)
        phone: 전화번호, 선택 (Phone number, optional)
        email: 이메일, 선택 (Email, optional)
        employment_type: 고용 형태 (e.g. "stylist", "therapist")
        is_active: 재직 여부 (Active flag)
    """

    __tablename__ = "employees"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    # 소속 지점 FK: Home location (CASCADE)
    location_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("locations.id", ondelete="CASCADE"), nullable=False)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    phone: Mapped[str | None] = mapped_column(String(30), nullable=True)
    email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    # 고용 형태: Job title / employment type
    employment_type: Mapped[str | None] = mapped_column(String(50), nullable=True)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))

    __table_args__ = (
        Index("ix_employees_location", "location_id"),
    )

    # 관계: Relationships
    location = relationship("Location", back_populates="employees")
    shifts = relationship("StaffShift", back_populates="employee", cascade="all, delete-orphan", passive_deletes=True)
