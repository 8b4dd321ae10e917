"""근무 시프트 SQLAlchemy ORM 모델 정의.

Staff shift SQLAlchemy ORM model definition.
Each row is one concrete, dated working period for an employee.
Rows created from a rotation template share a generation_id.

Tables:
    - shifts: 직원 근무 시프트 (Concrete employee shifts)
"""

import uuid
from datetime import datetime, timezone
from sqlalchemy import String, DateTime, ForeignKey, Index, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base


class StaffShift(Base):
    """직원 시프트 모델.

    Staff shift model: One dated working period.

    Status Flow:
        pending → confirmed → (optional) cancelled

    Attributes:
        id: 고유 식별자 UUID (Unique identifier)
        employee_id: 직원 FK (Employee working the shift)
        location_id: 지점 FK (Location where the shift takes place)
        start_time: 시작 시각 (Shift start timestamp)
        end_time: 종료 시각 (Shift end timestamp; not checked against start)
        status: 상태 (pending/confirmed/cancelled)
        generation_id: 반복 패턴 전개 ID, 수동 생성이면 None
                       (Rotation run that produced the row; None if created by hand)
    """

    __tablename__ = "shifts"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    # 직원 FK: Employee (CASCADE: 직원 삭제 시 시프트도 삭제)
    employee_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("employees.id", ondelete="CASCADE"), nullable=False)
    # 지점 FK: Location
    location_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("locations.id", ondelete="CASCADE"), nullable=False)
    start_time: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    end_time: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    # 상태: "pending" → "confirmed" → "cancelled"
    status: Mapped[str] = mapped_column(String(20), default="pending")
    # 전개 ID: Rotation generation identifier
    generation_id: Mapped[uuid.UUID | None] = mapped_column(Uuid, nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))

    __table_args__ = (
        Index("ix_shifts_employee_start", "employee_id", "start_time"),
        Index("ix_shifts_location_start", "location_id", "start_time"),
    )

    # 관계: Relationships
    employee = relationship("Employee", back_populates="shifts")
