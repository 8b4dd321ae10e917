"""반복 근무 패턴 서비스: 템플릿 전개 및 시프트 교체.

Shift Rotation Service: Applies an N-week rotation template to an employee.
Expands the template with shift_rotation.generate and replaces the
employee's shifts over the covered range in a single transaction.
"""

import logging
import uuid
from datetime import date, datetime, time, timedelta, tzinfo
from uuid import UUID
from zoneinfo import ZoneInfo

from sqlalchemy.ext.asyncio import AsyncSession

from app.config import settings
from app.models.shift import StaffShift
from app.repositories.shift_repository import shift_repository
from app.schemas.shift_rotation import (
    ShiftResponse,
    ShiftRotationRequest,
    ShiftRotationResponse,
)
from app.services.location_service import location_service
from app.services.shift_rotation import (
    DayConfig,
    GeneratedShift,
    ShiftSlot,
    ShiftTemplate,
    generate,
    horizon_range,
    inverted_slots,
)

logger = logging.getLogger(__name__)

_DAY_NAMES: tuple[str, ...] = ("Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday")


def _parse_hhmm(value: str) -> time:
    h, m = map(int, value.split(":"))
    return time(h, m)


def build_template(data: ShiftRotationRequest) -> ShiftTemplate:
    """요청 스키마를 전개용 템플릿으로 변환합니다.

    Convert the request's list-of-weeks into {week: {day: DayConfig}}.
    """
    template: ShiftTemplate = {}
    for week_index, week in enumerate(data.weeks):
        template[week_index] = {
            int(day): DayConfig(
                enabled=config.enabled,
                shifts=[
                    ShiftSlot(_parse_hhmm(slot.start_time), _parse_hhmm(slot.end_time))
                    for slot in config.shifts
                ],
            )
            for day, config in week.items()
        }
    return template


class ShiftRotationService:
    """반복 근무 패턴 서비스.

    Shift rotation service handling preview, application and listing.
    """

    @staticmethod
    def _tz() -> tzinfo:
        return ZoneInfo(settings.SCHEDULE_TIMEZONE)

    def _warnings(self, template: ShiftTemplate) -> list[str]:
        return [
            f"Week {week + 1} {_DAY_NAMES[day]}: shift ends at {slot.end_time:%H:%M}, "
            f"not after its start {slot.start_time:%H:%M}"
            for week, day, slot in inverted_slots(template)
        ]

    def _resolve(
        self, data: ShiftRotationRequest
    ) -> tuple[ShiftTemplate, int, int, date]:
        template = build_template(data)
        total_weeks = len(data.weeks)
        horizon_weeks = data.horizon_weeks or settings.ROTATION_HORIZON_WEEKS
        anchor_date = data.anchor_date or datetime.now(self._tz()).date()
        return template, total_weeks, horizon_weeks, anchor_date

    @staticmethod
    def _generated_response(employee_id: UUID, shift: GeneratedShift) -> ShiftResponse:
        return ShiftResponse(
            employee_id=str(employee_id),
            start_time=shift.start_time,
            end_time=shift.end_time,
            status=shift.status,
        )

    @staticmethod
    def _stored_response(shift: StaffShift) -> ShiftResponse:
        return ShiftResponse(
            id=str(shift.id),
            employee_id=str(shift.employee_id),
            start_time=shift.start_time,
            end_time=shift.end_time,
            status=shift.status,
            generation_id=str(shift.generation_id) if shift.generation_id else None,
        )

    async def preview_rotation(
        self,
        db: AsyncSession,
        employee_id: UUID,
        organization_id: UUID,
        data: ShiftRotationRequest,
    ) -> ShiftRotationResponse:
        """저장 없이 전개 결과를 미리 봅니다.

        Expand the template without touching stored shifts.
        """
        await location_service.get_employee(db, employee_id, organization_id)
        template, total_weeks, horizon_weeks, anchor_date = self._resolve(data)
        generated = generate(employee_id, template, total_weeks, horizon_weeks, anchor_date, self._tz())
        range_start, range_end = horizon_range(anchor_date, total_weeks, horizon_weeks)
        return ShiftRotationResponse(
            range_start=range_start,
            range_end=range_end,
            created_count=len(generated),
            shifts=[self._generated_response(employee_id, s) for s in generated],
            warnings=self._warnings(template),
        )

    async def apply_rotation(
        self,
        db: AsyncSession,
        employee_id: UUID,
        organization_id: UUID,
        data: ShiftRotationRequest,
    ) -> ShiftRotationResponse:
        """반복 근무 패턴을 적용합니다.

        Expand the template and replace the employee's shifts over the covered
        range. The replaced range starts at the anchor's week and spans whole
        rotations, so a re-run always removes everything a previous run with
        the same template created. Delete and insert share the caller's
        transaction; the router commits once.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            employee_id: 직원 UUID (Employee UUID)
            organization_id: 조직 UUID (Caller's organization)
            data: 템플릿 및 전개 옵션 (Template and horizon options)

        Returns:
            ShiftRotationResponse: 교체 범위와 생성된 시프트 (Replaced range and created shifts)

        Raises:
            NotFoundError: 직원이 없거나 다른 조직 소속일 때 (Missing or foreign employee)
        """
        employee = await location_service.get_employee(db, employee_id, organization_id)
        template, total_weeks, horizon_weeks, anchor_date = self._resolve(data)
        tz = self._tz()

        generated = generate(employee_id, template, total_weeks, horizon_weeks, anchor_date, tz)
        warnings = self._warnings(template)
        for warning in warnings:
            logger.warning("Rotation for employee %s: %s", employee_id, warning)

        range_start, range_end = horizon_range(anchor_date, total_weeks, horizon_weeks)
        generation_id: UUID = uuid.uuid4()
        removed, created = await shift_repository.replace_range(
            db,
            employee_id,
            datetime.combine(range_start, time.min, tzinfo=tz),
            datetime.combine(range_end, time.min, tzinfo=tz),
            [
                {
                    "employee_id": employee_id,
                    "location_id": employee.location_id,
                    "start_time": shift.start_time,
                    "end_time": shift.end_time,
                    "status": shift.status,
                }
                for shift in generated
            ],
            generation_id,
        )

        logger.info(
            "Applied %d-week rotation to employee %s over %s..%s: removed=%d created=%d generation=%s",
            total_weeks, employee_id, range_start, range_end, removed, len(created), generation_id,
        )
        return ShiftRotationResponse(
            generation_id=str(generation_id),
            range_start=range_start,
            range_end=range_end,
            removed_count=removed,
            created_count=len(created),
            shifts=[self._stored_response(s) for s in created],
            warnings=warnings,
        )

    async def list_shifts(
        self,
        db: AsyncSession,
        employee_id: UUID,
        organization_id: UUID,
        date_from: date | None = None,
        date_to: date | None = None,
    ) -> list[ShiftResponse]:
        """직원 시프트를 날짜 범위로 조회합니다 (date_to 포함).

        List an employee's shifts starting between date_from and date_to, inclusive.
        """
        await location_service.get_employee(db, employee_id, organization_id)
        tz = self._tz()
        range_start = datetime.combine(date_from, time.min, tzinfo=tz) if date_from else None
        range_end = datetime.combine(date_to + timedelta(days=1), time.min, tzinfo=tz) if date_to else None
        shifts = await shift_repository.get_by_employee_range(db, employee_id, range_start, range_end)
        return [self._stored_response(s) for s in shifts]


shift_rotation_service: ShiftRotationService = ShiftRotationService()
