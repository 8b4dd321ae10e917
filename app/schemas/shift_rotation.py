"""반복 근무 패턴 / 시프트 Pydantic 스키마.

Shift rotation and shift request/response schemas.
A rotation template arrives as a list of weeks; each week maps a
day-of-week string ("0" = Sunday ... "6" = Saturday) to a day config.
"""

from datetime import date, datetime
from pydantic import BaseModel, Field, field_validator

# "HH:MM" 24시간 형식: 24-hour clock
_HHMM = r"^([01]\d|2[0-3]):[0-5]\d$"


class ShiftSlotIn(BaseModel):
    start_time: str = Field(pattern=_HHMM)  # "HH:MM"
    end_time: str = Field(pattern=_HHMM)  # "HH:MM"


class DayConfigIn(BaseModel):
    enabled: bool = False
    shifts: list[ShiftSlotIn] = Field(default_factory=list)


class ShiftRotationRequest(BaseModel):
    """반복 근무 패턴 적용 요청 스키마.

    Attributes:
        weeks: 주차별 요일 설정, 길이가 반복 주기 (Per-week day configs; length = rotation length)
        horizon_weeks: 전개 기간(주), 생략 시 설정값 사용 (Horizon; defaults to ROTATION_HORIZON_WEEKS)
        anchor_date: 기준일, 생략 시 오늘 (Anchor date; defaults to today)
    """

    weeks: list[dict[str, DayConfigIn]] = Field(min_length=1, max_length=52)
    horizon_weeks: int | None = Field(default=None, ge=1, le=104)
    anchor_date: date | None = None

    @field_validator("weeks")
    @classmethod
    def _check_day_keys(cls, weeks: list[dict[str, DayConfigIn]]) -> list[dict[str, DayConfigIn]]:
        valid = {str(day) for day in range(7)}
        for week in weeks:
            unknown = set(week) - valid
            if unknown:
                raise ValueError(f"Invalid day of week: {', '.join(sorted(unknown))} (expected 0-6)")
        return weeks


class ShiftResponse(BaseModel):
    id: str | None = None  # 미리보기에서는 None (None in previews)
    employee_id: str
    start_time: datetime
    end_time: datetime
    status: str
    generation_id: str | None = None


class ShiftRotationResponse(BaseModel):
    """반복 근무 패턴 적용/미리보기 응답.

    Attributes:
        range_start / range_end: 교체 대상 범위 [시작, 끝) (Replaced range)
        removed_count: 삭제된 기존 시프트 수, 미리보기는 0 (Deleted rows; 0 for previews)
        shifts: 생성된 시프트 (Generated shifts in generation order)
        warnings: 종료가 시작보다 이른 시간대 등 경고 (Warnings such as inverted slots)
    """

    generation_id: str | None = None
    range_start: date
    range_end: date
    removed_count: int = 0
    created_count: int
    shifts: list[ShiftResponse]
    warnings: list[str] = Field(default_factory=list)
