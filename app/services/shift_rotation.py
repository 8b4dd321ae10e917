"""반복 근무 패턴 전개: 순수 계산 모듈.

Shift rotation expansion: Pure computation module.
Expands a repeating N-week template of enabled days and shift time ranges
into concrete dated shift records over a forward-looking horizon.
Persistence (delete-then-insert of the horizon) is the caller's job;
see ShiftRepository.replace_range.

Day-of-week convention: 0 = Sunday ... 6 = Saturday. Weeks start on Sunday.
"""

import math
from dataclasses import dataclass, field
from datetime import date, datetime, time, timedelta, tzinfo
from typing import Any

# 요일 수: Days per week
DAYS_PER_WEEK: int = 7


@dataclass(frozen=True)
class ShiftSlot:
    """하루 안의 근무 시간대: One start/end time range within a day."""

    start_time: time
    end_time: time


@dataclass
class DayConfig:
    """요일 설정: 근무 여부와 시간대 목록.

    Attributes:
        enabled: 근무일 여부, False면 shifts는 무시됨 (Working day; False suppresses all shifts)
        shifts: 시간대 목록, 순서 유지 및 중복 허용 (Ordered time ranges, duplicates kept)
    """

    enabled: bool = False
    shifts: list[ShiftSlot] = field(default_factory=list)


# 템플릿: {주차 인덱스: {요일: DayConfig}}
# Template: {week index: {day of week: DayConfig}}
ShiftTemplate = dict[int, dict[int, DayConfig]]


@dataclass(frozen=True)
class GeneratedShift:
    """전개 결과 근무 레코드: Concrete shift record produced by `generate`."""

    employee_id: Any
    start_time: datetime
    end_time: datetime
    status: str = "pending"


def week_start(day: date) -> date:
    """날짜가 속한 주의 일요일을 반환합니다.

    Normalize a date to the Sunday that starts its week.
    """
    # date.weekday(): Monday=0 ... Sunday=6 → Sunday-based offset
    return day - timedelta(days=(day.weekday() + 1) % DAYS_PER_WEEK)


def horizon_range(
    anchor_date: date, total_weeks: int, horizon_weeks: int
) -> tuple[date, date]:
    """전개 결과가 차지하는 구간 [시작, 끝)을 반환합니다.

    Return the half-open date range `generate` fills for the same arguments.
    The last cycle always completes, so the span is the horizon rounded up to
    a whole number of rotations.
    """
    start = week_start(anchor_date)
    cycles = math.ceil(horizon_weeks / total_weeks)
    return start, start + timedelta(weeks=cycles * total_weeks)


def generate(
    employee_id: Any,
    template: ShiftTemplate,
    total_weeks: int,
    horizon_weeks: int,
    anchor_date: date,
    tz: tzinfo | None = None,
) -> list[GeneratedShift]:
    """반복 템플릿을 구체적인 근무 레코드로 전개합니다.

    Expand a cyclic weekly template into dated shift records.

    The template repeats every `total_weeks` weeks until `horizon_weeks` of
    calendar time is covered. When the horizon is not a multiple of
    `total_weeks` the last cycle runs to completion, so the output may end
    just past the horizon but never short of it.

    Output order: cycle, template week, day 0..6, then shift index.
    Disabled days produce nothing even if they list shifts. Identical shift
    entries produce identical records. An end time before the start time is
    passed through unchanged.

    Args:
        employee_id: 대상 직원 ID (Employee the shifts belong to)
        template: 주차별/요일별 설정 (Per-week, per-day configuration)
        total_weeks: 반복 주기(주) (Rotation length in weeks)
        horizon_weeks: 전개 기간(주) (Calendar weeks to cover)
        anchor_date: 기준일, 해당 주 일요일로 정규화 (Normalized to its week's Sunday)
        tz: 생성 시각에 부여할 시간대, 선택 (Optional timezone for produced timestamps)

    Returns:
        list[GeneratedShift]: 전개된 근무 레코드 (Generated records)

    Raises:
        ValueError: total_weeks 또는 horizon_weeks가 1 미만일 때
    """
    if total_weeks < 1:
        raise ValueError("total_weeks must be at least 1")
    if horizon_weeks < 1:
        raise ValueError("horizon_weeks must be at least 1")

    anchor: date = week_start(anchor_date)
    cycles: int = math.ceil(horizon_weeks / total_weeks)
    records: list[GeneratedShift] = []

    for cycle_week in range(cycles):
        for template_week in range(total_weeks):
            offset: int = cycle_week * total_weeks + template_week
            week_start_date: date = anchor + timedelta(weeks=offset)
            days: dict[int, DayConfig] = template.get(template_week, {})

            for day_of_week in range(DAYS_PER_WEEK):
                config: DayConfig | None = days.get(day_of_week)
                if config is None or not config.enabled:
                    continue
                day: date = week_start_date + timedelta(days=day_of_week)
                for slot in config.shifts:
                    records.append(
                        GeneratedShift(
                            employee_id=employee_id,
                            start_time=datetime.combine(day, slot.start_time, tzinfo=tz),
                            end_time=datetime.combine(day, slot.end_time, tzinfo=tz),
                        )
                    )

    return records


def inverted_slots(template: ShiftTemplate) -> list[tuple[int, int, ShiftSlot]]:
    """종료가 시작보다 늦지 않은 시간대를 찾습니다.

    Return (week, day, slot) for every enabled slot whose end is not after
    its start. Such slots are still generated; callers may warn about them.
    """
    found: list[tuple[int, int, ShiftSlot]] = []
    for week_index in sorted(template):
        for day_of_week in sorted(template[week_index]):
            config = template[week_index][day_of_week]
            if not config.enabled:
                continue
            found.extend(
                (week_index, day_of_week, slot)
                for slot in config.shifts
                if slot.end_time <= slot.start_time
            )
    return found
