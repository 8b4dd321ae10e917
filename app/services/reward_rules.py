"""할인/리워드 중복 적용 규칙: 순수 판단 함수 모듈.

Discount/reward stacking rules: Pure decision functions.
Decides whether one more discount kind may be applied to a checkout,
given the location's reward usage strategy and the kinds already active.
No database or network access happens here; callers pass in an explicit
RewardUsageRules value built from the stored configuration.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable


class DiscountKind(str, Enum):
    """할인 종류: Discount/reward mechanism category."""

    DISCOUNT = "discount"
    COUPON = "coupon"
    MEMBERSHIP = "membership"
    LOYALTY_POINTS = "loyalty_points"
    REFERRAL = "referral"


class RewardStrategy(str, Enum):
    """중복 적용 전략: Stacking policy configured per location."""

    SINGLE_ONLY = "single_only"
    COMBINATIONS_ONLY = "combinations_only"


@dataclass(frozen=True)
class RewardUsageRules:
    """매장별 리워드 사용 규칙 값 객체.

    Immutable reward usage rules for one location.

    Attributes:
        strategy: 중복 적용 전략 (Stacking strategy)
        allowed_combinations: 허용 조합 목록, 각 조합은 순서 없는 집합
                              (Allowed combinations, each an unordered set)
        max_kinds_per_booking: 예약당 최대 할인 종류 수 (Upper bound on kinds per booking)
        enabled_kinds: 사용 가능한 할인 종류 (Kinds whose enable flag is on)
    """

    strategy: RewardStrategy
    allowed_combinations: tuple[frozenset[DiscountKind], ...] = ()
    max_kinds_per_booking: int = 1
    enabled_kinds: frozenset[DiscountKind] = field(default_factory=lambda: frozenset(DiscountKind))

    @classmethod
    def build(
        cls,
        strategy: RewardStrategy | str,
        allowed_combinations: Iterable[Iterable[DiscountKind | str]] = (),
        max_kinds_per_booking: int = 1,
        enabled_kinds: Iterable[DiscountKind | str] | None = None,
    ) -> "RewardUsageRules":
        """문자열/리스트 입력으로 규칙을 생성합니다.

        Build rules from plain strings and lists (as stored in the DB or sent over JSON).
        Combination order is preserved; duplicate kinds inside a combination collapse.
        """
        combos = tuple(
            frozenset(DiscountKind(kind) for kind in combo) for combo in allowed_combinations
        )
        enabled = (
            frozenset(DiscountKind)
            if enabled_kinds is None
            else frozenset(DiscountKind(kind) for kind in enabled_kinds)
        )
        return cls(
            strategy=RewardStrategy(strategy),
            allowed_combinations=combos,
            max_kinds_per_booking=max_kinds_per_booking,
            enabled_kinds=enabled,
        )


@dataclass(frozen=True)
class RewardDecision:
    """적용 가능 여부 판단 결과: Decision with a reason code for the UI."""

    allowed: bool
    reason: str | None = None
    message: str | None = None


# 사유 코드별 안내 메시지: Messages shown next to a disabled reward option
_MESSAGES: dict[str, str] = {
    "already_applied": "This discount is already applied",
    "kind_disabled": "This reward type is disabled for this location",
    "single_only": "Only one discount can be used at a time",
    "max_reached": "Maximum of {max} discounts allowed per booking",
    "not_in_any_combination": "This reward can only be used in combination with other discounts",
    "combination_not_allowed": "This discount combination is not allowed",
}


def _strategy_reason(
    rules: RewardUsageRules,
    active: frozenset[DiscountKind],
    candidate: DiscountKind,
) -> str | None:
    """전략 단계에서 거절 사유를 반환합니다. 허용이면 None."""
    if rules.strategy == RewardStrategy.SINGLE_ONLY:
        return "single_only" if active else None

    candidate_set = active | {candidate}
    if len(candidate_set) == 1:
        # 단독 사용: 어느 조합에든 포함되어 있으면 허용 (partial match)
        # 단, 최대 개수를 넘는 조합은 완성될 수 없으므로 근거가 되지 않음
        # A combination larger than the per-booking maximum can never be
        # completed, so it does not justify using one of its members alone
        containing = [combo for combo in rules.allowed_combinations if candidate in combo]
        if not containing:
            return "not_in_any_combination"
        if any(len(combo) <= rules.max_kinds_per_booking for combo in containing):
            return None
        return "max_reached"

    # 복수 사용: 허용 조합과 정확히 일치해야 함 (exact set match)
    if candidate_set in rules.allowed_combinations:
        return None
    return "combination_not_allowed"


def _decide(
    rules: RewardUsageRules,
    active_kinds: Iterable[DiscountKind | str],
    candidate_kind: DiscountKind | str,
) -> str | None:
    active = frozenset(DiscountKind(kind) for kind in active_kinds)
    candidate = DiscountKind(candidate_kind)

    if candidate in active:
        return "already_applied"

    reason = _strategy_reason(rules, active, candidate)
    if reason == "single_only":
        return reason

    # 최대 개수 제한은 전략 결과와 무관하게 마지막에 적용
    # The per-booking maximum overrides every other strategy outcome
    if len(active) + 1 > rules.max_kinds_per_booking:
        return "max_reached"
    return reason


def can_apply(
    rules: RewardUsageRules,
    active_kinds: Iterable[DiscountKind | str],
    candidate_kind: DiscountKind | str,
) -> bool:
    """할인 종류를 하나 더 적용할 수 있는지 판단합니다.

    Decide whether `candidate_kind` may be added on top of `active_kinds`.

    - single_only: allowed only while nothing else is active.
    - combinations_only: a lone candidate must appear in some allowed
      combination; two or more kinds together must equal an allowed
      combination exactly (unordered).
    - The per-booking maximum is checked last and overrides the
      combinations_only outcome.

    A candidate that is already active returns False. Per-kind enable flags
    are not consulted here; see `explain`.

    Args:
        rules: 매장 리워드 규칙 (Location reward rules)
        active_kinds: 이미 적용된 할인 종류 (Kinds already applied)
        candidate_kind: 추가하려는 할인 종류 (Kind being added)

    Returns:
        bool: 적용 가능 여부 (Whether the candidate may be applied)
    """
    return _decide(rules, active_kinds, candidate_kind) is None


def explain(
    rules: RewardUsageRules,
    active_kinds: Iterable[DiscountKind | str],
    candidate_kind: DiscountKind | str,
) -> RewardDecision:
    """적용 가능 여부와 거절 사유를 함께 반환합니다.

    Same decision as `can_apply`, preceded by the per-kind enable flag,
    with a reason code and a display message when the candidate is refused.
    """
    active = frozenset(DiscountKind(kind) for kind in active_kinds)
    candidate = DiscountKind(candidate_kind)

    if candidate in active:
        reason: str | None = "already_applied"
    elif candidate not in rules.enabled_kinds:
        reason = "kind_disabled"
    else:
        reason = _decide(rules, active, candidate)

    if reason is None:
        return RewardDecision(allowed=True)
    return RewardDecision(
        allowed=False,
        reason=reason,
        message=_MESSAGES[reason].format(max=rules.max_kinds_per_booking),
    )


def validate_combinations(rules: RewardUsageRules) -> list[str]:
    """허용 조합 구성의 문제점을 찾습니다 (저장 시점 검증용).

    Return human-readable problems with the configured combinations:
    combinations with fewer than two kinds, duplicate combinations,
    and combinations that reference disabled kinds. Empty list means valid.
    """
    problems: list[str] = []
    seen: set[frozenset[DiscountKind]] = set()
    for index, combo in enumerate(rules.allowed_combinations):
        names = ", ".join(sorted(kind.value for kind in combo))
        if len(combo) < 2:
            problems.append(f"Combination #{index + 1} ({names}) must contain at least 2 reward types")
        if combo in seen:
            problems.append(f"Combination #{index + 1} ({names}) is a duplicate")
        seen.add(combo)
        disabled = sorted(kind.value for kind in combo - rules.enabled_kinds)
        if disabled:
            problems.append(
                f"Combination #{index + 1} ({names}) uses disabled reward types: {', '.join(disabled)}"
            )
    return problems
