"""Rule-based adherence coaching and daily tip persistence."""

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from datetime import UTC, date, datetime
from typing import Protocol
from uuid import UUID

from dog_tracker.domain.coach import CoachInsight, CoachMetrics, CoachTip
from dog_tracker.domain.logs import day_key
from dog_tracker.services.energy import round_half_up
from dog_tracker.services.summaries import DailySummaryService

ABOVE_TARGET_KCAL = 150
BELOW_TARGET_KCAL = -250
STREAK_DAYS = 3
STABLE_BAND_KCAL = 120

_logger = logging.getLogger(__name__)


def average(values: Sequence[float]) -> float:
    """Return the mean of values, or 0 when empty."""
    if not values:
        return 0.0
    return sum(values) / len(values)


def consecutive_days(
    condition: Callable[[float], bool], values: Sequence[float]
) -> int:
    """Count qualifying values from the most recent one backwards."""
    streak = 0
    for value in reversed(values):
        if not condition(value):
            break
        streak += 1
    return streak


def build_coach_insight(
    target: float, last7: Sequence[float], last14: Sequence[float]
) -> CoachInsight:
    """Classify recent daily net calories against the target.

    Rules are checked in priority order and the first match wins: streaks
    over the last 14 days take precedence over the 7-day average.
    """
    diff7 = round_half_up(average(last7) - target)
    diff14 = round_half_up(average(last14) - target)

    streak_above = consecutive_days(lambda x: x - target > ABOVE_TARGET_KCAL, last14)
    streak_below = consecutive_days(lambda x: x - target < BELOW_TARGET_KCAL, last14)

    if streak_above >= STREAK_DAYS:
        return CoachInsight(
            title="Above target for a few days",
            severity="warn",
            bullets=[
                f"{streak_above} days in a row above target (about +150 kcal or more).",
                "Cut snacks and extras by 5-10% and weigh treats for 3 days.",
                "Goal: get back into the range without drastic cuts.",
            ],
        )

    if streak_below >= STREAK_DAYS:
        return CoachInsight(
            title="Deficit too aggressive",
            severity="bad",
            bullets=[
                f"{streak_below} days in a row well below target "
                "(about -250 kcal or more).",
                "Risk: hunger, lower adherence and metabolic adaptation.",
                "Increase portions slightly (5-10%) and aim for consistency.",
            ],
        )

    if diff7 > ABOVE_TARGET_KCAL:
        return CoachInsight(
            title="Trending above target",
            severity="warn",
            bullets=[
                f"7-day average is ~{diff7} kcal above target.",
                "Reduce snacks or portions by 5-10%; a small correction is enough.",
                "Tip: snacks are usually the main cause.",
            ],
        )

    if diff7 < BELOW_TARGET_KCAL:
        return CoachInsight(
            title="Too far below target",
            severity="bad",
            bullets=[
                f"7-day average is ~{abs(diff7)} kcal below target.",
                "A moderate deficit works better: increase portions slightly.",
                "If the dog is already restless or hungry, avoid further cuts.",
            ],
        )

    if abs(diff14) <= STABLE_BAND_KCAL:
        extra = "Stable over 14 days too: great consistency."
    else:
        sign = "+" if diff14 >= 0 else ""
        extra = (
            f"Over 14 days you are ~{sign}{diff14} kcal from target: "
            "ok, but watch regularity."
        )
    return CoachInsight(
        title="Great adherence",
        severity="good",
        bullets=[
            "7-day average is in line with the target: keep it up.",
            extra,
            "Tip: keep meal times and portions steady for 7-10 days "
            "before changing strategy.",
        ],
    )


class CoachTipRepository(Protocol):
    """Persistence interface for daily coach tips."""

    def get_tip(self, user_id: UUID, dog_id: UUID, day_id: str) -> CoachTip | None:
        """Return the tip stored for a day if present."""

    def upsert_tip(self, user_id: UUID, dog_id: UUID, tip: CoachTip) -> None:
        """Insert or overwrite the tip for its day."""


@dataclass
class CoachTipService:
    """Service that evaluates adherence and stores one tip per day."""

    repository: CoachTipRepository
    summary_service: DailySummaryService

    def upsert_today_coach_tip(
        self,
        user_id: UUID,
        dog_id: UUID,
        insight: CoachInsight,
        metrics: CoachMetrics | None = None,
        today: date | None = None,
    ) -> str:
        """Store today's insight, keeping the original creation time."""
        key = day_key(today or self.summary_service.today())
        existing = self.repository.get_tip(user_id, dog_id, key)
        now = datetime.now(tz=UTC)
        tip = CoachTip(
            day_id=key,
            title=insight.title,
            bullets=list(insight.bullets),
            severity=insight.severity,
            metrics=metrics or CoachMetrics(),
            created_at=existing.created_at if existing and existing.created_at else now,
            updated_at=now,
        )
        self.repository.upsert_tip(user_id, dog_id, tip)
        _logger.info(
            "Coach tip stored: dog_id=%s day=%s severity=%s new=%s",
            dog_id,
            key,
            insight.severity,
            existing is None,
        )
        return key

    def refresh_today_tip(
        self, user_id: UUID, dog_id: UUID, target: float
    ) -> tuple[CoachInsight, str] | None:
        """Evaluate recent history and persist today's tip.

        Returns None without writing when the dog has no recent summaries.
        """
        today = self.summary_service.today()
        last7, last14 = self.summary_service.net_history(user_id, dog_id, today)
        if not last14:
            return None
        insight = build_coach_insight(target, last7, last14)
        metrics = CoachMetrics(
            target=round_half_up(target),
            avg7=round_half_up(average(last7)),
            avg14=round_half_up(average(last14)),
        )
        key = self.upsert_today_coach_tip(user_id, dog_id, insight, metrics, today)
        return insight, key
