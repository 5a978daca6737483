"""Daily energy summary aggregation."""

import logging
import math
from dataclasses import dataclass
from datetime import UTC, date, datetime, timedelta
from typing import Protocol
from uuid import UUID
from zoneinfo import ZoneInfo

from dog_tracker.domain.logs import ActivityEvent, DailySummary, MealEvent
from dog_tracker.services.energy import round_half_up

HISTORY_DAYS = 14
RECENT_DAYS = 7

_logger = logging.getLogger(__name__)


class EventRepository(Protocol):
    """Persistence interface for logged meal and activity events."""

    def list_meal_events(
        self, user_id: UUID, dog_id: UUID, day: date
    ) -> list[MealEvent]:
        """Return meal events in a day bucket."""

    def list_activity_events(
        self, user_id: UUID, dog_id: UUID, day: date
    ) -> list[ActivityEvent]:
        """Return activity events in a day bucket."""

    def create_meal_event(
        self, user_id: UUID, dog_id: UUID, event: MealEvent
    ) -> MealEvent:
        """Store a meal event."""

    def create_activity_event(
        self, user_id: UUID, dog_id: UUID, event: ActivityEvent
    ) -> ActivityEvent:
        """Store an activity event."""


class SummaryRepository(Protocol):
    """Persistence interface for daily summaries."""

    def get_summary(
        self, user_id: UUID, dog_id: UUID, day: date
    ) -> DailySummary | None:
        """Return the summary for a day if present."""

    def upsert_summary(
        self, user_id: UUID, dog_id: UUID, summary: DailySummary
    ) -> None:
        """Insert or overwrite the summary for its day."""

    def list_summaries(
        self,
        user_id: UUID,
        dog_id: UUID,
        start: date | None = None,
        end: date | None = None,
    ) -> list[DailySummary]:
        """Return summaries ordered by day, optionally bounded (inclusive)."""


@dataclass
class DailySummaryService:
    """Service that reduces a day's events into one energy summary."""

    event_repository: EventRepository
    summary_repository: SummaryRepository
    timezone_name: str = "UTC"

    def today(self) -> date:
        """Return today's date in the configured timezone."""
        return datetime.now(tz=ZoneInfo(self.timezone_name)).date()

    def recompute_daily_summary(
        self, user_id: UUID, dog_id: UUID, day: date, target: float
    ) -> DailySummary:
        """Re-scan the day's events and overwrite its summary."""
        meals = self.event_repository.list_meal_events(user_id, dog_id, day)
        activities = self.event_repository.list_activity_events(user_id, dog_id, day)

        calories_in = sum(_to_kcal(event.kcal) for event in meals)
        calories_out = sum(_to_kcal(event.kcal) for event in activities)
        net = round_half_up(calories_in - calories_out)

        existing = self.summary_repository.get_summary(user_id, dog_id, day)
        now = datetime.now(tz=UTC)
        summary = DailySummary(
            day=day,
            calories_in=round_half_up(calories_in),
            calories_out=round_half_up(calories_out),
            net=net,
            target=round_half_up(target),
            delta=round_half_up(net - target),
            created_at=existing.created_at if existing and existing.created_at else now,
            updated_at=now,
        )
        self.summary_repository.upsert_summary(user_id, dog_id, summary)
        _logger.info(
            "Daily summary recomputed: dog_id=%s day=%s meals=%s activities=%s net=%s",
            dog_id,
            day.isoformat(),
            len(meals),
            len(activities),
            net,
        )
        return summary

    def get_today_summary(self, user_id: UUID, dog_id: UUID) -> DailySummary | None:
        """Return today's summary if it has been computed."""
        return self.summary_repository.get_summary(user_id, dog_id, self.today())

    def ensure_today_summary(
        self, user_id: UUID, dog_id: UUID, target: float
    ) -> DailySummary:
        """Return today's summary, computing it when missing."""
        existing = self.get_today_summary(user_id, dog_id)
        if existing is not None:
            return existing
        return self.recompute_daily_summary(user_id, dog_id, self.today(), target)

    def list_summaries(self, user_id: UUID, dog_id: UUID) -> list[DailySummary]:
        """Return all summaries for a dog ordered by day."""
        rows = self.summary_repository.list_summaries(user_id, dog_id)
        return sorted(rows, key=lambda row: row.day)

    def net_history(
        self, user_id: UUID, dog_id: UUID, today: date | None = None
    ) -> tuple[list[int], list[int]]:
        """Return (last 7 days, last 14 days) net values, oldest first.

        Days with nothing logged are skipped, including the empty row the home
        view creates for today.
        """
        end = today or self.today()
        start14 = end - timedelta(days=HISTORY_DAYS - 1)
        start7 = end - timedelta(days=RECENT_DAYS - 1)
        rows = sorted(
            (
                row
                for row in self.summary_repository.list_summaries(
                    user_id, dog_id, start14, end
                )
                if row.calories_in or row.calories_out
            ),
            key=lambda row: row.day,
        )
        last14 = [row.net for row in rows if start14 <= row.day <= end]
        last7 = [row.net for row in rows if start7 <= row.day <= end]
        return last7, last14


def _to_kcal(value: object) -> float:
    if isinstance(value, bool):
        return 0.0
    if isinstance(value, int | float):
        number = float(value)
    elif isinstance(value, str):
        try:
            number = float(value)
        except ValueError:
            return 0.0
    else:
        return 0.0
    return number if math.isfinite(number) and number > 0 else 0.0
