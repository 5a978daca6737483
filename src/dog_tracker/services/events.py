"""Meal and activity logging."""

import math
from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID

from dog_tracker.domain.catalog import ACTIVITIES, FOODS
from dog_tracker.domain.logs import ActivityEvent, MealEvent
from dog_tracker.services.energy import round_half_up
from dog_tracker.services.summaries import DailySummaryService, EventRepository


def meal_kcal(grams: float, kcal_per_100g: float) -> int:
    """Return the energy of a portion."""
    return round_half_up(grams * kcal_per_100g / 100)


def activity_kcal(weight_kg: float, kcal_per_kg_per_hour: float, minutes: float) -> int:
    """Return the energy spent on an activity."""
    return round_half_up(weight_kg * kcal_per_kg_per_hour * minutes / 60)


@dataclass
class EventLogService:
    """Service that converts catalog entries into logged events."""

    repository: EventRepository
    summary_service: DailySummaryService

    def log_meal(
        self, user_id: UUID, dog_id: UUID, food_id: str, grams: float
    ) -> MealEvent:
        """Log a meal into today's bucket."""
        food = FOODS[food_id]
        if not math.isfinite(grams) or grams < 0:
            raise ValueError("grams must be a finite non-negative number")
        event = MealEvent(
            kind=food.id,
            label=food.label,
            grams=grams,
            kcal=meal_kcal(grams, food.kcal_per_100g),
            created_at=datetime.now(tz=UTC),
            day=self.summary_service.today(),
        )
        return self.repository.create_meal_event(user_id, dog_id, event)

    def log_activity(  # noqa: PLR0913
        self,
        user_id: UUID,
        dog_id: UUID,
        activity_id: str,
        minutes: float,
        weight_kg: float,
    ) -> ActivityEvent:
        """Log an activity session into today's bucket."""
        activity = ACTIVITIES[activity_id]
        if not math.isfinite(minutes) or minutes < 0:
            raise ValueError("minutes must be a finite non-negative number")
        event = ActivityEvent(
            kind=activity.id,
            label=activity.label,
            minutes=minutes,
            kcal=activity_kcal(weight_kg, activity.kcal_per_kg_per_hour, minutes),
            created_at=datetime.now(tz=UTC),
            day=self.summary_service.today(),
        )
        return self.repository.create_activity_event(user_id, dog_id, event)
