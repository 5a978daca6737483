"""Supabase repository for meal and activity logs."""

from dataclasses import dataclass
from datetime import UTC, date, datetime
from uuid import UUID

from supabase import Client

from dog_tracker.domain.logs import ActivityEvent, MealEvent
from dog_tracker.services.summaries import EventRepository

MEAL_TABLE = "dog_meal_logs"
ACTIVITY_TABLE = "dog_activity_logs"


@dataclass
class SupabaseEventRepository(EventRepository):
    """Supabase implementation for logged events."""

    client: Client

    def list_meal_events(
        self, user_id: UUID, dog_id: UUID, day: date
    ) -> list[MealEvent]:
        """Return meal events in the day bucket."""
        response = (
            self.client.table(MEAL_TABLE)
            .select("kind, label, grams, kcal, created_at, day")
            .eq("user_id", str(user_id))
            .eq("dog_id", str(dog_id))
            .eq("day", day.isoformat())
            .order("created_at", desc=False)
            .execute()
        )
        return [_parse_meal(row) for row in response.data or []]

    def list_activity_events(
        self, user_id: UUID, dog_id: UUID, day: date
    ) -> list[ActivityEvent]:
        """Return activity events in the day bucket."""
        response = (
            self.client.table(ACTIVITY_TABLE)
            .select("kind, label, minutes, kcal, created_at, day")
            .eq("user_id", str(user_id))
            .eq("dog_id", str(dog_id))
            .eq("day", day.isoformat())
            .order("created_at", desc=False)
            .execute()
        )
        return [_parse_activity(row) for row in response.data or []]

    def create_meal_event(
        self, user_id: UUID, dog_id: UUID, event: MealEvent
    ) -> MealEvent:
        """Insert a meal log row."""
        response = (
            self.client.table(MEAL_TABLE)
            .insert(
                {
                    "user_id": str(user_id),
                    "dog_id": str(dog_id),
                    "kind": event.kind,
                    "label": event.label,
                    "grams": event.grams,
                    "kcal": event.kcal,
                    "created_at": event.created_at.isoformat(),
                    "day": event.day.isoformat(),
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create meal log")
        return event

    def create_activity_event(
        self, user_id: UUID, dog_id: UUID, event: ActivityEvent
    ) -> ActivityEvent:
        """Insert an activity log row."""
        response = (
            self.client.table(ACTIVITY_TABLE)
            .insert(
                {
                    "user_id": str(user_id),
                    "dog_id": str(dog_id),
                    "kind": event.kind,
                    "label": event.label,
                    "minutes": event.minutes,
                    "kcal": event.kcal,
                    "created_at": event.created_at.isoformat(),
                    "day": event.day.isoformat(),
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create activity log")
        return event


def _parse_meal(row: dict[str, object]) -> MealEvent:
    return MealEvent(
        kind=str(row.get("kind") or ""),
        label=str(row.get("label") or ""),
        grams=_to_float(row.get("grams")),
        kcal=row.get("kcal"),  # type: ignore[arg-type]
        created_at=_parse_datetime(row.get("created_at")),
        day=date.fromisoformat(str(row["day"])[:10]),
    )


def _parse_activity(row: dict[str, object]) -> ActivityEvent:
    return ActivityEvent(
        kind=str(row.get("kind") or ""),
        label=str(row.get("label") or ""),
        minutes=_to_float(row.get("minutes")),
        kcal=row.get("kcal"),  # type: ignore[arg-type]
        created_at=_parse_datetime(row.get("created_at")),
        day=date.fromisoformat(str(row["day"])[:10]),
    )


def _parse_datetime(raw: object) -> datetime:
    if isinstance(raw, str) and raw:
        return datetime.fromisoformat(raw)
    return datetime.min.replace(tzinfo=UTC)


def _to_float(value: object) -> float:
    if isinstance(value, int | float):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError:
            return 0.0
    return 0.0
