"""Domain models for logged events and daily summaries."""

from dataclasses import dataclass
from datetime import date, datetime


@dataclass(frozen=True)
class MealEvent:
    """A logged meal."""

    kind: str
    label: str
    grams: float
    kcal: float | None
    created_at: datetime
    day: date


@dataclass(frozen=True)
class ActivityEvent:
    """A logged activity session."""

    kind: str
    label: str
    minutes: float
    kcal: float | None
    created_at: datetime
    day: date


@dataclass(frozen=True)
class DailySummary:
    """Energy balance for one dog on one calendar day."""

    day: date
    calories_in: int
    calories_out: int
    net: int
    target: int
    delta: int
    created_at: datetime | None = None
    updated_at: datetime | None = None


def day_key(day: date) -> str:
    """Return the stable YYYY-MM-DD key for a calendar day."""
    return day.isoformat()
