"""Domain models for coaching."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Literal

Severity = Literal["good", "warn", "bad"]


@dataclass(frozen=True)
class CoachInsight:
    """Coaching message derived from recent adherence."""

    title: str
    severity: Severity
    bullets: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class CoachMetrics:
    """Numbers the insight was computed from."""

    target: int | None = None
    avg7: int | None = None
    avg14: int | None = None


@dataclass(frozen=True)
class CoachTip:
    """Daily snapshot of a coaching insight."""

    day_id: str
    title: str
    bullets: list[str]
    severity: Severity
    metrics: CoachMetrics
    created_at: datetime | None
    updated_at: datetime | None
