"""Domain models for the energy model."""

from dataclasses import dataclass, field
from typing import Literal

ActivityLevel = Literal["low", "normal", "high"]
LifeStage = Literal["puppy", "adult", "senior"]
Environment = Literal["indoor", "outdoor", "mixed"]
SeasonFactor = Literal["auto", "cold", "mild", "hot"]
GoalMode = Literal["maintain", "lose"]


@dataclass(frozen=True)
class DogProfile:
    """Biometric and behavioural profile of a dog."""

    weight_kg: float
    target_weight_kg: float
    neutered: bool
    activity_level: ActivityLevel = "normal"
    bcs: int | None = 5
    life_stage: LifeStage = "adult"
    environment: Environment = "indoor"
    season_factor: SeasonFactor = "auto"
    goal_mode: GoalMode = "maintain"
    weekly_loss_rate_pct: float | None = 0.75
    breed: str | None = None
    name: str | None = None


@dataclass(frozen=True)
class CalorieRange:
    """Safe daily intake range."""

    low: int
    high: int


@dataclass(frozen=True)
class CalorieResult:
    """Recommended daily calories with rationale."""

    rer: int
    mer: int
    recommended: int
    range: CalorieRange
    deficit_pct: float
    notes: list[str] = field(default_factory=list)
