"""Pydantic models for API request payloads."""

from pydantic import BaseModel, Field

from dog_tracker.domain.energy import (
    ActivityLevel,
    DogProfile,
    Environment,
    GoalMode,
    LifeStage,
    SeasonFactor,
)


class ProfilePayload(BaseModel):
    """Dog profile fields used by the energy model."""

    weight_kg: float
    target_weight_kg: float | None = None
    neutered: bool = False
    activity_level: ActivityLevel = "normal"
    bcs: int | None = Field(default=5, ge=1, le=9)
    life_stage: LifeStage = "adult"
    environment: Environment = "indoor"
    season_factor: SeasonFactor = "auto"
    goal_mode: GoalMode = "maintain"
    weekly_loss_rate_pct: float | None = 0.75
    breed: str | None = None
    month: int | None = Field(default=None, ge=1, le=12)

    def to_profile(self) -> DogProfile:
        """Convert the payload into a domain profile."""
        return DogProfile(
            weight_kg=self.weight_kg,
            target_weight_kg=self.target_weight_kg or self.weight_kg,
            neutered=self.neutered,
            activity_level=self.activity_level,
            bcs=self.bcs,
            life_stage=self.life_stage,
            environment=self.environment,
            season_factor=self.season_factor,
            goal_mode=self.goal_mode,
            weekly_loss_rate_pct=self.weekly_loss_rate_pct,
            breed=self.breed,
        )


class MealPayload(BaseModel):
    """Meal logging payload."""

    food_id: str
    grams: float = Field(ge=0, allow_inf_nan=False)


class ActivityPayload(BaseModel):
    """Activity logging payload."""

    activity_id: str
    minutes: float = Field(ge=0, allow_inf_nan=False)
