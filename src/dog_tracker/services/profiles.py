"""Dog profile lookups and target calculation."""

from dataclasses import dataclass, replace
from datetime import datetime
from typing import Protocol
from uuid import UUID
from zoneinfo import ZoneInfo

from dog_tracker.domain.energy import CalorieResult, DogProfile
from dog_tracker.services.energy import compute_target, resolve_season


class ProfileRepository(Protocol):
    """Read interface for externally managed dog profiles."""

    def get_profile(self, user_id: UUID, dog_id: UUID) -> DogProfile | None:
        """Return the dog's profile if it exists."""


@dataclass
class ProfileService:
    """Service that turns stored profiles into calorie targets."""

    repository: ProfileRepository
    timezone_name: str = "UTC"

    def get_profile(self, user_id: UUID, dog_id: UUID) -> DogProfile | None:
        """Return a dog's profile."""
        return self.repository.get_profile(user_id, dog_id)

    def current_month(self) -> int:
        """Return the current month in the configured timezone."""
        return datetime.now(tz=ZoneInfo(self.timezone_name)).month

    def target_for(
        self, profile: DogProfile, month: int | None = None
    ) -> CalorieResult:
        """Compute the target with ``auto`` season resolved for a month."""
        season = resolve_season(profile.season_factor, month or self.current_month())
        return compute_target(replace(profile, season_factor=season))

    def get_target(self, user_id: UUID, dog_id: UUID) -> CalorieResult | None:
        """Return today's target for a stored profile."""
        profile = self.repository.get_profile(user_id, dog_id)
        if profile is None:
            return None
        return self.target_for(profile)
