"""Supabase repository for dog profiles."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from dog_tracker.domain.energy import DogProfile
from dog_tracker.services.profiles import ProfileRepository


@dataclass
class SupabaseProfileRepository(ProfileRepository):
    """Supabase implementation for reading dog profiles."""

    client: Client

    def get_profile(self, user_id: UUID, dog_id: UUID) -> DogProfile | None:
        """Return the profile for a dog owned by the user."""
        response = (
            self.client.table("dogs")
            .select(
                "name, weight_kg, target_weight_kg, neutered, activity_level, bcs, "
                "life_stage, environment, season_factor, goal_mode, "
                "weekly_loss_rate_pct, breed"
            )
            .eq("id", str(dog_id))
            .eq("user_id", str(user_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_row(response.data[0])


def _parse_row(row: dict[str, object]) -> DogProfile:
    weight = _to_float(row.get("weight_kg"))
    target_weight = _to_float(row.get("target_weight_kg")) or weight
    bcs = row.get("bcs")
    rate = row.get("weekly_loss_rate_pct")
    return DogProfile(
        name=row.get("name"),  # type: ignore[arg-type]
        weight_kg=weight,
        target_weight_kg=target_weight,
        neutered=bool(row.get("neutered")),
        activity_level=row.get("activity_level") or "normal",  # type: ignore[arg-type]
        bcs=int(bcs) if isinstance(bcs, int | float) else None,
        life_stage=row.get("life_stage") or "adult",  # type: ignore[arg-type]
        environment=row.get("environment") or "indoor",  # type: ignore[arg-type]
        season_factor=row.get("season_factor") or "auto",  # type: ignore[arg-type]
        goal_mode=row.get("goal_mode") or "maintain",  # type: ignore[arg-type]
        weekly_loss_rate_pct=float(rate) if isinstance(rate, int | float) else None,
        breed=row.get("breed") or None,  # type: ignore[arg-type]
    )


def _to_float(value: object) -> float:
    if isinstance(value, int | float):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError:
            return 0.0
    return 0.0
