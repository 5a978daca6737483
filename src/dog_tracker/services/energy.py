"""Daily calorie target model for dogs.

The maintenance energy requirement is the resting requirement scaled by
independent multiplicative factors (neuter status, activity, life stage,
season exposure and body condition). Weight loss applies a deficit mapped
linearly from the requested weekly loss rate.
"""

import math

from dog_tracker.domain.energy import (
    CalorieRange,
    CalorieResult,
    DogProfile,
    SeasonFactor,
)

MIN_WEIGHT_KG = 0.5

NEUTERED_FACTOR = 1.6
INTACT_FACTOR = 1.8

ACTIVITY_FACTORS = {"low": 0.9, "normal": 1.0, "high": 1.15}
LIFE_STAGE_FACTORS = {"puppy": 2.0, "adult": 1.0, "senior": 0.95}
SEASON_BASE_FACTORS = {"cold": 1.05, "hot": 0.95, "mild": 1.0}
ENVIRONMENT_SEASON_BOOST = {"outdoor": 1.03, "mixed": 1.015, "indoor": 1.0}

DEFAULT_BCS = 5
DEFAULT_WEEKLY_LOSS_RATE_PCT = 0.75
MIN_WEEKLY_LOSS_RATE_PCT = 0.25
MAX_WEEKLY_LOSS_RATE_PCT = 1.25
MIN_DEFICIT_PCT = 0.12
MAX_DEFICIT_PCT = 0.26
OBESE_DEFICIT_BUMP = 0.02
OBESE_MAX_DEFICIT_PCT = 0.28
OBESE_BCS = 8

RANGE_LOW_FACTOR = 0.92
RANGE_HIGH_FACTOR = 1.08

_COLD_MONTHS = {12, 1, 2}
_HOT_MONTHS = {6, 7, 8}


def calc_rer(weight_kg: float) -> float:
    """Return the resting energy requirement in kcal/day."""
    return 70 * math.pow(_safe_weight(weight_kg), 0.75)


def resolve_season(season_factor: SeasonFactor | None, month: int) -> str:
    """Resolve ``auto`` to a concrete season from a calendar month."""
    if season_factor and season_factor != "auto":
        return season_factor
    if month in _COLD_MONTHS:
        return "cold"
    if month in _HOT_MONTHS:
        return "hot"
    return "mild"


def compute_target(profile: DogProfile) -> CalorieResult:
    """Compute the recommended daily calories for a dog profile."""
    rer = calc_rer(profile.weight_kg)
    bcs = profile.bcs if profile.bcs is not None else DEFAULT_BCS

    mer = (
        rer
        * (NEUTERED_FACTOR if profile.neutered else INTACT_FACTOR)
        * ACTIVITY_FACTORS.get(profile.activity_level, 1.0)
        * LIFE_STAGE_FACTORS.get(profile.life_stage or "adult", 1.0)
        * _season_factor(profile)
        * _body_condition_factor(bcs)
    )

    notes = [f"Estimated RER: {round10(rer)} kcal"]
    deficit_pct = 0.0
    if profile.goal_mode == "lose":
        weekly = _clamp(
            profile.weekly_loss_rate_pct
            if profile.weekly_loss_rate_pct is not None
            else DEFAULT_WEEKLY_LOSS_RATE_PCT,
            MIN_WEEKLY_LOSS_RATE_PCT,
            MAX_WEEKLY_LOSS_RATE_PCT,
        )
        deficit_pct = deficit_for_rate(weekly, bcs)
        mer *= 1 - deficit_pct
        notes.append(f"Weight-loss mode: deficit ~{round_half_up(deficit_pct * 100)}%")
        notes.append(f"Target loss: ~{weekly:g}% body weight/week (estimate)")
    else:
        notes.append("Maintenance mode")

    recommended = round10(mer)
    calorie_range = CalorieRange(
        low=round10(recommended * RANGE_LOW_FACTOR),
        high=round10(recommended * RANGE_HIGH_FACTOR),
    )

    if profile.breed:
        notes.append(
            f"Breed: {profile.breed} (used for advice, not for the formula)"
        )

    return CalorieResult(
        rer=round10(rer),
        mer=recommended,
        recommended=recommended,
        range=calorie_range,
        deficit_pct=deficit_pct,
        notes=notes,
    )


def deficit_for_rate(weekly_loss_rate_pct: float, bcs: int = DEFAULT_BCS) -> float:
    """Map a weekly loss rate (% body weight) to a calorie deficit fraction."""
    weekly = _clamp(
        weekly_loss_rate_pct, MIN_WEEKLY_LOSS_RATE_PCT, MAX_WEEKLY_LOSS_RATE_PCT
    )
    deficit = _clamp(
        MIN_DEFICIT_PCT + (weekly - MIN_WEEKLY_LOSS_RATE_PCT) * 0.14,
        MIN_DEFICIT_PCT,
        MAX_DEFICIT_PCT,
    )
    if bcs >= OBESE_BCS:
        deficit = _clamp(
            deficit + OBESE_DEFICIT_BUMP, MIN_DEFICIT_PCT, OBESE_MAX_DEFICIT_PCT
        )
    return deficit


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up."""
    return math.floor(value + 0.5)


def round10(value: float) -> int:
    """Round to the nearest multiple of 10."""
    return round_half_up(value / 10) * 10


def _season_factor(profile: DogProfile) -> float:
    base = SEASON_BASE_FACTORS.get(profile.season_factor or "mild", 1.0)
    boost = ENVIRONMENT_SEASON_BOOST.get(profile.environment or "indoor", 1.0)
    return base * boost


def _body_condition_factor(bcs: int) -> float:
    if bcs >= 7:  # noqa: PLR2004
        return 0.85
    if bcs == 6:  # noqa: PLR2004
        return 0.92
    if bcs <= 3:  # noqa: PLR2004
        return 1.08
    return 1.0


def _safe_weight(weight_kg: float) -> float:
    if not isinstance(weight_kg, int | float) or not math.isfinite(weight_kg):
        return MIN_WEIGHT_KG
    return max(MIN_WEIGHT_KG, float(weight_kg))


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))
