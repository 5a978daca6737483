"""Food and activity catalogs used for logging."""

from dataclasses import dataclass


@dataclass(frozen=True)
class FoodItem:
    """Food with its energy density."""

    id: str
    label: str
    kcal_per_100g: float


@dataclass(frozen=True)
class ActivityItem:
    """Activity with its energy cost per kg of body weight."""

    id: str
    label: str
    kcal_per_kg_per_hour: float


FOODS: dict[str, FoodItem] = {
    item.id: item
    for item in (
        FoodItem("kibble_standard", "Kibble (standard)", 360),
        FoodItem("kibble_light", "Kibble (light)", 310),
        FoodItem("wet_standard", "Wet food (standard)", 110),
        FoodItem("treats", "Treats / biscuits", 420),
        FoodItem("chicken", "Chicken (cooked)", 165),
        FoodItem("rice", "Rice (cooked)", 130),
    )
}

ACTIVITIES: dict[str, ActivityItem] = {
    item.id: item
    for item in (
        ActivityItem("walk_normal", "Walk (normal)", 2.0),
        ActivityItem("walk_fast", "Walk (brisk)", 2.6),
        ActivityItem("play_active", "Play (active)", 3.6),
        ActivityItem("run_easy", "Run (easy)", 4.2),
        ActivityItem("fetch", "Fetch / ball", 3.8),
    )
}
