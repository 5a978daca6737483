"""FastAPI application factory."""

import logging
from uuid import UUID

from fastapi import FastAPI, HTTPException, Request, status

from dog_tracker.api.models import ActivityPayload, MealPayload, ProfilePayload
from dog_tracker.app_logging import configure_logging
from dog_tracker.containers import AppContainer
from dog_tracker.domain.catalog import ACTIVITIES, FOODS
from dog_tracker.domain.energy import CalorieResult, DogProfile


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    app = FastAPI()
    app.state.container = container

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/catalog")
    async def catalog() -> dict[str, object]:
        """Return the food and activity catalogs."""
        return {
            "foods": list(FOODS.values()),
            "activities": list(ACTIVITIES.values()),
        }

    @app.post("/energy/target")
    async def energy_target(payload: ProfilePayload, request: Request) -> CalorieResult:
        """Compute a calorie target for an ad-hoc profile."""
        state_container: AppContainer = request.app.state.container
        return state_container.profile_service.target_for(
            payload.to_profile(), payload.month
        )

    @app.get("/users/{user_id}/dogs/{dog_id}/target")
    async def dog_target(
        user_id: UUID, dog_id: UUID, request: Request
    ) -> CalorieResult:
        """Return today's target for a stored dog profile."""
        state_container: AppContainer = request.app.state.container
        _, target = _load_target(state_container, user_id, dog_id)
        return target

    @app.post("/users/{user_id}/dogs/{dog_id}/meals")
    async def log_meal(
        user_id: UUID, dog_id: UUID, payload: MealPayload, request: Request
    ) -> dict[str, object]:
        """Log a meal and refresh today's summary."""
        state_container: AppContainer = request.app.state.container
        _, target = _load_target(state_container, user_id, dog_id)
        if payload.food_id not in FOODS:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND, detail="Unknown food"
            )
        event = state_container.event_log_service.log_meal(
            user_id, dog_id, payload.food_id, payload.grams
        )
        summary = state_container.summary_service.recompute_daily_summary(
            user_id, dog_id, event.day, target.recommended
        )
        return {"event": event, "summary": summary}

    @app.post("/users/{user_id}/dogs/{dog_id}/activities")
    async def log_activity(
        user_id: UUID, dog_id: UUID, payload: ActivityPayload, request: Request
    ) -> dict[str, object]:
        """Log an activity and refresh today's summary."""
        state_container: AppContainer = request.app.state.container
        profile, target = _load_target(state_container, user_id, dog_id)
        if payload.activity_id not in ACTIVITIES:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND, detail="Unknown activity"
            )
        event = state_container.event_log_service.log_activity(
            user_id, dog_id, payload.activity_id, payload.minutes, profile.weight_kg
        )
        summary = state_container.summary_service.recompute_daily_summary(
            user_id, dog_id, event.day, target.recommended
        )
        return {"event": event, "summary": summary}

    @app.get("/users/{user_id}/dogs/{dog_id}/summaries")
    async def list_summaries(
        user_id: UUID, dog_id: UUID, request: Request
    ) -> dict[str, object]:
        """Return all daily summaries for a dog."""
        state_container: AppContainer = request.app.state.container
        return {
            "summaries": state_container.summary_service.list_summaries(
                user_id, dog_id
            )
        }

    @app.get("/users/{user_id}/dogs/{dog_id}/home")
    async def home(user_id: UUID, dog_id: UUID, request: Request) -> dict[str, object]:
        """Return target, today's summary and the coach insight."""
        state_container: AppContainer = request.app.state.container
        _, target = _load_target(state_container, user_id, dog_id)
        try:
            coach = state_container.coach_tip_service.refresh_today_tip(
                user_id, dog_id, target.recommended
            )
            today = state_container.summary_service.ensure_today_summary(
                user_id, dog_id, target.recommended
            )
        except Exception:
            logger.exception(
                "Failed to refresh home data", extra={"dog_id": str(dog_id)}
            )
            raise
        insight, tip_id = coach if coach else (None, None)
        return {
            "target": target,
            "today": today,
            "coach": insight,
            "tip_id": tip_id,
        }

    return app


def _load_target(
    container: AppContainer, user_id: UUID, dog_id: UUID
) -> tuple[DogProfile, CalorieResult]:
    profile = container.profile_service.get_profile(user_id, dog_id)
    if profile is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Dog profile not found"
        )
    return profile, container.profile_service.target_for(profile)
