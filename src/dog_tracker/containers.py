"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from dog_tracker.adapters.supabase_coach_tip_repository import (
    SupabaseCoachTipRepository,
)
from dog_tracker.adapters.supabase_event_repository import SupabaseEventRepository
from dog_tracker.adapters.supabase_profile_repository import SupabaseProfileRepository
from dog_tracker.adapters.supabase_summary_repository import (
    SupabaseSummaryRepository,
)
from dog_tracker.config import Settings
from dog_tracker.services.coach import CoachTipService
from dog_tracker.services.events import EventLogService
from dog_tracker.services.profiles import ProfileService
from dog_tracker.services.summaries import DailySummaryService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    profile_service: ProfileService
    summary_service: DailySummaryService
    event_log_service: EventLogService
    coach_tip_service: CoachTipService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    event_repository = SupabaseEventRepository(supabase_client)
    summary_service = DailySummaryService(
        event_repository=event_repository,
        summary_repository=SupabaseSummaryRepository(supabase_client),
        timezone_name=resolved_settings.timezone,
    )
    return AppContainer(
        settings=resolved_settings,
        profile_service=ProfileService(
            SupabaseProfileRepository(supabase_client),
            timezone_name=resolved_settings.timezone,
        ),
        summary_service=summary_service,
        event_log_service=EventLogService(
            repository=event_repository,
            summary_service=summary_service,
        ),
        coach_tip_service=CoachTipService(
            repository=SupabaseCoachTipRepository(supabase_client),
            summary_service=summary_service,
        ),
    )
