"""Tests for daily summary aggregation."""

from dataclasses import replace
from datetime import UTC, date, datetime, timedelta
from uuid import uuid4

from dog_tracker.domain.logs import ActivityEvent, DailySummary, MealEvent
from dog_tracker.services.summaries import DailySummaryService
from tests.conftest import InMemoryEventRepository, InMemorySummaryRepository

DAY = date(2026, 3, 14)


def _meal(kcal: object, day: date = DAY) -> MealEvent:
    return MealEvent(
        kind="kibble_standard",
        label="Kibble (standard)",
        grams=100,
        kcal=kcal,  # type: ignore[arg-type]
        created_at=datetime.now(tz=UTC),
        day=day,
    )


def _activity(kcal: object, day: date = DAY) -> ActivityEvent:
    return ActivityEvent(
        kind="walk_normal",
        label="Walk (normal)",
        minutes=30,
        kcal=kcal,  # type: ignore[arg-type]
        created_at=datetime.now(tz=UTC),
        day=day,
    )


def test_recompute_sums_events_for_the_day(
    summary_service: DailySummaryService, event_repository: InMemoryEventRepository
) -> None:
    user_id, dog_id = uuid4(), uuid4()
    event_repository.meals[(user_id, dog_id)] = [
        _meal(360),
        _meal(84.4),
        _meal(500, day=DAY - timedelta(days=1)),
    ]
    event_repository.activities[(user_id, dog_id)] = [_activity(20.2)]

    summary = summary_service.recompute_daily_summary(user_id, dog_id, DAY, 630)

    assert summary.day == DAY
    assert summary.calories_in == 444
    assert summary.calories_out == 20
    assert summary.net == 424
    assert summary.target == 630
    assert summary.delta == -206


def test_missing_or_invalid_kcal_counts_as_zero(
    summary_service: DailySummaryService, event_repository: InMemoryEventRepository
) -> None:
    user_id, dog_id = uuid4(), uuid4()
    event_repository.meals[(user_id, dog_id)] = [
        _meal(None),
        _meal("abc"),
        _meal(float("nan")),
        _meal("120"),
    ]
    event_repository.activities[(user_id, dog_id)] = [_activity(None)]

    summary = summary_service.recompute_daily_summary(user_id, dog_id, DAY, 500)

    assert summary.calories_in == 120
    assert summary.calories_out == 0
    assert summary.net == 120


def test_empty_day_yields_negative_target_delta(
    summary_service: DailySummaryService,
) -> None:
    summary = summary_service.recompute_daily_summary(uuid4(), uuid4(), DAY, 630)

    assert summary.calories_in == 0
    assert summary.calories_out == 0
    assert summary.net == 0
    assert summary.delta == -630


def test_recompute_is_idempotent(
    summary_service: DailySummaryService,
    event_repository: InMemoryEventRepository,
    summary_repository: InMemorySummaryRepository,
) -> None:
    user_id, dog_id = uuid4(), uuid4()
    event_repository.meals[(user_id, dog_id)] = [_meal(300)]

    first = summary_service.recompute_daily_summary(user_id, dog_id, DAY, 630)
    second = summary_service.recompute_daily_summary(user_id, dog_id, DAY, 630)

    assert replace(first, updated_at=None) == replace(second, updated_at=None)
    assert second.created_at == first.created_at
    assert len(summary_repository.rows) == 1


def test_recompute_overwrites_after_new_event(
    summary_service: DailySummaryService,
    event_repository: InMemoryEventRepository,
    summary_repository: InMemorySummaryRepository,
) -> None:
    user_id, dog_id = uuid4(), uuid4()
    summary_service.recompute_daily_summary(user_id, dog_id, DAY, 630)
    event_repository.meals[(user_id, dog_id)] = [_meal(200)]

    summary = summary_service.recompute_daily_summary(user_id, dog_id, DAY, 630)

    assert summary.calories_in == 200
    assert summary_repository.rows[(user_id, dog_id, DAY)].net == 200
    assert len(summary_repository.rows) == 1


def test_ensure_today_summary_creates_once(
    summary_service: DailySummaryService,
    summary_repository: InMemorySummaryRepository,
) -> None:
    user_id, dog_id = uuid4(), uuid4()
    assert summary_service.get_today_summary(user_id, dog_id) is None

    created = summary_service.ensure_today_summary(user_id, dog_id, 630)
    again = summary_service.ensure_today_summary(user_id, dog_id, 700)

    assert created.day == summary_service.today()
    assert created.delta == -630
    assert again == created
    assert summary_repository.writes == 1


def test_list_summaries_ordered_by_day(
    summary_service: DailySummaryService,
    summary_repository: InMemorySummaryRepository,
) -> None:
    user_id, dog_id = uuid4(), uuid4()
    for offset in (3, 1, 2):
        day = DAY - timedelta(days=offset)
        summary_repository.rows[(user_id, dog_id, day)] = DailySummary(
            day=day, calories_in=0, calories_out=0, net=offset, target=0, delta=offset
        )

    rows = summary_service.list_summaries(user_id, dog_id)

    assert [row.net for row in rows] == [3, 2, 1]


def test_net_history_windows(
    summary_service: DailySummaryService,
    summary_repository: InMemorySummaryRepository,
) -> None:
    user_id, dog_id = uuid4(), uuid4()
    for offset in (20, 13, 9, 6, 2, 0):
        day = DAY - timedelta(days=offset)
        summary_repository.rows[(user_id, dog_id, day)] = DailySummary(
            day=day, calories_in=500, calories_out=0, net=offset, target=0, delta=0
        )

    last7, last14 = summary_service.net_history(user_id, dog_id, DAY)

    assert last14 == [13, 9, 6, 2, 0]
    assert last7 == [6, 2, 0]


def test_net_history_skips_days_without_logs(
    summary_service: DailySummaryService,
    summary_repository: InMemorySummaryRepository,
) -> None:
    user_id, dog_id = uuid4(), uuid4()
    logged = DAY - timedelta(days=1)
    summary_repository.rows[(user_id, dog_id, logged)] = DailySummary(
        day=logged, calories_in=700, calories_out=50, net=650, target=630, delta=20
    )
    summary_service.recompute_daily_summary(user_id, dog_id, DAY, 630)

    last7, last14 = summary_service.net_history(user_id, dog_id, DAY)

    assert last7 == [650]
    assert last14 == [650]
