"""Supabase repository for daily summaries."""

from dataclasses import dataclass
from datetime import date, datetime
from uuid import UUID

from supabase import Client

from dog_tracker.domain.logs import DailySummary
from dog_tracker.services.summaries import SummaryRepository

SUMMARY_TABLE = "dog_daily_summaries"
_COLUMNS = (
    "day, calories_in, calories_out, net, target, delta, created_at, updated_at"
)


@dataclass
class SupabaseSummaryRepository(SummaryRepository):
    """Supabase implementation for daily summaries."""

    client: Client

    def get_summary(
        self, user_id: UUID, dog_id: UUID, day: date
    ) -> DailySummary | None:
        """Return the summary row for a day."""
        response = (
            self.client.table(SUMMARY_TABLE)
            .select(_COLUMNS)
            .eq("user_id", str(user_id))
            .eq("dog_id", str(dog_id))
            .eq("day", day.isoformat())
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_row(response.data[0])

    def upsert_summary(
        self, user_id: UUID, dog_id: UUID, summary: DailySummary
    ) -> None:
        """Write the summary row, replacing any row for the same day."""
        payload: dict[str, object] = {
            "user_id": str(user_id),
            "dog_id": str(dog_id),
            "day": summary.day.isoformat(),
            "calories_in": summary.calories_in,
            "calories_out": summary.calories_out,
            "net": summary.net,
            "target": summary.target,
            "delta": summary.delta,
        }
        if summary.created_at:
            payload["created_at"] = summary.created_at.isoformat()
        if summary.updated_at:
            payload["updated_at"] = summary.updated_at.isoformat()
        response = (
            self.client.table(SUMMARY_TABLE)
            .upsert(payload, on_conflict="user_id,dog_id,day")
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to upsert daily summary")

    def list_summaries(
        self,
        user_id: UUID,
        dog_id: UUID,
        start: date | None = None,
        end: date | None = None,
    ) -> list[DailySummary]:
        """Return summary rows ordered by day."""
        query = (
            self.client.table(SUMMARY_TABLE)
            .select(_COLUMNS)
            .eq("user_id", str(user_id))
            .eq("dog_id", str(dog_id))
        )
        if start is not None:
            query = query.gte("day", start.isoformat())
        if end is not None:
            query = query.lte("day", end.isoformat())
        response = query.order("day", desc=False).execute()
        return [_parse_row(row) for row in response.data or []]


def _parse_row(row: dict[str, object]) -> DailySummary:
    return DailySummary(
        day=date.fromisoformat(str(row["day"])[:10]),
        calories_in=int(row.get("calories_in") or 0),
        calories_out=int(row.get("calories_out") or 0),
        net=int(row.get("net") or 0),
        target=int(row.get("target") or 0),
        delta=int(row.get("delta") or 0),
        created_at=_parse_datetime(row.get("created_at")),
        updated_at=_parse_datetime(row.get("updated_at")),
    )


def _parse_datetime(raw: object) -> datetime | None:
    if isinstance(raw, str) and raw:
        return datetime.fromisoformat(raw)
    return None
