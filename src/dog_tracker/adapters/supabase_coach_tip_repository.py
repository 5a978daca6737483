"""Supabase repository for daily coach tips."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from supabase import Client

from dog_tracker.domain.coach import CoachMetrics, CoachTip
from dog_tracker.services.coach import CoachTipRepository

TIP_TABLE = "dog_coach_tips"


@dataclass
class SupabaseCoachTipRepository(CoachTipRepository):
    """Supabase implementation for coach tips."""

    client: Client

    def get_tip(self, user_id: UUID, dog_id: UUID, day_id: str) -> CoachTip | None:
        """Return the tip row for a day."""
        response = (
            self.client.table(TIP_TABLE)
            .select("day_id, title, bullets, severity, metrics, created_at, updated_at")
            .eq("user_id", str(user_id))
            .eq("dog_id", str(dog_id))
            .eq("day_id", day_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_row(response.data[0])

    def upsert_tip(self, user_id: UUID, dog_id: UUID, tip: CoachTip) -> None:
        """Write the tip row, merging into any row for the same day."""
        payload: dict[str, object] = {
            "user_id": str(user_id),
            "dog_id": str(dog_id),
            "day_id": tip.day_id,
            "title": tip.title,
            "bullets": tip.bullets,
            "severity": tip.severity,
            "metrics": {
                "target": tip.metrics.target,
                "avg7": tip.metrics.avg7,
                "avg14": tip.metrics.avg14,
            },
        }
        if tip.created_at:
            payload["created_at"] = tip.created_at.isoformat()
        if tip.updated_at:
            payload["updated_at"] = tip.updated_at.isoformat()
        response = (
            self.client.table(TIP_TABLE)
            .upsert(payload, on_conflict="user_id,dog_id,day_id")
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to upsert coach tip")


def _parse_row(row: dict[str, object]) -> CoachTip:
    metrics = row.get("metrics") or {}
    if not isinstance(metrics, dict):
        metrics = {}
    bullets = row.get("bullets") or []
    return CoachTip(
        day_id=str(row["day_id"]),
        title=str(row.get("title") or ""),
        bullets=[str(item) for item in bullets] if isinstance(bullets, list) else [],
        severity=str(row.get("severity") or "good"),  # type: ignore[arg-type]
        metrics=CoachMetrics(
            target=metrics.get("target"),
            avg7=metrics.get("avg7"),
            avg14=metrics.get("avg14"),
        ),
        created_at=_parse_datetime(row.get("created_at")),
        updated_at=_parse_datetime(row.get("updated_at")),
    )


def _parse_datetime(raw: object) -> datetime | None:
    if isinstance(raw, str) and raw:
        return datetime.fromisoformat(raw)
    return None
