"""Supabase repository for water intake."""

from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID

from supabase import Client

from macro_tracker.domain.logs import WaterEntry
from macro_tracker.services.tracker import WaterLogRepository


@dataclass
class SupabaseWaterLogRepository(WaterLogRepository):
    """Supabase implementation for water logs."""

    client: Client

    def list_entries(self, user_id: UUID, day: str) -> list[WaterEntry]:
        """Return a user's water increments for a date."""
        response = (
            self.client.table("water_logs")
            .select("id, date, amount, created_at")
            .eq("user_id", str(user_id))
            .eq("date", day)
            .order("created_at", desc=False)
            .execute()
        )
        return [
            WaterEntry(
                id=UUID(row["id"]) if row.get("id") else None,
                amount_ml=int(row.get("amount") or 0),
                day=str(row["date"]),
                timestamp=int(
                    datetime.fromisoformat(str(row["created_at"])).timestamp() * 1000
                ),
            )
            for row in response.data or []
        ]

    def create_entry(self, user_id: UUID, entry: WaterEntry) -> None:
        """Insert a water increment row."""
        response = (
            self.client.table("water_logs")
            .insert(
                {
                    "user_id": str(user_id),
                    "date": entry.day,
                    "amount": entry.amount_ml,
                    "created_at": datetime.fromtimestamp(
                        entry.timestamp / 1000, tz=UTC
                    ).isoformat(),
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create water log entry")
