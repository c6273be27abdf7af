# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Data-access layer for meetings and the notifications they own."""
from datetime import datetime
from typing import Any, Dict, List, Optional

from sqlalchemy import func, insert, select
from sqlalchemy.engine import Engine

from meeting_service.core.logging import get_logger
from meeting_service.core.schema import meetings, notifications
from meeting_service.repositories.base import as_utc
from meeting_service.repositories.notification_repository import _row_to_dict as _notification_to_dict

logger = get_logger(__name__)


def _row_to_dict(row) -> Dict[str, Any]:
    return {
        "id": row["id"],
        "title": row["title"],
        "description": row["description"],
        "start_date": as_utc(row["start_date"]),
        "end_date": as_utc(row["end_date"]),
        "created_at": as_utc(row["created_at"]),
        "updated_at": as_utc(row["updated_at"]),
    }


class MeetingRepository:
    def __init__(self, engine: Engine):
        self._engine = engine

    def create_meeting(self, title: str, description: Optional[str],
                       start_date: datetime, end_date: Optional[datetime],
                       now: datetime) -> Dict[str, Any]:
        with self._engine.begin() as conn:
            result = conn.execute(
                insert(meetings).values(
                    title=title, description=description,
                    start_date=start_date, end_date=end_date,
                    created_at=now, updated_at=now,
                )
            )
            meeting_id = result.inserted_primary_key[0]
        return {
            "id": meeting_id, "title": title, "description": description,
            "start_date": as_utc(start_date), "end_date": as_utc(end_date),
            "created_at": as_utc(now), "updated_at": as_utc(now),
        }

    def get_meeting(self, meeting_id: int) -> Optional[Dict[str, Any]]:
        with self._engine.connect() as conn:
            row = conn.execute(
                select(meetings).where(meetings.c.id == meeting_id)
            ).mappings().first()
            if not row:
                return None
            meeting = _row_to_dict(row)
            note_rows = conn.execute(
                select(notifications)
                .where(notifications.c.meeting_id == meeting_id)
                .order_by(notifications.c.id)
            ).mappings().all()
        meeting["notifications"] = [_notification_to_dict(n) for n in note_rows]
        return meeting

    def list_starting_after(self, threshold: datetime) -> List[Dict[str, Any]]:
        """Meetings with ``start_date > threshold``, each with its notifications."""
        with self._engine.connect() as conn:
            rows = conn.execute(
                select(meetings)
                .where(meetings.c.start_date > threshold)
                .order_by(meetings.c.id)
            ).mappings().all()
            found = [_row_to_dict(r) for r in rows]
            if not found:
                return []
            by_id = {m["id"]: m for m in found}
            for m in found:
                m["notifications"] = []
            note_rows = conn.execute(
                select(notifications)
                .where(notifications.c.meeting_id.in_(list(by_id)))
                .order_by(notifications.c.id)
            ).mappings().all()
        for n in note_rows:
            by_id[n["meeting_id"]]["notifications"].append(_notification_to_dict(n))
        return found

    def count_all(self) -> int:
        with self._engine.connect() as conn:
            return conn.execute(select(func.count()).select_from(meetings)).scalar() or 0
