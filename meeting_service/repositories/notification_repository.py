# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Data-access layer for notifications."""
from datetime import datetime
from typing import Any, Dict, List, Optional, Tuple

from sqlalchemy import func, insert, select
from sqlalchemy.engine import Engine

from meeting_service.core.logging import get_logger
from meeting_service.core.schema import notifications
from meeting_service.repositories.base import as_utc

logger = get_logger(__name__)


def _row_to_dict(row) -> Dict[str, Any]:
    return {
        "id": row["id"],
        "message": row["message"],
        "meeting_id": row["meeting_id"],
        "user_id": row["user_id"],
        "send_date": as_utc(row["send_date"]),
        "created_at": as_utc(row["created_at"]),
        "updated_at": as_utc(row["updated_at"]),
    }


class NotificationRepository:
    def __init__(self, engine: Engine):
        self._engine = engine

    def create_notification(self, message: str, meeting_id: int, user_id: int,
                            send_date: datetime, now: datetime) -> Dict[str, Any]:
        with self._engine.begin() as conn:
            result = conn.execute(
                insert(notifications).values(
                    message=message, meeting_id=meeting_id, user_id=user_id,
                    send_date=send_date, created_at=now, updated_at=now,
                )
            )
            notification_id = result.inserted_primary_key[0]
        return {
            "id": notification_id, "message": message,
            "meeting_id": meeting_id, "user_id": user_id,
            "send_date": as_utc(send_date),
            "created_at": as_utc(now), "updated_at": as_utc(now),
        }

    def get_notification(self, notification_id: int) -> Optional[Dict[str, Any]]:
        with self._engine.connect() as conn:
            row = conn.execute(
                select(notifications).where(notifications.c.id == notification_id)
            ).mappings().first()
        return _row_to_dict(row) if row else None

    def list_notifications(self, send_date_from: Optional[datetime] = None,
                           page: int = 1, per_page: int = 10) -> Tuple[int, List[Dict[str, Any]]]:
        conditions = []
        if send_date_from is not None:
            conditions.append(notifications.c.send_date >= send_date_from)

        with self._engine.connect() as conn:
            total = conn.execute(
                select(func.count()).select_from(notifications).where(*conditions)
            ).scalar() or 0
            rows = conn.execute(
                select(notifications)
                .where(*conditions)
                .order_by(notifications.c.id)
                .limit(per_page)
                .offset((page - 1) * per_page)
            ).mappings().all()
        return total, [_row_to_dict(r) for r in rows]
