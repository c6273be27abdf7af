# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Data-access layer for roles."""
from datetime import datetime
from typing import Any, Dict, Iterable, List, Optional

from sqlalchemy import func, select
from sqlalchemy.engine import Engine

from meeting_service.core.logging import get_logger
from meeting_service.core.schema import roles
from meeting_service.repositories.base import as_utc, insert_if_absent

logger = get_logger(__name__)


def _row_to_dict(row) -> Dict[str, Any]:
    return {
        "id": row["id"],
        "name": row["name"],
        "created_at": as_utc(row["created_at"]),
        "updated_at": as_utc(row["updated_at"]),
    }


class RoleRepository:
    def __init__(self, engine: Engine):
        self._engine = engine

    # ── Write ──────────────────────────────────────────────────────────

    def ensure_roles(self, names: Iterable[str], now: datetime) -> int:
        """Insert every missing role in one transaction; returns how many were new."""
        created = 0
        with self._engine.begin() as conn:
            for name in names:
                if insert_if_absent(
                    conn, roles,
                    {"name": name, "created_at": now, "updated_at": now},
                    conflict_columns=("name",),
                ):
                    created += 1
        return created

    # ── Read ───────────────────────────────────────────────────────────

    def get_role_by_name(self, name: str) -> Optional[Dict[str, Any]]:
        with self._engine.connect() as conn:
            row = conn.execute(
                select(roles).where(roles.c.name == name)
            ).mappings().first()
        return _row_to_dict(row) if row else None

    def list_roles(self) -> List[Dict[str, Any]]:
        with self._engine.connect() as conn:
            rows = conn.execute(select(roles).order_by(roles.c.id)).mappings().all()
        return [_row_to_dict(r) for r in rows]

    def count_all(self) -> int:
        with self._engine.connect() as conn:
            return conn.execute(select(func.count()).select_from(roles)).scalar() or 0
