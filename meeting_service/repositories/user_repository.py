# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Data-access layer for users and their role bindings."""
from datetime import datetime
from typing import Any, Dict, List, Optional

from sqlalchemy import func, insert, select
from sqlalchemy.engine import Engine

from meeting_service.core.logging import get_logger
from meeting_service.core.schema import user_roles, users
from meeting_service.repositories.base import as_utc

logger = get_logger(__name__)


def _row_to_dict(row) -> Dict[str, Any]:
    return {
        "id": row["id"],
        "username": row["username"],
        "email": row["email"],
        "phone": row["phone"],
        "password_hash": row["password_hash"],
        "created_at": as_utc(row["created_at"]),
        "updated_at": as_utc(row["updated_at"]),
    }


class UserRepository:
    def __init__(self, engine: Engine):
        self._engine = engine

    # ── Write ──────────────────────────────────────────────────────────

    def create_user(self, username: str, email: str, phone: Optional[str],
                    password_hash: str, now: datetime) -> int:
        with self._engine.begin() as conn:
            result = conn.execute(
                insert(users).values(
                    username=username, email=email, phone=phone,
                    password_hash=password_hash, created_at=now, updated_at=now,
                )
            )
            return result.inserted_primary_key[0]

    def add_user_role(self, user_id: int, role_id: int, now: datetime) -> int:
        with self._engine.begin() as conn:
            result = conn.execute(
                insert(user_roles).values(
                    user_id=user_id, role_id=role_id, created_at=now, updated_at=now,
                )
            )
            return result.inserted_primary_key[0]

    # ── Read ───────────────────────────────────────────────────────────

    def get_user(self, user_id: int) -> Optional[Dict[str, Any]]:
        with self._engine.connect() as conn:
            row = conn.execute(select(users).where(users.c.id == user_id)).mappings().first()
        return _row_to_dict(row) if row else None

    def get_user_by_username(self, username: str) -> Optional[Dict[str, Any]]:
        with self._engine.connect() as conn:
            row = conn.execute(
                select(users).where(users.c.username == username)
            ).mappings().first()
        return _row_to_dict(row) if row else None

    def list_role_ids(self, user_id: int) -> List[int]:
        with self._engine.connect() as conn:
            rows = conn.execute(
                select(user_roles.c.role_id)
                .where(user_roles.c.user_id == user_id)
                .order_by(user_roles.c.id)
            ).all()
        return [r[0] for r in rows]

    def count_all(self) -> int:
        with self._engine.connect() as conn:
            return conn.execute(select(func.count()).select_from(users)).scalar() or 0

    def count_user_roles(self) -> int:
        with self._engine.connect() as conn:
            return conn.execute(select(func.count()).select_from(user_roles)).scalar() or 0
