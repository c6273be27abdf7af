# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Helpers shared by the repositories."""
from datetime import datetime, timezone
from typing import Any, Dict, Optional, Sequence

from sqlalchemy import Table, and_, insert, select
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.engine import Connection

_UPSERT_DIALECTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """SQLite hands back naive datetimes; everything is stored as UTC."""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def insert_if_absent(conn: Connection, table: Table, values: Dict[str, Any],
                     conflict_columns: Sequence[str]) -> bool:
    """INSERT ... ON CONFLICT DO NOTHING. Returns True when a row was written."""
    dialect_insert = _UPSERT_DIALECTS.get(conn.dialect.name)
    if dialect_insert is not None:
        stmt = dialect_insert(table).values(**values).on_conflict_do_nothing(
            index_elements=list(conflict_columns),
        )
        return conn.execute(stmt).rowcount == 1

    # Other backends: check then insert inside the caller's transaction
    predicate = and_(*(table.c[col] == values[col] for col in conflict_columns))
    if conn.execute(select(table.c.id).where(predicate)).first() is not None:
        return False
    conn.execute(insert(table).values(**values))
    return True
