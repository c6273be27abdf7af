# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Table definitions shared by every repository."""
from sqlalchemy import (
    Column, DateTime, ForeignKey, Integer, MetaData, String, Table, Text,
    UniqueConstraint,
)
from sqlalchemy.engine import Engine

from meeting_service.core.logging import get_logger

logger = get_logger(__name__)

metadata = MetaData()

roles = Table(
    "roles", metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", String(100), nullable=False, unique=True),
    Column("created_at", DateTime(timezone=True), nullable=False),
    Column("updated_at", DateTime(timezone=True), nullable=False),
)

users = Table(
    "users", metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("username", String(100), nullable=False, unique=True),
    Column("email", String(255), nullable=False),
    Column("phone", String(50), nullable=True),
    Column("password_hash", String(255), nullable=False),
    Column("created_at", DateTime(timezone=True), nullable=False),
    Column("updated_at", DateTime(timezone=True), nullable=False),
)

user_roles = Table(
    "user_roles", metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("user_id", Integer, ForeignKey("users.id"), nullable=False, index=True),
    Column("role_id", Integer, ForeignKey("roles.id"), nullable=False, index=True),
    Column("created_at", DateTime(timezone=True), nullable=False),
    Column("updated_at", DateTime(timezone=True), nullable=False),
)

role_claims = Table(
    "role_claims", metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("role_id", Integer, ForeignKey("roles.id"), nullable=False, index=True),
    Column("claim_type", String(100), nullable=False),
    Column("claim_value", String(255), nullable=False),
    UniqueConstraint("role_id", "claim_type", "claim_value", name="uq_role_claims_role_type_value"),
)

meetings = Table(
    "meetings", metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("title", String(500), nullable=False),
    Column("description", Text, nullable=True),
    Column("start_date", DateTime(timezone=True), nullable=False, index=True),
    Column("end_date", DateTime(timezone=True), nullable=True),
    Column("created_at", DateTime(timezone=True), nullable=False),
    Column("updated_at", DateTime(timezone=True), nullable=False),
)

notifications = Table(
    "notifications", metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("message", Text, nullable=False),
    Column("meeting_id", Integer, ForeignKey("meetings.id"), nullable=False, index=True),
    Column("user_id", Integer, ForeignKey("users.id"), nullable=False, index=True),
    Column("send_date", DateTime(timezone=True), nullable=False, index=True),
    Column("created_at", DateTime(timezone=True), nullable=False),
    Column("updated_at", DateTime(timezone=True), nullable=False),
)


def init_schema(engine: Engine) -> None:
    """Create any missing tables."""
    metadata.create_all(engine)
    logger.info("Database schema ready (%d tables)", len(metadata.tables))
