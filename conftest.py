# type: ignore
"""Shared fixtures: an in-memory SQLite database with the full schema."""
import os

os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from meeting_service.core.schema import init_schema
from meeting_service.core.security import HashService
from meeting_service.repositories import (
    ClaimRepository, MeetingRepository, NotificationRepository, RoleRepository,
    UserRepository,
)
from meeting_service.services.seeder import Seeder


@pytest.fixture()
def engine():
    eng = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_schema(eng)
    yield eng
    eng.dispose()


@pytest.fixture()
def role_repo(engine):
    return RoleRepository(engine)


@pytest.fixture()
def claim_repo(engine):
    return ClaimRepository(engine)


@pytest.fixture()
def user_repo(engine):
    return UserRepository(engine)


@pytest.fixture()
def meeting_repo(engine):
    return MeetingRepository(engine)


@pytest.fixture()
def notification_repo(engine):
    return NotificationRepository(engine)


@pytest.fixture()
def hash_service():
    # Minimum bcrypt cost keeps the suite fast
    return HashService(rounds=4)


@pytest.fixture()
def seeder(role_repo, user_repo, claim_repo, hash_service):
    return Seeder(role_repo, user_repo, claim_repo, hash_service)
