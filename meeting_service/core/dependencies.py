# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""FastAPI dependency injection wiring."""
from meeting_service.core.config import settings
from meeting_service.core.database import engine
from meeting_service.core.security import HashService
from meeting_service.repositories import (
    ClaimRepository, MeetingRepository, NotificationRepository, RoleRepository,
    UserRepository,
)
from meeting_service.services.email_service import EmailService
from meeting_service.services.meeting_service import MeetingService, RoleService
from meeting_service.services.notification_service import NotificationService
from meeting_service.services.seeder import Seeder

_role_repo = RoleRepository(engine)
_claim_repo = ClaimRepository(engine)
_user_repo = UserRepository(engine)
_meeting_repo = MeetingRepository(engine)
_notification_repo = NotificationRepository(engine)

_email_service = EmailService()
_notification_service = NotificationService(
    _notification_repo, _meeting_repo, _user_repo, _email_service,
    window_days=settings.NOTIFY_WINDOW_DAYS,
)
_meeting_service = MeetingService(_meeting_repo)
_role_service = RoleService(_role_repo, _claim_repo)
_seeder = Seeder(
    _role_repo, _user_repo, _claim_repo, HashService(),
    default_password=settings.SEED_DEFAULT_PASSWORD,
)


def get_engine():
    return engine


def get_meeting_repo() -> MeetingRepository:
    return _meeting_repo


def get_notification_service() -> NotificationService:
    return _notification_service


def get_meeting_service() -> MeetingService:
    return _meeting_service


def get_role_service() -> RoleService:
    return _role_service


def get_seeder() -> Seeder:
    return _seeder
