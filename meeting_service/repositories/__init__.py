# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Repository package."""
from meeting_service.repositories.claim_repository import ClaimRepository
from meeting_service.repositories.meeting_repository import MeetingRepository
from meeting_service.repositories.notification_repository import NotificationRepository
from meeting_service.repositories.role_repository import RoleRepository
from meeting_service.repositories.user_repository import UserRepository

__all__ = [
    "ClaimRepository",
    "MeetingRepository",
    "NotificationRepository",
    "RoleRepository",
    "UserRepository",
]
