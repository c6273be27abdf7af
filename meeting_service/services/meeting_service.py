# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Business logic for meetings and role permission lookups."""
from meeting_service.core.logging import get_logger
from meeting_service.repositories.base import utcnow
from meeting_service.repositories.claim_repository import ClaimRepository
from meeting_service.repositories.meeting_repository import MeetingRepository
from meeting_service.repositories.role_repository import RoleRepository
from meeting_service.schemas import (
    MeetingCreate, MeetingDetail, MeetingOut, Response, RolePermissions,
)

logger = get_logger(__name__)


class MeetingService:
    def __init__(self, meeting_repo: MeetingRepository):
        self._repo = meeting_repo

    def create_meeting(self, payload: MeetingCreate) -> Response:
        try:
            if payload.end_date is not None and payload.end_date < payload.start_date:
                return Response.fail(400, "end_date must not be before start_date")
            created = self._repo.create_meeting(
                title=payload.title,
                description=payload.description,
                start_date=payload.start_date,
                end_date=payload.end_date,
                now=utcnow(),
            )
            logger.info("Meeting created id=%s start=%s", created["id"], created["start_date"])
            return Response(status_code=201, data=MeetingOut(**created))
        except Exception as exc:
            logger.error("create_meeting failed: %s", exc)
            return Response.fail(500, str(exc))

    def get_meeting_by_id(self, meeting_id: int) -> Response:
        try:
            meeting = self._repo.get_meeting(meeting_id)
            if meeting is None:
                return Response.fail(400, f"Not found Meeting by id:{meeting_id}")
            return Response.ok(MeetingDetail(**meeting))
        except Exception as exc:
            logger.error("get_meeting_by_id failed: %s", exc)
            return Response.fail(500, str(exc))


class RoleService:
    def __init__(self, role_repo: RoleRepository, claim_repo: ClaimRepository):
        self._roles = role_repo
        self._claims = claim_repo

    def get_role_permissions(self, name: str) -> Response:
        try:
            role = self._roles.get_role_by_name(name)
            if role is None:
                return Response.fail(400, f"Not found Role by name:{name}")
            return Response.ok(RolePermissions(
                role=role["name"],
                permissions=self._claims.list_permission_values(role["id"]),
            ))
        except Exception as exc:
            logger.error("get_role_permissions failed: %s", exc)
            return Response.fail(500, str(exc))
