# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Controller: Meeting create/get and role permission lookup."""
from fastapi import APIRouter, Depends

from meeting_service.controllers.notification_controller import as_json
from meeting_service.schemas import MeetingCreate
from meeting_service.services.meeting_service import MeetingService, RoleService
from meeting_service.core.dependencies import get_meeting_service, get_role_service

router = APIRouter(prefix="/api/v1", tags=["Meetings"])


@router.post("/meetings")
def create_meeting(body: MeetingCreate,
                   service: MeetingService = Depends(get_meeting_service)):
    return as_json(service.create_meeting(body))


@router.get("/meetings/{meeting_id}")
def get_meeting(meeting_id: int,
                service: MeetingService = Depends(get_meeting_service)):
    return as_json(service.get_meeting_by_id(meeting_id))


@router.get("/roles/{name}/permissions", tags=["Roles"])
def get_role_permissions(name: str,
                         service: RoleService = Depends(get_role_service)):
    return as_json(service.get_role_permissions(name))
