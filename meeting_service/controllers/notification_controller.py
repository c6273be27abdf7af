# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Controller: Notification endpoints: list, get, create, send digest."""
from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from meeting_service.schemas import (
    DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE, NotificationCreate, NotificationFilter, Response,
)
from meeting_service.services.notification_service import NotificationService
from meeting_service.core.dependencies import get_notification_service

router = APIRouter(prefix="/api/v1", tags=["Notifications"])


def as_json(response: Response) -> JSONResponse:
    return JSONResponse(status_code=response.status_code, content=response.model_dump(mode="json"))


@router.get("/notifications")
def get_notifications(
    send_date: Optional[datetime] = None,
    page_number: int = Query(default=1, ge=1),
    page_size: int = Query(default=DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE),
    service: NotificationService = Depends(get_notification_service),
):
    filter = NotificationFilter(send_date=send_date, page_number=page_number, page_size=page_size)
    return as_json(service.get_notifications(filter))


@router.get("/notifications/{notification_id}")
def get_notification_by_id(notification_id: int,
                           service: NotificationService = Depends(get_notification_service)):
    return as_json(service.get_notification_by_id(notification_id))


@router.post("/notifications")
def create_notification(body: NotificationCreate,
                        service: NotificationService = Depends(get_notification_service)):
    return as_json(service.create_notification(body))


@router.put("/notifications/send")
async def send_notifications(service: NotificationService = Depends(get_notification_service)):
    return as_json(await service.send_notifications())
