# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Pydantic request/response schemas."""
import math
from datetime import datetime, timezone
from typing import Any, List, Optional

from pydantic import BaseModel, Field, field_validator

DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 200


def _to_utc(value: Optional[datetime]) -> Optional[datetime]:
    # Naive input is taken to be UTC already
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


# ── Response envelopes ────────────────────────────────────────────────────

class Response(BaseModel):
    """Status code plus either ``data`` or ``errors``."""
    status_code: int = 200
    data: Optional[Any] = None
    errors: List[str] = []

    @classmethod
    def ok(cls, data: Any) -> "Response":
        return cls(status_code=200, data=data)

    @classmethod
    def fail(cls, status_code: int, message: str) -> "Response":
        return cls(status_code=status_code, errors=[message])

    @property
    def succeeded(self) -> bool:
        return self.status_code < 400


class PagedResponse(Response):
    page_number: int = 1
    page_size: int = DEFAULT_PAGE_SIZE
    total_pages: int = 0
    total_records: int = 0

    @classmethod
    def page(cls, data: List[Any], page_number: int, page_size: int,
             total_records: int) -> "PagedResponse":
        return cls(
            status_code=200, data=data,
            page_number=page_number, page_size=page_size,
            total_pages=math.ceil(total_records / page_size) if page_size else 0,
            total_records=total_records,
        )


# ── Notifications ─────────────────────────────────────────────────────────

class NotificationFilter(BaseModel):
    send_date: Optional[datetime] = None
    page_number: int = Field(default=1, ge=1)
    page_size: int = Field(default=DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE)

    @field_validator("send_date")
    @classmethod
    def normalise_send_date(cls, v: Optional[datetime]) -> Optional[datetime]:
        return _to_utc(v)


class NotificationCreate(BaseModel):
    message: str = Field(..., min_length=1, max_length=5000)
    meeting_id: int = Field(..., ge=1)
    user_id: int = Field(..., ge=1)


class NotificationOut(BaseModel):
    id: int
    message: str
    meeting_id: int
    user_id: int
    send_date: datetime
    created_at: datetime
    updated_at: datetime


# ── Meetings ──────────────────────────────────────────────────────────────

class MeetingCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=500)
    description: Optional[str] = Field(default=None, max_length=5000)
    start_date: datetime
    end_date: Optional[datetime] = None

    @field_validator("title")
    @classmethod
    def normalise_title(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("title must not be blank")
        return v

    @field_validator("start_date", "end_date")
    @classmethod
    def normalise_dates(cls, v: Optional[datetime]) -> Optional[datetime]:
        return _to_utc(v)


class MeetingOut(BaseModel):
    id: int
    title: str
    description: Optional[str] = None
    start_date: datetime
    end_date: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime


class MeetingDetail(MeetingOut):
    notifications: List[NotificationOut] = []


# ── Roles ─────────────────────────────────────────────────────────────────

class RolePermissions(BaseModel):
    role: str
    permissions: List[str]


class ErrorResponse(BaseModel):
    error: str
    detail: Optional[str] = None
    request_id: Optional[str] = None
