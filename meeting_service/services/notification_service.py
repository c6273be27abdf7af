# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Business logic for notifications: CRUD and the upcoming-meetings email digest."""
from datetime import timedelta
from typing import Any, Dict, List

from meeting_service.core.logging import get_logger
from meeting_service.metrics import (
    DIGEST_EMAILS_SENT, DISPATCH_DURATION, DISPATCH_RUNS, NOTIFICATIONS_CREATED,
)
from meeting_service.repositories.base import utcnow
from meeting_service.repositories.meeting_repository import MeetingRepository
from meeting_service.repositories.notification_repository import NotificationRepository
from meeting_service.repositories.user_repository import UserRepository
from meeting_service.schemas import (
    NotificationCreate, NotificationFilter, NotificationOut, PagedResponse, Response,
)
from meeting_service.services.email_service import EmailMessage, EmailService, TextFormat

logger = get_logger(__name__)

DIGEST_HEADER = "Your upcoming meetings"
NO_MEETINGS_MESSAGE = "No upcoming meetings found."
SENT_MESSAGE = "Notifications sent successfully!"


def to_notification_out(row: Dict[str, Any]) -> NotificationOut:
    return NotificationOut(**row)


def render_digest(messages: List[str]) -> str:
    """One HTML document per recipient. Messages are inserted as-is."""
    parts = [f"<div style='font-family:Arial,sans-serif;color:#333;'><h2>{DIGEST_HEADER}</h2>"]
    parts.extend(f"<p>{message}</p>" for message in messages)
    parts.append("</div>")
    return "".join(parts)


def digest_subject(window_days: int) -> str:
    return f"Your upcoming meetings in the next {window_days} days"


class NotificationService:
    def __init__(self, notification_repo: NotificationRepository,
                 meeting_repo: MeetingRepository, user_repo: UserRepository,
                 email_service: EmailService, window_days: int = 1):
        self._repo = notification_repo
        self._meetings = meeting_repo
        self._users = user_repo
        self._email = email_service
        self._window_days = window_days

    # ── CRUD ───────────────────────────────────────────────────────────

    def get_notifications(self, filter: NotificationFilter) -> PagedResponse:
        try:
            logger.info("Starting get_notifications page=%d size=%d",
                        filter.page_number, filter.page_size)
            total, rows = self._repo.list_notifications(
                send_date_from=filter.send_date,
                page=filter.page_number,
                per_page=filter.page_size,
            )
            logger.info("Finished get_notifications total=%d", total)
            return PagedResponse.page(
                [to_notification_out(r) for r in rows],
                filter.page_number, filter.page_size, total,
            )
        except Exception as exc:
            logger.error("get_notifications failed: %s", exc)
            return PagedResponse(status_code=500, errors=[str(exc)],
                                 page_number=filter.page_number, page_size=filter.page_size)

    def get_notification_by_id(self, notification_id: int) -> Response:
        try:
            logger.info("Starting get_notification_by_id id=%s", notification_id)
            row = self._repo.get_notification(notification_id)
            if row is None:
                logger.warning("Could not find notification id=%s", notification_id)
                return Response.fail(400, f"Not found Notification by id:{notification_id}")
            logger.info("Finished get_notification_by_id id=%s", notification_id)
            return Response.ok(to_notification_out(row))
        except Exception as exc:
            logger.error("get_notification_by_id failed: %s", exc)
            return Response.fail(500, str(exc))

    def create_notification(self, payload: NotificationCreate) -> Response:
        try:
            logger.info("Starting create_notification meeting=%s user=%s",
                        payload.meeting_id, payload.user_id)
            now = utcnow()
            created = self._repo.create_notification(
                message=payload.message,
                meeting_id=payload.meeting_id,
                user_id=payload.user_id,
                send_date=now,
                now=now,
            )
            NOTIFICATIONS_CREATED.inc()
            logger.info("Finished create_notification id=%s", created["id"])
            return Response.ok(f"Successfully created Notification by Id:{created['id']}")
        except Exception as exc:
            logger.error("create_notification failed: %s", exc)
            return Response.fail(500, str(exc))

    # ── Dispatch ───────────────────────────────────────────────────────

    async def send_notifications(self) -> Response:
        """Email every user one digest of their notifications for meetings
        starting more than the notify window from now."""
        with DISPATCH_DURATION.time():
            try:
                logger.info("Starting send_notifications")
                threshold = utcnow() + timedelta(days=self._window_days)
                upcoming = self._meetings.list_starting_after(threshold)
                if not upcoming:
                    logger.info("No upcoming meetings found")
                    DISPATCH_RUNS.labels(status="empty").inc()
                    return Response.ok(NO_MEETINGS_MESSAGE)

                by_email = self.collect_messages(upcoming)
                subject = digest_subject(self._window_days)
                for email, messages in by_email.items():
                    await self._email.send_email(
                        EmailMessage(recipients=[email], subject=subject,
                                     content=render_digest(messages)),
                        TextFormat.HTML,
                    )
                    DIGEST_EMAILS_SENT.inc()

                DISPATCH_RUNS.labels(status="ok").inc()
                logger.info("Finished send_notifications meetings=%d recipients=%d",
                            len(upcoming), len(by_email))
                return Response.ok(SENT_MESSAGE)
            except Exception as exc:
                DISPATCH_RUNS.labels(status="error").inc()
                logger.error("send_notifications failed: %s", exc)
                return Response.fail(500, str(exc))

    def collect_messages(self, meetings: List[Dict[str, Any]]) -> Dict[str, List[str]]:
        """Group messages by recipient email, keeping load order.

        Notifications whose user no longer exists are dropped."""
        by_email: Dict[str, List[str]] = {}
        for meeting in meetings:
            for notification in meeting["notifications"]:
                user = self._users.get_user(notification["user_id"])
                if user is None:
                    logger.warning("Skipping notification id=%s, user %s not found",
                                   notification["id"], notification["user_id"])
                    continue
                by_email.setdefault(user["email"], []).append(notification["message"])
        return by_email
