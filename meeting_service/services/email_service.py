# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Email gateway. SMTP delivery, or a log-only mock when no SMTP host is set."""
import asyncio
import smtplib
from email.message import EmailMessage as MimeMessage
from typing import List

from pydantic import BaseModel, Field

from meeting_service.core.config import settings
from meeting_service.core.logging import get_logger

logger = get_logger(__name__)


class TextFormat:
    HTML = "html"
    PLAIN = "plain"


class EmailMessage(BaseModel):
    recipients: List[str] = Field(..., min_length=1)
    subject: str
    content: str


class EmailService:
    def __init__(self, host: str = None, port: int = None, username: str = None,
                 password: str = None, sender: str = None, use_tls: bool = None,
                 timeout: float = None):
        self._host = settings.SMTP_HOST if host is None else host
        self._port = settings.SMTP_PORT if port is None else port
        self._username = settings.SMTP_USERNAME if username is None else username
        self._password = settings.SMTP_PASSWORD if password is None else password
        self._sender = settings.SMTP_SENDER if sender is None else sender
        self._use_tls = settings.SMTP_USE_TLS if use_tls is None else use_tls
        self._timeout = settings.SMTP_TIMEOUT if timeout is None else timeout

    @property
    def is_mock(self) -> bool:
        return not self._host

    async def send_email(self, message: EmailMessage, text_format: str = TextFormat.HTML) -> None:
        if self.is_mock:
            logger.info("[MOCK EMAIL] To: %s | Subject: %s | Body: %s",
                        ", ".join(message.recipients), message.subject, message.content)
            return
        await asyncio.to_thread(self._send_smtp, self.build_mime(message, text_format))
        logger.info("Email delivered via %s to %s", self._host, ", ".join(message.recipients))

    def build_mime(self, message: EmailMessage, text_format: str = TextFormat.HTML) -> MimeMessage:
        mime = MimeMessage()
        mime["From"] = self._sender
        mime["To"] = ", ".join(message.recipients)
        mime["Subject"] = message.subject
        mime.set_content(message.content, subtype=text_format)
        return mime

    def _send_smtp(self, mime: MimeMessage) -> None:
        with smtplib.SMTP(self._host, self._port, timeout=self._timeout) as client:
            if self._use_tls:
                client.starttls()
            if self._username:
                client.login(self._username, self._password)
            client.send_message(mime)
