# type: ignore
"""
Email gateway tests
===================
Mock mode logs only; SMTP mode is exercised with smtplib patched out.

Run:  pytest test_email_service.py -v
"""
from unittest.mock import MagicMock, patch

import pytest
from pydantic import ValidationError

from meeting_service.services.email_service import EmailMessage, EmailService, TextFormat


def _message(**overrides):
    base = {
        "recipients": ["alice@example.com"],
        "subject": "Your upcoming meetings in the next 1 days",
        "content": "<p>Standup</p>",
    }
    base.update(overrides)
    return EmailMessage(**base)


def _smtp_client():
    client = MagicMock()
    client.__enter__ = MagicMock(return_value=client)
    client.__exit__ = MagicMock(return_value=False)
    return client


# ══════════════════════════════════════════════════════════════════════════
# MESSAGE MODEL
# ══════════════════════════════════════════════════════════════════════════
class TestEmailMessage:
    def test_requires_a_recipient(self):
        with pytest.raises(ValidationError):
            _message(recipients=[])

    def test_multiple_recipients(self):
        msg = _message(recipients=["a@x.io", "b@x.io"])
        assert msg.recipients == ["a@x.io", "b@x.io"]


# ══════════════════════════════════════════════════════════════════════════
# MOCK MODE
# ══════════════════════════════════════════════════════════════════════════
class TestMockMode:
    def test_blank_host_is_mock(self):
        assert EmailService(host="").is_mock

    def test_configured_host_is_not_mock(self):
        assert not EmailService(host="smtp.example.com").is_mock

    @pytest.mark.asyncio
    async def test_mock_never_opens_smtp(self):
        with patch("meeting_service.services.email_service.smtplib.SMTP") as smtp:
            await EmailService(host="").send_email(_message())
        smtp.assert_not_called()


# ══════════════════════════════════════════════════════════════════════════
# SMTP MODE
# ══════════════════════════════════════════════════════════════════════════
class TestSmtpMode:
    def _service(self, **overrides):
        kwargs = {
            "host": "smtp.example.com", "port": 2525,
            "username": "mailer", "password": "pw",
            "sender": "noreply@example.com", "use_tls": True, "timeout": 5,
        }
        kwargs.update(overrides)
        return EmailService(**kwargs)

    @pytest.mark.asyncio
    async def test_sends_via_smtp(self):
        client = _smtp_client()
        with patch("meeting_service.services.email_service.smtplib.SMTP",
                   return_value=client) as smtp:
            await self._service().send_email(_message(), TextFormat.HTML)

        smtp.assert_called_once_with("smtp.example.com", 2525, timeout=5)
        client.starttls.assert_called_once()
        client.login.assert_called_once_with("mailer", "pw")
        client.send_message.assert_called_once()
        sent = client.send_message.call_args.args[0]
        assert sent["To"] == "alice@example.com"
        assert sent["From"] == "noreply@example.com"

    @pytest.mark.asyncio
    async def test_no_tls_no_login(self):
        client = _smtp_client()
        with patch("meeting_service.services.email_service.smtplib.SMTP", return_value=client):
            await self._service(use_tls=False, username="").send_email(_message())

        client.starttls.assert_not_called()
        client.login.assert_not_called()
        client.send_message.assert_called_once()

    @pytest.mark.asyncio
    async def test_smtp_errors_propagate(self):
        client = _smtp_client()
        client.send_message.side_effect = OSError("connection reset")
        with patch("meeting_service.services.email_service.smtplib.SMTP", return_value=client):
            with pytest.raises(OSError):
                await self._service().send_email(_message())

    def test_build_mime_html(self):
        mime = self._service().build_mime(
            _message(recipients=["a@x.io", "b@x.io"]), TextFormat.HTML,
        )
        assert mime["To"] == "a@x.io, b@x.io"
        assert mime["Subject"] == "Your upcoming meetings in the next 1 days"
        assert mime.get_content_type() == "text/html"
        assert "<p>Standup</p>" in mime.get_content()

    def test_build_mime_plain(self):
        mime = self._service().build_mime(_message(content="hi"), TextFormat.PLAIN)
        assert mime.get_content_type() == "text/plain"
