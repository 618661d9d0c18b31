"""Unit tests for dispatch_notification."""

from unittest.mock import MagicMock

import pytest

from notifier.channels import Notifier
from notifier.dispatcher import dispatch_notification
from notifier.errors import CredentialsError, WebhookError


def _notifier(channel_type: str, error: Exception = None) -> MagicMock:
    notifier = MagicMock(spec=Notifier)
    notifier.channel_type = channel_type
    if error is not None:
        notifier.send.side_effect = error
    return notifier


class TestDispatchNotification:
    def test_all_succeed(self):
        notifiers = [_notifier("webhook"), _notifier("email")]

        outcomes = dispatch_notification(notifiers, "T", "M")

        assert [o.success for o in outcomes] == [True, True]
        for notifier in notifiers:
            notifier.send.assert_called_once_with("T", "M")

    def test_failures_do_not_stop_other_channels(self):
        notifiers = [
            _notifier("webhook", WebhookError("Bad Gateway", status_code=502, body="oops", retryable=True)),
            _notifier("email", CredentialsError("SMTP credentials not found")),
            _notifier("webhook"),
        ]

        first, second, third = dispatch_notification(notifiers, "T", "M")

        assert first.success is False
        assert first.channel == "webhook"
        assert first.status_code == 502
        assert first.body == "oops"
        assert first.retryable is True
        assert "502" in first.message

        assert second.success is False
        assert second.channel == "email"
        assert second.retryable is False
        assert "SMTP credentials not found" in second.message

        assert third.success is True

    def test_unexpected_exceptions_propagate(self):
        notifiers = [_notifier("webhook", RuntimeError("bug")), _notifier("email")]

        with pytest.raises(RuntimeError):
            dispatch_notification(notifiers, "T", "M")

        notifiers[1].send.assert_not_called()


def test_bad_settings_do_not_stop_other_channels(monkeypatch, mock_smtp_transport):
    """A malformed environment value fails only the channel that reads settings."""
    from notifier.channels.email import EmailNotifier
    from notifier.schemas.channel import EmailConfig

    email = EmailNotifier(EmailConfig(smtp_host="smtp.x.com", from_addr="a@x.com"), transport=mock_smtp_transport)
    other = _notifier("webhook")
    monkeypatch.setenv("HTTP_RETRY_BACKOFF", "abc")

    first, second = dispatch_notification([email, other], "T", "M")

    assert first.success is False
    assert first.channel == "email"
    assert "invalid settings" in first.message
    assert second.success is True
    mock_smtp_transport.send_mail.assert_not_called()
