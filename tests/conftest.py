"""Shared fixtures for notifier tests."""

from unittest.mock import MagicMock

import pytest

from notifier.params import ParameterResolver
from notifier.transports.http import HttpTransport
from notifier.transports.smtp import SmtpTransport


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep host environment values out of every test."""
    for name in ("WEBHOOK_URL", "SMTP_USERNAME", "SMTP_PASSWORD", "HTTP_RETRY_BACKOFF", "SMTP_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def resolver():
    """Resolver with the values a health check would supply for one site."""
    return ParameterResolver(
        {
            "site": "example.com",
            "SITE": "example.com",
            "status": "down",
            "response_time": 1234,
        }
    )


@pytest.fixture
def mock_http_transport():
    """HttpTransport double that records send_request calls."""
    return MagicMock(spec=HttpTransport)


@pytest.fixture
def mock_smtp_transport():
    """SmtpTransport double that records send_mail calls."""
    return MagicMock(spec=SmtpTransport)
