"""SMTP credential providers injected into the email notifier."""

from dataclasses import dataclass
from typing import Optional, Protocol

from notifier.config import get_settings


@dataclass(frozen=True)
class SmtpCredentials:
    username: str
    password: str


class CredentialProvider(Protocol):
    def get_smtp_credentials(self) -> Optional[SmtpCredentials]:
        ...


class EnvironmentCredentialProvider:
    """Read SMTP_USERNAME / SMTP_PASSWORD at call time."""

    def get_smtp_credentials(self) -> Optional[SmtpCredentials]:
        settings = get_settings()
        if not settings.smtp_username or not settings.smtp_password:
            return None
        return SmtpCredentials(settings.smtp_username, settings.smtp_password)


class StaticCredentialProvider:
    """Fixed credentials, e.g. loaded from a secret store at startup."""

    def __init__(self, username: str, password: str):
        self._credentials = SmtpCredentials(username, password)

    def get_smtp_credentials(self) -> Optional[SmtpCredentials]:
        if not self._credentials.username or not self._credentials.password:
            return None
        return self._credentials
