"""SMTP email channel."""

from email.utils import formatdate
from typing import Optional

from notifier.channels import Notifier
from notifier.credentials import CredentialProvider, EnvironmentCredentialProvider
from notifier.errors import CredentialsError
from notifier.schemas.channel import EmailConfig
from notifier.transports.smtp import SmtpTransport


def format_recipients(recipients: list[str]) -> str:
    return ", ".join(recipients)


def build_email_body(config: EmailConfig, subject: str, message: str) -> str:
    """
    Render the full RFC 822 message: headers, blank line, plain text body.

    ``To`` is always present (empty for no recipients); ``Reply-To`` only
    when configured. The message text is not altered.
    """
    headers = [
        f"From: {config.from_addr}",
        f"To: {format_recipients(config.to)}",
    ]
    if config.reply_to:
        headers.append(f"Reply-To: {config.reply_to}")
    headers += [
        f"Subject: {subject}",
        f"Date: {formatdate(localtime=True)}",
        "MIME-Version: 1.0",
        "Content-Type: text/plain; charset=UTF-8",
    ]
    return "\r\n".join(headers) + "\r\n\r\n" + message


class EmailNotifier(Notifier):
    """Send alerts as plain text email through an SMTP server."""

    @property
    def channel_type(self) -> str:
        return "email"

    def __init__(
        self,
        config: EmailConfig,
        transport: Optional[SmtpTransport] = None,
        credentials: Optional[CredentialProvider] = None,
    ):
        self.config = config
        self.transport = transport or SmtpTransport()
        self.credentials = credentials or EnvironmentCredentialProvider()

    def build_email_body(self, subject: str, message: str) -> str:
        return build_email_body(self.config, subject, message)

    def send(self, title: str, message: str) -> None:
        creds = self.credentials.get_smtp_credentials()
        if creds is None:
            raise CredentialsError(
                "SMTP credentials not found: set SMTP_USERNAME and SMTP_PASSWORD"
            )

        body = self.build_email_body(title, message)

        self.transport.send_mail(
            self.config.smtp_host,
            self.config.smtp_port,
            creds.username,
            creds.password,
            self.config.from_addr,
            list(self.config.to),
            body,
            use_tls=self.config.use_tls,
            use_starttls=self.config.use_starttls,
            skip_verify=self.config.skip_verify,
        )
