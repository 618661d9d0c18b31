"""SMTP transport (plain, implicit TLS or STARTTLS)."""

import logging
import re
import smtplib
import ssl
from typing import Optional

from notifier.config import get_settings
from notifier.errors import EmailDeliveryError

logger = logging.getLogger(__name__)

BARE_LF_RE = re.compile(r"(?<!\r)\n")


def tls_context(skip_verify: bool) -> ssl.SSLContext:
    context = ssl.create_default_context()
    if skip_verify:
        context.check_hostname = False
        context.verify_mode = ssl.CERT_NONE
    return context


class SmtpTransport:
    """Send a pre-rendered message through an SMTP server."""

    def __init__(self, timeout: Optional[int] = None):
        self.timeout = get_settings().smtp_timeout if timeout is None else timeout

    def _connect(self, host: str, port: int, use_tls: bool, context: ssl.SSLContext) -> smtplib.SMTP:
        try:
            if use_tls:
                return smtplib.SMTP_SSL(host, port, timeout=self.timeout, context=context)
            return smtplib.SMTP(host, port, timeout=self.timeout)
        except (OSError, smtplib.SMTPException) as e:
            raise EmailDeliveryError(f"failed to connect to SMTP server {host}:{port}: {e}") from e

    def send_mail(
        self,
        host: str,
        port: int,
        username: str,
        password: str,
        from_addr: str,
        to: list[str],
        body: str,
        use_tls: bool = False,
        use_starttls: bool = False,
        skip_verify: bool = False,
    ) -> None:
        context = tls_context(skip_verify)
        server = self._connect(host, port, use_tls, context)

        try:
            if use_starttls and not use_tls:
                try:
                    server.starttls(context=context)
                except (OSError, smtplib.SMTPException) as e:
                    raise EmailDeliveryError(f"failed to start TLS: {e}") from e

            try:
                server.login(username, password)
            except (OSError, smtplib.SMTPException) as e:
                raise EmailDeliveryError(f"SMTP authentication failed: {e}") from e

            try:
                server.sendmail(from_addr, to, to_wire(body))
            except (OSError, smtplib.SMTPException) as e:
                raise EmailDeliveryError(f"failed to send email: {e}") from e
        finally:
            self._close(server, host)

        logger.info("Email sent via SMTP host=%s to=%s", host, ", ".join(to))

    def _close(self, server: smtplib.SMTP, host: str) -> None:
        # The message is already accepted or the send already failed;
        # a bad QUIT reply only costs the connection.
        try:
            server.quit()
        except (OSError, smtplib.SMTPException) as e:
            logger.warning("SMTP QUIT failed for host=%s: %s", host, e)
            server.close()


def to_wire(body: str) -> bytes:
    """Encode *body* with CRLF line endings; smtplib leaves bytes untouched."""
    return BARE_LF_RE.sub("\r\n", body).encode("utf-8")
