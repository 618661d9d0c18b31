"""Network transports used by the notifiers."""

from notifier.transports.http import HttpTransport
from notifier.transports.smtp import SmtpTransport

__all__ = ["HttpTransport", "SmtpTransport"]
