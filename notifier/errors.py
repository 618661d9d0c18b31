"""Error types raised by notifiers and transports."""


class NotifierError(Exception):
    """Base class for every failure surfaced by a notifier."""


class ConfigurationError(NotifierError):
    """Channel configuration is missing or invalid. Never retried."""


class CredentialsError(ConfigurationError):
    """Transport credentials could not be found."""


class PayloadError(NotifierError):
    """The payload could not be built or encoded."""


class TemplateError(PayloadError):
    """A custom payload template failed to parse or execute."""


class EmailDeliveryError(NotifierError):
    """SMTP connection, authentication or submission failed."""


class WebhookError(NotifierError):
    """
    A webhook request failed.

    The HTTP transport decides ``retryable``; notifiers propagate it unchanged.
    ``status_code`` is 0 when no response was received.
    """

    def __init__(
        self,
        message: str,
        status_code: int = 0,
        body: str = "",
        retryable: bool = False,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.body = body
        self.retryable = retryable

    def __str__(self) -> str:
        if self.status_code:
            return f"webhook request failed with status {self.status_code}: {self.message}"
        return f"webhook request failed: {self.message}"

    def __repr__(self) -> str:
        return (
            f"WebhookError(status_code={self.status_code!r}, "
            f"retryable={self.retryable!r}, message={self.message!r})"
        )

