"""Generic webhook channel."""

import json
from typing import Any, Optional

from notifier.channels import Notifier
from notifier.channels.auth import apply_authentication
from notifier.channels.payload import build_payload
from notifier.config import get_settings
from notifier.errors import ConfigurationError, PayloadError
from notifier.params import ParameterResolver, Resolver
from notifier.schemas.channel import WebhookConfig
from notifier.transports.http import HttpTransport

DEFAULT_METHOD = "POST"
DEFAULT_TIMEOUT = 30


class WebhookNotifier(Notifier):
    """
    Deliver alerts to an HTTP endpoint.

    URL, header values and credentials all pass through the parameter
    resolver. Retrying is left to the transport; its WebhookError is
    raised to the caller unchanged.
    """

    @property
    def channel_type(self) -> str:
        return "webhook"

    def __init__(
        self,
        config: WebhookConfig,
        transport: Optional[HttpTransport] = None,
        resolver: Optional[Resolver] = None,
    ):
        self.config = config
        self.transport = transport or HttpTransport()
        self.resolver = resolver or ParameterResolver()

    def send(self, title: str, message: str) -> None:
        url = self.config.url or get_settings().webhook_url
        if not url:
            raise ConfigurationError("webhook URL not configured")
        url = self.resolver.resolve_parameters(url)

        try:
            payload = build_payload(title, message, self.config, self.resolver)
        except PayloadError as e:
            raise type(e)(f"failed to build webhook payload: {e}") from e

        method = self.config.method.upper() if self.config.method else DEFAULT_METHOD

        headers = {
            key: self.resolver.resolve_parameters(value)
            for key, value in self.config.headers.items()
        }
        if self.config.auth_type:
            apply_authentication(headers, self.config, self.resolver)

        body = encode_body(payload.body)

        self.transport.send_request(
            url,
            method,
            body,
            payload.content_type,
            headers,
            max_retries=max(self.config.retries, 0),
            timeout=self.config.timeout if self.config.timeout > 0 else DEFAULT_TIMEOUT,
            skip_tls_verify=self.config.skip_tls_verify,
        )


def encode_body(body: Any) -> Optional[str]:
    """Text is sent verbatim; anything else is JSON-encoded."""
    if body is None or isinstance(body, str):
        return body
    try:
        return json.dumps(body, ensure_ascii=False, allow_nan=False)
    except (TypeError, ValueError) as e:
        raise PayloadError(f"failed to marshal payload: {e}") from e
