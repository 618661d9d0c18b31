"""HTTP transport for webhook delivery: retries and failure classification."""

import logging
import time
from typing import Callable, Optional, Union

import httpx

from notifier.config import get_settings
from notifier.errors import WebhookError

logger = logging.getLogger(__name__)

USER_AGENT = "ponghub-notifier/0.1.0"
BODY_SNIPPET_LIMIT = 512


def is_retryable_status(status_code: int) -> bool:
    """Server errors and rate limiting are worth another attempt."""
    return status_code >= 500 or status_code == 429


def _has_header(headers: dict[str, str], name: str) -> bool:
    return any(key.lower() == name.lower() for key in headers)


class HttpTransport:
    """
    Sends one webhook request, retrying retryable failures.

    A custom ``httpx.BaseTransport`` may be injected (tests use
    ``httpx.MockTransport``); ``sleep`` controls backoff pacing.
    """

    def __init__(
        self,
        backoff: Optional[float] = None,
        transport: Optional[httpx.BaseTransport] = None,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.backoff = get_settings().http_retry_backoff if backoff is None else backoff
        self.transport = transport
        self.sleep = sleep

    def _client(self, timeout: int, skip_tls_verify: bool) -> httpx.Client:
        return httpx.Client(
            timeout=timeout,
            verify=not skip_tls_verify,
            follow_redirects=True,
            transport=self.transport,
        )

    def send_request(
        self,
        url: str,
        method: str,
        body: Union[str, bytes, None],
        content_type: str,
        headers: dict[str, str],
        max_retries: int = 0,
        timeout: int = 30,
        skip_tls_verify: bool = False,
    ) -> None:
        """Raise the last WebhookError if every attempt fails."""
        request_headers = dict(headers)
        if content_type and not _has_header(request_headers, "Content-Type"):
            request_headers["Content-Type"] = content_type
        if not _has_header(request_headers, "User-Agent"):
            request_headers["User-Agent"] = USER_AGENT

        attempts = max(max_retries, 0) + 1
        last_error: Optional[WebhookError] = None

        with self._client(timeout, skip_tls_verify) as client:
            for attempt in range(attempts):
                if attempt:
                    self.sleep(self.backoff * 2 ** (attempt - 1))
                try:
                    status = self._attempt(client, method, url, body, request_headers)
                except WebhookError as e:
                    if not e.retryable:
                        raise
                    last_error = e
                    if attempt + 1 < attempts:
                        logger.warning(
                            "Webhook attempt %d/%d to %s failed, retrying: %s",
                            attempt + 1, attempts, url, e,
                        )
                    continue

                logger.info("Webhook delivered: %s %s -> %d", method, url, status)
                return

        raise last_error

    def _attempt(
        self,
        client: httpx.Client,
        method: str,
        url: str,
        body: Union[str, bytes, None],
        headers: dict[str, str],
    ) -> int:
        try:
            response = client.request(method, url, content=body, headers=headers)
        except (httpx.InvalidURL, httpx.UnsupportedProtocol) as e:
            raise WebhookError(f"invalid webhook URL: {e}") from e
        except httpx.TimeoutException as e:
            raise WebhookError(f"request timed out: {e}", retryable=True) from e
        except httpx.TransportError as e:
            raise WebhookError(f"request failed: {e}", retryable=True) from e

        if response.is_success:
            return response.status_code

        raise WebhookError(
            response.reason_phrase or "unexpected response",
            status_code=response.status_code,
            body=response.text[:BODY_SNIPPET_LIMIT],
            retryable=is_retryable_status(response.status_code),
        )
