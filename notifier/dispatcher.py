"""Send one alert through every configured notifier."""

import logging
from dataclasses import dataclass
from typing import Iterable

from notifier.channels import Notifier
from notifier.errors import NotifierError, WebhookError

logger = logging.getLogger(__name__)


@dataclass
class DispatchOutcome:
    """Result of one notifier's send; failures carry the classification."""
    channel: str
    success: bool
    status_code: int = 0
    body: str = ""
    retryable: bool = False
    message: str = ""


def dispatch_notification(
    notifiers: Iterable[Notifier],
    title: str,
    message: str,
) -> list[DispatchOutcome]:
    """
    Call send() on each notifier in order.

    A failing channel never prevents the others from being tried.
    Exceptions that are not NotifierErrors are programming errors and
    propagate.
    """
    outcomes = []
    for notifier in notifiers:
        channel = notifier.channel_type
        try:
            notifier.send(title, message)
        except WebhookError as e:
            logger.error("Notification via %s failed: %s", channel, e)
            outcomes.append(
                DispatchOutcome(
                    channel=channel,
                    success=False,
                    status_code=e.status_code,
                    body=e.body,
                    retryable=e.retryable,
                    message=str(e),
                )
            )
            continue
        except NotifierError as e:
            logger.error("Notification via %s failed: %s", channel, e)
            outcomes.append(DispatchOutcome(channel=channel, success=False, message=str(e)))
            continue

        logger.debug("Notification sent via %s", channel)
        outcomes.append(DispatchOutcome(channel=channel, success=True))

    return outcomes
