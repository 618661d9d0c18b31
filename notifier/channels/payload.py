"""Webhook payload construction."""

import json
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Optional

from notifier.channels.template import (
    references_field,
    render_template,
    resolve_special_parameters,
)
from notifier.params import Resolver
from notifier.schemas.channel import CustomPayloadConfig, WebhookConfig

SERVICE_NAME = "ponghub"
JSON_CONTENT_TYPE = "application/json"
TEXT_CONTENT_TYPE = "text/plain"

# Keys every payload carries; not re-added to a template-produced object
STANDARD_KEYS = {"title", "message", "Title", "Message", "timestamp", "service"}


@dataclass
class ResolvedPayload:
    """Body (text or JSON-serialisable value) plus its content type."""
    body: Any
    content_type: str


def build_payload(
    title: str,
    message: str,
    config: WebhookConfig,
    resolver: Resolver,
) -> ResolvedPayload:
    resolved_title = resolver.resolve_parameters(title)
    resolved_message = resolver.resolve_parameters(message)

    # Title/Message duplicates are what {{.Title}} references resolve to
    data = {
        "title": resolved_title,
        "message": resolved_message,
        "Title": resolved_title,
        "Message": resolved_message,
        "timestamp": datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ"),
        "service": SERVICE_NAME,
    }

    if config.custom_payload is not None:
        return build_custom_payload(data, config.custom_payload, resolver)

    return ResolvedPayload(data, JSON_CONTENT_TYPE)


def build_custom_payload(
    data: dict[str, Any],
    custom: CustomPayloadConfig,
    resolver: Resolver,
) -> ResolvedPayload:
    """Merge extra fields, field renames and the optional template into one body."""
    enhanced = dict(data)

    for key, value in custom.fields.items():
        enhanced[key] = resolver.resolve_parameters(value)

    if custom.title_field and custom.include_title:
        enhanced[custom.title_field] = data["title"]
    if custom.message_field and custom.include_message:
        enhanced[custom.message_field] = data["message"]

    if custom.template:
        return build_template_payload(custom.template, enhanced, custom.content_type, resolver)

    return ResolvedPayload(enhanced, custom.content_type or JSON_CONTENT_TYPE)


def build_template_payload(
    template: str,
    data: dict[str, Any],
    content_type: Optional[str],
    resolver: Resolver,
) -> ResolvedPayload:
    resolved_template = resolve_special_parameters(template, resolver)
    rendered = render_template(resolved_template, data)

    try:
        parsed = json.loads(rendered, parse_constant=_reject_constant)
    except ValueError:
        # Typical cause: an unescaped quote or newline in title/message
        # broke an otherwise JSON-shaped template.
        if references_field(template, "Title") and references_field(template, "Message"):
            body = {"alert": data["Title"], "details": data["Message"]}
            for key, value in data.items():
                if key not in ("title", "message", "Title", "Message"):
                    body[key] = value
            return ResolvedPayload(body, content_type or JSON_CONTENT_TYPE)

        return ResolvedPayload(rendered, content_type or TEXT_CONTENT_TYPE)

    if isinstance(parsed, dict):
        for key, value in data.items():
            if key not in STANDARD_KEYS and key not in parsed:
                parsed[key] = value
        return ResolvedPayload(parsed, content_type or JSON_CONTENT_TYPE)

    # Valid JSON that is not an object is sent exactly as rendered
    return ResolvedPayload(rendered, content_type or JSON_CONTENT_TYPE)


def _reject_constant(name: str) -> Any:
    # NaN and Infinity are not JSON
    raise ValueError(f"invalid JSON constant: {name}")
