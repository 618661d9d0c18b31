"""Config validation and construction of notifiers from raw config dicts."""

from typing import Any, Optional
from urllib.parse import urlparse

from pydantic import ValidationError

from notifier.channels import Notifier
from notifier.channels.auth import AUTH_TYPES
from notifier.channels.email import EmailNotifier
from notifier.channels.webhook import WebhookNotifier
from notifier.errors import ConfigurationError
from notifier.schemas.channel import EmailConfig, WebhookConfig


def validate_channel_config(channel_type: str, config: dict) -> Optional[str]:
    """
    Validate channel config for a given type.
    Returns None if valid, or an error message string if invalid.
    """
    validators = {
        "email": _validate_email,
        "webhook": _validate_webhook,
    }
    validator = validators.get(channel_type)
    if not validator:
        return f"Unknown channel type: {channel_type}"
    return validator(config)


def create_notifier(channel_type: str, config: dict, **kwargs: Any) -> Notifier:
    """
    Build a notifier from a raw config mapping (e.g. loaded from YAML).

    Extra keyword arguments go to the notifier constructor:
    ``transport`` and ``resolver`` for webhook, ``transport`` and
    ``credentials`` for email. Anything else raises TypeError.
    """
    error = validate_channel_config(channel_type, config)
    if error:
        raise ConfigurationError(error)

    try:
        if channel_type == "webhook":
            return WebhookNotifier(WebhookConfig.model_validate(config), **kwargs)
        return EmailNotifier(EmailConfig.model_validate(config), **kwargs)
    except ValidationError as e:
        raise ConfigurationError(f"invalid {channel_type} config: {e}") from e


# --- Internal validators ---


def _validate_url(value, field_name: str) -> Optional[str]:
    # Placeholders are only expanded at send time
    if "{{" in value:
        return None
    parsed = urlparse(value)
    if parsed.scheme not in ("http", "https"):
        return f"{field_name} must use http or https protocol"
    if not parsed.netloc:
        return f"{field_name} is not a valid URL"
    return None


def _validate_webhook(config: dict) -> Optional[str]:
    url = config.get("url")
    if url:
        if not isinstance(url, str):
            return "url must be a string"
        err = _validate_url(url, "url")
        if err:
            return err

    headers = config.get("headers")
    if headers is not None and not isinstance(headers, dict):
        return "headers must be an object"

    auth_type = config.get("auth_type") or ""
    if not isinstance(auth_type, str):
        return "auth_type must be a string"
    if auth_type and auth_type.lower() not in AUTH_TYPES:
        return f"Unknown auth type: {auth_type}"

    custom_payload = config.get("custom_payload")
    if custom_payload is not None and not isinstance(custom_payload, dict):
        return "custom_payload must be an object"
    return None


def _validate_email(config: dict) -> Optional[str]:
    if not config.get("smtp_host"):
        return "Missing required field: smtp_host"
    if not (config.get("from") or config.get("from_addr")):
        return "Missing required field: from"

    recipients = config.get("to", [])
    if not isinstance(recipients, list):
        return "to must be a list of addresses"
    for r in recipients:
        if not isinstance(r, str) or "@" not in r:
            return f"Invalid email address: {r}"

    port = config.get("smtp_port", 587)
    try:
        p = int(port)
    except (ValueError, TypeError):
        return "smtp_port must be between 1 and 65535"
    if p < 1 or p > 65535:
        return "smtp_port must be between 1 and 65535"
    return None
