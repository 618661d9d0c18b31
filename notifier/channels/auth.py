"""Authentication headers for webhook requests."""

import base64

from notifier.params import Resolver
from notifier.schemas.channel import WebhookConfig

AUTH_TYPES = {"none", "bearer", "basic", "apikey"}
DEFAULT_API_KEY_HEADER = "X-API-Key"


def apply_authentication(
    headers: dict[str, str],
    config: WebhookConfig,
    resolver: Resolver,
) -> None:
    """
    Set the auth header for ``config.auth_type`` on *headers* in place.

    Credentials pass through the resolver, so ``{{env.API_TOKEN}}`` style
    placeholders work. Missing credentials skip authentication silently.
    """
    auth_type = config.auth_type.lower()

    if auth_type == "bearer":
        if config.auth_token:
            token = resolver.resolve_parameters(config.auth_token)
            headers["Authorization"] = f"Bearer {token}"

    elif auth_type == "basic":
        if config.auth_username and config.auth_password:
            username = resolver.resolve_parameters(config.auth_username)
            password = resolver.resolve_parameters(config.auth_password)
            encoded = base64.b64encode(f"{username}:{password}".encode()).decode()
            headers["Authorization"] = f"Basic {encoded}"

    elif auth_type == "apikey":
        if config.auth_token:
            token = resolver.resolve_parameters(config.auth_token)
            if config.auth_header:
                headers[resolver.resolve_parameters(config.auth_header)] = token
            else:
                headers[DEFAULT_API_KEY_HEADER] = token
