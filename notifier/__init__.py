"""Alert delivery over webhooks and SMTP email."""

from notifier.channels import Notifier
from notifier.channels.email import EmailNotifier, build_email_body, format_recipients
from notifier.channels.payload import ResolvedPayload, build_payload
from notifier.channels.validate import create_notifier, validate_channel_config
from notifier.channels.webhook import WebhookNotifier
from notifier.credentials import (
    CredentialProvider,
    EnvironmentCredentialProvider,
    SmtpCredentials,
    StaticCredentialProvider,
)
from notifier.dispatcher import DispatchOutcome, dispatch_notification
from notifier.errors import (
    ConfigurationError,
    CredentialsError,
    EmailDeliveryError,
    NotifierError,
    PayloadError,
    TemplateError,
    WebhookError,
)
from notifier.params import ParameterResolver
from notifier.schemas.channel import CustomPayloadConfig, EmailConfig, WebhookConfig

__all__ = [
    # Channels
    "Notifier",
    "WebhookNotifier",
    "EmailNotifier",
    "create_notifier",
    "validate_channel_config",
    # Payload / email rendering
    "ResolvedPayload",
    "build_payload",
    "build_email_body",
    "format_recipients",
    # Config
    "WebhookConfig",
    "CustomPayloadConfig",
    "EmailConfig",
    "ParameterResolver",
    # Credentials
    "CredentialProvider",
    "EnvironmentCredentialProvider",
    "StaticCredentialProvider",
    "SmtpCredentials",
    # Dispatch
    "DispatchOutcome",
    "dispatch_notification",
    # Errors
    "NotifierError",
    "ConfigurationError",
    "CredentialsError",
    "PayloadError",
    "TemplateError",
    "WebhookError",
    "EmailDeliveryError",
]
