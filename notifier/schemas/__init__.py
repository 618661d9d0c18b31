from notifier.schemas.channel import CustomPayloadConfig, EmailConfig, WebhookConfig

__all__ = ["CustomPayloadConfig", "EmailConfig", "WebhookConfig"]
