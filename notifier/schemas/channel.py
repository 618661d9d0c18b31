"""Pydantic schemas for notification channel configuration."""

from typing import Optional

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Webhook
# ---------------------------------------------------------------------------

class CustomPayloadConfig(BaseModel):
    template: str = Field("", description="Payload template; {{.Title}} style references")
    fields: dict[str, str] = Field(default_factory=dict, description="Extra fields merged into the payload")
    title_field: str = ""
    message_field: str = ""
    include_title: bool = False
    include_message: bool = False
    content_type: str = ""

    model_config = {"frozen": True}


class WebhookConfig(BaseModel):
    url: str = Field("", description="Target URL; falls back to WEBHOOK_URL")
    method: str = ""
    headers: dict[str, str] = Field(default_factory=dict)
    auth_type: str = Field("", description="none, bearer, basic or apikey")
    auth_token: str = ""
    auth_username: str = ""
    auth_password: str = ""
    auth_header: str = ""
    custom_payload: Optional[CustomPayloadConfig] = None
    retries: int = 0
    timeout: int = 30
    skip_tls_verify: bool = False

    model_config = {"frozen": True}


# ---------------------------------------------------------------------------
# Email
# ---------------------------------------------------------------------------

class EmailConfig(BaseModel):
    smtp_host: str = ""
    smtp_port: int = 587
    from_addr: str = Field("", alias="from")
    to: list[str] = Field(default_factory=list)
    reply_to: str = ""
    use_tls: bool = False
    use_starttls: bool = False
    skip_verify: bool = False

    model_config = {"frozen": True, "populate_by_name": True}
