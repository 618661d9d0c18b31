"""Unit tests for channel config validation and the notifier factory."""

import pytest

from notifier.channels.email import EmailNotifier
from notifier.channels.validate import create_notifier, validate_channel_config
from notifier.channels.webhook import WebhookNotifier
from notifier.credentials import StaticCredentialProvider
from notifier.errors import ConfigurationError


class TestValidateChannelConfig:
    def test_unknown_type(self):
        assert validate_channel_config("pager", {}) == "Unknown channel type: pager"

    @pytest.mark.parametrize(
        "config",
        [
            {},
            {"url": "https://hooks.example.com/x"},
            {"url": "https://{{site}}/hook"},
            {"url": "http://x.test", "auth_type": "Bearer", "headers": {"X-A": "b"}},
            {"custom_payload": {"template": "{{.Title}}"}},
        ],
    )
    def test_valid_webhook(self, config):
        assert validate_channel_config("webhook", config) is None

    @pytest.mark.parametrize(
        "config,error",
        [
            ({"url": "ftp://x.test"}, "url must use http or https protocol"),
            ({"url": "https://"}, "url is not a valid URL"),
            ({"url": 42}, "url must be a string"),
            ({"headers": ["X-A"]}, "headers must be an object"),
            ({"auth_type": "digest"}, "Unknown auth type: digest"),
            ({"custom_payload": "raw"}, "custom_payload must be an object"),
        ],
    )
    def test_invalid_webhook(self, config, error):
        assert validate_channel_config("webhook", config) == error

    def test_valid_email(self):
        config = {"smtp_host": "smtp.x.com", "from": "a@x.com", "to": ["b@x.com"], "smtp_port": 465}
        assert validate_channel_config("email", config) is None

    def test_email_without_recipients_is_valid(self):
        assert validate_channel_config("email", {"smtp_host": "smtp.x.com", "from": "a@x.com"}) is None

    @pytest.mark.parametrize(
        "config,error",
        [
            ({"from": "a@x.com"}, "Missing required field: smtp_host"),
            ({"smtp_host": "smtp.x.com"}, "Missing required field: from"),
            ({"smtp_host": "h", "from": "a@x.com", "to": "b@x.com"}, "to must be a list of addresses"),
            ({"smtp_host": "h", "from": "a@x.com", "to": ["nobody"]}, "Invalid email address: nobody"),
            ({"smtp_host": "h", "from": "a@x.com", "smtp_port": 0}, "smtp_port must be between 1 and 65535"),
            ({"smtp_host": "h", "from": "a@x.com", "smtp_port": "abc"}, "smtp_port must be between 1 and 65535"),
        ],
    )
    def test_invalid_email(self, config, error):
        assert validate_channel_config("email", config) == error


class TestCreateNotifier:
    def test_webhook(self, mock_http_transport):
        notifier = create_notifier(
            "webhook",
            {"url": "https://x.test", "retries": 2, "custom_payload": {"template": "{{.Title}}"}},
            transport=mock_http_transport,
        )
        assert isinstance(notifier, WebhookNotifier)
        assert notifier.config.retries == 2
        assert notifier.config.custom_payload.template == "{{.Title}}"
        assert notifier.transport is mock_http_transport

    def test_email_from_alias(self, mock_smtp_transport):
        notifier = create_notifier(
            "email",
            {"smtp_host": "smtp.x.com", "from": "a@x.com", "to": ["b@x.com"], "use_starttls": True},
            transport=mock_smtp_transport,
        )
        assert isinstance(notifier, EmailNotifier)
        assert notifier.config.from_addr == "a@x.com"
        assert notifier.config.to == ["b@x.com"]
        assert notifier.config.use_starttls is True

    def test_invalid_config(self):
        with pytest.raises(ConfigurationError, match="Unknown auth type"):
            create_notifier("webhook", {"auth_type": "digest"})

    def test_schema_violation(self):
        with pytest.raises(ConfigurationError, match="invalid webhook config"):
            create_notifier("webhook", {"url": "https://x.test", "retries": "many"})

    def test_email_with_credentials(self, mock_smtp_transport):
        credentials = StaticCredentialProvider("u", "p")
        notifier = create_notifier(
            "email",
            {"smtp_host": "smtp.x.com", "from": "a@x.com"},
            transport=mock_smtp_transport,
            credentials=credentials,
        )
        assert notifier.credentials is credentials

    def test_webhook_with_resolver(self, mock_http_transport, resolver):
        notifier = create_notifier("webhook", {"url": "https://x.test"}, transport=mock_http_transport, resolver=resolver)
        assert notifier.resolver is resolver

    def test_option_for_other_channel_rejected(self, mock_smtp_transport, resolver):
        with pytest.raises(TypeError):
            create_notifier(
                "email",
                {"smtp_host": "smtp.x.com", "from": "a@x.com"},
                transport=mock_smtp_transport,
                resolver=resolver,
            )
