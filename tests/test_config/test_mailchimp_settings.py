"""Testes para config/settings/mailchimp.py."""

from __future__ import annotations

from collections.abc import Iterator

import pytest
from pydantic import ValidationError

from config.settings import MailChimpSettings, get_mailchimp_settings
from config.settings.mailchimp import _parse_lists
from utils.errors import ConfigurationError


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[pytest.MonkeyPatch]:
    for key in (
        "MAILCHIMP_API_KEY",
        "MAILCHIMP_LISTS",
        "MAILCHIMP_DEFAULT_LOCALE",
        "APP_DEFAULT_LOCALE",
        "MAILCHIMP_REQUEST_TIMEOUT_SECONDS",
        "MAILCHIMP_VERIFY_SSL",
        "MAILCHIMP_ENABLED",
    ):
        monkeypatch.delenv(key, raising=False)
    get_mailchimp_settings.cache_clear()
    yield monkeypatch
    get_mailchimp_settings.cache_clear()


class TestMailChimpSettings:
    def test_default_values(self) -> None:
        settings = MailChimpSettings()

        assert settings.api_key == ""
        assert settings.lists == {}
        assert settings.default_locale is None
        assert settings.request_timeout_seconds == 10.0
        assert settings.verify_ssl is True
        assert settings.enabled is True

    def test_immutable(self) -> None:
        settings = MailChimpSettings()

        with pytest.raises(ValidationError):
            settings.api_key = "outro"  # type: ignore[misc]

    def test_timeout_must_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            MailChimpSettings(request_timeout_seconds=0)

    def test_validation_errors_ok(self) -> None:
        settings = MailChimpSettings(api_key="abc-us1", lists={"newsletter": "abc123"})
        assert settings.validation_errors() == []

    def test_validation_errors_missing_key(self) -> None:
        errors = MailChimpSettings().validation_errors()
        assert errors == ["MAILCHIMP_API_KEY não configurado"]

    @pytest.mark.parametrize("api_key", ["nohyphen", "-us1", "abc-"])
    def test_validation_errors_malformed_key(self, api_key: str) -> None:
        errors = MailChimpSettings(api_key=api_key).validation_errors()
        assert any("inválido" in error for error in errors)

    def test_validation_errors_empty_list_id(self) -> None:
        settings = MailChimpSettings(api_key="abc-us1", lists={"news": "", "promo": "x"})
        assert settings.validation_errors() == ["MAILCHIMP_LISTS com IDs vazios: news"]


class TestParseLists:
    def test_json_object(self) -> None:
        assert _parse_lists('{"newsletter": "abc123", "promo": "def456"}') == {
            "newsletter": "abc123",
            "promo": "def456",
        }

    def test_key_value_pairs(self) -> None:
        assert _parse_lists("newsletter=abc123, promo = def456") == {
            "newsletter": "abc123",
            "promo": "def456",
        }

    def test_empty(self) -> None:
        assert _parse_lists("  ") == {}

    def test_ignores_items_without_separator(self) -> None:
        assert _parse_lists("newsletter=abc123,garbage") == {"newsletter": "abc123"}

    def test_malformed_json_raises_configuration_error(self) -> None:
        with pytest.raises(ConfigurationError, match="JSON válido"):
            _parse_lists('{"newsletter": ')

    def test_json_non_object_raises_configuration_error(self) -> None:
        with pytest.raises(ConfigurationError, match="objeto JSON"):
            _parse_lists("[1, 2]")


class TestLoadFromEnv:
    def test_loads_all_fields(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv("MAILCHIMP_API_KEY", " abc123-us6 ")
        clean_env.setenv("MAILCHIMP_LISTS", "newsletter=abc123")
        clean_env.setenv("MAILCHIMP_DEFAULT_LOCALE", "pt_BR")
        clean_env.setenv("MAILCHIMP_REQUEST_TIMEOUT_SECONDS", "2.5")
        clean_env.setenv("MAILCHIMP_VERIFY_SSL", "false")
        clean_env.setenv("MAILCHIMP_ENABLED", "0")

        settings = get_mailchimp_settings()

        assert settings.api_key == "abc123-us6"
        assert settings.lists == {"newsletter": "abc123"}
        assert settings.default_locale == "pt_BR"
        assert settings.request_timeout_seconds == 2.5
        assert settings.verify_ssl is False
        assert settings.enabled is False

    def test_default_locale_falls_back_to_app_locale(
        self, clean_env: pytest.MonkeyPatch
    ) -> None:
        clean_env.setenv("APP_DEFAULT_LOCALE", "en_US")

        assert get_mailchimp_settings().default_locale == "en_US"

    def test_cached(self, clean_env: pytest.MonkeyPatch) -> None:
        assert get_mailchimp_settings() is get_mailchimp_settings()

    def test_malformed_lists_json_raises_configuration_error(
        self, clean_env: pytest.MonkeyPatch
    ) -> None:
        clean_env.setenv("MAILCHIMP_LISTS", "{not json")

        with pytest.raises(ConfigurationError):
            get_mailchimp_settings()

    @pytest.mark.parametrize("raw", ["abc", "0", "-1"])
    def test_invalid_timeout_raises_configuration_error(
        self, clean_env: pytest.MonkeyPatch, raw: str
    ) -> None:
        clean_env.setenv("MAILCHIMP_REQUEST_TIMEOUT_SECONDS", raw)

        with pytest.raises(ConfigurationError, match="MAILCHIMP_REQUEST_TIMEOUT_SECONDS"):
            get_mailchimp_settings()
