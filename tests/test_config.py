"""Tests for client settings."""

import pytest

from coinmarketcap.config import (
    PRODUCTION_BASE_URL,
    SANDBOX_BASE_URL,
    ClientSettings,
)


class TestClientSettings:
    """Test suite for ClientSettings."""

    def test_base_url_selection(self):
        assert ClientSettings(api_key="k").base_url == PRODUCTION_BASE_URL
        assert ClientSettings(api_key="k", sandbox=True).base_url == SANDBOX_BASE_URL

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("COINMARKETCAP_API_KEY", "env_key")
        monkeypatch.setenv("COINMARKETCAP_SANDBOX", "True")

        settings = ClientSettings.from_env()

        assert settings.api_key == "env_key"
        assert settings.sandbox is True

    @pytest.mark.parametrize("value", ["false", "1", "yes", ""])
    def test_sandbox_only_enabled_by_true(self, monkeypatch, value):
        monkeypatch.setenv("COINMARKETCAP_API_KEY", "env_key")
        monkeypatch.setenv("COINMARKETCAP_SANDBOX", value)

        assert ClientSettings.from_env().sandbox is False

    def test_sandbox_unset(self, monkeypatch):
        monkeypatch.setenv("COINMARKETCAP_API_KEY", "env_key")
        monkeypatch.delenv("COINMARKETCAP_SANDBOX", raising=False)

        assert ClientSettings.from_env().sandbox is False

    def test_explicit_values_win(self, monkeypatch):
        monkeypatch.setenv("COINMARKETCAP_API_KEY", "env_key")
        monkeypatch.setenv("COINMARKETCAP_SANDBOX", "true")

        settings = ClientSettings.from_env(api_key="explicit", sandbox=False, timeout=5)

        assert settings == ClientSettings(api_key="explicit", sandbox=False, timeout=5)

    def test_missing_api_key(self, monkeypatch):
        monkeypatch.delenv("COINMARKETCAP_API_KEY", raising=False)

        with pytest.raises(ValueError, match="COINMARKETCAP_API_KEY"):
            ClientSettings.from_env()
