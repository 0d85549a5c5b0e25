"""Tests for confsplit.config."""

from __future__ import annotations

import pydantic
import pytest

from confsplit.config import Config, TokenizerConfig


class TestDefaults:
    def test_tokenizer(self, config: Config) -> None:
        assert config.tokenizer.delimiters == " \t"

    def test_fetch(self, config: Config) -> None:
        assert config.fetch.timeout == 30.0
        assert config.fetch.verify_ssl is True
        assert config.fetch.user_agent is None
        assert config.fetch.max_redirects == 10
        assert config.fetch.proxy_type is None
        assert config.fetch.proxy_auth_method == "any"
        assert config.fetch.cookie_cache is None

    def test_logging(self, config: Config) -> None:
        assert config.logging.level == "INFO"


class TestFromEnv:
    def test_no_env(self) -> None:
        assert Config.from_env() == Config()

    def test_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CONFSPLIT_DELIMITERS", ",")
        monkeypatch.setenv("CONFSPLIT_FETCH_TIMEOUT", "5")
        monkeypatch.setenv("CONFSPLIT_VERIFY_SSL", "false")
        monkeypatch.setenv("CONFSPLIT_MAX_REDIRECTS", "3")
        monkeypatch.setenv("CONFSPLIT_PROXY", "http://proxy:3128")
        monkeypatch.setenv("CONFSPLIT_LOG_LEVEL", "DEBUG")
        cfg = Config.from_env()
        assert cfg.tokenizer.delimiters == ","
        assert cfg.fetch.timeout == 5.0
        assert cfg.fetch.verify_ssl is False
        assert cfg.fetch.max_redirects == 3
        assert cfg.fetch.proxy == "http://proxy:3128"
        assert cfg.logging.level == "DEBUG"

    def test_empty_value_uses_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CONFSPLIT_DELIMITERS", "")
        assert Config.from_env().tokenizer.delimiters == " \t"

    def test_bool_spellings(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CONFSPLIT_VERIFY_SSL", "yes")
        assert Config.from_env().fetch.verify_ssl is True

    def test_proxy_and_cookie_settings(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CONFSPLIT_PROXY_TYPE", "socks5h")
        monkeypatch.setenv("CONFSPLIT_PROXY_AUTH_METHOD", "basic")
        monkeypatch.setenv("CONFSPLIT_COOKIE_CACHE", "/tmp/cookies.txt")
        monkeypatch.setenv("CONFSPLIT_CA_BUNDLE", "/etc/ssl/ca.pem")
        fetch = Config.from_env().fetch
        assert fetch.proxy_type == "socks5h"
        assert fetch.proxy_auth_method == "basic"
        assert fetch.cookie_cache == "/tmp/cookies.txt"
        assert fetch.ca_bundle == "/etc/ssl/ca.pem"


class TestValidation:
    def test_empty_delimiters_rejected(self) -> None:
        with pytest.raises(pydantic.ValidationError):
            TokenizerConfig(delimiters="")
