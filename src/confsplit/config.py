"""
Configuration for confsplit.

Supports loading from:
1. Environment variables (highest priority)
2. Default values (fallback)
"""

from __future__ import annotations

import os
from typing import Any

from pydantic import BaseModel, Field, field_validator

PROGRAM_NAME = "confsplit"
PROGRAM_VERSION = "0.1.0"


class TokenizerConfig(BaseModel):
    """Tokenizer defaults used when a caller passes no delimiters."""

    delimiters: str = " \t"

    @field_validator("delimiters")
    @classmethod
    def _non_empty(cls, value: str) -> str:
        if not value:
            raise ValueError("delimiters must contain at least one character")
        return value


class FetchConfig(BaseModel):
    """HTTP retrieval configuration."""

    timeout: float = 30.0
    user_agent: str | None = None  # None -> derived from program name and platform
    auth_method: str = "any"  # any, basic, digest
    proxy: str | None = None  # "host:port" or a URL
    proxy_type: str | None = None  # http, socks4, socks4a, socks5, socks5h
    proxy_auth: str | None = None  # "user:pass"
    proxy_auth_method: str = "any"  # any, basic
    cookie_cache: str | None = None  # Netscape-format cookie file
    ca_bundle: str | None = None  # None -> CURL_CA_BUNDLE, then the system store
    verify_ssl: bool = True
    max_redirects: int = 10


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "INFO"
    format: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class Config(BaseModel):
    """Main configuration."""

    tokenizer: TokenizerConfig = Field(default_factory=TokenizerConfig)
    fetch: FetchConfig = Field(default_factory=FetchConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def from_env(cls) -> Config:
        """
        Load configuration from environment variables.

        Environment variables:
            CONFSPLIT_DELIMITERS: Default delimiter characters
            CONFSPLIT_FETCH_TIMEOUT: HTTP timeout in seconds
            CONFSPLIT_USER_AGENT: User-Agent header override
            CONFSPLIT_AUTH_METHOD: HTTP auth method (any, basic, digest)
            CONFSPLIT_PROXY: Proxy URL
            CONFSPLIT_PROXY_TYPE: Proxy type (http, socks4, socks4a, socks5, socks5h)
            CONFSPLIT_PROXY_AUTH: Proxy credentials as user:pass
            CONFSPLIT_PROXY_AUTH_METHOD: Proxy auth method (any, basic)
            CONFSPLIT_COOKIE_CACHE: Cookie file loaded before and saved after requests
            CONFSPLIT_CA_BUNDLE: CA bundle path for TLS verification
            CONFSPLIT_VERIFY_SSL: Verify TLS certificates (true/false)
            CONFSPLIT_MAX_REDIRECTS: Redirect limit
            CONFSPLIT_LOG_LEVEL: Logging level name
        """

        def get_env(key: str, default: Any = None) -> Any:
            """Get environment variable with type conversion."""
            value = os.getenv(key)
            if value is None or value == "":
                return default
            if isinstance(default, bool):
                return value.lower() in ("true", "1", "yes")
            if isinstance(default, int):
                return int(value)
            if isinstance(default, float):
                return float(value)
            return value

        return cls(
            tokenizer=TokenizerConfig(
                delimiters=get_env("CONFSPLIT_DELIMITERS", " \t"),
            ),
            fetch=FetchConfig(
                timeout=get_env("CONFSPLIT_FETCH_TIMEOUT", 30.0),
                user_agent=get_env("CONFSPLIT_USER_AGENT"),
                auth_method=get_env("CONFSPLIT_AUTH_METHOD", "any"),
                proxy=get_env("CONFSPLIT_PROXY"),
                proxy_type=get_env("CONFSPLIT_PROXY_TYPE"),
                proxy_auth=get_env("CONFSPLIT_PROXY_AUTH"),
                proxy_auth_method=get_env("CONFSPLIT_PROXY_AUTH_METHOD", "any"),
                cookie_cache=get_env("CONFSPLIT_COOKIE_CACHE"),
                ca_bundle=get_env("CONFSPLIT_CA_BUNDLE"),
                verify_ssl=get_env("CONFSPLIT_VERIFY_SSL", True),
                max_redirects=get_env("CONFSPLIT_MAX_REDIRECTS", 10),
            ),
            logging=LoggingConfig(
                level=get_env("CONFSPLIT_LOG_LEVEL", "INFO"),
            ),
        )
