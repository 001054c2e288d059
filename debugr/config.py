"""Configuration loaded from the environment (and an optional .env file)."""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import find_dotenv, load_dotenv

API_URL = "https://api.anthropic.com/v1/messages"
API_VERSION = "2023-06-01"
DEFAULT_MODEL = "claude-3-5-sonnet-20240620"
DEFAULT_MAX_TOKENS = 2048
DEFAULT_TIMEOUT_SECONDS = 60.0

API_KEY_ENV = "ANTHROPIC_API_KEY"

_TRUTHY = ("1", "true", "yes", "on")


class ConfigError(Exception):
    """Raised when required configuration is missing or invalid"""
    pass


def mask_api_key(key: str) -> str:
    """Hide all but the first and last four characters of a key."""
    if len(key) <= 8:
        return "****"
    return key[:4] + "..." + key[-4:]


def _env_number(env: Mapping[str, str], name: str, default, cast):
    raw = env.get(name, "").strip()
    if not raw:
        return default
    try:
        value = cast(raw)
    except ValueError:
        raise ConfigError(f"{name} must be a number, got {raw!r}")
    if value <= 0:
        raise ConfigError(f"{name} must be positive, got {raw!r}")
    return value


@dataclass(frozen=True)
class AppConfig:
    """Typed runtime configuration, passed explicitly to every component."""

    api_key: str = ""
    api_url: str = API_URL
    model: str = DEFAULT_MODEL
    max_tokens: int = DEFAULT_MAX_TOKENS
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    debug: bool = False
    dry_run: bool = False

    @property
    def masked_api_key(self) -> str:
        return mask_api_key(self.api_key)

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "AppConfig":
        """Create AppConfig from environment variables.

        Reads ``.env`` first when no explicit mapping is given. A missing
        ``ANTHROPIC_API_KEY`` is a ConfigError.
        """
        if env is None:
            load_dotenv(find_dotenv(usecwd=True))
            env = os.environ

        api_key = env.get(API_KEY_ENV, "").strip()
        if not api_key:
            raise ConfigError(f"{API_KEY_ENV} is required")

        return cls(
            api_key=api_key,
            api_url=env.get("ANTHROPIC_API_URL", "").strip() or API_URL,
            model=env.get("DEBUGR_MODEL", "").strip() or DEFAULT_MODEL,
            max_tokens=_env_number(env, "DEBUGR_MAX_TOKENS", DEFAULT_MAX_TOKENS, int),
            timeout_seconds=_env_number(env, "DEBUGR_TIMEOUT", DEFAULT_TIMEOUT_SECONDS, float),
            debug=env.get("DEBUGR_DEBUG", "").strip().lower() in _TRUTHY,
        )
