"""Environment-backed settings for the status update job."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping

from common.errors import ConfigError

# Per-request HTTP timeout in seconds for both external APIs
DEFAULT_TIMEOUT = 30.0

NEWS_API_KEY_ENV = "NEWS_API_KEY"
ANTHROPIC_API_KEY_ENV = "ANTHROPIC_API_KEY"


@dataclass(frozen=True)
class Settings:
    """API credentials required by the pipeline."""
    news_api_key: str
    anthropic_api_key: str


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """
    Read required API keys from the environment.

    Args:
        environ: Mapping to read from (default: os.environ)

    Returns:
        Populated Settings.

    Raises:
        ConfigError: If any required variable is missing or empty.
    """
    if environ is None:
        environ = os.environ

    missing = [
        name
        for name in (NEWS_API_KEY_ENV, ANTHROPIC_API_KEY_ENV)
        if not environ.get(name)
    ]
    if missing:
        raise ConfigError(missing)

    return Settings(
        news_api_key=environ[NEWS_API_KEY_ENV],
        anthropic_api_key=environ[ANTHROPIC_API_KEY_ENV],
    )
