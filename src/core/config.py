"""Core configuration.

Why here:
- Centralises environment variables (pydantic-settings) without leaking into the CLI.
- Adapters (HTTP, key store) read configuration the same way.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.domain.models import LookupConfig


def get_user_config_dir() -> Path:
    """Per-user configuration directory (cross-platform, no extra dependencies)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "safebrowsing"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "safebrowsing"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "safebrowsing"
    return Path.home() / ".config" / "safebrowsing"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class AppSettings(BaseSettings):
    """Central application settings.

    Why pydantic-settings:
    - Typing and validation at the edge (env vars) keep the core free of parsing.
    - A single configuration contract shared by CLI and adapters.
    """

    model_config = SettingsConfigDict(
        env_prefix="SAFEBROWSING_",
        extra="ignore",
        case_sensitive=False,
        # Project .env first (dev), then the user's global config.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    endpoint: str = Field(
        default="https://sb-ssl.google.com/safebrowsing/api/lookup",
        min_length=8,
        description="Lookup API endpoint.",
    )
    client: str = Field(
        default="safebrowsing",
        min_length=1,
        description="Client identifier sent as the `client` query parameter.",
    )
    appver: str = Field(
        default="1.0",
        min_length=1,
        description="Application version sent as `appver`.",
    )
    pver: str = Field(
        default="3.0",
        min_length=1,
        description="Protocol version sent as `pver`.",
    )

    key_file: Path = Field(
        default=Path("categorization.key"),
        description="File holding the API key (created on first run).",
    )

    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Timeout for the lookup request (seconds).",
    )
    user_agent: str = Field(
        default="safebrowsing/1.0",
        min_length=1,
        description="User-Agent for lookup requests.",
    )

    log_level: str = Field(
        default="WARNING",
        description="Logging level (DEBUG, INFO, WARNING, ERROR).",
    )

    def lookup_config(self) -> LookupConfig:
        """Freeze the wire-level fields into an immutable `LookupConfig`."""

        return LookupConfig(
            endpoint=self.endpoint,
            client=self.client,
            appver=self.appver,
            pver=self.pver,
            timeout_seconds=self.http_timeout_seconds,
            user_agent=self.user_agent,
        )
