"""
Configuration for sd-launcher.

Settings come from SD_* environment variables and can be overridden
by CLI flags.

Security:
    The API token is a SecretStr so it never shows up in logs or
    reprs. Access the value with `.get_secret_value()`.
"""

from __future__ import annotations

import os
from functools import lru_cache
from typing import Any, Literal

from pydantic import BaseModel, Field, SecretStr, field_validator

from sdlauncher.workspace import DEFAULT_WORKSPACE_ROOT

DEFAULT_API_URI = "https://api.screwdriver.cd/v4"


class LauncherSettings(BaseModel):
    """
    Launcher settings model.

    Used for type-safe settings access.
    """

    # Screwdriver API
    api_uri: str = Field(DEFAULT_API_URI, min_length=1, description="Screwdriver API base URL")
    token: SecretStr = Field(default=SecretStr(""), description="Screwdriver API token")
    http_timeout: float = Field(30.0, gt=0, description="Per-request timeout in seconds")

    # Workspace
    workspace_root: str = Field(DEFAULT_WORKSPACE_ROOT, min_length=1, description="Root for build workspaces")

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        "INFO", description="Root log level"
    )
    log_http: bool = Field(False, description="Log API requests and responses at DEBUG")

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value: Any) -> Any:
        return value.upper() if isinstance(value, str) else value


@lru_cache()
def get_settings() -> LauncherSettings:
    """
    Get launcher settings from environment.

    Uses lru_cache for singleton pattern.
    """
    return LauncherSettings(
        api_uri=os.getenv("SD_API_URI", DEFAULT_API_URI),
        token=os.getenv("SD_TOKEN", ""),
        http_timeout=os.getenv("SD_HTTP_TIMEOUT", "30"),
        workspace_root=os.getenv("SD_WORKSPACE_ROOT", DEFAULT_WORKSPACE_ROOT),
        log_level=os.getenv("SD_LOG_LEVEL", "INFO"),
        log_http=os.getenv("SD_LOG_HTTP", "false"),
    )
