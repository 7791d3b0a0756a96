"""
Centralized settings for collectkit.

One validated, cached settings object holds the tuning knobs of the
collection engines and the logging defaults. Values come from
``COLLECTKIT_*`` environment variables or a ``.env`` file.

Features:
    - **contains_any_scan_threshold:** Collection size at or below which
      ``contains_any`` scans candidates directly instead of hashing them
    - **log_level / log_format:** Defaults for ``configure_from_settings()``

Examples:
    >>> import os
    >>> os.environ["COLLECTKIT_CONTAINS_ANY_SCAN_THRESHOLD"] = "32"
    >>> clear_settings_cache()
    >>> get_settings().contains_any_scan_threshold
    32

Tags:
    settings, configuration, pydantic, environment, collectkit

Doc-Types:
    - API Reference
    - Configuration Guide
"""

from __future__ import annotations

import logging

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from collectkit.core.errors import InvalidConfigError

DEFAULT_SCAN_THRESHOLD = 10


class Settings(BaseSettings):
    """collectkit configuration.

    All fields can be set via ``COLLECTKIT_*`` environment variables (e.g.
    ``COLLECTKIT_LOG_LEVEL=DEBUG``).
    """

    model_config = SettingsConfigDict(
        env_prefix="COLLECTKIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ── Engines ──────────────────────────────────────────────────
    contains_any_scan_threshold: int = Field(
        default=DEFAULT_SCAN_THRESHOLD,
        ge=0,
        description="Max collection size for the direct candidate scan in contains_any",
    )

    # ── Observability ────────────────────────────────────────────
    log_level: str = Field(default="INFO")
    log_format: str = Field(default="console", description="json or console")

    @field_validator("log_level")
    @classmethod
    def _check_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level {value!r}")
        return level

    @field_validator("log_format")
    @classmethod
    def _check_format(cls, value: str) -> str:
        fmt = value.lower()
        if fmt not in ("json", "console"):
            raise ValueError("log_format must be 'json' or 'console'")
        return fmt


_settings_cache: dict[str, Settings] = {}


def get_settings(*, _force_reload: bool = False) -> Settings:
    """Load, validate, and cache a :class:`Settings` instance.

    Raises:
        InvalidConfigError: If an environment value fails validation.
    """
    if not _force_reload and "default" in _settings_cache:
        return _settings_cache["default"]

    try:
        settings = Settings()
    except ValidationError as exc:
        errors = exc.errors()
        key = ".".join(str(part) for part in errors[0]["loc"]) if errors else "settings"
        value = errors[0].get("input") if errors else None
        raise InvalidConfigError(key, value, message=f"Invalid configuration for {key}: {exc}", cause=exc) from exc

    _settings_cache["default"] = settings
    return settings


def clear_settings_cache() -> None:
    """Clear the settings cache (primarily for testing)."""
    _settings_cache.clear()


__all__ = [
    "DEFAULT_SCAN_THRESHOLD",
    "Settings",
    "get_settings",
    "clear_settings_cache",
]
