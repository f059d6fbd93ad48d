"""Configuration settings using Pydantic Settings.

Usage:
    from typelineage.config import IntrospectionSettings

    # Load from environment variables (TYPELINEAGE_*)
    settings = IntrospectionSettings()

    # Or override with explicit values
    settings = IntrospectionSettings(probe_on_register=True)
"""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class IntrospectionSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for the type registry and logging.

    Attributes:
        probe_on_register: Build a default instance of every type when it is
            registered, so types without a no-argument path fail at definition
            time instead of at first enumeration.
        verbose: Enable DEBUG output for the typelineage logger.
        log_json: Render log lines as JSON instead of console output.

    Environment Variables:
        TYPELINEAGE_PROBE_ON_REGISTER
        TYPELINEAGE_VERBOSE
        TYPELINEAGE_LOG_JSON
    """

    model_config = SettingsConfigDict(
        env_prefix="TYPELINEAGE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    probe_on_register: bool = False
    verbose: bool = False
    log_json: bool = False
