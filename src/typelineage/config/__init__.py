"""Configuration module: Pydantic settings and structlog setup.

Usage:
    from typelineage.config import IntrospectionSettings, configure_logging

    settings = IntrospectionSettings(verbose=True)
    configure_logging(verbose=settings.verbose, log_json=settings.log_json)
"""

from typelineage.config.logging import configure_logging, configure_logging_from_settings
from typelineage.config.settings import IntrospectionSettings

__all__ = [
    "IntrospectionSettings",
    "configure_logging",
    "configure_logging_from_settings",
]
