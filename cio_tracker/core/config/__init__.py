"""Configuration module for the Customer.io tracking client.

Provides centralized configuration management with type-safe enums.

Usage:
    from cio_tracker.core.config import settings, Region

    if settings.REGION == Region.EU:
        ...
"""

from cio_tracker.core.config.enums import Region
from cio_tracker.core.config.settings import Settings

__all__ = [
    "Settings",
    "Region",
    "settings",
]

# Singleton settings instance
settings = Settings()
