"""Infrastructure layer - configuration and logging."""

from mailcraft.infrastructure.logging import configure_logging
from mailcraft.infrastructure.settings import Settings, get_settings

__all__ = [
    "Settings",
    "get_settings",
    "configure_logging",
]
