"""Application Bootstrap — wires settings into logging.

Invariants:
    - configure() is the only place that installs log handlers
    - Importing this module has no side effects

Design Decisions:
    - Explicit configure() call over import-time setup: library users keep
      control of their own logging tree
"""

import logging

from bookstore.config import Settings, get_settings
from bookstore.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


def configure(settings: Settings | None = None) -> Settings:
    """Install logging from settings and return the settings used."""
    settings = settings or get_settings()
    setup_logging(settings.log_level, settings.log_format)
    logger.info(
        f"Book store catalog configured (default currency {settings.default_currency})",
    )
    return settings
