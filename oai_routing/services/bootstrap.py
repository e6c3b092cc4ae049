"""Bootstrap: apply Settings to process-wide concerns (logging).

Invariants:
    - configure_logging reads Settings.log_level and Settings.log_format only
    - Safe to call repeatedly; the previous handler is replaced, not duplicated
"""

import logging

from oai_routing.config import Settings, get_settings
from oai_routing.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings | None = None) -> logging.Handler:
    """Install the root log handler described by settings."""
    settings = settings or get_settings()
    handler = setup_logging(settings.log_level, settings.log_format)
    logger.debug(
        f"Logging configured: level={settings.log_level} format={settings.log_format}",
    )
    return handler
