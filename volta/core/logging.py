"""
Logging setup for hosts embedding the designer engine.

Library modules only create named loggers; the host decides when to call
configure_logging().
"""

import logging

from volta.config import get_settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str | None = None) -> None:
    """
    Configure root logging for the designer.

    Args:
        level: Log level name. Defaults to Settings.log_level, or DEBUG when
            Settings.debug is on.
    """
    settings = get_settings()
    if level is None:
        level = "DEBUG" if settings.debug else settings.log_level

    logging.basicConfig(level=getattr(logging, level), format=LOG_FORMAT)
    logging.getLogger("volta").setLevel(getattr(logging, level))
