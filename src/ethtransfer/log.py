"""Logging setup for the ethtransfer logger hierarchy."""

import logging

from ethtransfer.config import Settings, settings as default_settings

LOGGER_NAME = "ethtransfer"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(settings: Settings | None = None) -> logging.Logger:
    """Attach one stream handler to the package logger. Safe to call repeatedly."""
    settings = settings or default_settings
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(settings.effective_log_level)

    if not any(h.get_name() == LOGGER_NAME for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.set_name(LOGGER_NAME)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    return logger
