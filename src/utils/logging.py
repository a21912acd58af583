"""Logging utilities for the dashboard."""

import logging
import sys

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Libraries that log every poll at INFO or DEBUG
_CHATTY_LOGGERS = ("apscheduler", "urllib3")


def setup_logging(level: str = "INFO") -> None:
    """Send log records to stdout at the given level.

    Safe to call again from a later Streamlit session: the handler is only
    installed once, but the level is always applied.
    """
    root = logging.getLogger()
    if not root.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    for name in _CHATTY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Return a logger, configuring the root logger on first use."""
    if not logging.getLogger().handlers:
        setup_logging()
    return logging.getLogger(name)


# Convenience logger for the Streamlit app
dashboard_logger = get_logger("dashboard")
