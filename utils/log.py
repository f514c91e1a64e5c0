"""
Logging configuration for LiftLog.

All loggers hang off the ``liftlog`` root so the Streamlit server's own
logging is left alone.
"""

import logging
import sys

ROOT_LOGGER = "liftlog"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(level: str = "INFO") -> logging.Logger:
    """
    Configure the ``liftlog`` logger.

    Streamlit re-executes the script on every interaction, so this only
    installs a handler the first time it is called; later calls just update
    the level.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """
    logger = logging.getLogger(ROOT_LOGGER)
    numeric_level = getattr(logging, str(level).upper(), logging.INFO)
    logger.setLevel(numeric_level)

    if not any(getattr(h, "_liftlog", False) for h in logger.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%H:%M:%S"))
        handler._liftlog = True
        logger.addHandler(handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Return a logger namespaced under ``liftlog``."""
    if name == ROOT_LOGGER or name.startswith(ROOT_LOGGER + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")
