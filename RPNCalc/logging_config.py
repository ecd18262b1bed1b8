# logging_config.py
"""Logging setup for the calculator shell (main.py and the Qt window).

The level comes from the "log_level" setting in config.json. The core
modules (Parser, RPNEngine, MathEngine) never log.
"""
import logging

from .config_manager import DEFAULT_SETTINGS

LOG_FORMAT = "[%(asctime)s] %(name)s %(levelname)s: %(message)s"
LOG_DATE_FORMAT = "%H:%M:%S"


def resolve_level(level_name):
    """Map a setting like "debug" to a logging level; unknown names give None."""
    level = logging.getLevelName(str(level_name).upper())
    return level if isinstance(level, int) else None


def configure_logging(level_name=None):
    """Install the root handler once; returns the level actually used."""
    if level_name is None:
        level_name = DEFAULT_SETTINGS["log_level"]

    level = resolve_level(level_name)
    fallback = level is None
    if fallback:
        level = resolve_level(DEFAULT_SETTINGS["log_level"])

    logging.basicConfig(level=level, format=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
    if fallback:
        logging.getLogger(__name__).warning(
            "Unknown log_level %r, using %s", level_name, DEFAULT_SETTINGS["log_level"])
    return level
