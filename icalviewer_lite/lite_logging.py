"""
Central logging configuration for icalviewer_lite.

Sets package logger levels and keeps third-party loggers quiet while
keeping warnings about dropped events and malformed values visible.
"""

import logging
import os
from typing import Optional

PACKAGE_LOGGERS = (
    "icalviewer_lite",
    "icalviewer_lite.calendar",
    "icalviewer_lite.calendar.lite_parser",
    "icalviewer_lite.calendar.lite_event_assembler",
    "icalviewer_lite.calendar.lite_datetime_utils",
    "icalviewer_lite.config_loader",
)

SUPPRESSED_LOGGERS = (
    "asyncio",
    "pydantic",
    "yaml",
)

_LEVEL_NAMES = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def configure_lite_logging(
    debug_mode: bool = False,
    force_debug: Optional[bool] = None,
    level_name: Optional[str] = None,
) -> None:
    """
    Configure logging levels for icalviewer_lite.

    Args:
        debug_mode: Whether to enable debug logging for icalviewer_lite modules
        force_debug: Override debug mode setting (None to use env var detection)
        level_name: Level for root and package loggers outside debug mode
            (defaults to INFO)

    Environment Variables:
        ICALVIEWER_DEBUG: Set to '1', 'true', 'yes' to force debug logging
        ICALVIEWER_LOG_LEVEL: Override the configured level (DEBUG, INFO, WARNING, ERROR)
    """
    env_debug = os.getenv("ICALVIEWER_DEBUG", "").lower() in ("1", "true", "yes")
    env_log_level = os.getenv("ICALVIEWER_LOG_LEVEL", "").upper()

    if force_debug is not None:
        final_debug = force_debug
    elif env_debug:
        final_debug = True
    else:
        final_debug = debug_mode

    configured_level = logging.INFO
    if level_name and level_name.upper() in _LEVEL_NAMES:
        configured_level = getattr(logging, level_name.upper())

    root_level = logging.DEBUG if final_debug else configured_level
    if env_log_level in _LEVEL_NAMES:
        root_level = getattr(logging, env_log_level)

    root_logger = logging.getLogger()
    root_logger.setLevel(root_level)

    logger_config: dict[str, int] = {name: logging.WARNING for name in SUPPRESSED_LOGGERS}

    package_level = logging.DEBUG if final_debug else root_level
    for module in PACKAGE_LOGGERS:
        logger_config[module] = package_level

    for logger_name, level in logger_config.items():
        logging.getLogger(logger_name).setLevel(level)

    if final_debug:
        root_logger.info("Debug logging enabled for icalviewer_lite modules.")
    else:
        root_logger.debug("Production logging configuration applied.")


def get_logging_status() -> dict[str, str]:
    """
    Get current logging configuration status.

    Returns:
        Dictionary mapping logger names to their current levels
    """
    status = {"root": logging.getLevelName(logging.getLogger().level)}

    for logger_name in ("icalviewer_lite", *SUPPRESSED_LOGGERS):
        status[logger_name] = logging.getLevelName(logging.getLogger(logger_name).level)

    return status
