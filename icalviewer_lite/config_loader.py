"""icalviewer_lite.config_loader

Lightweight YAML config loader for icalviewer_lite.

Exposes a typed dataclass `Config` and a `load_config()` helper that accepts
an optional path override.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from icalviewer_lite.lite_exceptions import LiteConfigError

logger = logging.getLogger(__name__)

CONFIG_PATH_ENV = "ICALVIEWER_CONFIG"
LOG_LEVEL_ENV = "ICALVIEWER_LOG_LEVEL"
DEFAULT_CONFIG_FILENAME = "icalviewer.yaml"
_VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class Config:
    """Typed configuration for icalviewer_lite.

    Fields:
        log_level: logging level name
        default_title: title for events without SUMMARY
        large_document_warning_bytes: size at which a warning is logged
        output_indent: JSON indent used by the CLI (0 for compact output)
    """

    log_level: str = "INFO"
    default_title: str = "Untitled Event"
    large_document_warning_bytes: int = 10 * 1024 * 1024
    output_indent: int = 2

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> Config:
        """Create Config from a plain mapping, applying defaults and validation.

        Numeric-like values are coerced to int; anything unusable falls back
        to the default with a warning.
        """
        if data is None:
            data = {}

        def _coerce_int(key: str, default: int) -> int:
            raw = data.get(key, default)
            try:
                value = int(raw)
            except (TypeError, ValueError):
                logger.warning("Config %s=%r is not an int; using default %d", key, raw, default)
                return default
            if value < 0:
                logger.warning("Config %s=%d is negative; using default %d", key, value, default)
                return default
            return value

        log_level = data.get("log_level", "INFO")
        log_level = str(log_level).upper() if log_level is not None else "INFO"
        if log_level not in _VALID_LOG_LEVELS:
            logger.warning("Config log_level=%r is not a logging level; using INFO", log_level)
            log_level = "INFO"

        default_title = data.get("default_title", "Untitled Event")
        default_title = str(default_title) if default_title else "Untitled Event"

        return cls(
            log_level=log_level,
            default_title=default_title,
            large_document_warning_bytes=_coerce_int(
                "large_document_warning_bytes", 10 * 1024 * 1024
            ),
            output_indent=_coerce_int("output_indent", 2),
        )


def _apply_env_overrides(cfg: Config) -> Config:
    env_level = os.getenv(LOG_LEVEL_ENV, "").strip().upper()
    if env_level in _VALID_LOG_LEVELS:
        logger.debug("Applying %s=%s", LOG_LEVEL_ENV, env_level)
        cfg.log_level = env_level
    return cfg


def load_config(path: str | None = None) -> Config:
    """Load configuration from a YAML file and return a Config instance.

    Args:
        path: Optional path to the config file. Falls back to the
              ICALVIEWER_CONFIG environment variable, then ./icalviewer.yaml.

    Returns:
        Config dataclass instance with values from file (or defaults).

    Raises:
        LiteConfigError: If the file is not valid YAML or its top level is
            not a mapping
    """
    p = Path(path or os.getenv(CONFIG_PATH_ENV) or Path.cwd() / DEFAULT_CONFIG_FILENAME)
    logger.debug("Attempting to load config from %s", p)
    if not p.exists():
        logger.debug("Config file %s not found; using defaults", p)
        return _apply_env_overrides(Config())

    try:
        raw = yaml.safe_load(p.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise LiteConfigError(f"Config file {p} is not valid YAML: {exc}") from exc

    # safe_load returns None for empty files
    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        logger.warning("Config file %s parsed but top-level is not a mapping: %r", p, raw)
        raise LiteConfigError("Config file must contain a mapping at top level")

    cfg = Config.from_dict(raw)
    logger.debug("Loaded configuration from %s", p)
    logger.debug("Configuration values: %s", cfg)
    return _apply_env_overrides(cfg)
