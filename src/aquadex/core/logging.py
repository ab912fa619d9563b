"""
Logging configuration.

The packaged YAML config (`src/aquadex/config/logging.yaml`) keeps third-party
libraries at WARNING; only the `aquadex` logger tree follows the configured
level. That level comes from `app.log_level` (`AQUADEX_LOG_LEVEL`) unless the
caller passes one explicitly (CLI `--log-level`).
"""

from __future__ import annotations

import logging
import logging.config

from aquadex.config.settings import get_logging_config, get_settings

APP_LOGGER = "aquadex"


def _level_number(name: str) -> int:
    level = logging.getLevelName(name.strip().upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level '{name}'")
    return level


def configure_logging(level: str | None = None) -> int:
    """Apply the packaged logging config; return the level set on the `aquadex` logger."""
    number = _level_number(level or get_settings().app.log_level)
    config = get_logging_config()
    config.setdefault("loggers", {}).setdefault(APP_LOGGER, {})["level"] = logging.getLevelName(number)
    logging.config.dictConfig(config)
    return number
