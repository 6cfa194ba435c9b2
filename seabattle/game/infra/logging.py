"""App-level logging policy over the runtime logging pipeline."""

from __future__ import annotations

import logging
import os

from seabattle.runtime.logging import JsonFormatter, LoggingConfig, configure_logging

__all__ = ["JsonFormatter", "build_logging_config", "setup_logging"]


def build_logging_config() -> LoggingConfig:
    """Read logging settings from the environment."""
    level_name = os.getenv("SEABATTLE_LOG_LEVEL", os.getenv("LOG_LEVEL", "INFO")).upper()
    console_format = os.getenv("LOG_FORMAT", "text").lower()
    file_path = os.getenv("SEABATTLE_LOG_FILE", "").strip() or None
    return LoggingConfig(
        level_name=level_name,
        console_format=console_format,
        file_path=file_path,
        file_format="json",
    )


def setup_logging() -> None:
    """Configure application logging."""
    config = build_logging_config()
    configure_logging(config)
    logging.getLogger(__name__).info(
        "logging_configured level=%s file=%s", config.level_name, config.file_path
    )
