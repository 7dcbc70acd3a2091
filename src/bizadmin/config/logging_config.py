"""Centralized logging configuration for bizadmin.

Standard library logging configured through ``dictConfig``. Verbosity and
format come from the environment so the proxy, scripts and tests behave the
same way.
"""

import logging
import logging.config
import os
from enum import Enum
from typing import Optional


class LogFormat(str, Enum):
    """Log format options."""
    SIMPLE = "simple"
    DETAILED = "detailed"
    JSON = "json"


FORMAT_STRINGS = {
    LogFormat.SIMPLE: "%(asctime)s - %(levelname)s - %(message)s",
    LogFormat.DETAILED: "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s",
    LogFormat.JSON: '{"time":"%(asctime)s","level":"%(levelname)s","module":"%(name)s","message":"%(message)s"}',
}


class LoggingConfig:
    """Centralized logging configuration manager."""

    # Third-party modules that only log warnings and above
    QUIET_MODULES = [
        "httpx",
        "httpcore",
        "asyncio",
        "redis",
    ]

    @classmethod
    def build(cls, level: Optional[str] = None, log_format: Optional[str] = None) -> dict:
        """Build a dictConfig mapping.

        Args:
            level: Log level, defaults to ``LOG_LEVEL`` or INFO
            log_format: simple, detailed or json, defaults to ``LOG_FORMAT``
        """
        level = (level or os.getenv("LOG_LEVEL", "INFO")).upper()
        try:
            fmt = LogFormat((log_format or os.getenv("LOG_FORMAT", "simple")).lower())
        except ValueError:
            fmt = LogFormat.SIMPLE

        config = {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "default": {
                    "format": FORMAT_STRINGS[fmt],
                    "datefmt": "%Y-%m-%d %H:%M:%S",
                },
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "level": level,
                    "formatter": "default",
                    "stream": "ext://sys.stdout",
                },
            },
            "root": {
                "level": level,
                "handlers": ["console"],
            },
            "loggers": {},
        }

        for module in cls.QUIET_MODULES:
            config["loggers"][module] = {
                "level": "WARNING",
                "handlers": ["console"],
                "propagate": False,
            }

        return config

    @classmethod
    def configure(cls, level: Optional[str] = None, log_format: Optional[str] = None) -> None:
        """Apply logging configuration."""
        config = cls.build(level, log_format)
        logging.config.dictConfig(config)
        logging.getLogger(__name__).debug(
            f"Logging configured: level={config['root']['level']}"
        )


def setup_logging(level: Optional[str] = None) -> None:
    """Setup logging configuration from environment variables.

    Entry points call this once at startup; the library itself never does.
    """
    LoggingConfig.configure(level)
