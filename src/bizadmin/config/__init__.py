"""Configuration for bizadmin: settings, logging and constants."""

from .constants import (
    Tables,
    CacheDefaults,
    SearchDefaults,
    DEFAULT_PAGE_SIZE,
    UserRole,
    UserStatus,
    TaskPriority,
    TaskStatus,
    FormStatus,
    FormType,
)
from .logging_config import LogFormat, LoggingConfig, setup_logging
from .settings import AppSettings, get_settings

__all__ = [
    "Tables",
    "CacheDefaults",
    "SearchDefaults",
    "DEFAULT_PAGE_SIZE",
    "UserRole",
    "UserStatus",
    "TaskPriority",
    "TaskStatus",
    "FormStatus",
    "FormType",
    "LogFormat",
    "LoggingConfig",
    "setup_logging",
    "AppSettings",
    "get_settings",
]
