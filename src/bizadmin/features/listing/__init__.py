"""List screen controller and list source protocol."""

from .entities import (
    OFFLINE_BANNER,
    OFFLINE_REFRESH_MESSAGE,
    SEARCH_UNAVAILABLE_MESSAGE,
    STALE_DATA_NOTICE,
    ListSource,
    ScreenState,
)
from .services import ListController

__all__ = [
    "OFFLINE_BANNER",
    "OFFLINE_REFRESH_MESSAGE",
    "SEARCH_UNAVAILABLE_MESSAGE",
    "STALE_DATA_NOTICE",
    "ListSource",
    "ScreenState",
    "ListController",
]
