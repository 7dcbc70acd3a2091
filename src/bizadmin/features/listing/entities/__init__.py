from .protocols import ListSource
from .screen_state import (
    OFFLINE_BANNER,
    OFFLINE_REFRESH_MESSAGE,
    SEARCH_UNAVAILABLE_MESSAGE,
    STALE_DATA_NOTICE,
    ScreenState,
)

__all__ = [
    "ListSource",
    "OFFLINE_BANNER",
    "OFFLINE_REFRESH_MESSAGE",
    "SEARCH_UNAVAILABLE_MESSAGE",
    "STALE_DATA_NOTICE",
    "ScreenState",
]
