"""Screen state derived from a list controller."""

from enum import Enum

SEARCH_UNAVAILABLE_MESSAGE = "Search is unavailable while offline"
OFFLINE_REFRESH_MESSAGE = "You are offline. Pull to refresh when the connection is back."
OFFLINE_BANNER = "You are offline. Showing saved data."
STALE_DATA_NOTICE = "You're viewing cached data. Some information may be outdated."


class ScreenState(str, Enum):
    INITIAL_LOADING = "initial_loading"
    LOADED_EMPTY = "loaded_empty"
    LOADED_WITH_DATA = "loaded_with_data"
    ERROR = "error"
