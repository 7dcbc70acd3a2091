"""Network state awareness."""

from .services import ConnectivityMonitor, http_probe

__all__ = ["ConnectivityMonitor", "http_probe"]
