from .connectivity_monitor import ConnectivityMonitor, http_probe

__all__ = ["ConnectivityMonitor", "http_probe"]
