from .list_controller import ListController

__all__ = ["ListController"]
