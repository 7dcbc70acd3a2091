"""Tasks."""

from .entities import Task
from .repositories import TaskListSource

__all__ = ["Task", "TaskListSource"]
