from .task_list_source import TaskListSource

__all__ = ["TaskListSource"]
