"""Exceptions raised by the todo list core."""


class TodoError(Exception):
    """Base exception for todo list errors."""


class InvalidParentError(TodoError):
    """Raised when a parent id does not name an existing task."""

    def __init__(self, parent_id: int):
        super().__init__(f"Parent todo with ID {parent_id} not found")
        self.parent_id = parent_id


class TaskNotFoundError(TodoError):
    """Raised when a task id does not name an existing task."""

    def __init__(self, task_id: int):
        super().__init__(f"Todo with ID {task_id} not found")
        self.task_id = task_id


class DeserializationError(TodoError):
    """Raised when persisted todo data cannot be decoded."""
