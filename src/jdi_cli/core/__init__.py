"""Core todo list model, codec and errors."""

from jdi_cli.core.exceptions import (
    DeserializationError,
    InvalidParentError,
    TaskNotFoundError,
    TodoError,
)
from jdi_cli.core.todo_list import TodoList

__all__ = [
    "DeserializationError",
    "InvalidParentError",
    "TaskNotFoundError",
    "TodoError",
    "TodoList",
]
