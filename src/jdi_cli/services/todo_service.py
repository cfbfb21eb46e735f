"""Todo service - Business logic for todo operations.

This service layer sits between commands and the repository. Each call
loads the list, runs one operation on it and, for mutations, saves it
back. A failing operation raises before anything is saved.
"""

from __future__ import annotations

from jdi_cli.config import get_config_manager
from jdi_cli.core.todo_list import DEFAULT_STATS_LIMIT
from jdi_cli.models import CompletionStats, Task
from jdi_cli.repositories import JsonTodoRepository, resolve_data_file
from jdi_cli.utils.logger import get_logger


class TodoService:
    """Service for todo business logic."""

    def __init__(self, repository: JsonTodoRepository):
        """Initialize the todo service.

        Args:
            repository: Repository the todo list is loaded from and saved to
        """
        self.repository = repository
        self.logger = get_logger("service")

    def add_task(self, text: str, parent_id: int | None = None) -> Task:
        """Create a new todo.

        Args:
            text: Todo text (required)
            parent_id: Id of the parent todo for a subtask

        Returns:
            The created Task

        Raises:
            InvalidParentError: If parent_id does not exist
            ValueError: If text is blank
        """
        todo_list = self.repository.load()
        task_id = todo_list.add_item(text, parent_id)
        self.repository.save(todo_list)
        self.logger.info("added todo %d (parent=%s)", task_id, parent_id)
        return todo_list.items[task_id]

    def get_task(self, task_id: int) -> Task:
        """Get a todo by id, raising TaskNotFoundError if it does not exist."""
        return self.repository.load().get_item(task_id)

    def complete_task(self, task_id: int) -> tuple[str, int]:
        """Complete and archive a todo, removing its subtree.

        Returns:
            The todo text and its number of direct subtasks
        """
        todo_list = self.repository.load()
        text, subtask_count = todo_list.complete_item(task_id)
        self.repository.save(todo_list)
        self.logger.info(
            "completed todo %d (%d direct subtasks)", task_id, subtask_count
        )
        return text, subtask_count

    def delete_task(self, task_id: int) -> bool:
        """Delete a todo and its subtree. Returns False if it does not exist."""
        todo_list = self.repository.load()
        before = len(todo_list)
        if not todo_list.delete_item(task_id):
            return False
        self.repository.save(todo_list)
        self.logger.info("deleted todo %d (%d removed)", task_id, before - len(todo_list))
        return True

    def renumber(self) -> int:
        """Renumber all todos from 1. Returns the number of todos."""
        todo_list = self.repository.load()
        todo_list.renumber_items()
        self.repository.save(todo_list)
        self.logger.info("renumbered %d todos", len(todo_list))
        return len(todo_list)

    def list_tree(self) -> list[tuple[int, Task]]:
        """Return (depth, task) pairs in display order."""
        return list(self.repository.load().iter_tree())

    def get_stats(self, limit: int = DEFAULT_STATS_LIMIT) -> CompletionStats:
        """Return completion statistics without saving."""
        return self.repository.load().get_stats(limit)


def get_todo_service() -> TodoService:
    """Build a TodoService for the configured data file."""
    config = get_config_manager().config
    return TodoService(JsonTodoRepository(resolve_data_file(config)))
