"""Service layer for jdi."""

from jdi_cli.services.todo_service import TodoService, get_todo_service

__all__ = ["TodoService", "get_todo_service"]
