"""Persistence for the todo list."""

from jdi_cli.repositories.json_repository import (
    JsonTodoRepository,
    resolve_data_file,
)

__all__ = ["JsonTodoRepository", "resolve_data_file"]
