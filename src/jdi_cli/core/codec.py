"""JSON encoding and decoding of a TodoList."""

from __future__ import annotations

import json

from pydantic import ValidationError

from jdi_cli.core.exceptions import DeserializationError
from jdi_cli.core.todo_list import TodoList
from jdi_cli.models.task import StoreData
from jdi_cli.utils.logger import get_logger


def decode(data: bytes | str) -> TodoList:
    """Decode persisted JSON into a TodoList.

    Raises:
        DeserializationError: If the data is not valid JSON, does not match
            the stored layout, or describes a broken task tree
    """
    if isinstance(data, bytes):
        try:
            data = data.decode("utf-8")
        except UnicodeDecodeError as e:
            raise DeserializationError(f"Todo data is not UTF-8: {e}") from e
    try:
        stored = StoreData.model_validate_json(data)
    except ValidationError as e:
        raise DeserializationError(f"Invalid todo data: {e}") from e

    items = {}
    for key, task in stored.items.items():
        if key != str(task.id):
            raise DeserializationError(
                f"Item key '{key}' does not match task id {task.id}"
            )
        items[task.id] = task

    # Older files may under-report next_id; never hand out a live id again.
    next_id = max([stored.next_id, *(task_id + 1 for task_id in items)])

    todo_list = TodoList(
        items=items,
        next_id=next_id,
        completed_count=stored.completed_count,
        completed_history=stored.completed_history,
    )

    reachable = sum(1 for _ in todo_list.iter_tree())
    if reachable != len(items):
        raise DeserializationError(
            "Task tree contains dangling or cyclic parent references"
        )
    return todo_list


def load(data: bytes | str | None) -> TodoList:
    """Decode persisted JSON, falling back to an empty TodoList.

    Missing or empty input yields an empty list. Corrupt input is logged
    and also yields an empty list.
    """
    if data is None or not data.strip():
        return TodoList()
    try:
        return decode(data)
    except DeserializationError as e:
        get_logger("codec").warning("discarding unreadable todo data: %s", e)
        return TodoList()


def serialize(todo_list: TodoList) -> bytes:
    """Encode a TodoList as pretty-printed UTF-8 JSON.

    Items are written in ascending id order so the output is stable.
    """
    stored = StoreData(
        items={str(task_id): todo_list.items[task_id] for task_id in sorted(todo_list.items)},
        next_id=todo_list.next_id,
        completed_count=todo_list.completed_count,
        completed_history=todo_list.completed_history,
    )
    return json.dumps(stored.model_dump(), indent=2, ensure_ascii=False).encode("utf-8")
