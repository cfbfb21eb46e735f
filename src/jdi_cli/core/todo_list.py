"""TodoList - the in-memory task forest and its completion archive.

Tasks live in a flat mapping keyed by id; the tree is derived from each
task's ``parent_id``. Every public mutation validates its arguments before
touching any state, so a failed call leaves the list unchanged.
"""

from __future__ import annotations

from collections.abc import Iterator
from datetime import UTC, datetime

from jdi_cli.core.exceptions import InvalidParentError, TaskNotFoundError
from jdi_cli.models.task import (
    TIMESTAMP_FORMAT,
    CompletedRecord,
    CompletionStats,
    Task,
)

DEFAULT_STATS_LIMIT = 10


def _utc_timestamp() -> str:
    return datetime.now(UTC).strftime(TIMESTAMP_FORMAT)


class TodoList:
    """Hierarchical todo list with cascade delete and completion archive.

    Attributes:
        items: Mapping of task id to Task
        next_id: Id handed to the next added task
        completed_count: Number of completions ever performed
        completed_history: CompletedRecords in completion order
    """

    def __init__(
        self,
        items: dict[int, Task] | None = None,
        next_id: int = 1,
        completed_count: int = 0,
        completed_history: list[CompletedRecord] | None = None,
    ):
        self.items: dict[int, Task] = dict(items or {})
        self.next_id = next_id
        self.completed_count = completed_count
        self.completed_history: list[CompletedRecord] = list(completed_history or [])

    def __len__(self) -> int:
        return len(self.items)

    def __contains__(self, task_id: object) -> bool:
        return task_id in self.items

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def add_item(self, text: str, parent_id: int | None = None) -> int:
        """Add a task and return its id.

        Raises:
            ValueError: If text is empty or whitespace only
            InvalidParentError: If parent_id does not name an existing task
        """
        if not text or not text.strip():
            raise ValueError("Todo text must not be empty")
        if parent_id is not None and parent_id not in self.items:
            raise InvalidParentError(parent_id)

        task_id = self.next_id
        self.items[task_id] = Task(
            id=task_id,
            text=text,
            parent_id=parent_id,
            created_at=_utc_timestamp(),
        )
        self.next_id += 1
        return task_id

    def complete_item(self, task_id: int) -> tuple[str, int]:
        """Archive a task and remove it together with its whole subtree.

        Only direct children are counted in the archive record, although
        every descendant is removed.

        Returns:
            The task text and its number of direct children

        Raises:
            TaskNotFoundError: If task_id does not name an existing task
        """
        task = self.get_item(task_id)
        subtask_count = len(self._children_index().get(task_id, []))

        self.completed_history.append(
            CompletedRecord(
                id=task.id,
                text=task.text,
                completed_at=_utc_timestamp(),
                had_subtasks=subtask_count > 0,
                subtask_count=subtask_count,
            )
        )
        self.completed_count += 1
        self.delete_item(task_id)
        return task.text, subtask_count

    def delete_item(self, task_id: int) -> bool:
        """Remove a task and all of its descendants without archiving.

        Returns:
            False if the task does not exist, True otherwise
        """
        if task_id not in self.items:
            return False
        for doomed in self._collect_subtree(task_id):
            del self.items[doomed]
        return True

    def renumber_items(self) -> None:
        """Reassign dense ids from 1 in depth-first display order.

        Text and creation time are kept, parent links are rewritten to the
        new ids, and the completion archive is left untouched.
        """
        mapping: dict[int, int] = {}
        for new_id, (_, task) in enumerate(self.iter_tree(), start=1):
            mapping[task.id] = new_id

        renumbered: dict[int, Task] = {}
        for old_id, new_id in mapping.items():
            task = self.items[old_id]
            parent_id = None if task.parent_id is None else mapping[task.parent_id]
            renumbered[new_id] = task.model_copy(
                update={"id": new_id, "parent_id": parent_id}
            )

        self.items = renumbered
        self.next_id = len(renumbered) + 1

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_item(self, task_id: int) -> Task:
        """Return a task by id, raising TaskNotFoundError if absent."""
        try:
            return self.items[task_id]
        except KeyError:
            raise TaskNotFoundError(task_id) from None

    def get_root_items(self) -> list[Task]:
        """Return tasks without a parent, sorted by id."""
        return self.get_children(None)

    def get_children(self, parent_id: int | None) -> list[Task]:
        """Return the direct children of parent_id, sorted by id."""
        children = [t for t in self.items.values() if t.parent_id == parent_id]
        return sorted(children, key=lambda t: t.id)

    def iter_tree(self) -> Iterator[tuple[int, Task]]:
        """Yield (depth, task) pairs in depth-first pre-order.

        Roots come in ascending id order and each node's children follow
        it, also in ascending id order.
        """
        index = self._children_index()
        stack = [(0, task_id) for task_id in reversed(index.get(None, []))]
        while stack:
            depth, task_id = stack.pop()
            yield depth, self.items[task_id]
            for child_id in reversed(index.get(task_id, [])):
                stack.append((depth + 1, child_id))

    def get_stats(self, limit: int = DEFAULT_STATS_LIMIT) -> CompletionStats:
        """Return the completion count and the most recent completions first."""
        recent = self.completed_history[-limit:] if limit > 0 else []
        return CompletionStats(
            completed_count=self.completed_count,
            recent=list(reversed(recent)),
        )

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _children_index(self) -> dict[int | None, list[int]]:
        index: dict[int | None, list[int]] = {}
        for task_id in sorted(self.items):
            index.setdefault(self.items[task_id].parent_id, []).append(task_id)
        return index

    def _collect_subtree(self, task_id: int) -> list[int]:
        """Return task_id and its descendants, every child before its parent."""
        index = self._children_index()
        preorder: list[int] = []
        stack = [task_id]
        while stack:
            current = stack.pop()
            preorder.append(current)
            stack.extend(index.get(current, []))
        return list(reversed(preorder))
