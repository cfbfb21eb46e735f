"""Task data models."""

from pydantic import BaseModel, ConfigDict, Field

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


class Task(BaseModel):
    """Task model representing an active todo item.

    Attributes:
        id: Unique positive identifier, assigned monotonically
        text: Display text (never empty)
        parent_id: Id of the parent task, or None for a root item
        created_at: UTC creation timestamp (YYYY-MM-DD HH:MM:SS)
    """

    id: int = Field(ge=1)
    text: str = Field(min_length=1)
    parent_id: int | None = None
    created_at: str


class CompletedRecord(BaseModel):
    """Archive entry written when a task is completed.

    Attributes:
        id: Id the task had when it was completed
        text: Snapshot of the task text
        completed_at: UTC completion timestamp (YYYY-MM-DD HH:MM:SS)
        had_subtasks: Whether the task had at least one direct child
        subtask_count: Number of direct children removed with it
    """

    model_config = ConfigDict(frozen=True)

    id: int
    text: str
    completed_at: str
    had_subtasks: bool = False
    subtask_count: int = Field(default=0, ge=0)


class StoreData(BaseModel):
    """Persisted layout of the todo file.

    Files written before completion archiving existed carry a ``completed``
    flag on every item and no ``completed_count``/``completed_history``
    keys. Unknown item keys are ignored and the archive fields default to
    empty, so both layouts validate.
    """

    items: dict[str, Task] = Field(default_factory=dict)
    next_id: int = Field(default=1, ge=1)
    completed_count: int = Field(default=0, ge=0)
    completed_history: list[CompletedRecord] = Field(default_factory=list)


class CompletionStats(BaseModel):
    """Completion summary returned by TodoList.get_stats()."""

    completed_count: int
    recent: list[CompletedRecord] = Field(default_factory=list)
