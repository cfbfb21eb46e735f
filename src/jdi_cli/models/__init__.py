"""Data models for jdi."""

from jdi_cli.models.task import (
    TIMESTAMP_FORMAT,
    CompletedRecord,
    CompletionStats,
    StoreData,
    Task,
)

__all__ = [
    "TIMESTAMP_FORMAT",
    "CompletedRecord",
    "CompletionStats",
    "StoreData",
    "Task",
]
