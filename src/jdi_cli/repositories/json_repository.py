"""JSON file repository for the todo list.

The whole list is read at the start of a command and written back at the
end. Writes go to a temporary file next to the target and are moved into
place, so an interrupted save never leaves a half-written file behind.
"""

from __future__ import annotations

import os
import tempfile
from pathlib import Path

from jdi_cli.config import Config
from jdi_cli.core import codec
from jdi_cli.core.todo_list import TodoList
from jdi_cli.utils.logger import get_logger

DATA_FILE_ENV = "JDI_DATA_FILE"
DEFAULT_DATA_FILE = "~/.todo_cli.json"


def resolve_data_file(config: Config | None = None) -> Path:
    """Resolve the todo data file path.

    Precedence: the JDI_DATA_FILE environment variable, then
    ``storage.data_file`` from the config, then ``~/.todo_cli.json``.
    """
    env_path = os.environ.get(DATA_FILE_ENV)
    if env_path:
        return Path(env_path).expanduser()
    if config is not None and config.storage.data_file:
        return Path(config.storage.data_file).expanduser()
    return Path(DEFAULT_DATA_FILE).expanduser()


class JsonTodoRepository:
    """Loads and saves a TodoList as a single JSON file."""

    def __init__(self, path: Path):
        self.path = Path(path)

    def load(self) -> TodoList:
        """Load the todo list, returning an empty one if the file is missing."""
        if not self.path.exists():
            return TodoList()
        try:
            data = self.path.read_bytes()
        except OSError as e:
            get_logger("repository").warning("cannot read %s: %s", self.path, e)
            return TodoList()
        return codec.load(data)

    def save(self, todo_list: TodoList) -> None:
        """Write the todo list, replacing the file atomically."""
        data = codec.serialize(todo_list)
        self.path.parent.mkdir(parents=True, exist_ok=True)

        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{self.path.name}.", suffix=".tmp", dir=self.path.parent
        )
        try:
            with os.fdopen(fd, "wb") as f:
                f.write(data)
            os.replace(tmp_name, self.path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
