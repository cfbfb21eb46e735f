"""Unit tests for TodoService."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from jdi_cli.config import get_config_manager
from jdi_cli.core.exceptions import InvalidParentError, TaskNotFoundError
from jdi_cli.core.todo_list import TodoList
from jdi_cli.repositories import JsonTodoRepository
from jdi_cli.services.todo_service import TodoService, get_todo_service

# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def repo(tmp_path):
    return JsonTodoRepository(tmp_path / "todos.json")


@pytest.fixture()
def service(repo):
    return TodoService(repo)


@pytest.fixture()
def mock_repo():
    """Repository stub holding a single list in memory."""
    todo_list = TodoList()
    todo_list.add_item("groceries")
    repo = MagicMock()
    repo.load.return_value = todo_list
    return repo


# ---------------------------------------------------------------------------
# Persistence round trips
# ---------------------------------------------------------------------------


def test_add_task_persists(service, repo):
    task = service.add_task("buy milk")

    assert task.id == 1
    assert task.text == "buy milk"
    assert repo.load().items[1].text == "buy milk"


def test_add_subtask_persists_parent(service, repo):
    parent = service.add_task("groceries")
    child = service.add_task("eggs", parent_id=parent.id)

    assert child.parent_id == parent.id
    assert [t.id for t in repo.load().get_children(parent.id)] == [child.id]


def test_complete_task_archives(service, repo):
    parent = service.add_task("groceries")
    service.add_task("eggs", parent_id=parent.id)

    assert service.complete_task(parent.id) == ("groceries", 1)

    stored = repo.load()
    assert len(stored) == 0
    assert stored.completed_count == 1
    assert stored.completed_history[0].subtask_count == 1


def test_delete_task(service, repo):
    parent = service.add_task("groceries")
    service.add_task("eggs", parent_id=parent.id)

    assert service.delete_task(parent.id) is True
    assert len(repo.load()) == 0
    assert service.delete_task(parent.id) is False


def test_renumber(service, repo):
    first = service.add_task("first")
    service.add_task("second")
    service.delete_task(first.id)

    assert service.renumber() == 1
    assert list(repo.load().items) == [1]


def test_list_tree_and_get_task(service):
    parent = service.add_task("groceries")
    service.add_task("eggs", parent_id=parent.id)

    tree = service.list_tree()

    assert [(depth, task.text) for depth, task in tree] == [(0, "groceries"), (1, "eggs")]
    assert service.get_task(parent.id).text == "groceries"


def test_get_stats(service):
    service.complete_task(service.add_task("one").id)
    service.complete_task(service.add_task("two").id)

    stats = service.get_stats(limit=1)

    assert stats.completed_count == 2
    assert [r.text for r in stats.recent] == ["two"]


# ---------------------------------------------------------------------------
# Failures do not save
# ---------------------------------------------------------------------------


def test_invalid_parent_does_not_save(mock_repo):
    service = TodoService(mock_repo)

    with pytest.raises(InvalidParentError):
        service.add_task("eggs", parent_id=99)

    mock_repo.save.assert_not_called()


def test_complete_missing_does_not_save(mock_repo):
    service = TodoService(mock_repo)

    with pytest.raises(TaskNotFoundError):
        service.complete_task(99)

    mock_repo.save.assert_not_called()


def test_delete_missing_does_not_save(mock_repo):
    service = TodoService(mock_repo)

    assert service.delete_task(99) is False
    mock_repo.save.assert_not_called()


def test_read_only_calls_do_not_save(mock_repo):
    service = TodoService(mock_repo)

    service.list_tree()
    service.get_stats()

    mock_repo.save.assert_not_called()


# ---------------------------------------------------------------------------
# Factory
# ---------------------------------------------------------------------------


def test_get_todo_service_uses_env_data_file(data_file):
    service = get_todo_service()
    assert service.repository.path == data_file


def test_get_todo_service_uses_config_data_file(tmp_path):
    get_config_manager().set("storage.data_file", str(tmp_path / "cfg.json"))

    service = get_todo_service()

    assert service.repository.path == tmp_path / "cfg.json"
