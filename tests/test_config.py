"""Tests for configuration management."""

import json

import pytest
from pydantic import ValidationError
from typer.testing import CliRunner

from jdi_cli.config import Config, ConfigManager, get_config_manager
from jdi_cli.main import app

runner = CliRunner()


def test_default_config():
    """Test default configuration."""
    config = Config()
    assert config.storage.data_file is None
    assert config.output.format == "pretty"
    assert config.stats.recent_limit == 10


def test_config_manager_uses_platform_dir(tmp_path):
    config_manager = ConfigManager()
    assert config_manager.config_file == tmp_path / "config" / "config.json"
    assert not config_manager.config_file.exists()


def test_config_save_load():
    """Test saving and loading configuration."""
    config_manager = ConfigManager()
    config_manager.set("storage.data_file", "/tmp/todos.json")
    assert config_manager.get("storage.data_file") == "/tmp/todos.json"

    # A fresh manager reads the saved value back
    assert ConfigManager().get("storage.data_file") == "/tmp/todos.json"


def test_corrupt_config_falls_back_to_defaults():
    config_manager = ConfigManager()
    config_manager.config_dir.mkdir(parents=True, exist_ok=True)
    config_manager.config_file.write_text("{ nope")

    assert config_manager.config == Config()


def test_unknown_key_raises():
    config_manager = ConfigManager()
    with pytest.raises(KeyError):
        config_manager.get("storage.nope")
    with pytest.raises(KeyError):
        config_manager.set("nope.value", 1)


def test_wrong_type_rejected():
    config_manager = ConfigManager()
    with pytest.raises(ValidationError):
        config_manager.set("stats.recent_limit", "many")


def test_unknown_output_format_rejected():
    with pytest.raises(ValidationError):
        Config(output={"format": "xml"})

    config_manager = ConfigManager()
    with pytest.raises(ValidationError):
        config_manager.set("output.format", "xml")
    assert config_manager.get("output.format") == "pretty"
    assert not config_manager.config_file.exists()


def test_saved_unknown_output_format_falls_back_to_defaults():
    config_manager = ConfigManager()
    config_manager.config_dir.mkdir(parents=True, exist_ok=True)
    config_manager.config_file.write_text(json.dumps({"output": {"format": "xml"}}))

    assert config_manager.config.output.format == "pretty"


def test_reset_single_key():
    config_manager = ConfigManager()
    config_manager.set("stats.recent_limit", 3)

    config_manager.reset("stats.recent_limit")

    assert config_manager.get("stats.recent_limit") == 10
    saved = json.loads(config_manager.config_file.read_text())
    assert saved["stats"]["recent_limit"] == 10


def test_reset_all():
    config_manager = ConfigManager()
    config_manager.set("output.format", "json")

    config_manager.reset()

    assert config_manager.config == Config()


def test_get_config_manager_is_cached():
    assert get_config_manager() is get_config_manager()


# ---------------------------------------------------------------------------
# config commands
# ---------------------------------------------------------------------------


class TestConfigCommands:
    def test_set_and_get(self):
        result = runner.invoke(app, ["config", "set", "stats.recent_limit", "5"])
        assert result.exit_code == 0, result.output
        assert "set to '5'" in result.output

        result = runner.invoke(app, ["config", "get", "stats.recent_limit"])
        assert result.exit_code == 0, result.output
        assert result.output.strip() == "5"

    def test_get_unknown_key(self):
        result = runner.invoke(app, ["config", "get", "nope"])
        assert result.exit_code == 2
        assert "Configuration key 'nope' not found" in result.output

    def test_set_bad_value(self):
        result = runner.invoke(app, ["config", "set", "stats.recent_limit", "lots"])
        assert result.exit_code == 2

    def test_set_unknown_output_format(self):
        result = runner.invoke(app, ["config", "set", "output.format", "xml"])

        assert result.exit_code == 2
        assert "Invalid value for 'output.format'" in result.output
        assert get_config_manager().get("output.format") == "pretty"

    def test_get_prints_brackets_literally(self):
        runner.invoke(app, ["config", "set", "storage.data_file", "~/[bold]todos.json"])

        result = runner.invoke(app, ["config", "get", "storage.data_file"])

        assert result.exit_code == 0, result.output
        assert result.output.strip() == "~/[bold]todos.json"

    def test_view_json(self):
        result = runner.invoke(app, ["config", "view"])
        assert result.exit_code == 0, result.output
        assert json.loads(result.output)["output"]["format"] == "pretty"

    def test_reset_requires_confirmation(self):
        runner.invoke(app, ["config", "set", "output.format", "json"])

        result = runner.invoke(app, ["config", "reset"], input="n\n")

        assert result.exit_code == 0, result.output
        assert "Cancelled" in result.output
        assert get_config_manager().get("output.format") == "json"

    def test_reset_yes(self):
        runner.invoke(app, ["config", "set", "output.format", "json"])

        result = runner.invoke(app, ["config", "reset", "--yes"])

        assert result.exit_code == 0, result.output
        assert get_config_manager().get("output.format") == "pretty"

    def test_output_format_default_drives_list(self, data_file):
        runner.invoke(app, ["add", "groceries"])
        runner.invoke(app, ["config", "set", "output.format", "json"])

        result = runner.invoke(app, ["list"])

        assert json.loads(result.output)["todos"][0]["text"] == "groceries"

    def test_stats_limit_from_config(self, data_file):
        for text in ("one", "two", "three"):
            runner.invoke(app, ["add", text])
        for task_id in ("1", "2", "3"):
            runner.invoke(app, ["done", task_id])
        runner.invoke(app, ["config", "set", "stats.recent_limit", "1"])

        result = runner.invoke(app, ["stats", "--json"])

        assert [r["text"] for r in json.loads(result.output)["recent"]] == ["three"]
