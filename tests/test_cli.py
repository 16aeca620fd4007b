"""Tests for the taskboard CLI."""

import io
import json
from pathlib import Path
from unittest.mock import patch

import pytest

from taskboard.__main__ import main
from taskboard.models import KanbanData


@pytest.fixture
def data_file(tmp_path: Path) -> Path:
    return tmp_path / "tasks.json"


def run_cli(data_file: Path, *args: str) -> int:
    """Run the CLI against a board file and return its exit code."""
    with pytest.raises(SystemExit) as exc_info:
        main(["--data-file", str(data_file), *args])
    return exc_info.value.code


class TestLoadCommand:
    def test_load_prints_default_board(self, data_file: Path, capsys):
        assert run_cli(data_file, "load") == 0

        out = capsys.readouterr().out
        assert KanbanData.model_validate_json(out) == KanbanData.default()
        assert data_file.exists()

    def test_load_corrupt_file_fails(self, data_file: Path, capsys):
        data_file.write_text("not json")

        assert run_cli(data_file, "load") == 1

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Invalid board file" in captured.err


class TestSaveCommand:
    def test_save_from_file(self, data_file: Path, tmp_path: Path, capsys):
        source = tmp_path / "input.json"
        source.write_text('{"columns": [{"id": "a", "title": "A", "tasks": []}]}')

        assert run_cli(data_file, "save", str(source)) == 0

        assert json.loads(data_file.read_text()) == {
            "columns": [{"id": "a", "title": "A", "tasks": []}]
        }
        assert "Board saved" in capsys.readouterr().out

    def test_save_from_stdin(self, data_file: Path, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setattr("sys.stdin", io.StringIO('{"columns": []}'))

        assert run_cli(data_file, "save") == 0

        assert json.loads(data_file.read_text()) == {"columns": []}

    def test_save_invalid_input(self, data_file: Path, monkeypatch: pytest.MonkeyPatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO('{"columns": [{"id": "x"}]}'))

        assert run_cli(data_file, "save") == 1

        assert "Invalid board data" in capsys.readouterr().err
        assert not data_file.exists()


    def test_save_non_utf8_file(self, data_file: Path, tmp_path: Path, capsys):
        """Undecodable input is reported as invalid board data, not a traceback."""
        source = tmp_path / "in.json"
        source.write_bytes(b"\xff\xfe garbage")

        assert run_cli(data_file, "save", str(source)) == 1

        assert "Invalid board data" in capsys.readouterr().err
        assert not data_file.exists()


class TestEditCommands:
    def test_add_then_delete(self, data_file: Path):
        assert run_cli(data_file, "add", "done", "Ship it", "-d", "v1") == 0

        board = KanbanData.model_validate_json(data_file.read_text())
        added = board.get_column("done").tasks[-1]
        assert (added.title, added.description) == ("Ship it", "v1")

        assert run_cli(data_file, "delete", "done", added.id) == 0

        board = KanbanData.model_validate_json(data_file.read_text())
        assert board == KanbanData.default()

    def test_edit(self, data_file: Path):
        assert run_cli(data_file, "edit", "todo", "task-1", "--title", "Learn Rust") == 0

        board = KanbanData.model_validate_json(data_file.read_text())
        assert board.columns[0].tasks[0].title == "Learn Rust"

    def test_move(self, data_file: Path):
        assert run_cli(data_file, "move", "in-progress", "0", "done", "0") == 0

        board = KanbanData.model_validate_json(data_file.read_text())
        assert board.get_column("in-progress").tasks == []
        assert [t.id for t in board.get_column("done").tasks] == ["task-3", "task-4"]

    def test_delete_missing_task(self, data_file: Path, capsys):
        assert run_cli(data_file, "delete", "todo", "task-99") == 1
        assert "task-99" in capsys.readouterr().err

    def test_reset(self, data_file: Path):
        data_file.write_text("garbage")

        assert run_cli(data_file, "reset") == 0

        assert KanbanData.model_validate_json(data_file.read_text()) == KanbanData.default()


class TestPathAndConfig:
    def test_path_prints_data_file(self, data_file: Path, capsys):
        assert run_cli(data_file, "path") == 0

        assert capsys.readouterr().out.strip() == str(data_file)
        assert not data_file.exists()

    def test_missing_home_exits_with_config_error(
        self, monkeypatch: pytest.MonkeyPatch, capsys
    ):
        monkeypatch.delenv("TASKBOARD_DATA_FILE", raising=False)

        with patch("taskboard.config.settings.Path.home", side_effect=RuntimeError("no home")):
            with pytest.raises(SystemExit) as exc_info:
                main(["load"])

        assert exc_info.value.code == 2
        assert "home directory" in capsys.readouterr().err
