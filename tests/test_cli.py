"""Tests for the diary CLI."""

import json
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from toydiary.cli import main
from toydiary.config import Config
from toydiary.store import STORAGE_KEY


@pytest.fixture
def config(tmp_path):
    return Config(data_dir=str(tmp_path))


@pytest.fixture
def runner(config):
    with patch("toydiary.cli.load_config", return_value=config):
        yield CliRunner()


def saved_entries(tmp_path) -> list[dict]:
    return json.loads((tmp_path / f"{STORAGE_KEY}.json").read_text())


def add(runner, *args):
    result = runner.invoke(main, ["add", *args])
    assert result.exit_code == 0, result.output
    return _entry_id(result.output)


def _entry_id(output: str) -> str:
    return output.strip().split()[-1]


class TestAdd:
    def test_with_options(self, runner, tmp_path):
        result = runner.invoke(main, ["add", "-t", "Morning walk", "-d", "2024-01-01", "-m", "bright"])

        assert result.exit_code == 0, result.output
        assert "Saved entry" in result.output
        [record] = saved_entries(tmp_path)
        assert record["title"] == "Morning walk"
        assert record["date"] == "2024-01-01"
        assert record["mood"] == "bright"
        assert isinstance(record["updatedAt"], int)

    def test_prompts_when_no_text_given(self, runner, tmp_path):
        result = runner.invoke(main, ["add"], input="Prompted title\nSome notes\n")
        assert result.exit_code == 0, result.output
        [record] = saved_entries(tmp_path)
        assert record["title"] == "Prompted title"
        assert record["content"] == "Some notes"

    def test_blank_is_rejected(self, runner, tmp_path):
        result = runner.invoke(main, ["add", "-t", "", "-c", "   "])
        assert result.exit_code == 1
        assert "Nothing to save" in result.output
        assert not (tmp_path / f"{STORAGE_KEY}.json").exists()

    def test_invalid_date(self, runner):
        result = runner.invoke(main, ["add", "-t", "x", "-d", "01/02/2024"])
        assert result.exit_code == 2
        assert "not a date" in result.output

    def test_invalid_mood(self, runner):
        result = runner.invoke(main, ["add", "-t", "x", "-m", "ecstatic"])
        assert result.exit_code == 2


class TestEdit:
    def test_overrides_given_fields(self, runner, tmp_path):
        entry_id = add(runner, "-t", "Walk", "-c", "cold", "-m", "stormy")

        result = runner.invoke(main, ["edit", entry_id, "-t", "Run"])

        assert result.exit_code == 0, result.output
        [record] = saved_entries(tmp_path)
        assert record["id"] == entry_id
        assert record["title"] == "Run"
        assert record["content"] == "cold"
        assert record["mood"] == "stormy"

    def test_unknown_id(self, runner):
        result = runner.invoke(main, ["edit", "missing", "-t", "Run"])
        assert result.exit_code == 1
        assert "no entry with id missing" in result.output


class TestDelete:
    def test_removes_entry(self, runner, tmp_path):
        entry_id = add(runner, "-t", "Walk")
        result = runner.invoke(main, ["delete", entry_id])
        assert result.exit_code == 0
        assert saved_entries(tmp_path) == []

    def test_missing_id_is_not_an_error(self, runner):
        result = runner.invoke(main, ["delete", "missing"])
        assert result.exit_code == 0
        assert "No entry with id missing" in result.output


class TestList:
    def test_empty(self, runner):
        result = runner.invoke(main, ["list"])
        assert result.exit_code == 0
        assert "0 shown" in result.output
        assert "No entries yet" in result.output

    def test_filters(self, runner):
        add(runner, "-t", "Morning walk", "-d", "2024-01-01")
        add(runner, "-t", "Evening read", "-d", "2024-01-02")

        result = runner.invoke(main, ["list", "--search", "walk"])
        assert "1 shown" in result.output
        assert "Morning walk" in result.output
        assert "Evening read" not in result.output

        result = runner.invoke(main, ["list", "--search", "walk", "--date", "2024-01-02"])
        assert "0 shown" in result.output
        assert "No entries match." in result.output

    def test_json_newest_first(self, runner):
        add(runner, "-t", "First")
        add(runner, "-t", "Second")
        result = runner.invoke(main, ["list", "--json"])
        titles = [e["title"] for e in json.loads(result.output)]
        assert titles == ["Second", "First"]

    def test_recovers_from_corrupt_storage(self, runner, tmp_path):
        (tmp_path / f"{STORAGE_KEY}.json").write_text("{oops")
        result = runner.invoke(main, ["list"])
        assert result.exit_code == 0
        assert "0 shown" in result.output


    def test_out_of_range_timestamp(self, runner, tmp_path):
        records = [{"id": "far", "date": "2024-01-01", "title": "Far future", "content": "", "mood": "calm",
                    "updatedAt": 10**20}]
        (tmp_path / f"{STORAGE_KEY}.json").write_text(json.dumps(records))

        result = runner.invoke(main, ["list"])
        assert result.exit_code == 0, result.output
        assert "Far future" in result.output
        assert "Updated • —" in result.output

        result = runner.invoke(main, ["stats"])
        assert result.exit_code == 0, result.output
        assert "Last saved:    —" in result.output


class TestShow:
    def test_fallbacks(self, runner):
        entry_id = add(runner, "-c", "Only notes")
        result = runner.invoke(main, ["show", entry_id])
        assert result.exit_code == 0
        assert "Untitled note" in result.output
        assert "Only notes" in result.output

    def test_unknown_id(self, runner):
        result = runner.invoke(main, ["show", "missing"])
        assert result.exit_code == 1


class TestStats:
    def test_json(self, runner):
        add(runner, "-t", "a", "-m", "bright")
        add(runner, "-t", "b", "-m", "bright")
        result = runner.invoke(main, ["stats", "--json"])
        data = json.loads(result.output)
        assert data["total"] == 2
        assert data["moods"] == {"bright": 2, "calm": 0, "reflective": 0, "stormy": 0}

    def test_empty_text(self, runner):
        result = runner.invoke(main, ["stats"])
        assert "Total entries: 0" in result.output
        assert "Last saved:    —" in result.output


class TestSaveWarning:
    def test_warns_but_succeeds(self, runner):
        with patch("toydiary.adapters.file_storage.FileStorageBackend.set", return_value=False):
            result = runner.invoke(main, ["add", "-t", "Walk"])
        assert result.exit_code == 0
        assert "Warning:" in result.output
