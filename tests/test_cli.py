"""Tests for the click CLI."""

from unittest.mock import patch

import pytest
from click.testing import CliRunner

from king.cli import main
from king.config import Config


@pytest.fixture
def config(tmp_path):
    return Config(data_file=str(tmp_path / "tasks.json"))


@pytest.fixture
def runner(config):
    with patch("king.cli.load_config", return_value=config):
        yield CliRunner()


class TestSay:
    def test_runs_one_command(self, runner):
        result = runner.invoke(main, ["say", "todo", "read", "book"])
        assert result.exit_code == 0
        assert "Now you have 1 tasks in the list." in result.output

    def test_state_persists_between_runs(self, runner):
        runner.invoke(main, ["say", "todo", "read", "book"])
        result = runner.invoke(main, ["say", "list"])
        assert "1. [T][✗] read book" in result.output

    def test_parse_error_exits_nonzero(self, runner):
        result = runner.invoke(main, ["say", "delete", "abc"])
        assert result.exit_code == 1
        assert "'abc' is not a valid item number." in result.output

    def test_corrupt_storage(self, runner, config):
        with open(config.data_file, "w") as f:
            f.write("{{{")
        result = runner.invoke(main, ["say", "list"])
        assert result.exit_code == 1
        assert "corrupt" in result.output


class TestChat:
    def test_session_until_bye(self, runner):
        result = runner.invoke(main, ["chat"], input="todo read book\nlist\nbye\nlist\n")
        assert result.exit_code == 0
        assert "Hello! I'm King!" in result.output
        assert "1. [T][✗] read book" in result.output
        assert "Bye! Come back soon." in result.output
        assert result.output.count("There are") == 1

    def test_default_command_is_chat(self, runner):
        result = runner.invoke(main, [], input="bye\n")
        assert result.exit_code == 0
        assert "Bye! Come back soon." in result.output

    def test_eof_ends_session(self, runner):
        result = runner.invoke(main, ["chat"], input="todo read book\n")
        assert result.exit_code == 0

    def test_errors_shown_inline(self, runner):
        result = runner.invoke(main, ["chat"], input="delete 3\nbye\n")
        assert "Error Encountered" in result.output
        assert "There is no item number 3." in result.output

    def test_boxed(self, runner):
        result = runner.invoke(main, ["chat", "--boxed"], input="bye\n")
        assert "King says" in result.output


class TestBot:
    def test_missing_token(self, runner):
        result = runner.invoke(main, ["bot"])
        assert result.exit_code == 1
        assert "TELEGRAM_BOT_TOKEN" in result.output
