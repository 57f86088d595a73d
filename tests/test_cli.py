"""Tests for Weave CLI."""

from pathlib import Path

import yaml
from typer.testing import CliRunner

from weave.cli import app
from weave.commands import stack_command
from weave.config import StackConfig, TextConfig, WeaveConfig, get_config, set_config


def test_version() -> None:
    """Test --version flag."""
    runner = CliRunner()
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert "0.1.0" in result.output


def test_help() -> None:
    """Test --help flag."""
    runner = CliRunner()
    result = runner.invoke(app, ["--help"])
    assert result.exit_code == 0
    assert "Weave - declarative composition builders" in result.output


def test_text_plain() -> None:
    """Test text command with raw output."""
    runner = CliRunner()
    result = runner.invoke(app, ["text", "--odd", "--plain", "-n", "3"])
    assert result.exit_code == 0
    assert result.output == "hello 42\nI am a String\nthe date is odd: false\n\n1 2 3 "


def test_text_with_value() -> None:
    """Test text command showing the optional line."""
    runner = CliRunner()
    result = runner.invoke(app, ["text", "--even", "--value", "1", "--plain"])
    assert result.exit_code == 0
    assert "the date is even: true\nC has a value\n" in result.output


def test_text_panel() -> None:
    """Test text command default panel output."""
    runner = CliRunner()
    result = runner.invoke(app, ["text"])
    assert result.exit_code == 0
    assert "Greeting" in result.output
    assert "hello 42" in result.output


def test_stack_command() -> None:
    """Test stack command prints the view tree."""
    runner = CliRunner()
    result = runner.invoke(app, ["stack", "--axis", "vertical", "--spacing", "10"])
    assert result.exit_code == 0
    assert "Vertical stack" in result.output
    assert "thermometer.snowflake" in result.output
    assert get_config().stack.spacing == 0


def test_stack_command_with_config(tmp_path: Path) -> None:
    """Test stack command reading a config file."""
    config_path = tmp_path / "weave.yaml"
    config_path.write_text(yaml.dump({"stack": {"alignment": "trailing"}}))

    runner = CliRunner()
    result = runner.invoke(app, ["stack", "--config", str(config_path)])
    assert result.exit_code == 0
    assert "alignment=trailing" in result.output


def test_stack_command_invalid_option() -> None:
    """Test stack command reports invalid options."""
    runner = CliRunner()
    result = runner.invoke(app, ["stack", "--spacing", "-1"])
    assert result.exit_code == 1
    assert "Invalid stack options" in result.output


def test_text_reads_project_config(tmp_path: Path) -> None:
    """Test text command uses text literals from .weave/config.yaml."""
    runner = CliRunner()
    with runner.isolated_filesystem(temp_dir=tmp_path):
        config_dir = Path(".weave")
        config_dir.mkdir()
        (config_dir / "config.yaml").write_text(yaml.dump({"text": {"true_literal": "yes"}}))

        result = runner.invoke(app, ["text", "--even", "--plain", "-n", "0"])

    assert result.exit_code == 0
    assert result.output == "hello 42\nI am a String\nthe date is even: yes\n\n"


def test_text_with_config_option(tmp_path: Path) -> None:
    """Test text command reading an explicit config file."""
    config_path = tmp_path / "weave.yaml"
    config_path.write_text(yaml.dump({"text": {"false_literal": "no"}}))

    runner = CliRunner()
    result = runner.invoke(app, ["text", "--odd", "--plain", "--config", str(config_path)])

    assert result.exit_code == 0
    assert "the date is odd: no\n" in result.output


def test_text_invalid_config(tmp_path: Path) -> None:
    """Test text command reports a missing config file."""
    runner = CliRunner()
    result = runner.invoke(app, ["text", "--config", str(tmp_path / "missing.yaml")])
    assert result.exit_code == 1
    assert "not found" in result.output


def test_stack_command_keeps_default_config() -> None:
    """Test stack command does not replace the process-wide config."""
    custom = WeaveConfig(stack=StackConfig(spacing=3), text=TextConfig(true_literal="Y"))
    set_config(custom)

    stack_command(spacing=12)

    assert get_config() is custom
    assert get_config().stack.spacing == 3
