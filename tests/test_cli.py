"""Tests for the root daytime CLI."""

from pathlib import Path

from click.testing import CliRunner

from daytime import __version__
from daytime.cli import cli


def test_cli_help(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    assert "daytime" in result.output


def test_cli_version(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_cli_no_args(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, [])
    assert result.exit_code == 0
    assert "Usage" in result.output


def test_commands_registered(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--help"])
    for name in ("parse", "anchor", "encode", "decode"):
        assert name in result.output


# --- Global flags ---


def test_json_flag_accepted(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--json", "--version"])
    assert result.exit_code == 0


def test_quiet_flag_accepted(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["-q", "--version"])
    assert result.exit_code == 0


def test_verbose_flag_accepted(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["-v", "--version"])
    assert result.exit_code == 0


def test_config_option_accepted(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["-c", "/tmp/test.toml", "--version"])
    assert result.exit_code == 0


def test_missing_config_file_rejected(cli_runner: CliRunner, tmp_path: Path) -> None:
    missing = tmp_path / "missing.toml"
    result = cli_runner.invoke(cli, ["-c", str(missing), "parse", "01:00"])
    assert result.exit_code == 2
    assert "does not exist" in result.output


def test_config_file_applied(cli_runner: CliRunner, tmp_path: Path) -> None:
    cfg = tmp_path / "custom.toml"
    cfg.write_text('[anchor]\nrollover = "calendar"\n')
    result = cli_runner.invoke(
        cli, ["--json", "-c", str(cfg), "anchor", "01:00", "--now", "2024-05-10T12:00:00+00:00"]
    )
    assert result.exit_code == 0
    assert '"rollover": "calendar"' in result.output


def test_rollover_choice_validated(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--rollover", "weekly", "parse", "01:00"])
    assert result.exit_code == 2
