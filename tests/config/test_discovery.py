"""Tests for config file discovery."""

from pathlib import Path

import pytest

from daytime.config.discovery import CONFIG_ENV_VAR, find_config, read_config_table


@pytest.fixture(autouse=True)
def _no_env_override(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)


class TestFindConfig:
    def test_finds_in_start_dir(self, tmp_path: Path) -> None:
        cfg = tmp_path / "daytime.toml"
        cfg.write_text("")
        assert find_config(tmp_path) == cfg.resolve()

    def test_walks_up(self, tmp_path: Path) -> None:
        cfg = tmp_path / "daytime.toml"
        cfg.write_text("")
        child = tmp_path / "x" / "y"
        child.mkdir(parents=True)
        assert find_config(child) == cfg.resolve()

    def test_env_var_wins(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        cfg = tmp_path / "elsewhere.toml"
        cfg.write_text("")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(cfg))
        assert find_config(tmp_path) == cfg

    def test_env_var_missing_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(CONFIG_ENV_VAR, str(tmp_path / "missing.toml"))
        assert find_config(tmp_path) is None


class TestPyprojectDiscovery:
    def test_pyproject_with_tool_table(self, tmp_path: Path) -> None:
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text('[project]\nname = "x"\n\n[tool.daytime.anchor]\nrollover = "calendar"\n')
        assert find_config(tmp_path) == pyproject.resolve()

    def test_pyproject_without_table_is_skipped(self, tmp_path: Path) -> None:
        cfg = tmp_path / "daytime.toml"
        cfg.write_text("")
        child = tmp_path / "pkg"
        child.mkdir()
        (child / "pyproject.toml").write_text('[project]\nname = "pkg"\n')
        assert find_config(child) == cfg.resolve()

    def test_daytime_toml_preferred_in_same_dir(self, tmp_path: Path) -> None:
        cfg = tmp_path / "daytime.toml"
        cfg.write_text("")
        (tmp_path / "pyproject.toml").write_text("[tool.daytime]\n")
        assert find_config(tmp_path) == cfg.resolve()

    def test_unreadable_pyproject_is_skipped(self, tmp_path: Path) -> None:
        cfg = tmp_path / "daytime.toml"
        cfg.write_text("")
        child = tmp_path / "pkg"
        child.mkdir()
        (child / "pyproject.toml").write_text("[tool\n")
        assert find_config(child) == cfg.resolve()


class TestReadConfigTable:
    def test_plain_file_read_whole(self, tmp_path: Path) -> None:
        cfg = tmp_path / "daytime.toml"
        cfg.write_text("[output]\njson_indent = 0\n")
        assert read_config_table(cfg) == {"output": {"json_indent": 0}}

    def test_pyproject_tool_table(self, tmp_path: Path) -> None:
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text('[project]\nname = "x"\n\n[tool.daytime.anchor]\nrollover = "calendar"\n')
        assert read_config_table(pyproject) == {"anchor": {"rollover": "calendar"}}

    def test_pyproject_without_table_is_empty(self, tmp_path: Path) -> None:
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text('[project]\nname = "x"\n')
        assert read_config_table(pyproject) == {}
