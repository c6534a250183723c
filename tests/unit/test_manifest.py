"""Tests for monkey.toml loading."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from monkey.core.errors import ConfigError
from monkey.core.manifest import (
    MonkeyConfig,
    find_manifest,
    load_config,
    load_manifest,
    normalize_level,
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("MONKEY_CONFIG", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)


def test_defaults() -> None:
    config = MonkeyConfig()
    assert config.repl.prompt == ">> "
    assert config.repl.show_ast is False
    assert config.logging.level_number == logging.WARNING


def test_load_manifest(tmp_path: Path) -> None:
    path = tmp_path / "monkey.toml"
    path.write_text(
        """
[repl]
prompt = "monkey> "
show_ast = true

[logging]
level = "debug"
"""
    )
    config = load_manifest(path)
    assert config.repl.prompt == "monkey> "
    assert config.repl.show_ast is True
    assert config.logging.level == "DEBUG"
    assert config.logging.level_number == logging.DEBUG
    assert config.path == path


def test_invalid_toml(tmp_path: Path) -> None:
    path = tmp_path / "monkey.toml"
    path.write_text("[repl\nprompt = ")
    with pytest.raises(ConfigError, match="Invalid TOML"):
        load_manifest(path)


def test_invalid_level(tmp_path: Path) -> None:
    path = tmp_path / "monkey.toml"
    path.write_text('[logging]\nlevel = "LOUD"\n')
    with pytest.raises(ConfigError, match="level must be one of"):
        load_manifest(path)


def test_invalid_show_ast(tmp_path: Path) -> None:
    path = tmp_path / "monkey.toml"
    path.write_text('[repl]\nshow_ast = "yes"\n')
    with pytest.raises(ConfigError, match="show_ast"):
        load_manifest(path)


def test_repl_must_be_a_table(tmp_path: Path) -> None:
    path = tmp_path / "monkey.toml"
    path.write_text('repl = "oops"\n')
    with pytest.raises(ConfigError, match=r"\[repl\] must be a table"):
        load_manifest(path)


def test_logging_must_be_a_table(tmp_path: Path) -> None:
    path = tmp_path / "monkey.toml"
    path.write_text("logging = 5\n")
    with pytest.raises(ConfigError, match=r"\[logging\] must be a table"):
        load_manifest(path)


def test_undecodable_file_reports_config_error(tmp_path: Path) -> None:
    path = tmp_path / "monkey.toml"
    path.write_bytes(b"[repl]\nprompt = \"\xff\"\n")
    with pytest.raises(ConfigError, match="Cannot read"):
        load_manifest(path)


def test_normalize_level() -> None:
    assert normalize_level("info") == "INFO"
    with pytest.raises(ConfigError, match="log level must be one of"):
        normalize_level("basic_format")


def test_missing_file_reports_config_error(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="Cannot read"):
        load_manifest(tmp_path / "absent.toml")


def test_find_manifest_in_directory(tmp_path: Path) -> None:
    assert find_manifest(tmp_path) is None
    (tmp_path / "monkey.toml").write_text("")
    assert find_manifest(tmp_path) == tmp_path / "monkey.toml"


def test_env_var_selects_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    path = tmp_path / "custom.toml"
    path.write_text('[repl]\nprompt = "$ "\n')
    monkeypatch.setenv("MONKEY_CONFIG", str(path))
    assert load_config(tmp_path).repl.prompt == "$ "


def test_log_level_env_overrides_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    (tmp_path / "monkey.toml").write_text('[logging]\nlevel = "ERROR"\n')
    monkeypatch.setenv("LOG_LEVEL", "info")
    assert load_config(tmp_path).logging.level == "INFO"


def test_load_config_without_file(tmp_path: Path) -> None:
    config = load_config(tmp_path)
    assert config.path is None
    assert config.repl.prompt == ">> "
