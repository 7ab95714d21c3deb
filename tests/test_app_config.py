"""Test module for app config loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from snailquote_py.core import app_config


def _write_config(tmp_path: Path, text: str) -> None:
    cfg = tmp_path / "config"
    cfg.mkdir(parents=True, exist_ok=True)
    (cfg / "app.toml").write_text(text, encoding="utf-8")


@pytest.fixture(autouse=True)
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    cwd = tmp_path / "cwd"
    cwd.mkdir()
    monkeypatch.chdir(cwd)
    app_config.load.cache_clear()


def test_load_defaults_without_config(tmp_path: Path) -> None:
    """Verify defaults apply when no app.toml exists."""
    cfg = app_config.load(tmp_path)
    assert cfg == app_config.AppConfig()
    assert cfg.always_quote is False
    assert cfg.separator == "\n"
    assert cfg.log_level == "WARNING"


def test_load_reads_overrides_from_toml(tmp_path: Path) -> None:
    """Verify output and logging values are loaded from app.toml."""
    _write_config(
        tmp_path,
        """
[output]
always_quote = true
separator = "\\u0000"

[logging]
level = "debug"
""".strip()
        + "\n",
    )
    cfg = app_config.load(tmp_path)
    assert cfg.always_quote is True
    assert cfg.separator == "\0"
    assert cfg.log_level == "DEBUG"


def test_load_keeps_defaults_for_invalid_values(tmp_path: Path) -> None:
    """Verify invalid payload values keep safe defaults."""
    _write_config(
        tmp_path,
        """
[output]
always_quote = "yes"
separator = 3

[logging]
level = "loud"
""".strip()
        + "\n",
    )
    cfg = app_config.load(tmp_path)
    assert cfg == app_config.AppConfig()


def test_load_ignores_malformed_toml(tmp_path: Path) -> None:
    """Verify a broken file is skipped instead of raising."""
    _write_config(tmp_path, "[output\nalways_quote = \n")
    assert app_config.load(tmp_path) == app_config.AppConfig()


def test_load_root_overrides_cwd(tmp_path: Path) -> None:
    """Verify the explicit root is merged after the working directory."""
    _write_config(tmp_path / "cwd", '[output]\nalways_quote = true\nseparator = ";"\n')
    root = tmp_path / "root"
    _write_config(root, '[output]\nseparator = ","\n')
    cfg = app_config.load(root)
    assert cfg.always_quote is True
    assert cfg.separator == ","
