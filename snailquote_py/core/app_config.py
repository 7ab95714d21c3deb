"""Application configuration loading utilities for repository-local settings."""

from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass, replace
from functools import lru_cache
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Store effective output and logging settings for the command line."""

    always_quote: bool = False
    separator: str = "\n"
    log_level: str = "WARNING"


def _candidate_roots(root: Path | None) -> list[Path]:
    roots = [Path.cwd()]
    if root is not None:
        roots.append(root)
    seen: set[Path] = set()
    out: list[Path] = []
    for entry in roots:
        entry = entry.resolve()
        if entry in seen:
            continue
        seen.add(entry)
        out.append(entry)
    return out


def _load_toml(path: Path) -> dict[str, Any]:
    if not path.exists():
        return {}
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, tomllib.TOMLDecodeError) as exc:
        logger.warning("ignoring unreadable config %s: %s", path, exc)
        return {}
    return data if isinstance(data, dict) else {}


def _normalize_bool(value: Any, *, default: bool) -> bool:
    return value if isinstance(value, bool) else default


def _normalize_separator(value: Any, *, default: str) -> str:
    return value if isinstance(value, str) else default


def _normalize_level(value: Any, *, default: str) -> str:
    level = str(value).strip().upper()
    return level if level in _LOG_LEVELS else default


@lru_cache(maxsize=8)
def load(root: Path | None = None) -> AppConfig:
    """Load and merge app configuration from `config/app.toml` candidates."""
    cfg = AppConfig()
    for base in _candidate_roots(root):
        path = base / "config" / "app.toml"
        data = _load_toml(path)
        if data:
            logger.debug("loaded config from %s", path)
        output = data.get("output", {})
        if isinstance(output, dict):
            cfg = replace(
                cfg,
                always_quote=_normalize_bool(
                    output.get("always_quote"), default=cfg.always_quote
                ),
                separator=_normalize_separator(
                    output.get("separator"), default=cfg.separator
                ),
            )
        log = data.get("logging", {})
        if isinstance(log, dict) and "level" in log:
            cfg = replace(
                cfg, log_level=_normalize_level(log["level"], default=cfg.log_level)
            )
    return cfg
