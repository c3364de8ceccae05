"""Utility helpers for loading project-wide configuration."""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Mapping

try:  # Python 3.11+
    import tomllib  # type: ignore[attr-defined]
except ModuleNotFoundError:  # pragma: no cover - fallback for older Python
    import tomli as tomllib  # type: ignore[import-untyped]

__all__ = ["events_enabled", "get_config", "get_section", "reload", "resolve_events_dir", "resolve_profile_name"]

_CONFIG_FILENAME = "config.toml"
_CONFIG_ENV = "SUDOKU_VALIDATOR_CONFIG"

_DEFAULTS: Dict[str, Any] = {
    "validation": {"profile": "classic"},
    "events": {"enabled": False, "log_dir": "logs/validation", "max_bytes": 100 * 1024 * 1024},
}


def _config_path() -> Path:
    override = os.environ.get(_CONFIG_ENV)
    if override:
        return Path(override)
    return Path(__file__).resolve().parents[2] / _CONFIG_FILENAME


@lru_cache(maxsize=1)
def get_config() -> Dict[str, Any]:
    """Load and cache the configuration merged over built-in defaults."""

    merged: Dict[str, Any] = {key: dict(value) for key, value in _DEFAULTS.items()}
    path = _config_path()
    if not path.exists():
        return merged
    with path.open("rb") as fh:
        data = tomllib.load(fh)
    for key, value in data.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key].update(value)
        else:
            merged[key] = value
    return merged


def reload() -> None:
    """Clear the cached configuration."""

    get_config.cache_clear()


def get_section(path: str, default: Any = None) -> Any:
    """Retrieve a nested configuration value using dotted notation."""

    data: Any = get_config()
    for part in path.split("."):
        if isinstance(data, dict) and part in data:
            data = data[part]
        else:
            if default is not None:
                return default
            raise KeyError(f"Configuration path '{path}' not found")
    return data


def resolve_profile_name(explicit: str | None = None, env: Mapping[str, str] | None = None) -> str:
    """Pick the profile name: argument, then environment, then config."""

    if explicit:
        return explicit
    source = os.environ if env is None else env
    from_env = source.get("SUDOKU_VALIDATION_PROFILE")
    if from_env:
        return from_env
    return str(get_section("validation.profile", "classic"))


def resolve_events_dir(explicit: str | Path | None = None, env: Mapping[str, str] | None = None) -> Path:
    if explicit:
        return Path(explicit)
    source = os.environ if env is None else env
    from_env = source.get("SUDOKU_EVENTS_DIR")
    if from_env:
        return Path(from_env)
    return Path(get_section("events.log_dir", "logs/validation"))


def events_enabled(explicit: str | Path | None = None, env: Mapping[str, str] | None = None) -> bool:
    """Return ``True`` when diagnostic events should also go to JSONL files.

    An explicit directory or ``SUDOKU_EVENTS_DIR`` turns the sink on; otherwise
    ``events.enabled`` in the config decides.
    """

    if explicit:
        return True
    source = os.environ if env is None else env
    if source.get("SUDOKU_EVENTS_DIR"):
        return True
    return _coerce_bool(get_section("events.enabled", False)) is True


def _coerce_bool(value: Any) -> bool | None:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        normalised = value.strip().lower()
        if normalised in {"1", "true", "yes", "on"}:
            return True
        if normalised in {"0", "false", "no", "off"}:
            return False
    return None
