"""Runtime configuration loader for the argument parser."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, replace
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Iterable, Optional

from .errors import ConfigError

__all__ = [
    "ParserConfig",
    "DEFAULT_OPTION_PREFIX",
    "DEFAULT_VALUE_SEPARATOR",
    "DEFAULT_NON_OPTION_ARGS_PROPERTY_NAME",
    "get_runtime_config",
    "load_config",
    "reload_config",
]

DEFAULT_OPTION_PREFIX = "--"
DEFAULT_VALUE_SEPARATOR = "="
DEFAULT_NON_OPTION_ARGS_PROPERTY_NAME = "nonOptionArgs"

_CONFIG_ENV = "CMDARGS_CONFIG"
_ENV_OVERRIDES: Dict[str, str] = {
    "option_prefix": "CMDARGS_OPTION_PREFIX",
    "value_separator": "CMDARGS_VALUE_SEPARATOR",
    "non_option_args_property_name": "CMDARGS_NON_OPTION_ARGS_PROPERTY",
}
_DEFAULT_CONFIG_LOCATIONS: tuple[Path, ...] = (
    Path("config/cmdargs.json"),
    Path("cmdargs.json"),
)

_LOGGER = logging.getLogger("cmdargs.config")


@dataclass(slots=True, frozen=True)
class ParserConfig:
    option_prefix: str = DEFAULT_OPTION_PREFIX
    value_separator: str = DEFAULT_VALUE_SEPARATOR
    non_option_args_property_name: str = DEFAULT_NON_OPTION_ARGS_PROPERTY_NAME

    def __post_init__(self) -> None:
        if not self.option_prefix:
            raise ConfigError("option_prefix must not be empty")
        if not self.value_separator:
            raise ConfigError("value_separator must not be empty")
        if not self.non_option_args_property_name:
            raise ConfigError("non_option_args_property_name must not be empty")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ParserConfig":
        if not isinstance(data, dict):
            return cls()
        values: Dict[str, str] = {}
        for key in _ENV_OVERRIDES:
            raw = data.get(key)
            if isinstance(raw, str):
                values[key] = raw
        return cls(**values)

    def with_env_overrides(self) -> "ParserConfig":
        changes: Dict[str, str] = {}
        for key, env_name in _ENV_OVERRIDES.items():
            value = os.getenv(env_name)
            if value:
                changes[key] = value
        return replace(self, **changes) if changes else self


def _candidate_paths() -> Iterable[Path]:
    env_path = os.getenv(_CONFIG_ENV)
    if env_path:
        yield Path(env_path).expanduser()
    yield from _DEFAULT_CONFIG_LOCATIONS


def _read_json(path: Path) -> Dict[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise ConfigError(f"Unable to read config file {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a JSON object")
    return data


def load_config(path: Optional[Path] = None) -> ParserConfig:
    """Load configuration from ``path`` or the first discoverable config file.

    An explicit ``path`` must be readable; discovered files that fail to load
    are skipped with a warning. Environment overrides apply last.
    """

    if path is not None:
        return ParserConfig.from_dict(_read_json(path)).with_env_overrides()
    for candidate in _candidate_paths():
        if not candidate.exists():
            continue
        try:
            data = _read_json(candidate)
        except ConfigError as exc:
            _LOGGER.warning("Skipping config file: %s", exc)
            continue
        return ParserConfig.from_dict(data).with_env_overrides()
    return ParserConfig().with_env_overrides()


@lru_cache(maxsize=1)
def get_runtime_config() -> ParserConfig:
    """Return the cached runtime configuration."""

    return load_config(None)


def reload_config(path: Optional[Path] = None) -> ParserConfig:
    """Reload configuration from disk, bypassing the cache."""

    get_runtime_config.cache_clear()
    return get_runtime_config() if path is None else load_config(path)
