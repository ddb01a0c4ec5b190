from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

CONFIG_ENV_VAR = "ENVKIT_CONFIG"
_DEFAULT_SETTINGS_PATH = Path("envkit.yaml")


@dataclass
class LoaderSettings:
    env_file: str = ".env"
    override: bool = True
    strict: bool = False


def _read_settings_yaml(path: Path) -> dict[str, Any]:
    payload = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    if not isinstance(payload, dict):
        raise ValueError(f"Settings file must contain a YAML object: {path}")
    return payload


def _normalize_settings(path: Path, row: dict[str, Any]) -> LoaderSettings:
    defaults = LoaderSettings()
    env_file = row.get("env_file", defaults.env_file)
    if not isinstance(env_file, str) or not env_file.strip():
        raise ValueError(f"Invalid env_file in {path}")

    flags = {}
    for name in ("override", "strict"):
        value = row.get(name, getattr(defaults, name))
        if not isinstance(value, bool):
            raise ValueError(f"Invalid {name} in {path}: expected true or false")
        flags[name] = value

    return LoaderSettings(env_file=env_file.strip(), **flags)


def resolve_settings_path(path: str | Path | None = None) -> Path:
    if path:
        return Path(path).expanduser()
    from_env = os.environ.get(CONFIG_ENV_VAR)
    if from_env:
        return Path(from_env).expanduser()
    return _DEFAULT_SETTINGS_PATH


def load_settings(path: str | Path | None = None) -> LoaderSettings:
    settings_path = resolve_settings_path(path)
    if not settings_path.exists():
        return LoaderSettings()
    return _normalize_settings(settings_path, _read_settings_yaml(settings_path))
