"""YAML settings file loader."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

from dotenv import dotenv_values
from pydantic import ValidationError
from ruamel.yaml import YAML

from tfplan_commenter.config.settings import CommenterSettings

logger = logging.getLogger(__name__)

DEFAULT_SETTINGS_FILE = Path(".tfplan-commenter.yaml")


class ConfigError(Exception):
    """Raised for settings loading / validation errors."""


# Field name → environment variable.
_SETTINGS_ENV_MAP: dict[str, str] = {
    "output": "TFPLAN_OUTPUT",
    "plan_filename": "TFPLAN_PLAN_FILENAME",
    "max_listed": "TFPLAN_MAX_LISTED",
}


def _resolve_settings(raw: dict[str, Any], config_dir: Path) -> dict[str, Any]:
    """Resolve settings fields from YAML, env vars, and ``.env`` file.

    Priority (highest wins): YAML value > env var > ``.env`` file.
    Keys not known to the settings model are passed through so validation
    can reject them.
    """
    env_file = config_dir / ".env"
    dotenv_vals = dotenv_values(env_file, encoding="utf-8-sig") if env_file.is_file() else {}

    resolved: dict[str, Any] = {k: v for k, v in raw.items() if k not in _SETTINGS_ENV_MAP}
    for field, env_key in _SETTINGS_ENV_MAP.items():
        val = raw.get(field)
        if val is None:
            val = os.environ.get(env_key)
        if val is None:
            val = dotenv_vals.get(env_key)
        if val is not None:
            resolved[field] = val

    return resolved


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        raw = YAML(typ="safe").load(path)
    except Exception as exc:
        raise ConfigError(f"Failed to read {path}: {exc}") from exc

    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ConfigError(f"{path}: expected a mapping at the top level")
    return raw


def load_settings(path: Path | str | None = None) -> CommenterSettings:
    """Load settings from a YAML file, the environment, and ``.env``.

    With no *path*, ``.tfplan-commenter.yaml`` in the working directory is
    used when present; otherwise only the environment applies.

    Raises:
        ConfigError: On unreadable YAML, unknown keys, or invalid values.
    """
    if path is None:
        path = DEFAULT_SETTINGS_FILE
        raw = _read_yaml(path) if path.is_file() else {}
    else:
        path = Path(path)
        raw = _read_yaml(path)

    try:
        settings = CommenterSettings(**_resolve_settings(raw, path.parent))
    except ValidationError as exc:
        raise ConfigError(str(exc)) from exc

    logger.debug("Loaded settings: %s", settings.model_dump(mode="json"))
    return settings
