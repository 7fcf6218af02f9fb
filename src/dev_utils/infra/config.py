# Configuration storage: per-user JSON config with environment overrides
#
# Lookup order (highest first):
#   - command-line flags (applied by the caller)
#   - DEV_UTILS_* environment variables
#   - config.json in the per-user config directory
#   - built-in defaults

import json
import os
import sys
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Dict, Optional

from .logger import log_warning

APP_NAME = "dev-utils"
CONFIG_FILE_NAME = "config.json"

DEFAULT_REPO_LIMIT = 5000
DEFAULT_BRANCH = "main"
DEFAULT_TERRAFORM_ENV_DIR = "environments"


@dataclass(frozen=True)
class Settings:
    """Effective settings for one CLI invocation."""

    repo_limit: int = DEFAULT_REPO_LIMIT
    default_branch: str = DEFAULT_BRANCH
    terraform_env_dir: str = DEFAULT_TERRAFORM_ENV_DIR


def get_config_dir() -> Path:
    override = os.environ.get("DEV_UTILS_CONFIG_DIR")
    if override:
        return Path(override)
    if os.name == "nt":
        base = os.environ.get("APPDATA") or os.environ.get("LOCALAPPDATA") or str(Path.home())
    elif sys.platform == "darwin":
        base = str(Path.home() / "Library" / "Application Support")
    else:
        base = os.environ.get("XDG_CONFIG_HOME") or str(Path.home() / ".config")
    return Path(base) / APP_NAME


def get_config_path() -> Path:
    return get_config_dir() / CONFIG_FILE_NAME


def _load_config(config_path: Path) -> Dict[str, Any]:
    if not config_path.exists():
        return {}
    try:
        data = json.loads(config_path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        log_warning(f"ignoring unreadable config file: {config_path} - {e}")
        return {}
    if not isinstance(data, dict):
        log_warning(f"ignoring config file without a JSON object: {config_path}")
        return {}
    return data


def _positive_int(value: Any, source: str) -> Optional[int]:
    try:
        number = int(value)
    except (TypeError, ValueError):
        log_warning(f"ignoring non-integer repo_limit from {source}: {value!r}")
        return None
    if number < 1:
        log_warning(f"ignoring repo_limit < 1 from {source}: {number}")
        return None
    return number


def _apply(settings: Settings, values: Dict[str, Any], source: str) -> Settings:
    updates: Dict[str, Any] = {}

    if values.get("repo_limit") is not None:
        limit = _positive_int(values["repo_limit"], source)
        if limit is not None:
            updates["repo_limit"] = limit

    for key in ("default_branch", "terraform_env_dir"):
        value = values.get(key)
        if isinstance(value, str) and value.strip():
            updates[key] = value.strip()

    return replace(settings, **updates)


def load_settings(config_path: Optional[Path] = None) -> Settings:
    """Build settings from defaults, the config file and the environment.

    Args:
        config_path: explicit config file (defaults to get_config_path())

    Returns:
        Settings with file values and environment overrides applied
    """
    path = config_path or get_config_path()
    settings = _apply(Settings(), _load_config(path), str(path))

    env_values = {
        "repo_limit": os.environ.get("DEV_UTILS_REPO_LIMIT"),
        "default_branch": os.environ.get("DEV_UTILS_DEFAULT_BRANCH"),
        "terraform_env_dir": os.environ.get("DEV_UTILS_TERRAFORM_ENV_DIR"),
    }
    return _apply(settings, env_values, "environment")
