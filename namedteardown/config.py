"""Configuration for namedteardown: whether diagnostic teardowns always run."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from namedteardown.constants import CONFIG_DIR_NAME, CONFIG_FILE_NAME, ENV_ALWAYS_RUN_DIAGNOSTICS

_DEFAULT_ALWAYS_RUN_DIAGNOSTICS = False


@dataclass
class TeardownConfig:
    """Runtime configuration for teardown registries."""

    always_run_diagnostics: bool


def env_flag_enabled(raw: str | None) -> bool:
    """True only for a case-insensitive "true"; anything else (or unset) is False."""
    if raw is None:
        return False
    return raw.strip().lower() == "true"


def _load_yaml(path: Path) -> dict[str, Any]:
    """Load YAML from path. Return {} if file missing or invalid."""
    if not path.is_file():
        return {}
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
        return data if isinstance(data, dict) else {}
    except (OSError, yaml.YAMLError):
        return {}


def _apply_yaml(config: dict[str, Any], key: str, default: Any) -> Any:
    """Get value from config dict if present and valid; else return default."""
    if key not in config:
        return default
    val = config[key]
    if key == "always_run_diagnostics":
        if isinstance(val, bool):
            return val
        if isinstance(val, str):
            return env_flag_enabled(val)
        return default
    return default


def load_config(project_root: Path | None = None) -> TeardownConfig:
    """
    Load TeardownConfig with precedence (highest first):
    1. ALWAYS_RUN_DIAGNOSTIC_TEARDOWNS environment variable (when set)
    2. .namedteardown/config.yaml in project root (if present)
    3. ~/.namedteardown/config.yaml
    """
    always_run = _DEFAULT_ALWAYS_RUN_DIAGNOSTICS

    # 3. User config
    user_cfg = _load_yaml(Path.home() / CONFIG_DIR_NAME / CONFIG_FILE_NAME)
    if user_cfg:
        always_run = _apply_yaml(user_cfg, "always_run_diagnostics", always_run)

    # 2. Project config (overrides user)
    root = project_root if project_root is not None else Path.cwd()
    proj_cfg = _load_yaml(root / CONFIG_DIR_NAME / CONFIG_FILE_NAME)
    if proj_cfg:
        always_run = _apply_yaml(proj_cfg, "always_run_diagnostics", always_run)

    # 1. Env (overrides all, but only when explicitly set)
    env_value = os.environ.get(ENV_ALWAYS_RUN_DIAGNOSTICS)
    if env_value is not None:
        always_run = env_flag_enabled(env_value)

    return TeardownConfig(always_run_diagnostics=always_run)
