"""
Configuration for the git batch sync scripts.

The only setting is the root directory whose immediate subdirectories are
scanned for repositories. It is read from the environment first and from
a JSON file second.
"""

import json
import os
from pathlib import Path

ROOT_ENV_VAR = "GIT_BATCH_SYNC_ROOT"
ROOT_KEY = "root"
DEFAULT_CONFIG_FILE = Path.home() / ".config" / "git-batch-sync" / "config.json"


class ConfigError(Exception):
    """Raised when the root directory cannot be configured."""


def _to_root_path(value: str) -> Path:
    return Path(value).expanduser().absolute()


def read_config(config_file: Path | None = None) -> Path:
    """Read the configured root directory.

    Params:
    config_file (Path): JSON file to read, defaults to DEFAULT_CONFIG_FILE.

    Returns:
    Path: Absolute path of the root directory.

    Raises:
    ConfigError: If no root is configured or the file is invalid.
    """
    env_value = os.environ.get(ROOT_ENV_VAR, "").strip()
    if env_value:
        return _to_root_path(env_value)

    config_file = config_file or DEFAULT_CONFIG_FILE
    if not config_file.exists():
        raise ConfigError(
            f"No root directory configured. Set {ROOT_ENV_VAR} or create {config_file}"
        )

    try:
        with open(config_file, "r", encoding="utf-8") as file:
            data = json.load(file)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Could not decode JSON from file: {config_file}") from e
    except OSError as e:
        raise ConfigError(f"Could not read file {config_file}. Details: {e}") from e

    value = data.get(ROOT_KEY) if isinstance(data, dict) else None
    if not isinstance(value, str) or not value.strip():
        raise ConfigError(f"Missing '{ROOT_KEY}' entry in {config_file}")
    return _to_root_path(value)


def save_config(root: Path, config_file: Path | None = None) -> Path:
    """Save the root directory to the JSON config file.

    Params:
    root (Path): Root directory to store.
    config_file (Path): JSON file to write, defaults to DEFAULT_CONFIG_FILE.

    Returns:
    Path: The file that was written.
    """
    config_file = config_file or DEFAULT_CONFIG_FILE
    try:
        config_file.parent.mkdir(parents=True, exist_ok=True)
        with open(config_file, "w", encoding="utf-8") as f:
            json.dump({ROOT_KEY: str(_to_root_path(str(root)))}, f, indent=2, sort_keys=True)
    except OSError as e:
        raise ConfigError(f"Could not write to file {config_file}. Details: {e}") from e
    return config_file
