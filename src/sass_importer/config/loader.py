"""Configuration loader for the Sass importer.

Loads a JSON configuration file and returns a validated ImporterConfig
instance.  Uses module-level caching so each file is only parsed once per
process.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import platformdirs
from pydantic import ValidationError

from sass_importer.config.models import ImporterConfig
from sass_importer.domain.errors import ConfigurationError

_APP_NAME = "sass_importer"
_USER_CONFIG_FILENAME = "config.json"

# Module-level cache
_config_cache: dict[str, ImporterConfig] = {}

# Default config path — lives next to this module
_DEFAULT_CONFIG_PATH = Path(__file__).parent / "sass_importer_default.json"


def user_config_path() -> Path:
    """Per-user override file (not required to exist)."""
    return Path(platformdirs.user_config_dir(_APP_NAME)) / _USER_CONFIG_FILENAME


def load_config(path: Optional[Path] = None) -> ImporterConfig:
    """Load and validate the importer config from a JSON file.

    Parameters
    ----------
    path : Path | None
        Path to a custom JSON config file.  If ``None``, the user config
        file is used when present, otherwise the built-in
        ``sass_importer_default.json``.

    Returns
    -------
    ImporterConfig
        Validated configuration instance.

    Raises
    ------
    ConfigurationError
        If the file does not exist, is not JSON, or does not match the schema.
    """
    if path is None:
        user_path = user_config_path()
        path = user_path if user_path.is_file() else _DEFAULT_CONFIG_PATH

    cache_key = str(path.resolve())
    if cache_key in _config_cache:
        return _config_cache[cache_key]

    if not path.exists():
        raise ConfigurationError(f"Config file not found: {path}")

    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
        config = ImporterConfig.model_validate(raw)
    except (json.JSONDecodeError, ValidationError) as exc:
        raise ConfigurationError(f"Invalid config file {path}: {exc}") from exc

    _config_cache[cache_key] = config
    return config


def get_config() -> ImporterConfig:
    """Get the active configuration (cached).

    This is the main entry point used by the rest of the application.
    """
    return load_config()


def clear_cache() -> None:
    """Clear the config cache — useful for testing."""
    _config_cache.clear()
