"""Configuration loader for codecatcher.

Loads the JSON configuration file and returns a validated LinterConfig
instance. Uses module-level caching so the config is only parsed once
per process.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional, Union

from codecatcher.config.models import LinterConfig

# Module-level cache
_config_cache: dict[str, LinterConfig] = {}

# Default config path — lives next to this module
_DEFAULT_CONFIG_PATH = Path(__file__).parent / "codecatcher_default.json"


def load_config(path: Optional[Union[str, Path]] = None) -> LinterConfig:
    """Load and validate linter config from a JSON file.

    Parameters
    ----------
    path : str | Path | None
        Path to a custom JSON config file.
        If ``None``, the built-in ``codecatcher_default.json`` is used.

    Returns
    -------
    LinterConfig
        Validated configuration instance.

    Raises
    ------
    FileNotFoundError
        If the specified path does not exist.
    pydantic.ValidationError
        If the JSON content does not match the expected schema.
    """
    config_path = Path(path) if path else _DEFAULT_CONFIG_PATH
    cache_key = str(config_path.resolve())

    if cache_key in _config_cache:
        return _config_cache[cache_key]

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    raw = json.loads(config_path.read_text(encoding="utf-8"))
    config = LinterConfig.model_validate(raw)
    _config_cache[cache_key] = config
    return config


def get_config() -> LinterConfig:
    """Get the default configuration (cached)."""
    return load_config()


def clear_cache() -> None:
    """Clear the config cache — useful for testing."""
    _config_cache.clear()
