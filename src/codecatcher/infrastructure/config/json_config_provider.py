"""JSON config provider — implements ConfigProviderPort.

Wraps config/loader.py.
"""

from __future__ import annotations

from typing import Any

from codecatcher.domain.ports.config_provider import ConfigProviderPort


class JsonConfigProvider(ConfigProviderPort):
    """Load linter configuration from JSON files."""

    def __init__(self, config_path: str | None = None) -> None:
        self._config_path = config_path
        self._config: Any = None

    def get_config(self) -> Any:
        """Return the current configuration, loading lazily."""
        if self._config is None:
            from codecatcher.config.loader import get_config, load_config

            if self._config_path:
                self._config = load_config(self._config_path)
            else:
                self._config = get_config()
        return self._config
