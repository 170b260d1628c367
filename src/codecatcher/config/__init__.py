"""codecatcher configuration package."""

from codecatcher.config.loader import get_config, load_config
from codecatcher.config.models import LinterConfig

__all__ = ["LinterConfig", "get_config", "load_config"]
