"""Infrastructure layer — parsing-library adapters."""

from codecatcher.infrastructure.analyzers.markup_analyzer import HtmlMarkupAnalyzer
from codecatcher.infrastructure.analyzers.stylesheet_analyzer import CssStylesheetAnalyzer
from codecatcher.infrastructure.config.json_config_provider import JsonConfigProvider

__all__ = [
    "HtmlMarkupAnalyzer",
    "CssStylesheetAnalyzer",
    "JsonConfigProvider",
]
