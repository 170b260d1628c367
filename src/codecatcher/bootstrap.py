"""Composition Root — Dependency Injection Container.

This module is the ONLY place where concrete infrastructure classes are
imported and wired together. All other layers refer to ports.
"""

from __future__ import annotations

from typing import Any

from codecatcher.domain.ports.analyzer import MarkupAnalyzerPort, StylesheetAnalyzerPort
from codecatcher.domain.ports.config_provider import ConfigProviderPort

from codecatcher.infrastructure.analyzers.markup_analyzer import HtmlMarkupAnalyzer
from codecatcher.infrastructure.analyzers.stylesheet_analyzer import CssStylesheetAnalyzer
from codecatcher.infrastructure.config.json_config_provider import JsonConfigProvider

from codecatcher.application.use_cases.analyze_sources import AnalyzeSourcesUseCase


class Container:
    """Simple dependency injection container.

    Wires the configured analyzers to their ports and provides
    pre-configured use cases.

    Usage::

        container = Container()
        report = container.analyze_sources().execute(html, css)
    """

    def __init__(self, config_path: str | None = None) -> None:
        # -- Infrastructure singletons ---------------------------------------
        self._config_provider = JsonConfigProvider(config_path)
        self._config: Any = self._config_provider.get_config()

        markup = self._config.markup
        self._markup_analyzer = HtmlMarkupAnalyzer(
            closing_tags=markup.closing_tags,
            disabled_rules=markup.disabled_rules,
            unknown_line=markup.unknown_line,
        )
        self._stylesheet_analyzer = CssStylesheetAnalyzer(
            disabled_rules=self._config.stylesheet.disabled_rules,
        )

    # -- Port accessors ------------------------------------------------------

    @property
    def config_provider(self) -> ConfigProviderPort:
        return self._config_provider

    @property
    def config(self) -> Any:
        return self._config

    @property
    def markup_analyzer(self) -> MarkupAnalyzerPort:
        return self._markup_analyzer

    @property
    def stylesheet_analyzer(self) -> StylesheetAnalyzerPort:
        return self._stylesheet_analyzer

    # -- Use Case factories --------------------------------------------------

    def analyze_sources(self) -> AnalyzeSourcesUseCase:
        """Create a use case for linting a markup/stylesheet pair."""
        return AnalyzeSourcesUseCase(
            markup_analyzer=self._markup_analyzer,
            stylesheet_analyzer=self._stylesheet_analyzer,
            parallel=self._config.analysis.parallel,
        )
