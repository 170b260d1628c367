"""Ports: source analyzers — lint raw document text into issue lists."""

from abc import ABC, abstractmethod

from codecatcher.domain.models.issue import MarkupIssue, StyleIssue


class MarkupAnalyzerPort(ABC):
    """Contract for linting a markup (HTML) document."""

    @abstractmethod
    def analyze(self, text: str) -> list[MarkupIssue]:
        """Return issues in emission order; never raise for malformed input."""
        ...


class StylesheetAnalyzerPort(ABC):
    """Contract for linting a stylesheet (CSS) document."""

    @abstractmethod
    def analyze(self, text: str) -> list[StyleIssue]:
        """Return issues in emission order; never raise for malformed input."""
        ...
