"""Pydantic models for codecatcher configuration.

These models validate and type the JSON configuration file that tunes
the rule catalogue (closing-tag list, disabled rules, sentinels) and the
way both analyzers are scheduled.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from codecatcher.domain.rules.catalogue import CLOSING_TAGS, MARKUP_RULE_IDS, STYLE_RULE_IDS


# ---------------------------------------------------------------------------
# Meta
# ---------------------------------------------------------------------------


class MetaData(BaseModel):
    """Metadata about the configuration file."""

    name: str = "codecatcher"
    version: str = "1"
    description: str = "Default HTML & CSS lint rules"


# ---------------------------------------------------------------------------
# Analyzer sections
# ---------------------------------------------------------------------------


class MarkupSettings(BaseModel):
    """Markup analyzer settings."""

    closing_tags: list[str] = Field(default_factory=lambda: list(CLOSING_TAGS))
    disabled_rules: list[str] = Field(default_factory=list)
    unknown_line: str = "Unknown"

    @field_validator("closing_tags")
    @classmethod
    def _normalise_tags(cls, value: list[str]) -> list[str]:
        tags = [t.strip().lower() for t in value if t.strip()]
        if not tags:
            raise ValueError("closing_tags must list at least one tag")
        return list(dict.fromkeys(tags))

    @field_validator("disabled_rules")
    @classmethod
    def _known_rules(cls, value: list[str]) -> list[str]:
        unknown = sorted(set(value) - MARKUP_RULE_IDS)
        if unknown:
            raise ValueError(f"unknown markup rule id(s): {', '.join(unknown)}")
        return value


class StylesheetSettings(BaseModel):
    """Stylesheet analyzer settings."""

    disabled_rules: list[str] = Field(default_factory=list)

    @field_validator("disabled_rules")
    @classmethod
    def _known_rules(cls, value: list[str]) -> list[str]:
        unknown = sorted(set(value) - STYLE_RULE_IDS)
        if unknown:
            raise ValueError(f"unknown stylesheet rule id(s): {', '.join(unknown)}")
        return value


class AnalysisSettings(BaseModel):
    """How the two analyzers are scheduled."""

    parallel: bool = True


# ---------------------------------------------------------------------------
# Root
# ---------------------------------------------------------------------------


class LinterConfig(BaseModel):
    """Root configuration model."""

    metadata: MetaData = Field(default_factory=MetaData)
    markup: MarkupSettings = Field(default_factory=MarkupSettings)
    stylesheet: StylesheetSettings = Field(default_factory=StylesheetSettings)
    analysis: AnalysisSettings = Field(default_factory=AnalysisSettings)
