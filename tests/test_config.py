"""Tests for the configuration system and the DI container."""

from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from codecatcher.bootstrap import Container
from codecatcher.config.loader import clear_cache, get_config, load_config
from codecatcher.config.models import LinterConfig, MarkupSettings
from codecatcher.domain.rules.catalogue import CLOSING_TAGS


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _fresh_cache():
    """Ensure a clean config cache for every test."""
    clear_cache()
    yield
    clear_cache()


@pytest.fixture
def write_config(tmp_path):
    def _write(data: dict, name: str = "custom.json"):
        path = tmp_path / name
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write


# ---------------------------------------------------------------------------
# Default config loading
# ---------------------------------------------------------------------------


class TestDefaultConfig:
    def test_loads_without_error(self):
        assert isinstance(load_config(), LinterConfig)

    def test_default_closing_tags_match_catalogue(self):
        assert load_config().markup.closing_tags == list(CLOSING_TAGS)

    def test_defaults(self):
        cfg = load_config()
        assert cfg.metadata.name == "codecatcher"
        assert cfg.markup.disabled_rules == []
        assert cfg.markup.unknown_line == "Unknown"
        assert cfg.stylesheet.disabled_rules == []
        assert cfg.analysis.parallel is True

    def test_cached(self):
        assert get_config() is get_config()

    def test_model_defaults_equal_default_file(self):
        assert LinterConfig() == load_config()


# ---------------------------------------------------------------------------
# Custom config files
# ---------------------------------------------------------------------------


class TestCustomConfig:
    def test_partial_file_uses_defaults(self, write_config):
        cfg = load_config(write_config({"analysis": {"parallel": False}}))
        assert cfg.analysis.parallel is False
        assert cfg.markup.closing_tags == list(CLOSING_TAGS)

    def test_closing_tags_are_normalised(self):
        settings = MarkupSettings(closing_tags=[" DIV ", "div", "Section", ""])
        assert settings.closing_tags == ["div", "section"]

    def test_empty_closing_tags_rejected(self, write_config):
        with pytest.raises(ValidationError):
            load_config(write_config({"markup": {"closing_tags": []}}))

    def test_unknown_markup_rule_rejected(self, write_config):
        with pytest.raises(ValidationError, match="no-such-rule"):
            load_config(write_config({"markup": {"disabled_rules": ["no-such-rule"]}}))

    def test_unknown_stylesheet_rule_rejected(self, write_config):
        with pytest.raises(ValidationError):
            load_config(write_config({"stylesheet": {"disabled_rules": ["img-alt"]}}))

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "absent.json")


# ---------------------------------------------------------------------------
# Container wiring
# ---------------------------------------------------------------------------


class TestContainer:
    def test_default_wiring(self):
        container = Container()
        report = container.analyze_sources().execute("<img>", "a { margin: 0px }")
        assert len(report.html_issues) == 1
        assert len(report.css_issues) == 1

    def test_config_disables_rules(self, write_config):
        path = write_config(
            {
                "markup": {"disabled_rules": ["img-alt", "closing-tag"]},
                "stylesheet": {"disabled_rules": ["zero-px"]},
            }
        )
        container = Container(config_path=str(path))
        report = container.analyze_sources().execute("<div><img>", "a { margin: 0px }")
        assert report.is_clean

    def test_config_closing_tags_and_sentinel(self, write_config):
        path = write_config({"markup": {"closing_tags": ["section"], "unknown_line": "n/a"}})
        container = Container(config_path=str(path))
        issues = container.markup_analyzer.analyze("<div><section>")
        assert [i.tag for i in issues] == ["<section>"]
