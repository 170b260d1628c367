"""Tests for the Typer command-line interface."""

from __future__ import annotations

import json

import pytest
from typer.testing import CliRunner

from codecatcher.config.loader import clear_cache
from codecatcher.presentation.cli.app import app

# Wide terminal so Rich tables do not wrap cell text
runner = CliRunner(env={"COLUMNS": "200"})


@pytest.fixture(autouse=True)
def _fresh_cache():
    clear_cache()
    yield
    clear_cache()


@pytest.fixture
def sources(tmp_path):
    html = tmp_path / "page.html"
    html.write_text('<html lang="en">\n<body>\n<img src="a.png">\n</body>\n</html>\n')
    css = tmp_path / "style.css"
    css.write_text("a {\n  margin: 0px;\n}\n")
    return html, css


@pytest.fixture
def clean_sources(tmp_path):
    html = tmp_path / "clean.html"
    html.write_text('<html lang="en"><body><p>Hello</p></body></html>')
    css = tmp_path / "clean.css"
    css.write_text("p { color: red; }")
    return html, css


class TestAnalyzeCommand:
    def test_json_report(self, sources):
        html, css = sources
        result = runner.invoke(app, ["analyze", str(html), str(css), "--json"])
        assert result.exit_code == 1
        data = json.loads(result.stdout)
        assert data["htmlIssues"] == [
            {
                "type": "Missing alt attribute",
                "tag": "<img>",
                "line": 3,
                "solution": 'Add alt="..." attribute in <img>',
            }
        ]
        assert [i["property"] for i in data["cssIssues"]] == ["margin"]
        assert data["cssIssues"][0]["line"] == 2

    def test_table_report(self, sources):
        html, css = sources
        result = runner.invoke(app, ["analyze", str(html), str(css)])
        assert result.exit_code == 1
        assert "Missing alt attribute" in result.stdout
        assert "Summary" in result.stdout

    def test_clean_sources_exit_zero(self, clean_sources):
        html, css = clean_sources
        result = runner.invoke(app, ["analyze", str(html), str(css)])
        assert result.exit_code == 0
        assert "No HTML issues found!" in result.stdout
        assert "No CSS issues found!" in result.stdout

    def test_html_only(self, sources):
        html, _css = sources
        result = runner.invoke(app, ["analyze", str(html), "--json"])
        data = json.loads(result.stdout)
        assert data["cssIssues"] == []
        assert len(data["htmlIssues"]) == 1

    def test_missing_file(self, tmp_path):
        result = runner.invoke(app, ["analyze", str(tmp_path / "nope.html")])
        assert result.exit_code == 2
        assert "File not found" in result.stdout

    def test_no_files(self):
        result = runner.invoke(app, ["analyze"])
        assert result.exit_code == 2

    def test_bad_config(self, sources, tmp_path):
        html, css = sources
        bad = tmp_path / "bad.json"
        bad.write_text(json.dumps({"markup": {"closing_tags": []}}))
        result = runner.invoke(app, ["analyze", str(html), str(css), "--config", str(bad)])
        assert result.exit_code == 2
        assert "Invalid configuration" in result.stdout

    def test_config_disables_rules(self, sources, tmp_path):
        html, css = sources
        cfg = tmp_path / "cfg.json"
        cfg.write_text(
            json.dumps(
                {
                    "markup": {"disabled_rules": ["img-alt"]},
                    "stylesheet": {"disabled_rules": ["zero-px"]},
                }
            )
        )
        result = runner.invoke(
            app, ["analyze", str(html), str(css), "--json", "--config", str(cfg)]
        )
        assert result.exit_code == 0
        assert json.loads(result.stdout) == {"htmlIssues": [], "cssIssues": []}


class TestRulesCommand:
    def test_lists_rules(self):
        result = runner.invoke(app, ["rules"])
        assert result.exit_code == 0
        assert "img-alt" in result.stdout
        assert "zero-px" in result.stdout

    def test_missing_config(self, tmp_path):
        result = runner.invoke(app, ["rules", "--config", str(tmp_path / "absent.json")])
        assert result.exit_code == 2
        assert "Invalid configuration" in result.stdout


class TestConfigCommands:
    def test_show(self):
        result = runner.invoke(app, ["config", "show"])
        assert result.exit_code == 0
        assert "closing_tags" in result.stdout

    def test_show_rejects_bad_config(self, tmp_path):
        bad = tmp_path / "bad.json"
        bad.write_text("{not json")
        result = runner.invoke(app, ["config", "show", "--config", str(bad)])
        assert result.exit_code == 2
        assert "Invalid configuration" in result.stdout

    def test_init_and_validate(self, tmp_path):
        dest = tmp_path / "codecatcher.json"
        result = runner.invoke(app, ["config", "init", "--output", str(dest)])
        assert result.exit_code == 0
        assert dest.exists()

        result = runner.invoke(app, ["config", "validate", str(dest)])
        assert result.exit_code == 0
        assert "Valid configuration" in result.stdout

    def test_validate_rejects_bad_file(self, tmp_path):
        bad = tmp_path / "bad.json"
        bad.write_text(json.dumps({"stylesheet": {"disabled_rules": ["nope"]}}))
        result = runner.invoke(app, ["config", "validate", str(bad)])
        assert result.exit_code == 2

    def test_validate_missing_file(self, tmp_path):
        result = runner.invoke(app, ["config", "validate", str(tmp_path / "absent.json")])
        assert result.exit_code == 2
