"""Rich formatting utilities for the CLI.

Keeps all Rich rendering (tables, panels, syntax) out of the command
module; nothing here knows how issues are detected.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from rich.console import Console
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table

if TYPE_CHECKING:
    from codecatcher.domain.models.issue import AnalysisReport, MarkupIssue, StyleIssue
    from codecatcher.domain.rules.catalogue import MarkupRule, StyleRule

console = Console()


# ---------------------------------------------------------------------------
# Success / error panels
# ---------------------------------------------------------------------------


def success_panel(message: str, title: str = "codecatcher") -> None:
    """Print a green success panel."""
    console.print(Panel(message, title=title, border_style="green"))


def error_message(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]❌ {message}[/]")


# ---------------------------------------------------------------------------
# JSON / config rendering
# ---------------------------------------------------------------------------


def json_panel(raw_json: str, title: str = "⚙️  Active configuration") -> None:
    """Render JSON inside a syntax-highlighted panel."""
    console.print(
        Panel(
            Syntax(raw_json, "json", theme="monokai", line_numbers=True),
            title=title,
            border_style="blue",
        )
    )


# ---------------------------------------------------------------------------
# Rule catalogue
# ---------------------------------------------------------------------------


def rules_table(
    markup_rules: Sequence[MarkupRule],
    style_rules: Sequence[StyleRule],
    closing_tags: Sequence[str],
) -> None:
    """Print the rule catalogue."""
    table = Table(title="📐 Lint rules", show_header=True, border_style="blue")
    table.add_column("Id", style="cyan", width=22)
    table.add_column("Applies to", width=14)
    table.add_column("Issue", style="red")
    table.add_column("Solution", style="green")

    table.add_row(
        "closing-tag",
        "raw HTML",
        "Missing closing tag",
        ", ".join(closing_tags),
    )
    for rule in markup_rules:
        target = f"<{rule.tag}>" if rule.tag else "any element"
        table.add_row(rule.rule_id, target, rule.issue.value, rule.solution)

    table.add_row("", "", "", "")
    for rule in style_rules:
        table.add_row(rule.rule_id, "declaration", rule.problem.value, rule.solution)

    console.print(table)


# ---------------------------------------------------------------------------
# Analysis report rendering
# ---------------------------------------------------------------------------


def html_issues_table(issues: Sequence[MarkupIssue]) -> None:
    """Print markup issues, or the empty-state line."""
    if not issues:
        console.print("[green]✅ No HTML issues found![/]")
        return

    table = Table(title="🧱 HTML Issues", show_header=True, border_style="blue")
    table.add_column("Line", justify="right", width=7)
    table.add_column("Issue", style="red")
    table.add_column("Tag", style="cyan")
    table.add_column("Solution", style="green")
    for issue in issues:
        table.add_row(str(issue.line), issue.type, issue.tag, issue.solution)
    console.print(table)


def css_issues_table(issues: Sequence[StyleIssue]) -> None:
    """Print stylesheet issues, or the empty-state line."""
    if not issues:
        console.print("[green]✅ No CSS issues found![/]")
        return

    table = Table(title="🎨 CSS Issues", show_header=True, border_style="blue")
    table.add_column("Line", justify="right", width=7)
    table.add_column("Issue", style="red")
    table.add_column("Property", style="cyan")
    table.add_column("Solution", style="green")
    for issue in issues:
        table.add_row(str(issue.line), issue.problem, issue.property, issue.solution)
    console.print(table)


def report_summary(report: AnalysisReport) -> None:
    """Print both tables plus a summary panel."""
    html_issues_table(report.html_issues)
    css_issues_table(report.css_issues)

    color = "green" if report.is_clean else "yellow"
    console.print(
        Panel(
            f"HTML: [bold]{len(report.html_issues)}[/] issue(s)  |  "
            f"CSS: [bold]{len(report.css_issues)}[/] issue(s)",
            title="📊 Summary",
            border_style=color,
        )
    )
