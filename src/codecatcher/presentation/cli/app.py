"""Thin CLI wrapper — Typer commands that delegate to Use Cases.

All analysis is reached through the Container (bootstrap.py).
"""

from __future__ import annotations

import json
import logging
import shutil
from pathlib import Path
from typing import Annotated, Optional

import typer

from codecatcher.presentation.cli.formatters import (
    console,
    error_message,
    json_panel,
    report_summary,
    rules_table,
    success_panel,
)

# Exit codes: 0 clean, 1 issues found, 2 usage/config error
EXIT_ISSUES = 1
EXIT_ERROR = 2

app = typer.Typer(
    name="codecatcher",
    help="🔎 Static-quality linter for HTML & CSS",
    rich_markup_mode="rich",
    no_args_is_help=True,
)

# Sub-app for config commands
config_app = typer.Typer(
    name="config",
    help="⚙️  Manage the linter configuration",
    rich_markup_mode="rich",
    no_args_is_help=True,
)
app.add_typer(config_app, name="config")

ConfigOption = Annotated[
    Optional[str],
    typer.Option("--config", "-c", help="Path to a JSON configuration file"),
]


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
        datefmt="%H:%M:%S",
    )


def _load_cli_config(config: Optional[str]):
    """Load the --config file, or the packaged default when none is given."""
    from codecatcher.config import get_config, load_config

    try:
        return load_config(Path(config)) if config else get_config()
    except (FileNotFoundError, ValueError) as e:
        error_message(f"Invalid configuration: {e}")
        raise typer.Exit(code=EXIT_ERROR)


def _read_source(path: Optional[str]) -> str:
    """Read a source file; an omitted file counts as an empty document."""
    if path is None:
        return ""
    source = Path(path)
    if not source.is_file():
        error_message(f"File not found: {path}")
        raise typer.Exit(code=EXIT_ERROR)
    return source.read_text(encoding="utf-8", errors="replace")


# ---------------------------------------------------------------------------
# codecatcher analyze
# ---------------------------------------------------------------------------


@app.command()
def analyze(
    html: Annotated[Optional[str], typer.Argument(help="HTML file to lint")] = None,
    css: Annotated[Optional[str], typer.Argument(help="CSS file to lint")] = None,
    as_json: Annotated[
        bool, typer.Option("--json", help="Print the report as JSON")
    ] = False,
    config: ConfigOption = None,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Enable debug logging")
    ] = False,
) -> None:
    """Lint an HTML file and a CSS file and report the issues found."""
    from codecatcher.bootstrap import Container

    _configure_logging(verbose)

    if html is None and css is None:
        error_message("Provide an HTML file, a CSS file, or both")
        raise typer.Exit(code=EXIT_ERROR)

    markup = _read_source(html)
    stylesheet = _read_source(css)

    try:
        container = Container(config_path=config)
    except (FileNotFoundError, ValueError) as e:
        error_message(f"Invalid configuration: {e}")
        raise typer.Exit(code=EXIT_ERROR)

    report = container.analyze_sources().execute(markup, stylesheet)

    if as_json:
        typer.echo(json.dumps(report.to_dict(), indent=2))
    else:
        report_summary(report)

    if not report.is_clean:
        raise typer.Exit(code=EXIT_ISSUES)


# ---------------------------------------------------------------------------
# codecatcher rules
# ---------------------------------------------------------------------------


@app.command()
def rules(config: ConfigOption = None) -> None:
    """Show the lint rule catalogue."""
    from codecatcher.domain.rules.catalogue import MARKUP_RULES, STYLE_RULES

    cfg = _load_cli_config(config)
    rules_table(MARKUP_RULES, STYLE_RULES, cfg.markup.closing_tags)


# ---------------------------------------------------------------------------
# codecatcher config show / init / validate
# ---------------------------------------------------------------------------


@config_app.command("show")
def config_show(config: ConfigOption = None) -> None:
    """Show the active configuration."""
    cfg = _load_cli_config(config)
    json_panel(cfg.model_dump_json(indent=2))


@config_app.command("init")
def config_init(
    output: Annotated[
        str, typer.Option("--output", "-o", help="Destination file name")
    ] = "codecatcher.json",
) -> None:
    """Copy the default configuration into the current directory."""
    from codecatcher.config.loader import _DEFAULT_CONFIG_PATH

    dest = Path(output)
    if dest.exists():
        console.print(f"[bold yellow]⚠️  File already exists:[/] {dest}")
        overwrite = typer.confirm("Overwrite it?")
        if not overwrite:
            raise typer.Abort()

    shutil.copy2(_DEFAULT_CONFIG_PATH, dest)
    success_panel(
        f"✅ Configuration copied to: [bold green]{dest}[/]\n\n"
        "Edit it and pass it with [bold]--config[/]:\n"
        f'  codecatcher analyze page.html style.css --config "{dest}"',
        title="⚙️  Config Init",
    )


@config_app.command("validate")
def config_validate(
    config_file: Annotated[str, typer.Argument(help="JSON configuration file to validate")],
) -> None:
    """Validate a JSON configuration file."""
    from codecatcher.config import load_config

    path = Path(config_file)
    if not path.exists():
        error_message(f"File not found: {path}")
        raise typer.Exit(code=EXIT_ERROR)

    try:
        cfg = load_config(path)
        success_panel(
            f"✅ Valid configuration\n\n"
            f"  Closing tags: [cyan]{len(cfg.markup.closing_tags)}[/] checked\n"
            f"  Disabled markup rules: [cyan]{len(cfg.markup.disabled_rules)}[/]\n"
            f"  Disabled CSS rules: [cyan]{len(cfg.stylesheet.disabled_rules)}[/]\n"
            f"  Parallel analysis: [cyan]{cfg.analysis.parallel}[/]",
            title="✅ Validation",
        )
    except ValueError as e:
        console.print(f"[bold red]❌ Validation error:[/]\n\n{e}")
        raise typer.Exit(code=EXIT_ERROR)


if __name__ == "__main__":
    app()
