"""
Command line interface for the Sember site generator.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from . import __version__
from .config import Config, get_settings, load_config
from .errors import AssetError, BuildError, ConfigError, RenderError, SemberError
from .render import build_page_context
from .web import BuildReport, build_site

console = Console()
app = typer.Typer(help="Build a personal landing page and résumé from sember.toml.")
logger = logging.getLogger(__name__)

LOG_LEVELS = ["critical", "error", "warning", "info", "debug"]

ERROR_LABELS = {
    ConfigError: "Configuration error",
    AssetError: "Missing bundled asset",
    RenderError: "Render error",
    BuildError: "Build error",
}


def _configure_logging(level_name: str) -> None:
    env_override = get_settings().log_level
    level_str = (env_override or level_name or "info").upper()
    if level_str not in {lvl.upper() for lvl in LOG_LEVELS}:
        level_str = "INFO"
    logging.basicConfig(
        level=getattr(logging, level_str, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    logger.debug("Logging configured at %s", level_str)


def _error_label(exc: SemberError) -> str:
    for kind, label in ERROR_LABELS.items():
        if isinstance(exc, kind):
            return label
    return "Error"


def _fail(exc: SemberError) -> typer.Exit:
    console.print(f"[bold red]{_error_label(exc)}:[/] {exc}")
    return typer.Exit(code=1)


def _resolve_config_path(value: Optional[Path]) -> Path:
    return (value or get_settings().config_path).expanduser().resolve()


def _load_config_or_exit(path: Path) -> Config:
    try:
        return load_config(path)
    except ConfigError as exc:
        raise _fail(exc) from exc


def _print_build_report(report: BuildReport) -> None:
    table = Table(title="Build Summary")
    table.add_column("Key")
    table.add_column("Value", overflow="fold")
    for key, value in report.summary_rows():
        table.add_row(key, value)
    console.print(table)


@app.callback(invoke_without_command=True)
def _root_command(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show sember version and exit.",
        is_flag=True,
    ),
    log_level: str = typer.Option(
        "info",
        "--log-level",
        help="Logging level (critical, error, warning, info, debug).",
        show_default=True,
        case_sensitive=False,
    ),
) -> None:
    """
    Default command when no subcommand is selected.
    """
    _configure_logging(log_level)

    if version:
        console.print(f"[bold green]sember[/] {__version__}")
        raise typer.Exit()

    if ctx.invoked_subcommand is None:
        console.print("[bold yellow]sember[/] is ready. Run [cyan]sember build[/] next to your sember.toml.")


@app.command()
def build(
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to the site configuration (defaults to ./sember.toml or $SEMBER_CONFIG).",
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output directory, replaced on every build (defaults to ./public or $SEMBER_OUTPUT).",
    ),
) -> None:
    """
    Regenerate the site from scratch.
    """
    config_path = _resolve_config_path(config)
    output_dir = (output or get_settings().output_dir).expanduser().resolve()

    logger.info("Loading configuration from %s", config_path)
    site_config = _load_config_or_exit(config_path)

    try:
        report = build_site(site_config, output_dir, base_dir=config_path.parent)
    except SemberError as exc:
        raise _fail(exc) from exc

    _print_build_report(report)
    console.print("[bold green]Site built.[/]")


@app.command()
def check(
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to the site configuration (defaults to ./sember.toml or $SEMBER_CONFIG).",
    ),
) -> None:
    """
    Validate the configuration and show the resolved values without writing anything.
    """
    config_path = _resolve_config_path(config)
    site_config = _load_config_or_exit(config_path)
    page = build_page_context("index", site_config)

    table = Table(title="Site Configuration Summary")
    table.add_column("Key")
    table.add_column("Value", overflow="fold")
    table.add_row("Name", site_config.about.name)
    table.add_row("Links", str(len(site_config.links or [])))
    table.add_row("Jobs", str(len(site_config.jobs or [])))
    table.add_row("Education", str(len(site_config.education or [])))
    table.add_row("Accent", page.accent)
    table.add_row("Show résumé link", "yes" if page.show_cv else "no")
    table.add_row("Config hash", site_config.hash)
    console.print(table)


def main() -> None:
    """
    Entry-point used by the console script defined in pyproject.toml.
    """
    app()
