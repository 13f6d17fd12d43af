"""Command line entry points: build, preview and prepare."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import NoReturn

import click
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from ..assets.manager import ASSET_KINDS, AssetsManager, collect_assets, copy_runtime_config, materialize
from ..config.settings import BuildRequest, Settings
from ..core.errors import ConfigurationError
from ..core.mode import Mode
from ..core.roots import read_text
from ..prompts.builder import PromptBuilder
from ..prompts.template import find_placeholders

console = Console()
err_console = Console(stderr=True)

WORKSPACE_DIR = ".opencode"


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _fail(message: str) -> NoReturn:
    err_console.print(f"[red]Error:[/red] {escape(message)}", soft_wrap=True)
    sys.exit(1)


def _load_settings(config_path: str | None, systems_dirs: tuple[str, ...]) -> Settings:
    try:
        settings = Settings.load(config_path)
    except ValueError as e:
        _fail(f"Invalid configuration: {e}")
    if systems_dirs:
        settings.systems_dirs = list(systems_dirs)
    return settings


def request_options(fn):
    """Options shared by the commands that build a prompt."""
    modes = [m.value for m in Mode]
    options = [
        click.option("--mode", "-m", required=True, type=click.Choice(modes), help="Prompt mode"),
        click.option("--system", "-s", default=None, help="System name (default from config)"),
        click.option(
            "--context", "context_file", required=True,
            type=click.Path(exists=True, dir_okay=False), help="Work item context JSON file",
        ),
        click.option("--command", "command_text", default=None, help="Command text (command mode)"),
        click.option(
            "--systems-dir", "systems_dirs", multiple=True,
            help="Systems directory; repeat to layer, first found wins",
        ),
        click.option("--config", "-c", "config_path", default=None, help="Path to config file"),
        click.option("--verbose", "-v", is_flag=True, help="Show debug logging"),
    ]
    for option in reversed(options):
        fn = option(fn)
    return fn


def _prepare_request(
    mode, system, context_file, command_text, systems_dirs, config_path, verbose
) -> tuple[Settings, BuildRequest]:
    _configure_logging(verbose)
    settings = _load_settings(config_path, systems_dirs)
    try:
        context_text = read_text(Path(context_file))
        request = BuildRequest.create(
            mode, system or settings.default_system, settings.roots(), context_text, command_text
        )
    except ConfigurationError as e:
        _fail(str(e))
    return settings, request


@click.group()
def cli() -> None:
    """Layered Prompt: build work-item prompts from layered system configuration."""


@cli.command()
@request_options
def build(**options) -> None:
    """Print the assembled prompt to stdout."""
    settings, request = _prepare_request(**options)
    try:
        prompt = PromptBuilder(settings).build(request)
    except ConfigurationError as e:
        _fail(str(e))
    click.echo(prompt)


@cli.command()
@request_options
@click.option("--full", is_flag=True, help="Show the whole prompt instead of the first lines")
def preview(full: bool, **options) -> None:
    """Show resolved configuration and a preview of the prompt."""
    settings, request = _prepare_request(**options)
    builder = PromptBuilder(settings)
    try:
        prompt_template = builder.template(request)
        prompt = builder.build(request)
    except ConfigurationError as e:
        _fail(str(e))

    assets = AssetsManager(request.roots, request.system)
    assets.discover()

    table = Table(show_header=False, box=None)
    table.add_column("Key", style="cyan")
    table.add_column("Value")
    table.add_row("Mode", request.mode.value)
    table.add_row("System", escape(request.system))
    table.add_row("Roots", escape("\n".join(str(r) for r in request.roots)) or "none")
    for kind in ASSET_KINDS:
        table.add_row(kind.capitalize(), escape(", ".join(assets.names(kind))) or "none")
    table.add_row("Placeholders", ", ".join(dict.fromkeys(find_placeholders(prompt_template))) or "none")
    console.print(Panel(table, title="Configuration", border_style="cyan"))

    lines = prompt.splitlines()
    shown = lines if full else lines[: settings.preview_lines]
    console.print(Text("\n".join(shown)))
    if len(shown) < len(lines):
        console.print(
            f"\n[dim]... (truncated, {len(lines)} total lines, use --full to see all)[/dim]"
        )
    console.print(f"[dim]Prompt length: {len(prompt)} characters[/dim]")


@cli.command()
@click.option("--system", "-s", default=None, help="System name (default from config)")
@click.option("--dest", default=".", type=click.Path(file_okay=False), help="Workspace directory")
@click.option("--systems-dir", "systems_dirs", multiple=True, help="Systems directory; repeatable")
@click.option("--config", "-c", "config_path", default=None, help="Path to config file")
@click.option("--verbose", "-v", is_flag=True, help="Show debug logging")
def prepare(system, dest, systems_dirs, config_path, verbose) -> None:
    """Copy layered skills, agents and opencode.json into a workspace."""
    _configure_logging(verbose)
    settings = _load_settings(config_path, systems_dirs)
    roots = settings.roots()
    system = system or settings.default_system
    dest_path = Path(dest)

    for kind in ASSET_KINDS:
        target = dest_path / WORKSPACE_DIR / kind
        written = materialize(collect_assets(roots, system, kind), target)
        console.print(f"[green]✓[/green] {len(written)} {kind} → {escape(str(target))}")

    source = copy_runtime_config(roots, dest_path)
    origin = escape(str(source)) if source else "empty default"
    console.print(f"[green]✓[/green] runtime config ({origin}) → {escape(str(dest_path))}")


def main() -> None:
    """Entry point."""
    cli()


if __name__ == "__main__":
    main()
