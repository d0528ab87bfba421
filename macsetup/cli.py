"""
macsetup CLI - Idempotent macOS workstation provisioning.
"""

import logging
from pathlib import Path
from typing import Callable

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from .artifacts.base import Artifact
from .command import CommandRunner
from .errors import BootstrapError, MacsetupError
from .formatters import ReportFormatter
from .loader import load_artifacts
from .manifest import git_alias_artifacts, workstation_artifacts
from .provisioner import Provisioner
from .settings import get_settings

# Exit status when the bootstrap dependency (Homebrew) fails. Click already
# uses 2 for usage errors.
EXIT_BOOTSTRAP_FAILED = 3

VERBOSE_HELP = "Enable debug logging"

# Setup
app = typer.Typer(
    name="macsetup",
    help="Idempotent macOS developer workstation provisioning",
    add_completion=False,
)
console = Console()


def configure_logging(verbose: bool = False):
    """Configure logging based on settings."""
    settings = get_settings()
    level = logging.DEBUG if verbose else getattr(logging, settings.log_level.upper(), logging.WARNING)
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        force=True,
    )


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help=VERBOSE_HELP),
):
    """Idempotent macOS developer workstation provisioning."""
    configure_logging(verbose)


# Helper functions to reduce duplication across commands
def _load_manifest(manifest: Path | None) -> list[Artifact]:
    """Return artifacts from a manifest file, or the built-in workstation manifest."""
    if manifest is None:
        return workstation_artifacts()
    return load_artifacts(manifest)


def _create_command_panel(title: str, color: str, source: str) -> Panel:
    """Create a Rich Panel for command display.

    Args:
        title: Command title (e.g., "macsetup provision")
        color: Border color (e.g., "blue", "cyan")
        source: Where the artifacts come from

    Returns:
        Formatted Rich Panel
    """
    return Panel.fit(
        f"[bold {color}]{title}[/bold {color}]\n"
        f"Manifest: {escape(source)}",
        border_style=color,
    )


def _handle_command_error(e: Exception, command_type: str) -> None:
    """Print a command error and exit with status 1.

    Raises:
        SystemExit: Always exits with code 1
    """
    console.print(
        f"\n[bold red]✗ {command_type.capitalize()} failed:[/bold red] {escape(str(e))}"
    )
    raise typer.Exit(code=1)


def _run_provision(
    command_name: str,
    panel_title: str,
    source: str,
    load: Callable[[], list[Artifact]],
):
    """Load artifacts, run the Provisioner and print the report.

    Exits with EXIT_BOOTSTRAP_FAILED after printing the partial report when
    the bootstrap artifact fails, and with 1 on manifest errors. A run with
    ordinary install failures still completes normally.
    """
    console.print(_create_command_panel(panel_title, "blue", source))
    formatter = ReportFormatter(console)

    try:
        artifacts = load()
        provisioner = Provisioner(runner=CommandRunner(), console=console)
        report = provisioner.run(artifacts)
    except BootstrapError as e:
        console.print()
        formatter.print_report(e.report)
        console.print(f"[bold red]✗ {escape(str(e))}[/bold red]")
        raise typer.Exit(code=EXIT_BOOTSTRAP_FAILED)
    except MacsetupError as e:
        _handle_command_error(e, command_name)

    console.print()
    formatter.print_report(report)

    next_steps = formatter.format_next_steps(report)
    if next_steps is not None:
        console.print(next_steps)


@app.command()
def provision(
    manifest: Path = typer.Option(
        None, "--manifest", "-m", help="Python manifest file (defaults to the built-in workstation manifest)"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help=VERBOSE_HELP),
):
    """Install and configure everything that is missing, then print a report."""
    if verbose:
        configure_logging(verbose=True)
    _run_provision(
        command_name="provision",
        panel_title="macsetup provision",
        source=str(manifest) if manifest else "workstation (built-in)",
        load=lambda: _load_manifest(manifest),
    )


@app.command(name="git-aliases")
def git_aliases(
    verbose: bool = typer.Option(False, "--verbose", "-v", help=VERBOSE_HELP),
):
    """Register the global Git aliases."""
    if verbose:
        configure_logging(verbose=True)
    _run_provision(
        command_name="git-aliases",
        panel_title="macsetup git-aliases",
        source="git aliases (built-in)",
        load=git_alias_artifacts,
    )
    console.print(
        "[dim]View them with 'git config --global -l | grep alias'.[/dim]"
    )


@app.command()
def check(
    manifest: Path = typer.Option(
        None, "--manifest", "-m", help="Python manifest file (defaults to the built-in workstation manifest)"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help=VERBOSE_HELP),
):
    """Run presence checks only; nothing is installed."""
    if verbose:
        configure_logging(verbose=True)
    source = str(manifest) if manifest else "workstation (built-in)"
    console.print(_create_command_panel("macsetup check", "cyan", source))

    try:
        artifacts = _load_manifest(manifest)
        results = Provisioner(runner=CommandRunner()).check(artifacts)
    except MacsetupError as e:
        _handle_command_error(e, "check")

    formatter = ReportFormatter(console)
    console.print(formatter.presence_table(results))

    missing = sum(1 for _, present in results if not present)
    console.print(
        f"\n[bold]{len(results) - missing} present, {missing} missing[/bold]"
    )
    if missing:
        console.print("[dim]Run 'macsetup provision' to install what is missing.[/dim]")


@app.command(name="list")
def list_artifacts(
    manifest: Path = typer.Option(
        None, "--manifest", "-m", help="Python manifest file (defaults to the built-in workstation manifest)"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help=VERBOSE_HELP),
):
    """List artifacts in run order."""
    if verbose:
        configure_logging(verbose=True)
    try:
        artifacts = _load_manifest(manifest)
        Provisioner.validate(artifacts)
    except MacsetupError as e:
        _handle_command_error(e, "list")

    console.print(ReportFormatter(console).artifact_table(artifacts))


@app.command()
def version():
    """Show macsetup version."""
    from . import __version__

    console.print(f"macsetup version: [bold]{__version__}[/bold]")


if __name__ == "__main__":
    app()
