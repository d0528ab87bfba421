"""
Rich output formatting for macsetup runs.

Renders the end-of-run report (six sections: successful, failed and skipped
installs and configs), the presence table of ``macsetup check`` and the
artifact listing of ``macsetup list``.
"""

from typing import Sequence

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from .artifacts.base import Artifact
from .models import ArtifactKind, ProvisionReport


class ReportFormatter:
    """Formatter for provisioning reports and manifest views."""

    def __init__(self, console: Console | None = None):
        """Initialize formatter with Rich console."""
        self.console = console or Console()

        self.colors = {
            'success': 'green',
            'failed': 'red',
            'skipped': 'dim',
            'header': 'bold blue',
            'item': 'bright_white',
            'comment': 'dim',
        }

        self.symbols = {
            'success': '✓',
            'failed': '✗',
            'skipped': '-',
        }

    def format_report(self, report: ProvisionReport) -> Text:
        """
        Format the end-of-run report.

        Args:
            report: Report returned by Provisioner.run (or carried by BootstrapError)

        Returns:
            Styled text listing every section, "(none)" for empty ones
        """
        output = Text()
        output.append("Provisioning summary\n", style=self.colors['header'])

        for status, title, names in report.sections():
            color = self.colors[status.value]
            symbol = self.symbols[status.value]
            output.append(f"\n{title} ({len(names)}):\n", style=color)
            if not names:
                output.append("  (none)\n", style=self.colors['comment'])
            for name in names:
                output.append(f"  {symbol} {name}\n", style=color)

        failures = [o for o in report.failed if o.exit_code is not None]
        if failures:
            output.append("\nFailure details:\n", style=self.colors['failed'])
            for outcome in failures:
                line = f"  {outcome.name}: exit {outcome.exit_code}"
                if outcome.detail:
                    line += f" ({outcome.detail})"
                output.append(line + "\n", style=self.colors['comment'])

        output.append("\n")
        if report.halted:
            remaining = report.requested - len(report.outcomes)
            output.append(
                f"Run halted: bootstrap dependency failed, {remaining} artifacts not attempted.\n",
                style=self.colors['failed'],
            )
        else:
            output.append(
                f"Done: {len(report.succeeded)} succeeded, {len(report.failed)} failed, "
                f"{len(report.skipped)} skipped.\n",
                style=self.colors['failed'] if report.failed else self.colors['success'],
            )
        return output

    def format_next_steps(self, report: ProvisionReport) -> Text | None:
        """Reminder to open newly installed applications and restart the shell."""
        apps = [
            o.name for o in report.succeeded if o.kind == ArtifactKind.BREW_CASK
        ]
        if not apps and not report.succeeded:
            return None

        output = Text()
        if apps:
            output.append(
                f"Launch {', '.join(apps)} to complete their initial setup.\n",
                style=self.colors['item'],
            )
        output.append(
            "You may need to restart your terminal for all changes to take effect.\n",
            style=self.colors['comment'],
        )
        return output

    def presence_table(self, results: Sequence[tuple[Artifact, bool]]) -> Table:
        """Table of presence check results for ``macsetup check``."""
        table = Table(title="Presence check")
        table.add_column("Artifact", style=self.colors['item'])
        table.add_column("Kind")
        table.add_column("State")

        for artifact, present in results:
            state = (
                Text("present", style=self.colors['success'])
                if present
                else Text("missing", style=self.colors['failed'])
            )
            table.add_row(escape(artifact.name), artifact.kind.value, state)
        return table

    def artifact_table(self, artifacts: Sequence[Artifact]) -> Table:
        """Table of artifacts in run order for ``macsetup list``."""
        table = Table(title="Artifacts")
        table.add_column("#", justify="right", style=self.colors['comment'])
        table.add_column("Artifact", style=self.colors['item'])
        table.add_column("Kind")
        table.add_column("Category")
        table.add_column("Bootstrap")

        for i, artifact in enumerate(artifacts, 1):
            table.add_row(
                str(i),
                escape(artifact.name),
                artifact.kind.value,
                artifact.category.value,
                "yes" if artifact.bootstrap else "",
            )
        return table

    def print_report(self, report: ProvisionReport) -> None:
        self.console.print(self.format_report(report))
