"""
macsetup Provisioner - the check-and-report pipeline.

Provision Pipeline: Validate manifest → for each artifact: presence check →
conditional install → classify outcome → ProvisionReport
Check Pipeline: Validate manifest → presence checks only
"""

import logging
from typing import Sequence

from rich.console import Console
from rich.markup import escape

from .artifacts.base import Artifact
from .command import CommandRunner
from .errors import BootstrapError, ManifestError
from .models import Outcome, OutcomeStatus, ProvisionReport

logger = logging.getLogger(__name__)


class Provisioner:
    """Brings a workstation into the state described by a list of artifacts.

    Artifacts are processed strictly in order, one at a time. A present
    artifact is skipped without calling its installer; a missing one gets a
    single install attempt whose exit status decides success or failure.
    Failures are recorded and the run continues, except for the bootstrap
    artifact (the package manager): when it fails the run halts immediately
    and BootstrapError is raised with the outcomes collected so far.
    """

    def __init__(
        self,
        runner: CommandRunner | None = None,
        console: Console | None = None,
    ):
        """
        Initialize Provisioner.

        Args:
            runner: Command runner for presence checks and installers
            console: Optional Rich console for per-artifact progress lines
        """
        self.runner = runner or CommandRunner()
        self.console = console

    def run(self, artifacts: Sequence[Artifact]) -> ProvisionReport:
        """
        Provision every artifact in order and return the report.

        Args:
            artifacts: Ordered artifacts; the bootstrap artifact must precede
                everything that depends on it

        Returns:
            ProvisionReport with one Outcome per artifact

        Raises:
            ManifestError: If the artifact list is invalid
            BootstrapError: If the bootstrap artifact failed to install
        """
        artifacts = list(artifacts)
        self.validate(artifacts)
        logger.info(f"Provisioning {len(artifacts)} artifacts")

        report = ProvisionReport(requested=len(artifacts))

        for artifact in artifacts:
            outcome = self._provision_one(artifact)
            report.add(outcome)

            if artifact.bootstrap and outcome.status == OutcomeStatus.FAILED:
                report.halted = True
                logger.error(
                    f"Bootstrap dependency {artifact.name} failed "
                    f"(exit {outcome.exit_code}); halting run"
                )
                raise BootstrapError(artifact.name, report)

        logger.info(
            f"Provisioning complete: {len(report.succeeded)} succeeded, "
            f"{len(report.failed)} failed, {len(report.skipped)} skipped"
        )
        return report

    def check(self, artifacts: Sequence[Artifact]) -> list[tuple[Artifact, bool]]:
        """
        Run only the presence checks; nothing is installed.

        Args:
            artifacts: Artifacts to inspect

        Returns:
            (artifact, present) pairs in manifest order
        """
        artifacts = list(artifacts)
        self.validate(artifacts)

        results = []
        for artifact in artifacts:
            present = artifact.is_present(self.runner)
            logger.debug(f"{artifact}: {'present' if present else 'missing'}")
            results.append((artifact, present))
        return results

    @staticmethod
    def validate(artifacts: Sequence[Artifact]) -> None:
        """Reject duplicate artifacts and more than one bootstrap artifact.

        Raises:
            ManifestError: If the list is invalid
        """
        seen = set()
        for artifact in artifacts:
            if artifact.key in seen:
                raise ManifestError(f"Duplicate artifact: {artifact}")
            seen.add(artifact.key)

        bootstrap = [a.name for a in artifacts if a.bootstrap]
        if len(bootstrap) > 1:
            raise ManifestError(
                f"Only one bootstrap artifact is allowed, found {len(bootstrap)}: "
                f"{', '.join(bootstrap)}"
            )

    def _provision_one(self, artifact: Artifact) -> Outcome:
        logger.info(f"Checking {artifact}")

        if artifact.is_present(self.runner):
            logger.info(f"{artifact.name} is already present, skipping")
            self._print(f"[dim]- {escape(artifact.name)} already present, skipping[/dim]")
            return Outcome(
                name=artifact.name,
                kind=artifact.kind,
                status=OutcomeStatus.SKIPPED,
            )

        self._print(f"[bold]Installing {escape(artifact.name)}...[/bold]")
        result = artifact.install(self.runner)

        if result.ok:
            logger.info(f"✓ Installed {artifact.name}")
            self._print(f"[green]✓ {escape(artifact.name)}[/green]")
            return Outcome(
                name=artifact.name,
                kind=artifact.kind,
                status=OutcomeStatus.SUCCESS,
                exit_code=result.returncode,
            )

        detail = result.stderr.strip().splitlines()[-1] if result.stderr.strip() else None
        logger.error(
            f"✗ Failed to install {artifact.name}: "
            f"{result.display()} exited with {result.returncode}"
        )
        self._print(f"[red]✗ {escape(artifact.name)} (exit {result.returncode})[/red]")
        return Outcome(
            name=artifact.name,
            kind=artifact.kind,
            status=OutcomeStatus.FAILED,
            exit_code=result.returncode,
            detail=detail,
        )

    def _print(self, message: str) -> None:
        if self.console is not None:
            self.console.print(message)
