"""Python package artifact installed with pip."""

from typing import ClassVar

from macsetup.command import CommandResult, CommandRunner
from macsetup.models import ArtifactKind

from .base import Artifact


class PipPackage(Artifact):
    """A Python package in the interpreter behind ``pip``.

    Present when ``pip show <name>`` succeeds.

    Example:
        >>> PipPackage(name="pandas")
    """

    kind: ClassVar[ArtifactKind] = ArtifactKind.PIP_PACKAGE

    pip: str = "pip3"

    def is_present(self, runner: CommandRunner) -> bool:
        return runner.run([self.pip, "show", self.name], capture=True).ok

    def install(self, runner: CommandRunner) -> CommandResult:
        return runner.run([self.pip, "install", self.name])
