"""Base artifact class for macsetup."""

from typing import ClassVar

from pydantic import BaseModel, ConfigDict

from macsetup.command import CommandResult, CommandRunner
from macsetup.models import ArtifactKind, Category


class Artifact(BaseModel):
    """Base artifact class - everything the Provisioner can install or configure.

    An artifact is a declarative description of one piece of desired workstation
    state. Subclasses provide two procedures:

    1. is_present(): the idempotency guard, asking the live system whether the
       artifact is already in the desired state
    2. install(): a single attempt to bring it into that state, reported as a
       CommandResult whose exit status decides success or failure

    Artifacts are frozen: a manifest is built once at program start and never
    mutated during a run.

    Attributes:
        name: Identifier shown in the report (unique per kind within a run)
        description: Optional human-readable description
        bootstrap: Marks the package manager itself; its failure halts the run
    """

    model_config = ConfigDict(frozen=True)

    kind: ClassVar[ArtifactKind]

    name: str
    description: str | None = None
    bootstrap: bool = False

    @property
    def category(self) -> Category:
        return self.kind.category

    @property
    def key(self) -> tuple[ArtifactKind, str]:
        return (self.kind, self.name)

    def is_present(self, runner: CommandRunner) -> bool:
        """Check whether the artifact is already in the desired state.

        Args:
            runner: Command runner used for any probing commands

        Returns:
            True if nothing needs to be done
        """
        raise NotImplementedError("Subclasses must implement is_present()")

    def install(self, runner: CommandRunner) -> CommandResult:
        """Attempt to install or configure the artifact once.

        Args:
            runner: Command runner used to invoke the installer

        Returns:
            CommandResult whose returncode classifies the attempt
        """
        raise NotImplementedError("Subclasses must implement install()")

    def __str__(self) -> str:
        return f"{self.kind.value}:{self.name}"
