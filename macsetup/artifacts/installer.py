"""External installer artifact (Xcode CLT, Homebrew, Oh My Zsh)."""

from pathlib import Path
from typing import ClassVar, Self

from pydantic import model_validator

from macsetup.command import CommandResult, CommandRunner
from macsetup.models import ArtifactKind

from .base import Artifact


class ExternalInstaller(Artifact):
    """Software installed by running a vendor's own installer.

    The presence check is whichever probe is configured, tried in this order:

    - path: the directory exists (e.g. ~/.oh-my-zsh)
    - probe: the probe command exits 0 (e.g. ``xcode-select -p``)
    - executable: the executable is on PATH (e.g. ``brew``)

    install_command may be a string, which is run through the shell so that
    ``/bin/bash -c "$(curl -fsSL ...)"`` style installers work unchanged.

    Example:
        >>> ExternalInstaller(
        ...     name="homebrew",
        ...     executable="brew",
        ...     install_command='/bin/bash -c "$(curl -fsSL https://.../install.sh)"',
        ...     bootstrap=True,
        ... )
    """

    kind: ClassVar[ArtifactKind] = ArtifactKind.EXTERNAL_INSTALLER

    install_command: list[str] | str
    executable: str | None = None
    probe: list[str] | None = None
    path: Path | None = None

    @model_validator(mode="after")
    def _require_presence_check(self) -> Self:
        if self.path is None and self.probe is None and self.executable is None:
            raise ValueError(
                f"External installer '{self.name}' needs one of path, probe or executable"
            )
        return self

    def is_present(self, runner: CommandRunner) -> bool:
        if self.path is not None:
            return self.path.is_dir()
        if self.probe is not None:
            return runner.run(self.probe, capture=True).ok
        return runner.which(self.executable) is not None

    def install(self, runner: CommandRunner) -> CommandResult:
        return runner.run(self.install_command)
