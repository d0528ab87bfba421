"""Filesystem artifacts: shell-profile lines and symlinks."""

import logging
from pathlib import Path
from typing import ClassVar

from macsetup.command import CommandResult, CommandRunner
from macsetup.models import ArtifactKind

from .base import Artifact

logger = logging.getLogger(__name__)


class ProfileLine(Artifact):
    """A line that must appear in a shell configuration file.

    Present when the file exists and already contains the line as a fixed
    substring, so rerunning never appends a duplicate. Installing appends the
    line, newline-terminated, creating the file if needed.

    Attributes:
        path: Profile file to edit (e.g. ~/.zprofile)
        line: Exact text to add

    Example:
        >>> ProfileLine(
        ...     name="openjdk@17 PATH",
        ...     path=Path.home() / ".zprofile",
        ...     line='export PATH="/opt/homebrew/opt/openjdk@17/bin:$PATH"',
        ... )
    """

    kind: ClassVar[ArtifactKind] = ArtifactKind.PROFILE_LINE

    path: Path
    line: str

    def is_present(self, runner: CommandRunner) -> bool:
        if not self.path.is_file():
            return False
        try:
            return self.line.encode() in self.path.read_bytes()
        except OSError as e:
            logger.warning(f"Could not read {self.path}: {e}")
            return False

    def install(self, runner: CommandRunner) -> CommandResult:
        args = ["append", str(self.path)]
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            prefix = b""
            if self.path.is_file():
                existing = self.path.read_bytes()
                if existing and not existing.endswith(b"\n"):
                    prefix = b"\n"
            with self.path.open("ab") as f:
                f.write(prefix + self.line.encode() + b"\n")
        except OSError as e:
            logger.error(f"Could not append to {self.path}: {e}")
            return CommandResult(args=args, returncode=1, stderr=str(e))

        logger.info(f"Appended '{self.line}' to {self.path}")
        return CommandResult(args=args, returncode=0)


class Symlink(Artifact):
    """A filesystem symlink, created with ``ln -sfn`` (through sudo by default).

    Present when the link path already is a symlink, wherever it points.

    Attributes:
        link: Path of the symlink to create
        target: Path the symlink points to
        sudo: Prefix the command with sudo (system locations need it)
    """

    kind: ClassVar[ArtifactKind] = ArtifactKind.SYMLINK

    link: Path
    target: Path
    sudo: bool = True

    def is_present(self, runner: CommandRunner) -> bool:
        return self.link.is_symlink()

    def install(self, runner: CommandRunner) -> CommandResult:
        argv = ["ln", "-sfn", str(self.target), str(self.link)]
        if self.sudo:
            argv.insert(0, "sudo")
        return runner.run(argv)
