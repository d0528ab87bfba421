"""Git alias artifact for the global Git configuration."""

from typing import ClassVar

from macsetup.command import CommandResult, CommandRunner
from macsetup.models import ArtifactKind

from .base import Artifact


class GitAlias(Artifact):
    """A ``git config --global alias.<name>`` entry.

    Present only when the alias already expands to exactly ``value``; an alias
    with a different expansion is overwritten.

    Example:
        >>> GitAlias(name="co", value="checkout")
    """

    kind: ClassVar[ArtifactKind] = ArtifactKind.GIT_ALIAS

    value: str
    git: str = "git"

    @property
    def config_key(self) -> str:
        return f"alias.{self.name}"

    def is_present(self, runner: CommandRunner) -> bool:
        result = runner.run(
            [self.git, "config", "--global", "--get", self.config_key], capture=True
        )
        return result.ok and result.stdout.rstrip("\n") == self.value

    def install(self, runner: CommandRunner) -> CommandResult:
        return runner.run([self.git, "config", "--global", self.config_key, self.value])
