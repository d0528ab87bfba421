"""Homebrew artifacts: formulae, casks, taps and zsh plugins."""

from typing import ClassVar

from macsetup.command import CommandResult, CommandRunner
from macsetup.models import ArtifactKind

from .base import Artifact


class BrewFormula(Artifact):
    """A Homebrew formula.

    Present when ``brew list <name>`` succeeds; installed with ``brew install <name>``.

    Example:
        >>> BrewFormula(name="kubectl")
        >>> BrewFormula(name="openjdk@17", brew="/usr/local/bin/brew")
    """

    kind: ClassVar[ArtifactKind] = ArtifactKind.BREW_FORMULA

    brew: str = "brew"

    def is_present(self, runner: CommandRunner) -> bool:
        return runner.run([self.brew, "list", self.name], capture=True).ok

    def install(self, runner: CommandRunner) -> CommandResult:
        return runner.run([self.brew, "install", self.name])


class ShellPlugin(BrewFormula):
    """A zsh plugin distributed as a Homebrew formula (e.g. zsh-autosuggestions).

    Enabling the plugin in ``.zshrc`` is a separate ProfileLine artifact.
    """

    kind: ClassVar[ArtifactKind] = ArtifactKind.SHELL_PLUGIN


class BrewCask(Artifact):
    """A Homebrew cask (GUI application).

    Example:
        >>> BrewCask(name="visual-studio-code")
    """

    kind: ClassVar[ArtifactKind] = ArtifactKind.BREW_CASK

    brew: str = "brew"

    def is_present(self, runner: CommandRunner) -> bool:
        return runner.run([self.brew, "list", "--cask", self.name], capture=True).ok

    def install(self, runner: CommandRunner) -> CommandResult:
        return runner.run([self.brew, "install", "--cask", self.name])


class BrewTap(Artifact):
    """A third-party Homebrew repository, e.g. ``stripe/stripe-cli``.

    Present when the tap appears as a full line in ``brew tap`` output.
    """

    kind: ClassVar[ArtifactKind] = ArtifactKind.BREW_TAP

    brew: str = "brew"

    def is_present(self, runner: CommandRunner) -> bool:
        result = runner.run([self.brew, "tap"], capture=True)
        if not result.ok:
            return False
        return self.name in (line.strip() for line in result.stdout.splitlines())

    def install(self, runner: CommandRunner) -> CommandResult:
        return runner.run([self.brew, "tap", self.name])
