"""Synchronous execution of external commands.

Every presence check and installer goes through a ``CommandRunner`` so the
Provisioner can be driven against a scripted runner in tests.
"""

import logging
import shlex
import shutil
import subprocess
from dataclasses import dataclass
from typing import Sequence

logger = logging.getLogger(__name__)

# Shell conventions for a command that could not be started
EXIT_NOT_EXECUTABLE = 126
EXIT_NOT_FOUND = 127


@dataclass(frozen=True)
class CommandResult:
    """Exit status and (when captured) output of one command."""

    args: Sequence[str] | str
    returncode: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.returncode == 0

    def display(self) -> str:
        if isinstance(self.args, str):
            return self.args
        return " ".join(shlex.quote(a) for a in self.args)


class CommandRunner:
    """Runs commands one at a time and blocks until each finishes.

    A string is run through the shell (needed for ``"$(curl ...)"`` style
    installers); a sequence is executed directly. Output is captured only
    when asked for, so installers keep the terminal for prompts and progress.
    """

    def run(self, args: Sequence[str] | str, *, capture: bool = False) -> CommandResult:
        shell = isinstance(args, str)
        argv = args if shell else list(args)
        result = CommandResult(args=argv, returncode=0)
        logger.info(f"Running: {result.display()}")

        try:
            process = subprocess.run(
                argv,
                shell=shell,
                capture_output=capture,
                text=True,
            )
        except FileNotFoundError as e:
            logger.debug(f"Command not found: {e}")
            return CommandResult(args=argv, returncode=EXIT_NOT_FOUND, stderr=str(e))
        except PermissionError as e:
            logger.debug(f"Command not executable: {e}")
            return CommandResult(args=argv, returncode=EXIT_NOT_EXECUTABLE, stderr=str(e))
        except OSError as e:
            logger.debug(f"Command could not be started: {e}")
            return CommandResult(args=argv, returncode=EXIT_NOT_EXECUTABLE, stderr=str(e))

        stdout = process.stdout or ""
        stderr = process.stderr or ""
        if stdout.strip():
            logger.debug(f"STDOUT {stdout.strip()}")
        if stderr.strip():
            logger.debug(f"STDERR {stderr.strip()}")

        return CommandResult(args=argv, returncode=process.returncode, stdout=stdout, stderr=stderr)

    def which(self, executable: str) -> str | None:
        """Return the resolved path of an executable on PATH, or None."""
        return shutil.which(executable)
