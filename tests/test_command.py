"""Tests for the subprocess-backed CommandRunner."""

import sys

from macsetup.command import EXIT_NOT_EXECUTABLE, EXIT_NOT_FOUND, CommandResult, CommandRunner


def test_exit_status_is_returned():
    result = CommandRunner().run([sys.executable, "-c", "import sys; sys.exit(3)"])

    assert result.returncode == 3
    assert not result.ok


def test_capture_output():
    result = CommandRunner().run([sys.executable, "-c", "print('hello')"], capture=True)

    assert result.ok
    assert result.stdout.strip() == "hello"


def test_missing_executable_maps_to_127():
    result = CommandRunner().run(["macsetup-definitely-not-a-command"], capture=True)

    assert result.returncode == EXIT_NOT_FOUND
    assert result.stderr


def test_unstartable_file_maps_to_126(temp_dir):
    # No shebang line, so the kernel refuses to execute it
    script = temp_dir / "install.sh"
    script.write_text("echo hi\n")
    script.chmod(0o755)

    result = CommandRunner().run([str(script)], capture=True)

    assert result.returncode == EXIT_NOT_EXECUTABLE
    assert result.stderr


def test_string_runs_through_shell():
    result = CommandRunner().run("exit 4")
    assert result.returncode == 4


def test_which():
    runner = CommandRunner()
    assert runner.which("macsetup-definitely-not-a-command") is None
    assert runner.which(sys.executable) is not None


def test_display_quotes_arguments():
    assert CommandResult(args=["git", "config", "alias.cm", "commit -m"], returncode=0).display() == (
        "git config alias.cm 'commit -m'"
    )
    assert CommandResult(args="echo hi | cat", returncode=0).display() == "echo hi | cat"
