"""Tests for the Provisioner check-and-report pipeline."""

import io

import pytest
from rich.console import Console

from macsetup.artifacts import BrewCask, BrewFormula, ExternalInstaller, ProfileLine
from macsetup.errors import BootstrapError, ManifestError
from macsetup.models import OutcomeStatus
from macsetup.provisioner import Provisioner
from tests.fakes import SimulatedHost


def tool(name, bootstrap=False):
    """Artifact driven by SimulatedHost's probe/install commands."""
    return ExternalInstaller(
        name=name,
        probe=["probe", name],
        install_command=["install", name],
        bootstrap=bootstrap,
    )


def statuses(report):
    return [(o.name, o.status) for o in report.outcomes]


def test_mixed_run_outcomes():
    """Absent+exit 0, present, absent+exit 1 -> success, skipped, failed."""
    host = SimulatedHost(installed={"b"}, failing={"c": 1})
    report = Provisioner(runner=host).run([tool("a"), tool("b"), tool("c")])

    assert statuses(report) == [
        ("a", OutcomeStatus.SUCCESS),
        ("b", OutcomeStatus.SKIPPED),
        ("c", OutcomeStatus.FAILED),
    ]
    assert host.installs() == ["a", "c"]


def test_present_artifacts_are_never_installed():
    host = SimulatedHost(installed={"a", "b", "c"})
    report = Provisioner(runner=host).run([tool("a"), tool("b"), tool("c")])

    assert all(o.status == OutcomeStatus.SKIPPED for o in report.outcomes)
    assert host.installs() == []
    assert all(o.exit_code is None for o in report.outcomes)


def test_install_exit_status_classifies_outcome():
    host = SimulatedHost(failing={"bad": 42})
    report = Provisioner(runner=host).run([tool("good"), tool("bad")])

    good, bad = report.outcomes
    assert good.status == OutcomeStatus.SUCCESS
    assert good.exit_code == 0
    assert bad.status == OutcomeStatus.FAILED
    assert bad.exit_code == 42
    assert bad.detail == "boom"


def test_failure_does_not_stop_the_run():
    host = SimulatedHost(failing={"first": 1, "second": 2})
    artifacts = [tool("first"), tool("second"), tool("third")]
    report = Provisioner(runner=host).run(artifacts)

    assert host.installs() == ["first", "second", "third"]
    assert [o.status for o in report.outcomes] == [
        OutcomeStatus.FAILED,
        OutcomeStatus.FAILED,
        OutcomeStatus.SUCCESS,
    ]


def test_one_outcome_per_artifact():
    host = SimulatedHost(installed={"b", "d"}, failing={"c": 1})
    artifacts = [tool(n) for n in "abcde"]
    report = Provisioner(runner=host).run(artifacts)

    assert len(report.outcomes) == len(artifacts) == report.requested
    assert report.complete
    assert [o.name for o in report.outcomes] == list("abcde")


def test_second_run_skips_everything():
    host = SimulatedHost()
    artifacts = [tool("a"), tool("b", bootstrap=True), tool("c")]
    provisioner = Provisioner(runner=host)

    first = provisioner.run(artifacts)
    second = provisioner.run(artifacts)

    assert all(o.status == OutcomeStatus.SUCCESS for o in first.outcomes)
    assert all(o.status == OutcomeStatus.SKIPPED for o in second.outcomes)
    assert host.installs() == ["a", "b", "c"]


def test_rerun_retries_only_what_failed():
    host = SimulatedHost(failing={"b": 1})
    artifacts = [tool("a"), tool("b"), tool("c")]
    Provisioner(runner=host).run(artifacts)

    host.failing.clear()
    report = Provisioner(runner=host).run(artifacts)

    assert statuses(report) == [
        ("a", OutcomeStatus.SKIPPED),
        ("b", OutcomeStatus.SUCCESS),
        ("c", OutcomeStatus.SKIPPED),
    ]


def test_bootstrap_failure_halts_run():
    host = SimulatedHost(failing={"homebrew": 1})
    artifacts = [tool("xcode"), tool("homebrew", bootstrap=True), tool("git"), tool("wget")]

    with pytest.raises(BootstrapError) as exc_info:
        Provisioner(runner=host).run(artifacts)

    report = exc_info.value.report
    assert exc_info.value.artifact_name == "homebrew"
    assert report.halted
    assert not report.complete
    assert len(report.outcomes) < len(artifacts)
    assert statuses(report) == [
        ("xcode", OutcomeStatus.SUCCESS),
        ("homebrew", OutcomeStatus.FAILED),
    ]
    # Nothing after the bootstrap artifact is even checked
    assert "git" not in host.probes()
    assert "wget" not in host.probes()


def test_bootstrap_already_present_is_skipped_and_run_continues():
    host = SimulatedHost(installed={"homebrew"})
    report = Provisioner(runner=host).run([tool("homebrew", bootstrap=True), tool("git")])

    assert statuses(report) == [
        ("homebrew", OutcomeStatus.SKIPPED),
        ("git", OutcomeStatus.SUCCESS),
    ]


def test_non_bootstrap_failure_before_bootstrap_is_not_fatal():
    host = SimulatedHost(failing={"xcode": 1})
    report = Provisioner(runner=host).run([tool("xcode"), tool("homebrew", bootstrap=True)])

    assert statuses(report) == [
        ("xcode", OutcomeStatus.FAILED),
        ("homebrew", OutcomeStatus.SUCCESS),
    ]


def test_more_than_one_bootstrap_artifact_is_rejected():
    host = SimulatedHost()
    artifacts = [tool("a", bootstrap=True), tool("b", bootstrap=True)]

    with pytest.raises(ManifestError, match="Only one bootstrap artifact"):
        Provisioner(runner=host).run(artifacts)

    assert host.calls == []


def test_duplicate_artifacts_are_rejected():
    with pytest.raises(ManifestError, match="Duplicate artifact"):
        Provisioner(runner=SimulatedHost()).run([tool("a"), tool("a")])


def test_same_name_with_different_kinds_is_allowed():
    # docker is both a formula and a cask in the workstation manifest
    artifacts = [BrewFormula(name="docker"), BrewCask(name="docker")]
    Provisioner.validate(artifacts)


def test_empty_run(runner):
    report = Provisioner(runner=runner).run([])

    assert report.outcomes == []
    assert report.complete


def test_check_runs_presence_checks_only():
    host = SimulatedHost(installed={"a"})
    results = Provisioner(runner=host).check([tool("a"), tool("b")])

    assert [(a.name, present) for a, present in results] == [("a", True), ("b", False)]
    assert host.installs() == []


def test_profile_line_through_provisioner(temp_dir, runner):
    zprofile = temp_dir / ".zprofile"
    artifact = ProfileLine(name="path", path=zprofile, line="export FOO=1")

    first = Provisioner(runner=runner).run([artifact])
    second = Provisioner(runner=runner).run([artifact])

    assert first.outcomes[0].status == OutcomeStatus.SUCCESS
    assert second.outcomes[0].status == OutcomeStatus.SKIPPED
    assert zprofile.read_text() == "export FOO=1\n"


def test_progress_lines_go_to_console():
    buffer = io.StringIO()
    console = Console(file=buffer, width=120)
    host = SimulatedHost(installed={"b"}, failing={"c": 3})

    Provisioner(runner=host, console=console).run([tool("a"), tool("b"), tool("c")])

    output = buffer.getvalue()
    assert "Installing a..." in output
    assert "b already present, skipping" in output
    assert "c (exit 3)" in output


def test_non_utf8_profile_does_not_abort_the_run(temp_dir, runner):
    zprofile = temp_dir / ".zprofile"
    zprofile.write_bytes(b"export NAME=caf\xe9\n")
    artifacts = [
        ProfileLine(name="name", path=zprofile, line="export NAME="),
        ProfileLine(name="java", path=zprofile, line="export JAVA_HOME=/opt/java"),
    ]

    report = Provisioner(runner=runner).run(artifacts)

    assert statuses(report) == [
        ("name", OutcomeStatus.SKIPPED),
        ("java", OutcomeStatus.SUCCESS),
    ]
    assert zprofile.read_bytes().endswith(b"export JAVA_HOME=/opt/java\n")


def test_markup_in_names_is_printed_literally():
    buffer = io.StringIO()
    console = Console(file=buffer, width=120)
    host = SimulatedHost(failing={"tool[bold]": 1})

    Provisioner(runner=host, console=console).run([tool("tool[bold]"), tool("[/red]")])

    output = buffer.getvalue()
    assert "Installing tool[bold]..." in output
    assert "tool[bold] (exit 1)" in output
    assert "Installing [/red]..." in output
