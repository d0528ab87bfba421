"""
macsetup errors.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .models import ProvisionReport


class MacsetupError(Exception):
    """Base exception for all macsetup errors."""
    pass


class ManifestError(MacsetupError):
    """Errors in an artifact manifest (unloadable file, duplicates, several bootstrap artifacts)."""
    pass


class BootstrapError(MacsetupError):
    """The bootstrap artifact failed to install and the run was halted.

    Carries the partial report so the outcomes collected before the halt can
    still be shown to the operator.
    """

    def __init__(self, artifact_name: str, report: "ProvisionReport"):
        self.artifact_name = artifact_name
        self.report = report
        super().__init__(
            f"Bootstrap dependency '{artifact_name}' failed to install; "
            f"halted after {len(report.outcomes)} of {report.requested} artifacts"
        )
