"""
macsetup - Idempotent provisioning for macOS developer workstations.

Declare the artifacts a workstation needs (Homebrew formulae and casks, pip
packages, shell-profile lines, symlinks, Git aliases) and let the Provisioner
bring the machine into that state:

- Present artifacts are skipped
- Missing artifacts are installed, one attempt each
- Every run ends with a report of what succeeded, failed and was skipped

Re-running is always safe: presence is re-checked against the live system.
"""

from .provisioner import Provisioner
from .settings import MacsetupSettings, get_settings, reload_settings

__version__ = "0.1.0"
__all__ = [
    "MacsetupSettings",
    "Provisioner",
    "get_settings",
    "reload_settings",
]
